"""
Client API — CRUD for confirmed customers.

Deleting a client does not touch its projects; their client_id is left as-is.
"""
from workflow.api.base import RecordListCreateView, RecordDetailView
from workflow.models.client import Client
from workflow.serializers import ClientCreateSerializer, ClientUpdateSerializer, ClientSerializer


class ClientListCreateView(RecordListCreateView):
    """List clients (optionally ?status=) and create new ones."""
    model = Client
    serializer_class = ClientSerializer
    create_serializer_class = ClientCreateSerializer
    filter_params = {"status": "status"}


class ClientDetailView(RecordDetailView):
    model = Client
    serializer_class = ClientSerializer
    update_serializer_class = ClientUpdateSerializer
