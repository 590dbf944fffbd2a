"""
Client portal API — read-only views a client can be pointed at.

The client id arrives as a raw path segment; anything that is not a UUID is
answered with 400 instead of a routing 404.
"""
import uuid

from rest_framework.views import APIView
from rest_framework import status

from workflow.api.analytics import public_response
from workflow.models.client import Client
from workflow.models.project import Project
from workflow.serializers import ClientSerializer, PortalProjectSerializer


def _resolve_client(client_id):
    """Return (client, error_response)."""
    try:
        client_uuid = uuid.UUID(client_id)
    except ValueError:
        return None, public_response({"error": "Invalid client ID"}, status=status.HTTP_400_BAD_REQUEST)

    client = Client.objects.filter(id=client_uuid).first()
    if not client:
        return None, public_response({"error": "Client not found"}, status=status.HTTP_404_NOT_FOUND)
    return client, None


class ClientPortalView(APIView):
    def get(self, request, client_id):
        client, error = _resolve_client(client_id)
        if error:
            return error
        return public_response(ClientSerializer(client).data)


class ClientPortalProjectsView(APIView):
    """The client's projects with progress, days remaining and KSH budget."""

    def get(self, request, client_id):
        client, error = _resolve_client(client_id)
        if error:
            return error
        projects = Project.objects.filter(client_id=client.id)
        return public_response(PortalProjectSerializer(projects, many=True).data)
