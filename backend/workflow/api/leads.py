"""
Lead API — CRUD over the sales pipeline plus lead → client conversion.

Pipeline statuses: new → contacted → qualified → proposal → won / lost
"""
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status

from workflow.api.base import RecordListCreateView, RecordDetailView, not_found
from workflow.models.lead import Lead
from workflow.serializers import (
    LeadCreateSerializer, LeadUpdateSerializer, LeadSerializer, ClientSerializer,
)
from workflow.services.lead_conversion import convert_lead_to_client
from workflow.services.records import RecordNotFound


class LeadListCreateView(RecordListCreateView):
    """List leads (optionally ?status= and ?search=) and create new leads."""
    model = Lead
    serializer_class = LeadSerializer
    create_serializer_class = LeadCreateSerializer
    filter_params = {"status": "status"}
    search_fields = ("name", "company", "email")


class LeadDetailView(RecordDetailView):
    model = Lead
    serializer_class = LeadSerializer
    update_serializer_class = LeadUpdateSerializer


class LeadConvertView(APIView):
    """Turn a lead into an active client and mark the lead as won."""

    def post(self, request, record_id):
        try:
            client = convert_lead_to_client(record_id)
        except RecordNotFound as e:
            return not_found(e)
        return Response(ClientSerializer(client).data, status=status.HTTP_201_CREATED)
