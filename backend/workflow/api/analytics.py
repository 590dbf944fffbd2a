"""
Analytics API — business-event log and the reporting aggregates.

GET /api/analytics is also consumed by external integrations, so it carries a
wildcard CORS header like the client portal endpoint.
"""
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status

from workflow.models.analytics_entry import AnalyticsEntry
from workflow.serializers import (
    AnalyticsEntrySerializer, AnalyticsRecordSerializer,
    RevenueRecordSerializer, DateRangeSerializer,
)
from workflow.services import metrics


def public_response(data, **kwargs):
    response = Response(data, **kwargs)
    response["Access-Control-Allow-Origin"] = "*"
    return response


class AnalyticsListCreateView(APIView):
    """List analytics entries (optionally ?type=) and record new ones."""

    def get(self, request):
        entry_type = request.query_params.get("type")
        # Unknown types fall back to the full list rather than an error
        if entry_type in metrics.ANALYTICS_TYPE_VALUES:
            entries = metrics.analytics_by_type(entry_type)
        else:
            entries = AnalyticsEntry.objects.all()
        return public_response(AnalyticsEntrySerializer(entries, many=True).data)

    def post(self, request):
        serializer = AnalyticsRecordSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        entry = metrics.record_analytics(**serializer.validated_data)
        return Response(AnalyticsEntrySerializer(entry).data, status=status.HTTP_201_CREATED)


class RevenueRecordView(APIView):
    """Record a payment against a project and/or client."""

    def post(self, request):
        serializer = RevenueRecordSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        entry = metrics.record_revenue(**serializer.validated_data)
        return Response(AnalyticsEntrySerializer(entry).data, status=status.HTTP_201_CREATED)


class AnalyticsDateRangeView(APIView):
    """Entries dated between ?start= and ?end= (ISO-8601, inclusive)."""

    def get(self, request):
        serializer = DateRangeSerializer(data=request.query_params)
        serializer.is_valid(raise_exception=True)
        entries = metrics.analytics_by_date_range(
            serializer.validated_data["start"], serializer.validated_data["end"],
        )
        return Response(AnalyticsEntrySerializer(entries, many=True).data)


class RevenueMetricsView(APIView):
    def get(self, request):
        return Response(metrics.revenue_metrics())


class ProjectMetricsView(APIView):
    def get(self, request):
        return Response(metrics.project_metrics())


class LeadMetricsView(APIView):
    def get(self, request):
        return Response(metrics.lead_metrics())
