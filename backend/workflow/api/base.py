"""
Shared list/create and detail views for the record-backed resources.

Each resource module subclasses these and names its model, its three
serializers and the query params that map onto indexed fields.
"""
from django.core.exceptions import ValidationError as DjangoValidationError
from django.db.models import Q
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status

from workflow.services.records import (
    RecordNotFound, NoFieldsToUpdate,
    list_records, filter_records, get_record,
    create_record, update_record, delete_record,
)


def not_found(exc):
    return Response({"detail": str(exc)}, status=status.HTTP_404_NOT_FOUND)


class RecordListCreateView(APIView):
    model = None
    serializer_class = None
    create_serializer_class = None
    # query param -> model field; every param present narrows the list
    filter_params = {}
    # fields matched by ?search= (case-insensitive substring, any field)
    search_fields = ()

    def get_filters(self, request):
        filters = {}
        for param, field in self.filter_params.items():
            value = request.query_params.get(param)
            if value:
                filters[field] = value
        return filters

    def get_queryset(self, request):
        filters = self.get_filters(request)
        if filters:
            queryset = filter_records(self.model, **filters)
        else:
            queryset = list_records(self.model)

        term = request.query_params.get("search", "").strip()
        if term and self.search_fields:
            clauses = Q()
            for field in self.search_fields:
                clauses |= Q(**{f"{field}__icontains": term})
            queryset = queryset.filter(clauses)
        return queryset

    def get(self, request):
        try:
            queryset = self.get_queryset(request)
            data = self.serializer_class(queryset, many=True).data
        except DjangoValidationError:
            # e.g. ?client=not-a-uuid
            return Response({"detail": "Invalid filter value"}, status=status.HTTP_400_BAD_REQUEST)
        return Response(data)

    def post(self, request):
        serializer = self.create_serializer_class(data=request.data)
        serializer.is_valid(raise_exception=True)
        record = create_record(self.model, **serializer.validated_data)
        return Response(self.serializer_class(record).data, status=status.HTTP_201_CREATED)


class RecordDetailView(APIView):
    model = None
    serializer_class = None
    update_serializer_class = None

    def get(self, request, record_id):
        try:
            record = get_record(self.model, record_id)
        except RecordNotFound as e:
            return not_found(e)
        return Response(self.serializer_class(record).data)

    def patch(self, request, record_id):
        serializer = self.update_serializer_class(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        try:
            record = update_record(self.model, record_id, **serializer.validated_data)
        except NoFieldsToUpdate as e:
            return Response({"detail": str(e)}, status=status.HTTP_400_BAD_REQUEST)
        except RecordNotFound as e:
            return not_found(e)
        return Response(self.serializer_class(record).data)

    def delete(self, request, record_id):
        try:
            delete_record(self.model, record_id)
        except RecordNotFound as e:
            return not_found(e)
        return Response(status=status.HTTP_204_NO_CONTENT)
