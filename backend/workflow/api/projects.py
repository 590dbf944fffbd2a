"""
Project API — CRUD for client projects.

List filters: ?status= and/or ?client=<client uuid>. Detail responses add the
status-derived progress, task completion and the KSH budget display.
"""
from workflow.api.base import RecordListCreateView, RecordDetailView
from workflow.models.project import Project
from workflow.serializers import (
    ProjectCreateSerializer, ProjectUpdateSerializer,
    ProjectSerializer, ProjectDetailSerializer,
)


class ProjectListCreateView(RecordListCreateView):
    model = Project
    serializer_class = ProjectSerializer
    create_serializer_class = ProjectCreateSerializer
    filter_params = {"client": "client_id", "status": "status"}


class ProjectDetailView(RecordDetailView):
    model = Project
    serializer_class = ProjectDetailSerializer
    update_serializer_class = ProjectUpdateSerializer
