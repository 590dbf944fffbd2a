"""
Task API — CRUD for units of work. List filters: ?project=<uuid> or ?status=.
"""
from workflow.api.base import RecordListCreateView, RecordDetailView
from workflow.models.task import Task
from workflow.serializers import TaskCreateSerializer, TaskUpdateSerializer, TaskSerializer


class TaskListCreateView(RecordListCreateView):
    model = Task
    serializer_class = TaskSerializer
    create_serializer_class = TaskCreateSerializer
    filter_params = {"project": "project_id", "status": "status"}


class TaskDetailView(RecordDetailView):
    model = Task
    serializer_class = TaskSerializer
    update_serializer_class = TaskUpdateSerializer
