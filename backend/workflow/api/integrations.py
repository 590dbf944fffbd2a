"""
Integration endpoints — inbound webhook and the raw debug dump.
"""
import logging

from rest_framework.views import APIView
from rest_framework.response import Response

from workflow.models.client import Client
from workflow.models.project import Project
from workflow.models.task import Task
from workflow.serializers import ClientSerializer, ProjectSerializer, TaskSerializer

logger = logging.getLogger(__name__)


class WebhookView(APIView):
    """
    Accepts any JSON payload (payments, client updates, ...) and logs it.
    Nothing is verified or persisted.
    """

    def post(self, request):
        logger.info("Webhook received: %s", request.data)
        return Response({"received": True})


class DebugView(APIView):
    """Raw projects/clients/tasks with counts, for checking the data connection."""

    def get(self, request):
        projects = Project.objects.all()
        clients = Client.objects.all()
        tasks = Task.objects.all()
        return Response({
            "counts": {
                "projects": projects.count(),
                "clients": clients.count(),
                "tasks": tasks.count(),
            },
            "projects": ProjectSerializer(projects, many=True).data,
            "clients": ClientSerializer(clients, many=True).data,
            "tasks": TaskSerializer(tasks, many=True).data,
        })
