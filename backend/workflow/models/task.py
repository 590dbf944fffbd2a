import uuid
from django.db import models

from workflow.utils import utcnow

TASK_STATUSES = [
    ("todo", "To do"),
    ("in_progress", "In progress"),
    ("review", "Review"),
    ("completed", "Completed"),
]

TASK_PRIORITIES = [
    ("low", "Low"),
    ("medium", "Medium"),
    ("high", "High"),
]


class Task(models.Model):
    """A unit of work, optionally attached to a project."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    title = models.CharField(max_length=200)
    description = models.TextField(null=True, blank=True)
    project_id = models.UUIDField(null=True, blank=True, db_index=True)
    assigned_to = models.CharField(max_length=200, null=True, blank=True)  # free-text name

    status = models.CharField(max_length=20, choices=TASK_STATUSES, db_index=True)
    priority = models.CharField(max_length=10, choices=TASK_PRIORITIES)
    due_date = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(default=utcnow)
    updated_at = models.DateTimeField(default=utcnow)

    class Meta:
        db_table = "tasks"
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.title} ({self.status}/{self.priority})"
