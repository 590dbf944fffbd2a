import uuid
from django.db import models

from workflow.utils import utcnow

PROJECT_STATUSES = [
    ("planning", "Planning"),
    ("in_progress", "In progress"),
    ("review", "Review"),
    ("completed", "Completed"),
    ("on_hold", "On hold"),
]


class Project(models.Model):
    """
    A unit of billable work owned by a client.

    The owning client is stored as a bare id rather than a foreign key:
    deleting a client leaves its projects in place with a dangling reference.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    title = models.CharField(max_length=200)
    description = models.TextField(null=True, blank=True)
    client_id = models.UUIDField(db_index=True)

    status = models.CharField(max_length=20, choices=PROJECT_STATUSES, db_index=True)

    start_date = models.DateTimeField(null=True, blank=True)
    end_date = models.DateTimeField(null=True, blank=True)
    budget = models.FloatField(null=True, blank=True)
    currency = models.CharField(max_length=10, null=True, blank=True)

    created_at = models.DateTimeField(default=utcnow)
    updated_at = models.DateTimeField(default=utcnow)

    class Meta:
        db_table = "projects"
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.title} ({self.status})"
