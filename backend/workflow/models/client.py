import uuid
from django.db import models

from workflow.utils import utcnow

CLIENT_STATUSES = [
    ("active", "Active"),
    ("inactive", "Inactive"),
    ("pending", "Pending"),
]


class Client(models.Model):
    """
    A confirmed customer of the agency. Created directly from the clients page
    or by converting a won lead.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    name = models.CharField(max_length=200)
    email = models.EmailField(db_index=True)
    phone = models.CharField(max_length=40, null=True, blank=True)
    company = models.CharField(max_length=200, null=True, blank=True)

    status = models.CharField(max_length=20, choices=CLIENT_STATUSES)

    # Stamped explicitly by the record services so both match on insert
    created_at = models.DateTimeField(default=utcnow)
    updated_at = models.DateTimeField(default=utcnow)

    class Meta:
        db_table = "clients"
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.name} <{self.email}> ({self.status})"
