import uuid
from django.db import models

from workflow.utils import utcnow

# Sales pipeline: new → contacted → qualified → proposal → won / lost
LEAD_STATUSES = [
    ("new", "New"),
    ("contacted", "Contacted"),
    ("qualified", "Qualified"),
    ("proposal", "Proposal"),
    ("won", "Won"),
    ("lost", "Lost"),
]


class Lead(models.Model):
    """
    A prospective client tracked through the sales pipeline.
    A won lead is usually converted into a Client (see services.lead_conversion).
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    name = models.CharField(max_length=200)
    email = models.EmailField(db_index=True)
    phone = models.CharField(max_length=40, null=True, blank=True)
    company = models.CharField(max_length=200, null=True, blank=True)
    source = models.CharField(max_length=100, null=True, blank=True)  # "Website Form", "Referral", ...

    status = models.CharField(max_length=20, choices=LEAD_STATUSES, db_index=True)

    notes = models.TextField(null=True, blank=True)
    estimated_value = models.FloatField(null=True, blank=True)
    currency = models.CharField(max_length=10, null=True, blank=True)

    created_at = models.DateTimeField(default=utcnow)
    updated_at = models.DateTimeField(default=utcnow)

    class Meta:
        db_table = "leads"
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.name} ({self.status})"
