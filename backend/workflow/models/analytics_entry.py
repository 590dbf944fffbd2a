import uuid
from django.db import models

from workflow.utils import utcnow

ANALYTICS_TYPES = [
    ("project_completed", "Project completed"),
    ("client_acquired", "Client acquired"),
    ("lead_converted", "Lead converted"),
    ("revenue_generated", "Revenue generated"),
]


class AnalyticsEntry(models.Model):
    """
    Append-only record of a business event, used for the reporting aggregates.
    The API never updates or deletes entries once written.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    type = models.CharField(max_length=30, choices=ANALYTICS_TYPES, db_index=True)
    value = models.FloatField()
    currency = models.CharField(max_length=10, null=True, blank=True)

    # Optional references, stored as bare ids
    project_id = models.UUIDField(null=True, blank=True)
    client_id = models.UUIDField(null=True, blank=True)
    lead_id = models.UUIDField(null=True, blank=True)

    date = models.DateTimeField(default=utcnow, db_index=True)
    metadata = models.JSONField(default=dict, blank=True)

    class Meta:
        db_table = "analytics"
        ordering = ["-date"]

    def __str__(self):
        return f"{self.type}={self.value} {self.currency or ''} at {self.date}"
