"""
Lead → Client conversion.

The only multi-step write in the system:
1. Insert a client carrying the lead's contact fields (status=active)
2. Move the lead to "won"
3. Record a lead_converted analytics entry referencing both

All three writes share one timestamp and commit or roll back together.
"""
import logging

from django.db import transaction

from workflow.models.analytics_entry import AnalyticsEntry
from workflow.models.client import Client
from workflow.models.lead import Lead
from workflow.utils import utcnow
from workflow.services.records import RecordNotFound

logger = logging.getLogger(__name__)

DEFAULT_CURRENCY = "USD"


def convert_lead_to_client(lead_id) -> Client:
    """Convert a lead into an active client. Raises RecordNotFound for an unknown lead."""
    with transaction.atomic():
        lead = Lead.objects.select_for_update().filter(id=lead_id).first()
        if not lead:
            raise RecordNotFound("Lead not found")

        now = utcnow()

        client = Client.objects.create(
            name=lead.name,
            email=lead.email,
            phone=lead.phone,
            company=lead.company,
            status="active",
            created_at=now,
            updated_at=now,
        )

        lead.status = "won"
        lead.updated_at = now
        lead.save(update_fields=["status", "updated_at"])

        AnalyticsEntry.objects.create(
            type="lead_converted",
            value=lead.estimated_value or 0,
            currency=lead.currency or DEFAULT_CURRENCY,
            lead_id=lead.id,
            client_id=client.id,
            date=now,
            metadata={"convertedFrom": "lead"},
        )

    logger.info(f"Converted lead {lead.id} into client {client.id}")
    return client
