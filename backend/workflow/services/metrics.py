"""
Analytics & reporting service.

Recording:
- record_analytics()  — generic event entry, dated now
- record_revenue()    — revenue_generated entry ("Record Payment" in the portal)

Reporting aggregates:
- revenue_metrics()   — total / this month / entry count
- project_metrics()   — totals and status distribution
- lead_metrics()      — totals, won count, conversion rate

Plus the small display rules the dashboard applies inline: project progress
by status, USD → KSH conversion, completion percentages and days remaining.
"""
import logging
import math
from datetime import timedelta

from django.conf import settings
from django.db.models import Count, Sum

from workflow.models.analytics_entry import AnalyticsEntry
from workflow.models.lead import Lead
from workflow.models.project import Project
from workflow.models.task import Task
from workflow.utils import utcnow

logger = logging.getLogger(__name__)

ANALYTICS_TYPE_VALUES = (
    "project_completed",
    "client_acquired",
    "lead_converted",
    "revenue_generated",
)

# Percent complete shown for a project in each status
PROJECT_PROGRESS = {
    "planning": 20,
    "in_progress": 60,
    "review": 85,
    "completed": 100,
    "on_hold": 50,
}


# ─── Recording ───────────────────────────────────────────────────────────────

def record_analytics(type, value, currency=None, project_id=None,
                     client_id=None, lead_id=None, metadata=None) -> AnalyticsEntry:
    entry = AnalyticsEntry.objects.create(
        type=type,
        value=value,
        currency=currency,
        project_id=project_id,
        client_id=client_id,
        lead_id=lead_id,
        date=utcnow(),
        metadata=metadata if metadata is not None else {},
    )
    logger.info(f"Recorded analytics {entry.type}={entry.value} ({entry.id})")
    return entry


def record_revenue(amount, currency, project_id=None, client_id=None,
                   description=None) -> AnalyticsEntry:
    return record_analytics(
        "revenue_generated",
        amount,
        currency=currency,
        project_id=project_id,
        client_id=client_id,
        metadata={"description": description},
    )


# ─── Queries ─────────────────────────────────────────────────────────────────

def analytics_by_type(entry_type):
    return AnalyticsEntry.objects.filter(type=entry_type)


def analytics_by_date_range(start, end):
    """Entries dated within [start, end], both ends inclusive."""
    return AnalyticsEntry.objects.filter(date__gte=start, date__lte=end).order_by("date")


def _month_start(now):
    return now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)


def revenue_metrics(now=None) -> dict:
    now = now or utcnow()
    revenue = AnalyticsEntry.objects.filter(type="revenue_generated")

    total = revenue.aggregate(total=Sum("value"))["total"] or 0
    monthly = (
        revenue.filter(date__gte=_month_start(now))
        .aggregate(total=Sum("value"))["total"] or 0
    )

    return {
        "totalRevenue": total,
        "monthlyRevenue": monthly,
        "entries": revenue.count(),
    }


def _status_distribution(model) -> dict:
    rows = model.objects.values("status").annotate(count=Count("id")).order_by()
    return {row["status"]: row["count"] for row in rows}


def project_metrics() -> dict:
    by_status = _status_distribution(Project)
    return {
        "total": sum(by_status.values()),
        "completed": by_status.get("completed", 0),
        "statusDistribution": by_status,
    }


def lead_metrics() -> dict:
    by_status = _status_distribution(Lead)
    total = sum(by_status.values())
    won = by_status.get("won", 0)
    return {
        "total": total,
        "converted": won,
        "conversionRate": (won / total) * 100 if total > 0 else 0,
        "statusDistribution": by_status,
    }


# ─── Display rules ───────────────────────────────────────────────────────────

def project_progress(status: str) -> int:
    return PROJECT_PROGRESS.get(status, 0)


def convert_to_ksh(usd_amount) -> str:
    """
    Format a USD amount in Kenyan shillings with grouped thousands and at most
    three decimals, trailing zeros dropped: 10000 -> "KSH 1,300,000",
    0.01 -> "KSH 1.3".
    """
    amount = usd_amount * settings.CURRENCY_KSH_RATE
    formatted = f"{amount:,.3f}".rstrip("0").rstrip(".")
    return f"KSH {formatted}"


def completion_percentage(completed: int, total: int) -> int:
    if total <= 0:
        return 0
    return round(completed / total * 100)


def task_completion(project_id) -> int:
    """Share of a project's tasks that are completed, as a whole percentage."""
    tasks = Task.objects.filter(project_id=project_id)
    return completion_percentage(tasks.filter(status="completed").count(), tasks.count())


def days_remaining(end_date, now=None):
    if end_date is None:
        return None
    now = now or utcnow()
    return max(0, math.ceil((end_date - now) / timedelta(days=1)))
