"""
Dashboard search — the header search box ("Search projects, clients, tasks...").

A plain case-insensitive substring scan across the display fields of the four
main collections. Matching is done on casefolded in-memory copies of those
fields rather than in SQL, since SQLite's LIKE and LOWER() only fold ASCII.
Results are taken collection by collection in a fixed order (clients,
projects, leads, tasks) and cut off at the configured limit. There is no
ranking and no index.
"""
from django.conf import settings

from workflow.models.client import Client
from workflow.models.lead import Lead
from workflow.models.project import Project
from workflow.models.task import Task

# (result type, model, searched fields, title field, subtitle field)
SEARCH_TARGETS = [
    ("client", Client, ("name", "email", "company"), "name", "company"),
    ("project", Project, ("title", "description"), "title", "description"),
    ("lead", Lead, ("name", "email", "company"), "name", "company"),
    ("task", Task, ("title", "description", "assigned_to"), "title", "assigned_to"),
]


def _matches(row: dict, fields, needle: str) -> bool:
    return any(needle in (row[field] or "").casefold() for field in fields)


def search(query: str, limit: int | None = None) -> list[dict]:
    """Return at most `limit` hits for `query` across all collections."""
    if limit is None:
        limit = settings.SEARCH_RESULT_LIMIT

    needle = (query or "").strip().casefold()
    if not needle or limit <= 0:
        return []

    results = []
    for result_type, model, fields, title_field, subtitle_field in SEARCH_TARGETS:
        if len(results) >= limit:
            break
        rows = model.objects.values("id", "status", *fields)
        for row in rows.iterator():
            if not _matches(row, fields, needle):
                continue
            results.append({
                "type": result_type,
                "id": str(row["id"]),
                "title": row[title_field],
                "subtitle": row[subtitle_field] or "",
                "status": row["status"],
            })
            if len(results) >= limit:
                break

    return results
