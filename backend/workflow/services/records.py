"""
Record services — the list/get/filter/insert/patch/delete primitives shared
by every entity.

Each helper takes the model class as its first argument, so the API views
for clients, projects, leads, tasks and analytics all go through one path:

- create stamps created_at and updated_at with the same instant (where the
  model has them; analytics entries are dated by their own `date` field)
- update drops None values, rejects an empty change set, and refreshes
  updated_at when the model has one
- delete removes the row only; rows that reference it are left alone
"""
import logging

from workflow.utils import utcnow

logger = logging.getLogger(__name__)


class RecordNotFound(LookupError):
    """Raised when an id does not resolve to a row."""


class NoFieldsToUpdate(ValueError):
    """Raised when a partial update carries nothing to change."""

    def __init__(self, message="No valid fields to update"):
        super().__init__(message)


def _label(model) -> str:
    return model._meta.verbose_name.title()


def list_records(model):
    """All rows of a model, newest first (the model's default ordering)."""
    return model.objects.all()


def get_record(model, record_id):
    try:
        return model.objects.get(id=record_id)
    except model.DoesNotExist:
        raise RecordNotFound(f"{_label(model)} not found")


def filter_records(model, **filters):
    """Rows matching an exact lookup on an indexed field (status, client_id, ...)."""
    return model.objects.filter(**filters)


def _timestamp_fields(model, *names) -> list[str]:
    """The subset of `names` the model actually defines (analytics entries only carry `date`)."""
    own = {field.name for field in model._meta.concrete_fields}
    return [name for name in names if name in own]


def create_record(model, **fields):
    now = utcnow()
    for name in _timestamp_fields(model, "created_at", "updated_at"):
        fields.setdefault(name, now)
    record = model.objects.create(**fields)
    logger.info(f"Created {model._meta.model_name} {record.id}")
    return record


def update_record(model, record_id, **fields):
    """
    Apply a partial update. Only keys with a non-None value are written.
    Raises NoFieldsToUpdate when nothing is left after filtering.
    """
    updates = {key: value for key, value in fields.items() if value is not None}
    if not updates:
        raise NoFieldsToUpdate()

    record = get_record(model, record_id)
    for key, value in updates.items():
        setattr(record, key, value)
    stamped = _timestamp_fields(model, "updated_at")
    for name in stamped:
        setattr(record, name, utcnow())
    record.save(update_fields=[*updates.keys(), *stamped])
    return record


def delete_record(model, record_id):
    deleted, _ = model.objects.filter(id=record_id).delete()
    if not deleted:
        raise RecordNotFound(f"{_label(model)} not found")
    logger.info(f"Deleted {model._meta.model_name} {record_id}")
