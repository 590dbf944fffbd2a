"""
Tests for the shared record services (create / update / filter / delete).
"""
from datetime import timedelta

import pytest

from workflow.models import AnalyticsEntry, Client, Project, Lead, Task
from workflow.services.records import (
    RecordNotFound, NoFieldsToUpdate,
    create_record, update_record, delete_record, get_record,
    filter_records, list_records,
)
from workflow.utils import utcnow


@pytest.mark.django_db
class TestCreateRecord:
    def test_persists_all_fields_and_stamps_equal_timestamps(self):
        client = create_record(
            Client, name="Ada", email="ada@example.com",
            phone="123", company="Analytical Ltd", status="pending",
        )
        stored = Client.objects.get(id=client.id)

        assert stored.name == "Ada"
        assert stored.email == "ada@example.com"
        assert stored.phone == "123"
        assert stored.company == "Analytical Ltd"
        assert stored.status == "pending"
        assert stored.created_at == stored.updated_at

    def test_task_without_project(self):
        task = create_record(Task, title="Write copy", status="todo", priority="low")
        assert task.project_id is None
        assert task.created_at == task.updated_at


@pytest.mark.django_db
class TestUpdateRecord:
    def test_empty_update_is_rejected(self, make_client):
        client = make_client()
        with pytest.raises(NoFieldsToUpdate, match="No valid fields to update"):
            update_record(Client, client.id)

    def test_only_none_values_is_rejected(self, make_client):
        client = make_client()
        with pytest.raises(NoFieldsToUpdate):
            update_record(Client, client.id, name=None, phone=None)

    def test_changes_only_the_given_field_and_refreshes_updated_at(self, make_client):
        client = make_client()
        past = utcnow() - timedelta(hours=1)
        Client.objects.filter(id=client.id).update(created_at=past, updated_at=past)

        update_record(Client, client.id, status="inactive")

        stored = Client.objects.get(id=client.id)
        assert stored.status == "inactive"
        assert stored.name == client.name
        assert stored.email == client.email
        assert stored.phone == client.phone
        assert stored.company == client.company
        assert stored.created_at == past
        assert stored.updated_at > past

    def test_unknown_id_raises_not_found(self, db):
        with pytest.raises(RecordNotFound, match="Lead not found"):
            update_record(Lead, "00000000-0000-0000-0000-000000000000", status="won")


@pytest.mark.django_db
class TestFilterAndDelete:
    def test_filter_by_status_returns_exact_subset(self, make_lead):
        new = [make_lead(email=f"n{i}@x.com", status="new") for i in range(2)]
        make_lead(email="c@x.com", status="contacted")
        make_lead(email="w@x.com", status="won")

        result = filter_records(Lead, status="new")

        assert {lead.id for lead in result} == {lead.id for lead in new}

    def test_list_is_newest_first(self, make_client):
        first = make_client(email="a@x.com")
        second = make_client(email="b@x.com")
        Client.objects.filter(id=first.id).update(created_at=utcnow() - timedelta(days=1))

        assert [c.id for c in list_records(Client)] == [second.id, first.id]

    def test_delete_removes_record_but_not_referencing_rows(self, make_project):
        project = make_project()
        client_id = project.client_id

        delete_record(Client, client_id)

        with pytest.raises(RecordNotFound):
            get_record(Client, client_id)
        survivor = Project.objects.get(id=project.id)
        assert survivor.client_id == client_id

    def test_delete_unknown_raises(self, db):
        with pytest.raises(RecordNotFound, match="Task not found"):
            delete_record(Task, "00000000-0000-0000-0000-000000000000")


@pytest.mark.django_db
class TestAnalyticsThroughRecordHelpers:
    def test_create_uses_entry_date_instead_of_timestamps(self):
        entry = create_record(AnalyticsEntry, type="client_acquired", value=1)

        stored = get_record(AnalyticsEntry, entry.id)
        assert stored.type == "client_acquired"
        assert stored.value == 1
        assert stored.date is not None

    def test_update_and_delete(self):
        entry = create_record(AnalyticsEntry, type="revenue_generated", value=1)
        original_date = entry.date

        updated = update_record(AnalyticsEntry, entry.id, value=2)

        assert AnalyticsEntry.objects.get(id=entry.id).value == 2
        assert updated.date == original_date
        assert [e.id for e in filter_records(AnalyticsEntry, type="revenue_generated")] == [entry.id]

        delete_record(AnalyticsEntry, entry.id)
        assert AnalyticsEntry.objects.count() == 0
