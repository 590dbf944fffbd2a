"""Shared pytest fixtures for the API test suite.

Fixture overview
----------------
api              — DRF APIClient
make_client      — factory creating a Client through the record service
make_project     — factory creating a Project (creates a client if none given)
make_lead        — factory creating a Lead
make_task        — factory creating a Task
"""
import pytest
from rest_framework.test import APIClient

from workflow.models import Client, Project, Lead, Task
from workflow.services.records import create_record


@pytest.fixture
def api() -> APIClient:
    return APIClient()


@pytest.fixture
def make_client(db):
    def _make(**overrides):
        fields = {
            "name": "Sarah Johnson",
            "email": "sarah@techcorp.com",
            "phone": "+1 (555) 123-4567",
            "company": "TechCorp Inc.",
            "status": "active",
        }
        fields.update(overrides)
        return create_record(Client, **fields)
    return _make


@pytest.fixture
def make_project(db, make_client):
    def _make(client=None, **overrides):
        client = client or make_client()
        fields = {
            "title": "TechCorp Website Redesign",
            "description": "Full redesign",
            "client_id": client.id,
            "status": "planning",
            "budget": 10000,
            "currency": "USD",
        }
        fields.update(overrides)
        return create_record(Project, **fields)
    return _make


@pytest.fixture
def make_lead(db):
    def _make(**overrides):
        fields = {
            "name": "Grace Wanjiku",
            "email": "grace@safaritours.co.ke",
            "phone": "+254 700 000 000",
            "company": "Safari Tours",
            "source": "Website Form",
            "status": "qualified",
            "notes": "Booking site",
            "estimated_value": 15000,
            "currency": "USD",
        }
        fields.update(overrides)
        return create_record(Lead, **fields)
    return _make


@pytest.fixture
def make_task(db):
    def _make(project=None, **overrides):
        fields = {
            "title": "Cross-browser testing",
            "project_id": project.id if project else None,
            "assigned_to": "Alex Kim",
            "status": "todo",
            "priority": "medium",
        }
        fields.update(overrides)
        return create_record(Task, **fields)
    return _make
