"""
API tests for /api/leads/ including lead → client conversion.
"""
import uuid

import pytest

from workflow.models import AnalyticsEntry, Client, Lead


@pytest.mark.django_db
class TestLeadAPI:
    def test_create_persists_all_fields(self, api):
        payload = {
            "name": "Hannah Brooks",
            "email": "hannah@brooksfitness.com",
            "phone": "555-0100",
            "company": "Brooks Fitness",
            "source": "LinkedIn",
            "status": "new",
            "notes": "Membership sign-up",
            "estimated_value": 4000.0,
            "currency": "USD",
        }
        response = api.post("/api/leads/", payload, format="json")

        assert response.status_code == 201
        body = response.json()
        for key, value in payload.items():
            assert body[key] == value
        assert body["created_at"] == body["updated_at"]

    def test_filter_by_status(self, api, make_lead):
        make_lead(email="a@x.com", status="new")
        proposal = make_lead(email="b@x.com", status="proposal")
        make_lead(email="c@x.com", status="lost")

        body = api.get("/api/leads/?status=proposal").json()

        assert [lead["id"] for lead in body] == [str(proposal.id)]

    def test_search_matches_name_company_or_email(self, api, make_lead):
        alpha = make_lead(name="Alpha", email="alpha@x.com", company="First Co")
        make_lead(name="Beta", email="beta@x.com", company="Second Co")

        body = api.get("/api/leads/?search=alpha").json()
        assert [lead["id"] for lead in body] == [str(alpha.id)]

        body = api.get("/api/leads/?search=SECOND").json()
        assert [lead["name"] for lead in body] == ["Beta"]

    def test_search_combines_with_status(self, api, make_lead):
        make_lead(name="Alpha One", email="a1@x.com", status="new")
        won = make_lead(name="Alpha Two", email="a2@x.com", status="won")
        make_lead(name="Beta", email="b@x.com", status="won")

        body = api.get("/api/leads/", {"search": "alpha", "status": "won"}).json()

        assert [lead["id"] for lead in body] == [str(won.id)]


@pytest.mark.django_db
class TestLeadConversion:
    def test_convert_creates_client_marks_won_and_records_analytics(self, api, make_lead):
        lead = make_lead(status="proposal")

        response = api.post(f"/api/leads/{lead.id}/convert")

        assert response.status_code == 201
        assert Client.objects.count() == 1
        client = Client.objects.get()
        assert str(client.id) == response.json()["id"]
        assert (client.name, client.email, client.phone, client.company) == (
            lead.name, lead.email, lead.phone, lead.company,
        )
        assert client.status == "active"

        lead.refresh_from_db()
        assert lead.status == "won"

        entries = AnalyticsEntry.objects.filter(type="lead_converted")
        assert entries.count() == 1
        entry = entries.get()
        assert entry.lead_id == lead.id
        assert entry.client_id == client.id
        assert entry.value == 15000
        assert entry.currency == "USD"
        assert entry.metadata == {"convertedFrom": "lead"}

    def test_convert_without_value_defaults(self, api, make_lead):
        lead = make_lead(estimated_value=None, currency=None)

        api.post(f"/api/leads/{lead.id}/convert")

        entry = AnalyticsEntry.objects.get()
        assert entry.value == 0
        assert entry.currency == "USD"

    def test_convert_unknown_lead_is_404_and_writes_nothing(self, api, db):
        response = api.post(f"/api/leads/{uuid.uuid4()}/convert")

        assert response.status_code == 404
        assert response.json() == {"detail": "Lead not found"}
        assert Client.objects.count() == 0
        assert AnalyticsEntry.objects.count() == 0
        assert Lead.objects.count() == 0
