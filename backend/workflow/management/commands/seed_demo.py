"""
Seed the database with demo agency data: a few clients with projects and
tasks, a lead pipeline, one converted lead and some recorded revenue.

Usage:
    python manage.py seed_demo
    python manage.py seed_demo --reset  # Clear and re-seed
"""
from datetime import timedelta

from django.core.management.base import BaseCommand

from workflow.models import Client, Project, Lead, Task, AnalyticsEntry
from workflow.services.lead_conversion import convert_lead_to_client
from workflow.services.metrics import record_revenue, record_analytics
from workflow.services.records import create_record
from workflow.utils import utcnow


CLIENTS = [
    {"name": "Sarah Johnson", "email": "sarah@techcorp.com", "phone": "+1 (555) 123-4567",
     "company": "TechCorp Inc.", "status": "active"},
    {"name": "Michael Chen", "email": "m.chen@shopmart.com", "phone": "+1 (555) 987-6543",
     "company": "ShopMart", "status": "active"},
    {"name": "Emily Rodriguez", "email": "emily@creativestudio.com", "phone": "+1 (555) 456-7890",
     "company": "Creative Studio", "status": "pending"},
]

# client_index refers into CLIENTS; dates are days from now
PROJECTS = [
    {"client_index": 0, "title": "TechCorp Website Redesign", "status": "review",
     "description": "Complete redesign with e-commerce functionality",
     "start": -60, "end": 14, "budget": 50000, "currency": "USD"},
    {"client_index": 1, "title": "ShopMart E-commerce Platform", "status": "in_progress",
     "description": "Modern storefront with inventory management",
     "start": -30, "end": 45, "budget": 25000, "currency": "USD"},
    {"client_index": 2, "title": "Creative Studio Portfolio", "status": "planning",
     "description": "Portfolio website for a design agency",
     "start": 7, "end": 60, "budget": 10000, "currency": "USD"},
]

TASKS = [
    {"project_index": 0, "title": "Cross-browser testing", "assigned_to": "Alex Kim",
     "status": "completed", "priority": "high", "due": -3},
    {"project_index": 0, "title": "Mobile responsiveness fixes", "assigned_to": "Jordan Lee",
     "status": "review", "priority": "high", "due": 2},
    {"project_index": 0, "title": "SSL certificate install", "assigned_to": "Alex Kim",
     "status": "todo", "priority": "high", "due": 10},
    {"project_index": 1, "title": "Product catalogue import", "assigned_to": "Sam Patel",
     "status": "in_progress", "priority": "medium", "due": 12},
    {"project_index": 1, "title": "Checkout flow", "assigned_to": "Jordan Lee",
     "status": "todo", "priority": "high", "due": 30},
    {"project_index": 2, "title": "Moodboard and sitemap", "assigned_to": "Sam Patel",
     "status": "todo", "priority": "low", "due": 14},
]

LEADS = [
    {"name": "Grace Wanjiku", "email": "grace@safaritours.co.ke", "company": "Safari Tours",
     "source": "Website Form", "status": "qualified", "estimated_value": 15000, "currency": "USD",
     "notes": "Booking site with multilingual support"},
    {"name": "Daniel Otieno", "email": "daniel@lakesidecafe.com", "company": "Lakeside Cafe",
     "source": "Referral", "status": "proposal", "estimated_value": 4000, "currency": "USD",
     "notes": "Menu and reservations site"},
    {"name": "Hannah Brooks", "email": "hannah@brooksfitness.com", "company": "Brooks Fitness",
     "source": "LinkedIn", "status": "new",
     "notes": "Class schedule and membership sign-up"},
    {"name": "Peter Mwangi", "email": "peter@mwangilaw.com", "company": "Mwangi & Co.",
     "source": "Referral", "status": "lost", "estimated_value": 8000, "currency": "USD",
     "notes": "Went with an in-house developer"},
]

# LEADS index converted after seeding
CONVERTED_LEAD_INDEX = 1


class Command(BaseCommand):
    help = "Seed the database with demo clients, projects, tasks, leads and analytics"

    def add_arguments(self, parser):
        parser.add_argument(
            "--reset", action="store_true",
            help="Delete all existing records before seeding",
        )

    def handle(self, *args, **options):
        if options["reset"]:
            for model in (AnalyticsEntry, Task, Project, Lead, Client):
                deleted, _ = model.objects.all().delete()
                self.stdout.write(f"Cleared {deleted} {model._meta.verbose_name_plural}.")
        elif Client.objects.exists() or Lead.objects.exists():
            self.stdout.write(self.style.WARNING(
                "Database already has data. Skipping seed (use --reset to re-seed)."
            ))
            return

        now = utcnow()

        clients = [create_record(Client, **data) for data in CLIENTS]

        projects = []
        for data in PROJECTS:
            data = dict(data)
            client = clients[data.pop("client_index")]
            projects.append(create_record(
                Project,
                client_id=client.id,
                start_date=now + timedelta(days=data.pop("start")),
                end_date=now + timedelta(days=data.pop("end")),
                **data,
            ))

        for data in TASKS:
            data = dict(data)
            project = projects[data.pop("project_index")]
            create_record(
                Task,
                project_id=project.id,
                due_date=now + timedelta(days=data.pop("due")),
                **data,
            )

        leads = [create_record(Lead, **data) for data in LEADS]

        converted = convert_lead_to_client(leads[CONVERTED_LEAD_INDEX].id)
        record_analytics("client_acquired", 1, client_id=converted.id)

        for project in projects[:2]:
            record_revenue(
                project.budget / 2, project.currency,
                project_id=project.id, client_id=project.client_id,
                description=f"Deposit for {project.title}",
            )

        self.stdout.write(self.style.SUCCESS(
            f"Seed complete: {Client.objects.count()} clients, {Project.objects.count()} projects, "
            f"{Task.objects.count()} tasks, {Lead.objects.count()} leads, "
            f"{AnalyticsEntry.objects.count()} analytics entries."
        ))
