from workflow.models.user import User
from workflow.models.client import Client
from workflow.models.project import Project
from workflow.models.lead import Lead
from workflow.models.task import Task
from workflow.models.analytics_entry import AnalyticsEntry

__all__ = [
    "User", "Client", "Project",
    "Lead", "Task", "AnalyticsEntry",
]
