"""WSGI config for the Agency Workflow backend."""
import os
from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'agency_workflow.settings')
application = get_wsgi_application()
