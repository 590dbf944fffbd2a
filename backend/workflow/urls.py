"""
App URL configuration — one block per dashboard area.
"""
from django.urls import path
from workflow.api import clients, projects, leads, tasks, analytics, portal, integrations, search, users

urlpatterns = [
    # Clients
    path('clients/', clients.ClientListCreateView.as_view()),
    path('clients/<uuid:record_id>', clients.ClientDetailView.as_view()),

    # Projects
    path('projects/', projects.ProjectListCreateView.as_view()),
    path('projects/<uuid:record_id>', projects.ProjectDetailView.as_view()),

    # Leads (CRM)
    path('leads/', leads.LeadListCreateView.as_view()),
    path('leads/<uuid:record_id>', leads.LeadDetailView.as_view()),
    path('leads/<uuid:record_id>/convert', leads.LeadConvertView.as_view()),

    # Tasks
    path('tasks/', tasks.TaskListCreateView.as_view()),
    path('tasks/<uuid:record_id>', tasks.TaskDetailView.as_view()),

    # Analytics & reporting
    path('analytics', analytics.AnalyticsListCreateView.as_view()),
    path('analytics/revenue', analytics.RevenueRecordView.as_view()),
    path('analytics/range', analytics.AnalyticsDateRangeView.as_view()),
    path('analytics/metrics/revenue', analytics.RevenueMetricsView.as_view()),
    path('analytics/metrics/projects', analytics.ProjectMetricsView.as_view()),
    path('analytics/metrics/leads', analytics.LeadMetricsView.as_view()),

    # Client portal
    path('client-portal/<str:client_id>', portal.ClientPortalView.as_view()),
    path('client-portal/<str:client_id>/projects', portal.ClientPortalProjectsView.as_view()),

    # Dashboard search
    path('search', search.SearchView.as_view()),

    # Users (identity-provider mirror)
    path('users/', users.UserListStoreView.as_view()),
    path('users/<str:user_id>', users.UserDetailView.as_view()),

    # Integrations
    path('webhook', integrations.WebhookView.as_view()),
    path('debug', integrations.DebugView.as_view()),
]
