"""
DRF serializers for API request/response validation.
Separates API contract from DB models.
"""
from rest_framework import serializers

from workflow.models import User, Client, Project, Lead, Task, AnalyticsEntry
from workflow.models.analytics_entry import ANALYTICS_TYPES
from workflow.services import metrics


def _all_optional(fields):
    return {field: {'required': False} for field in fields}


# ─── Client Serializers ──────────────────────────────────────────────────────

class ClientCreateSerializer(serializers.ModelSerializer):
    class Meta:
        model = Client
        fields = ['name', 'email', 'phone', 'company', 'status']


class ClientUpdateSerializer(serializers.ModelSerializer):
    class Meta:
        model = Client
        fields = ['name', 'email', 'phone', 'company', 'status']
        extra_kwargs = _all_optional(fields)


class ClientSerializer(serializers.ModelSerializer):
    class Meta:
        model = Client
        fields = '__all__'


# ─── Project Serializers ─────────────────────────────────────────────────────

class ProjectCreateSerializer(serializers.ModelSerializer):
    class Meta:
        model = Project
        fields = [
            'title', 'description', 'client_id', 'status',
            'start_date', 'end_date', 'budget', 'currency',
        ]

    def validate_client_id(self, value):
        if not Client.objects.filter(id=value).exists():
            raise serializers.ValidationError("Client not found")
        return value


class ProjectUpdateSerializer(serializers.ModelSerializer):
    """The owning client is fixed at creation time."""
    class Meta:
        model = Project
        fields = [
            'title', 'description', 'status',
            'start_date', 'end_date', 'budget', 'currency',
        ]
        extra_kwargs = _all_optional(fields)


class ProjectSerializer(serializers.ModelSerializer):
    progress = serializers.SerializerMethodField()
    budget_display = serializers.SerializerMethodField()

    class Meta:
        model = Project
        fields = [
            'id', 'title', 'description', 'client_id', 'status',
            'start_date', 'end_date', 'budget', 'currency',
            'progress', 'budget_display', 'created_at', 'updated_at',
        ]

    def get_progress(self, obj):
        return metrics.project_progress(obj.status)

    def get_budget_display(self, obj):
        if obj.budget is None:
            return None
        return metrics.convert_to_ksh(obj.budget)


class ProjectDetailSerializer(ProjectSerializer):
    """Single-project view: adds completion derived from the project's tasks."""
    task_completion = serializers.SerializerMethodField()

    class Meta(ProjectSerializer.Meta):
        fields = ProjectSerializer.Meta.fields + ['task_completion']

    def get_task_completion(self, obj):
        return metrics.task_completion(obj.id)


class PortalProjectSerializer(ProjectSerializer):
    days_remaining = serializers.SerializerMethodField()

    class Meta(ProjectSerializer.Meta):
        fields = ProjectSerializer.Meta.fields + ['days_remaining']

    def get_days_remaining(self, obj):
        return metrics.days_remaining(obj.end_date)


# ─── Lead Serializers ────────────────────────────────────────────────────────

class LeadCreateSerializer(serializers.ModelSerializer):
    class Meta:
        model = Lead
        fields = [
            'name', 'email', 'phone', 'company', 'source',
            'status', 'notes', 'estimated_value', 'currency',
        ]


class LeadUpdateSerializer(serializers.ModelSerializer):
    class Meta:
        model = Lead
        fields = [
            'name', 'email', 'phone', 'company', 'source',
            'status', 'notes', 'estimated_value', 'currency',
        ]
        extra_kwargs = _all_optional(fields)


class LeadSerializer(serializers.ModelSerializer):
    class Meta:
        model = Lead
        fields = '__all__'


# ─── Task Serializers ────────────────────────────────────────────────────────

class TaskCreateSerializer(serializers.ModelSerializer):
    class Meta:
        model = Task
        fields = [
            'title', 'description', 'project_id', 'assigned_to',
            'status', 'priority', 'due_date',
        ]

    def validate_project_id(self, value):
        if value is not None and not Project.objects.filter(id=value).exists():
            raise serializers.ValidationError("Project not found")
        return value


class TaskUpdateSerializer(serializers.ModelSerializer):
    """The owning project is fixed at creation time."""
    class Meta:
        model = Task
        fields = [
            'title', 'description', 'assigned_to',
            'status', 'priority', 'due_date',
        ]
        extra_kwargs = _all_optional(fields)


class TaskSerializer(serializers.ModelSerializer):
    class Meta:
        model = Task
        fields = '__all__'


# ─── Analytics Serializers ───────────────────────────────────────────────────

class AnalyticsEntrySerializer(serializers.ModelSerializer):
    class Meta:
        model = AnalyticsEntry
        fields = '__all__'


class AnalyticsRecordSerializer(serializers.Serializer):
    """Payload to record a business event."""
    type = serializers.ChoiceField(choices=ANALYTICS_TYPES)
    value = serializers.FloatField()
    currency = serializers.CharField(required=False, allow_null=True, max_length=10)
    project_id = serializers.UUIDField(required=False, allow_null=True)
    client_id = serializers.UUIDField(required=False, allow_null=True)
    lead_id = serializers.UUIDField(required=False, allow_null=True)
    metadata = serializers.JSONField(required=False, allow_null=True)


class RevenueRecordSerializer(serializers.Serializer):
    amount = serializers.FloatField()
    currency = serializers.CharField(max_length=10)
    project_id = serializers.UUIDField(required=False, allow_null=True)
    client_id = serializers.UUIDField(required=False, allow_null=True)
    description = serializers.CharField(required=False, allow_null=True, allow_blank=True)


class DateRangeSerializer(serializers.Serializer):
    start = serializers.DateTimeField()
    end = serializers.DateTimeField()

    def validate(self, attrs):
        if attrs['start'] > attrs['end']:
            raise serializers.ValidationError("start must not be after end")
        return attrs


# ─── User Serializers ────────────────────────────────────────────────────────

class UserStoreSerializer(serializers.Serializer):
    """Identity-provider user payload."""
    user_id = serializers.CharField(max_length=100)
    email = serializers.EmailField()
    first_name = serializers.CharField(required=False, allow_null=True, allow_blank=True, max_length=100)
    last_name = serializers.CharField(required=False, allow_null=True, allow_blank=True, max_length=100)
    image_url = serializers.URLField(required=False, allow_null=True, max_length=500)


class UserSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = '__all__'
