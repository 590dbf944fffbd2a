import uuid

from django.db import migrations, models

import workflow.utils


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='User',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('user_id', models.CharField(max_length=100, unique=True)),
                ('first_name', models.CharField(blank=True, max_length=100, null=True)),
                ('last_name', models.CharField(blank=True, max_length=100, null=True)),
                ('email', models.EmailField(max_length=254)),
                ('image_url', models.URLField(blank=True, max_length=500, null=True)),
                ('created_at', models.DateTimeField(default=workflow.utils.utcnow)),
                ('updated_at', models.DateTimeField(default=workflow.utils.utcnow)),
            ],
            options={
                'db_table': 'users',
                'ordering': ['created_at'],
            },
        ),
        migrations.CreateModel(
            name='Client',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=200)),
                ('email', models.EmailField(db_index=True, max_length=254)),
                ('phone', models.CharField(blank=True, max_length=40, null=True)),
                ('company', models.CharField(blank=True, max_length=200, null=True)),
                ('status', models.CharField(choices=[('active', 'Active'), ('inactive', 'Inactive'), ('pending', 'Pending')], max_length=20)),
                ('created_at', models.DateTimeField(default=workflow.utils.utcnow)),
                ('updated_at', models.DateTimeField(default=workflow.utils.utcnow)),
            ],
            options={
                'db_table': 'clients',
                'ordering': ['-created_at'],
            },
        ),
        migrations.CreateModel(
            name='Project',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('title', models.CharField(max_length=200)),
                ('description', models.TextField(blank=True, null=True)),
                ('client_id', models.UUIDField(db_index=True)),
                ('status', models.CharField(choices=[('planning', 'Planning'), ('in_progress', 'In progress'), ('review', 'Review'), ('completed', 'Completed'), ('on_hold', 'On hold')], db_index=True, max_length=20)),
                ('start_date', models.DateTimeField(blank=True, null=True)),
                ('end_date', models.DateTimeField(blank=True, null=True)),
                ('budget', models.FloatField(blank=True, null=True)),
                ('currency', models.CharField(blank=True, max_length=10, null=True)),
                ('created_at', models.DateTimeField(default=workflow.utils.utcnow)),
                ('updated_at', models.DateTimeField(default=workflow.utils.utcnow)),
            ],
            options={
                'db_table': 'projects',
                'ordering': ['-created_at'],
            },
        ),
        migrations.CreateModel(
            name='Lead',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=200)),
                ('email', models.EmailField(db_index=True, max_length=254)),
                ('phone', models.CharField(blank=True, max_length=40, null=True)),
                ('company', models.CharField(blank=True, max_length=200, null=True)),
                ('source', models.CharField(blank=True, max_length=100, null=True)),
                ('status', models.CharField(choices=[('new', 'New'), ('contacted', 'Contacted'), ('qualified', 'Qualified'), ('proposal', 'Proposal'), ('won', 'Won'), ('lost', 'Lost')], db_index=True, max_length=20)),
                ('notes', models.TextField(blank=True, null=True)),
                ('estimated_value', models.FloatField(blank=True, null=True)),
                ('currency', models.CharField(blank=True, max_length=10, null=True)),
                ('created_at', models.DateTimeField(default=workflow.utils.utcnow)),
                ('updated_at', models.DateTimeField(default=workflow.utils.utcnow)),
            ],
            options={
                'db_table': 'leads',
                'ordering': ['-created_at'],
            },
        ),
        migrations.CreateModel(
            name='Task',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('title', models.CharField(max_length=200)),
                ('description', models.TextField(blank=True, null=True)),
                ('project_id', models.UUIDField(blank=True, db_index=True, null=True)),
                ('assigned_to', models.CharField(blank=True, max_length=200, null=True)),
                ('status', models.CharField(choices=[('todo', 'To do'), ('in_progress', 'In progress'), ('review', 'Review'), ('completed', 'Completed')], db_index=True, max_length=20)),
                ('priority', models.CharField(choices=[('low', 'Low'), ('medium', 'Medium'), ('high', 'High')], max_length=10)),
                ('due_date', models.DateTimeField(blank=True, null=True)),
                ('created_at', models.DateTimeField(default=workflow.utils.utcnow)),
                ('updated_at', models.DateTimeField(default=workflow.utils.utcnow)),
            ],
            options={
                'db_table': 'tasks',
                'ordering': ['-created_at'],
            },
        ),
        migrations.CreateModel(
            name='AnalyticsEntry',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('type', models.CharField(choices=[('project_completed', 'Project completed'), ('client_acquired', 'Client acquired'), ('lead_converted', 'Lead converted'), ('revenue_generated', 'Revenue generated')], db_index=True, max_length=30)),
                ('value', models.FloatField()),
                ('currency', models.CharField(blank=True, max_length=10, null=True)),
                ('project_id', models.UUIDField(blank=True, null=True)),
                ('client_id', models.UUIDField(blank=True, null=True)),
                ('lead_id', models.UUIDField(blank=True, null=True)),
                ('date', models.DateTimeField(db_index=True, default=workflow.utils.utcnow)),
                ('metadata', models.JSONField(blank=True, default=dict)),
            ],
            options={
                'db_table': 'analytics',
                'ordering': ['-date'],
            },
        ),
    ]
