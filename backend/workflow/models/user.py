import uuid
from django.db import models

from workflow.utils import utcnow


class User(models.Model):
    """
    Local mirror of an identity-provider account. Only used for display;
    sign-in itself never touches this table.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    user_id = models.CharField(max_length=100, unique=True)  # external provider id
    first_name = models.CharField(max_length=100, null=True, blank=True)
    last_name = models.CharField(max_length=100, null=True, blank=True)
    email = models.EmailField()
    image_url = models.URLField(max_length=500, null=True, blank=True)

    created_at = models.DateTimeField(default=utcnow)
    updated_at = models.DateTimeField(default=utcnow)

    class Meta:
        db_table = "users"
        ordering = ["created_at"]

    def __str__(self):
        return f"{self.user_id} <{self.email}>"
