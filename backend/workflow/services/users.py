"""
User mirror — keeps a local copy of identity-provider accounts, keyed by the
provider's user id. Sign-in never goes through here.
"""
import logging

from workflow.models.user import User
from workflow.utils import utcnow

logger = logging.getLogger(__name__)


def store_user(user_id, email, first_name=None, last_name=None, image_url=None) -> User:
    """Insert or refresh the mirror row for an external user id."""
    now = utcnow()
    user, created = User.objects.update_or_create(
        user_id=user_id,
        defaults={
            "email": email,
            "first_name": first_name,
            "last_name": last_name,
            "image_url": image_url,
            "updated_at": now,
        },
        create_defaults={
            "email": email,
            "first_name": first_name,
            "last_name": last_name,
            "image_url": image_url,
            "created_at": now,
            "updated_at": now,
        },
    )
    logger.info(f"{'Stored' if created else 'Updated'} user {user_id}")
    return user


def remove_user(user_id) -> bool:
    deleted, _ = User.objects.filter(user_id=user_id).delete()
    if deleted:
        logger.info(f"Removed user {user_id}")
    return bool(deleted)


def get_user(user_id):
    return User.objects.filter(user_id=user_id).first()


def list_users():
    return User.objects.all()
