"""
User settings service: per-user scheduling preferences.
"""
import logging
from enum import Enum
from sqlmodel import Session
from sqlalchemy.exc import SQLAlchemyError

from app.core.database import dialect_insert
from app.core.exceptions import StoreError
from app.models.user_settings import UserSettings, DEFAULT_USER_SETTINGS
from app.schemas.user_settings import UpdateUserSettingsRequest

logger = logging.getLogger(__name__)


def get_or_create_user_settings(session: Session, user_id: str) -> UserSettings:
    """
    Return the user's settings, creating the default row on first access.

    The insert is ON CONFLICT DO NOTHING, so two concurrent first accesses
    both end up reading the single row that won.

    Args:
        session: Database session
        user_id: Owner of the settings

    Returns:
        The stored UserSettings row

    Raises:
        StoreError: If the default row could not be created
    """
    user_settings = session.get(UserSettings, user_id)
    if user_settings:
        return user_settings

    statement = (
        dialect_insert(session, UserSettings.__table__)
        .values(user_id=user_id, **DEFAULT_USER_SETTINGS)
        .on_conflict_do_nothing(index_elements=["user_id"])
    )
    try:
        session.execute(statement)
        session.commit()
    except SQLAlchemyError as e:
        session.rollback()
        logger.error(f"Error creating default settings for user {user_id}: {str(e)}")
        raise StoreError("Failed to create settings") from e

    logger.info(f"Created default settings for user {user_id}")
    return session.get(UserSettings, user_id)


def update_user_settings(
    session: Session,
    user_id: str,
    update: UpdateUserSettingsRequest
) -> UserSettings:
    """
    Apply a partial settings update and return the full row.

    Only fields present and non-null in the update are written.
    """
    user_settings = get_or_create_user_settings(session, user_id)

    changes = {
        field: value.value if isinstance(value, Enum) else value
        for field, value in update.model_dump(exclude_unset=True).items()
        if value is not None
    }
    for field, value in changes.items():
        setattr(user_settings, field, value)

    try:
        session.add(user_settings)
        session.commit()
        session.refresh(user_settings)
    except SQLAlchemyError as e:
        session.rollback()
        logger.error(f"Error updating settings for user {user_id}: {str(e)}")
        raise StoreError("Failed to update settings") from e

    logger.info(f"Updated settings for user {user_id}: {sorted(changes)}")
    return user_settings
