"""
User service for account-wide operations on a user's data.
"""
# pyright: reportAttributeAccessIssue=false
import logging
from sqlmodel import Session, select
from sqlalchemy import delete
from sqlalchemy.exc import SQLAlchemyError
from typing import Dict

from app.core.database import dialect_insert
from app.core.exceptions import StoreError
from app.models.models import CardState, ReviewLog, LessonProgress, UserSettings, DEFAULT_USER_SETTINGS
from app.schemas.card_state import CardStateResponse
from app.schemas.lesson_progress import LessonProgressResponse
from app.schemas.review_log import ReviewLogResponse
from app.schemas.user_data import UserDataExport
from app.schemas.user_settings import UserSettingsResponse

logger = logging.getLogger(__name__)


def reset_user_data(
    session: Session,
    user_id: str
) -> Dict[str, int]:
    """
    Delete all review logs, card states, lesson progress and settings for a
    user, then recreate default settings.

    Everything runs in one transaction: on failure the user's data is left
    exactly as it was.

    Args:
        session: Database session
        user_id: The user whose data should be reset

    Returns:
        Dict with counts of deleted items:
        {
            'review_logs_deleted': int,
            'card_states_deleted': int,
            'lesson_progress_deleted': int,
            'settings_deleted': int
        }

    Raises:
        StoreError: If the transaction failed and was rolled back
    """
    try:
        review_logs_deleted = session.execute(
            delete(ReviewLog.__table__).where(ReviewLog.__table__.c.user_id == user_id)
        ).rowcount
        card_states_deleted = session.execute(
            delete(CardState.__table__).where(CardState.__table__.c.user_id == user_id)
        ).rowcount
        lesson_progress_deleted = session.execute(
            delete(LessonProgress.__table__).where(LessonProgress.__table__.c.user_id == user_id)
        ).rowcount
        settings_deleted = session.execute(
            delete(UserSettings.__table__).where(UserSettings.__table__.c.user_id == user_id)
        ).rowcount
        session.execute(
            dialect_insert(session, UserSettings.__table__)
            .values(user_id=user_id, **DEFAULT_USER_SETTINGS)
            .on_conflict_do_nothing(index_elements=["user_id"])
        )
        session.commit()
    except SQLAlchemyError as e:
        session.rollback()
        logger.error(f"Error resetting data for user {user_id}: {str(e)}")
        raise StoreError("Failed to reset user data") from e

    logger.info(
        f"Reset user data for user {user_id}: "
        f"{review_logs_deleted} review logs, "
        f"{card_states_deleted} card states, "
        f"{lesson_progress_deleted} lesson progress rows, "
        f"{settings_deleted} settings rows deleted"
    )

    return {
        'review_logs_deleted': review_logs_deleted,
        'card_states_deleted': card_states_deleted,
        'lesson_progress_deleted': lesson_progress_deleted,
        'settings_deleted': settings_deleted
    }


def export_user_data(session: Session, user_id: str) -> UserDataExport:
    """Collect every row stored for the user, in stable key order."""
    card_states = session.exec(
        select(CardState).where(CardState.user_id == user_id).order_by(CardState.card_id)
    ).all()
    review_logs = session.exec(
        select(ReviewLog).where(ReviewLog.user_id == user_id).order_by(ReviewLog.id)  # type: ignore
    ).all()
    lesson_progress = session.exec(
        select(LessonProgress).where(LessonProgress.user_id == user_id).order_by(LessonProgress.lesson_id)
    ).all()
    user_settings = session.get(UserSettings, user_id)

    return UserDataExport(
        card_states=[CardStateResponse.model_validate(row) for row in card_states],
        review_logs=[ReviewLogResponse.model_validate(row) for row in review_logs],
        lesson_progress=[LessonProgressResponse.model_validate(row) for row in lesson_progress],
        settings=UserSettingsResponse.model_validate(user_settings) if user_settings else None
    )
