"""
Lesson progress service.
"""
# pyright: reportAttributeAccessIssue=false
import logging
from enum import Enum
from typing import List, Optional
from sqlmodel import Session, select
from sqlalchemy.exc import SQLAlchemyError

from app.core.database import dialect_insert
from app.core.exceptions import StoreError
from app.models.enums import LessonStatus
from app.models.lesson_progress import LessonProgress
from app.schemas.lesson_progress import UpdateLessonProgressRequest

logger = logging.getLogger(__name__)

LESSON_PROGRESS_FIELDS = (
    "status",
    "sections_read",
    "quiz_attempts",
    "best_quiz_score",
    "last_accessed_at",
    "completed_at",
    "total_time_spent",
)


def get_lesson_progress(session: Session, user_id: str, lesson_id: str) -> Optional[LessonProgress]:
    """Progress for one lesson, or None if the lesson was never opened."""
    return session.exec(
        select(LessonProgress).where(
            LessonProgress.user_id == user_id,
            LessonProgress.lesson_id == lesson_id
        )
    ).first()


def list_lesson_progress(session: Session, user_id: str) -> List[LessonProgress]:
    """All lesson progress rows, most recently accessed first, never-accessed last."""
    return session.exec(
        select(LessonProgress)
        .where(LessonProgress.user_id == user_id)
        .order_by(LessonProgress.last_accessed_at.desc().nulls_last(), LessonProgress.lesson_id)  # type: ignore
    ).all()


def save_lesson_progress(
    session: Session,
    user_id: str,
    lesson_id: str,
    update: UpdateLessonProgressRequest
) -> None:
    """
    Merge a partial update into the lesson's progress and store it.

    Fields missing from the update fall back to the stored value, then to the
    defaults of a lesson never opened before.

    Args:
        session: Database session
        user_id: Owner of the progress
        lesson_id: Lesson being updated
        update: Fields to change

    Raises:
        StoreError: If the write failed
    """
    existing = get_lesson_progress(session, user_id, lesson_id)

    values = {
        "status": LessonStatus.AVAILABLE.value,
        "sections_read": [],
        "quiz_attempts": 0,
        "best_quiz_score": 0,
        "last_accessed_at": None,
        "completed_at": None,
        "total_time_spent": 0,
    }
    if existing is not None:
        values.update({field: getattr(existing, field) for field in LESSON_PROGRESS_FIELDS})

    for field, value in update.model_dump(exclude_unset=True).items():
        if value is None:
            continue
        values[field] = value.value if isinstance(value, Enum) else value

    statement = dialect_insert(session, LessonProgress.__table__).values(
        user_id=user_id, lesson_id=lesson_id, **values
    )
    statement = statement.on_conflict_do_update(
        index_elements=["user_id", "lesson_id"],
        set_={field: statement.excluded[field] for field in LESSON_PROGRESS_FIELDS},
    )
    try:
        session.execute(statement)
        session.commit()
    except SQLAlchemyError as e:
        session.rollback()
        logger.error(f"Error saving lesson progress {lesson_id} for user {user_id}: {str(e)}")
        raise StoreError("Failed to save lesson progress") from e

    logger.info(f"Saved lesson progress {lesson_id} for user {user_id} (status={values['status']})")
