"""
Review log service: append-only review history.
"""
# pyright: reportAttributeAccessIssue=false
# pyright: reportArgumentType=false
import logging
from datetime import datetime
from typing import List, Optional
from sqlmodel import Session, select, func
from sqlalchemy.exc import SQLAlchemyError

from app.core.exceptions import StoreError, ValidationError
from app.models.review_log import ReviewLog
from app.schemas.review_log import ReviewLogCreate

logger = logging.getLogger(__name__)


def append_review_log(session: Session, user_id: str, entry: ReviewLogCreate) -> ReviewLog:
    """Add one review log row to the current transaction and flush it. Does not commit."""
    review_log = ReviewLog(
        user_id=user_id,
        card_id=entry.card_id,
        lesson_id=entry.lesson_id,
        rating=int(entry.rating),
        timestamp=entry.timestamp,
        scheduled_days=entry.scheduled_days,
        elapsed_days=entry.elapsed_days,
        state=int(entry.state),
        duration=entry.duration,
        context=entry.context
    )
    session.add(review_log)
    session.flush()
    return review_log


def save_review_log(session: Session, user_id: str, entry: ReviewLogCreate) -> None:
    """Append a review log row in its own transaction."""
    try:
        append_review_log(session, user_id, entry)
        session.commit()
    except SQLAlchemyError as e:
        session.rollback()
        logger.error(f"Error appending review log for user {user_id}, card {entry.card_id}: {str(e)}")
        raise StoreError("Failed to append review log") from e

    logger.info(f"Appended review log for user {user_id}, card {entry.card_id} (rating={int(entry.rating)})")


def query_review_logs(
    session: Session,
    user_id: str,
    card_id: Optional[str] = None,
    lesson_id: Optional[str] = None,
    since: Optional[datetime] = None
) -> List[ReviewLog]:
    """
    Review history of the user, filtered by at most one criterion.

    Without a filter the most recent reviews come first (activity feed). With
    a card, lesson or since filter the rows come back in chronological order
    for replay.

    Args:
        session: Database session
        user_id: Owner of the history
        card_id: Only reviews of this card
        lesson_id: Only reviews made in this lesson
        since: Only reviews at or after this instant

    Returns:
        List of ReviewLog rows

    Raises:
        ValidationError: If more than one filter is given
    """
    given = [name for name, value in (("card_id", card_id), ("lesson_id", lesson_id), ("since", since)) if value is not None]
    if len(given) > 1:
        raise ValidationError(f"At most one of card_id, lesson_id or since may be given, got: {', '.join(given)}")

    query = select(ReviewLog).where(ReviewLog.user_id == user_id)

    if card_id is not None:
        query = query.where(ReviewLog.card_id == card_id)
    elif lesson_id is not None:
        query = query.where(ReviewLog.lesson_id == lesson_id)
    elif since is not None:
        query = query.where(ReviewLog.timestamp >= since)  # type: ignore
    else:
        return session.exec(
            query.order_by(ReviewLog.timestamp.desc(), ReviewLog.id.desc())  # type: ignore
        ).all()

    return session.exec(
        query.order_by(ReviewLog.timestamp, ReviewLog.id)  # type: ignore
    ).all()


def count_review_logs(session: Session, user_id: str) -> int:
    """Total number of reviews the user has made."""
    return session.exec(
        select(func.count(ReviewLog.id)).where(ReviewLog.user_id == user_id)
    ).one()
