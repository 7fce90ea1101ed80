"""
Review commit service.

A review updates the card's scheduling state and appends one history row. Both
writes happen in one transaction so the stored state and the review history
can never disagree: either both are visible afterwards or neither is.
"""
import logging
from sqlmodel import Session
from sqlalchemy.exc import SQLAlchemyError

from app.core.exceptions import StoreError, ValidationError
from app.schemas.review import CommitReviewRequest
from app.services.card_state_service import get_card_state, upsert_card_state
from app.services.review_log_service import append_review_log

logger = logging.getLogger(__name__)


def validate_review(request: CommitReviewRequest) -> None:
    """
    Check that the card state and the log entry describe the same card.

    A card state whose last review differs from the log timestamp is accepted
    and logged; clients stamp the two values separately.

    Raises:
        ValidationError: If the card ids differ
    """
    card_state = request.card_state
    review_log = request.review_log

    if card_state.card_id != review_log.card_id:
        raise ValidationError(
            f"card_state.card_id ({card_state.card_id}) does not match "
            f"review_log.card_id ({review_log.card_id})"
        )

    if card_state.last_review != review_log.timestamp:
        logger.warning(
            f"Review of card {card_state.card_id}: card_state.last_review "
            f"({card_state.last_review}) differs from review_log.timestamp "
            f"({review_log.timestamp})"
        )


def commit_review(session: Session, user_id: str, request: CommitReviewRequest) -> None:
    """
    Atomically store the new card state and append the review log.

    Steps:
    1. Validate the request (nothing is written if this fails)
    2. Upsert the card state (full overwrite)
    3. Append the review log row
    4. Commit; any store failure in 2-4 rolls back both writes

    Args:
        session: Database session
        user_id: Resolved identity of the caller
        request: New card state and the review event

    Raises:
        ValidationError: If the request is inconsistent
        StoreError: If the transaction failed and was rolled back
    """
    validate_review(request)

    card_state = request.card_state
    card_id = card_state.card_id

    try:
        previous = get_card_state(session, user_id, card_id)
        if previous is not None and card_state.due < previous.due:
            logger.warning(
                f"Review of card {card_id} for user {user_id} moves due backwards: "
                f"{previous.due} -> {card_state.due}"
            )

        upsert_card_state(session, user_id, card_id, card_state)
        append_review_log(session, user_id, request.review_log)
        session.commit()
    except SQLAlchemyError as e:
        session.rollback()
        logger.error(f"Error committing review of card {card_id} for user {user_id}: {str(e)}")
        raise StoreError("Failed to commit review") from e

    logger.info(
        f"Committed review of card {card_id} for user {user_id}: "
        f"rating={int(request.review_log.rating)}, state={int(card_state.state)}, "
        f"reps={card_state.reps}, due={card_state.due}"
    )
