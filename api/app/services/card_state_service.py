"""
Card state service: storage of per-user, per-card scheduling state.

Writes replace the whole scheduling record (last writer wins). The scheduler
blob is carried through untouched.
"""
# pyright: reportAttributeAccessIssue=false
# pyright: reportArgumentType=false
import logging
from datetime import datetime
from typing import List, Optional
from sqlmodel import Session, select, func
from sqlalchemy.exc import SQLAlchemyError

from app.core.database import dialect_insert
from app.core.exceptions import StoreError
from app.models.card_state import CardState
from app.models.enums import CardLifecycleState
from app.schemas.card_state import CardStateUpsert

logger = logging.getLogger(__name__)

# Every column overwritten on upsert
CARD_STATE_FIELDS = (
    "due",
    "stability",
    "difficulty",
    "elapsed_days",
    "scheduled_days",
    "reps",
    "lapses",
    "state",
    "last_review",
    "scheduler_blob",
)


def get_card_state(session: Session, user_id: str, card_id: str) -> Optional[CardState]:
    """Return the card state, or None if the user never touched the card."""
    return session.exec(
        select(CardState).where(
            CardState.user_id == user_id,
            CardState.card_id == card_id
        )
    ).first()


def upsert_card_state(
    session: Session,
    user_id: str,
    card_id: str,
    card_state: CardStateUpsert
) -> None:
    """
    Insert or fully overwrite the card state in the current transaction.

    Runs as a single INSERT ... ON CONFLICT DO UPDATE so concurrent writers to
    the same row serialize on the row lock and never mix fields. Does not
    commit.

    Args:
        session: Database session
        user_id: Owner of the card state
        card_id: Card key in the content catalog
        card_state: Complete replacement record
    """
    values = {field: getattr(card_state, field) for field in CARD_STATE_FIELDS}
    values["state"] = int(values["state"])

    table = CardState.__table__
    statement = dialect_insert(session, table).values(user_id=user_id, card_id=card_id, **values)
    statement = statement.on_conflict_do_update(
        index_elements=["user_id", "card_id"],
        set_={field: statement.excluded[field] for field in CARD_STATE_FIELDS},
    )
    session.execute(statement)


def save_card_state(
    session: Session,
    user_id: str,
    card_id: str,
    card_state: CardStateUpsert
) -> None:
    """Upsert the card state in its own transaction."""
    try:
        upsert_card_state(session, user_id, card_id, card_state)
        session.commit()
    except SQLAlchemyError as e:
        session.rollback()
        logger.error(f"Error saving card state {card_id} for user {user_id}: {str(e)}")
        raise StoreError("Failed to save card state") from e

    logger.info(f"Saved card state {card_id} for user {user_id} (state={int(card_state.state)}, due={card_state.due})")


def list_card_states(session: Session, user_id: str) -> List[CardState]:
    """All card states of the user, earliest due first."""
    return session.exec(
        select(CardState)
        .where(CardState.user_id == user_id)
        .order_by(CardState.due, CardState.card_id)  # type: ignore
    ).all()


def list_due_card_states(session: Session, user_id: str, cutoff: datetime) -> List[CardState]:
    """
    Card states that are due at the cutoff, earliest due first.

    New cards are excluded: their due instant carries no meaning until they
    have been reviewed once.
    """
    return session.exec(
        select(CardState)
        .where(
            CardState.user_id == user_id,
            CardState.due <= cutoff,  # type: ignore
            CardState.state != CardLifecycleState.NEW.value
        )
        .order_by(CardState.due, CardState.card_id)  # type: ignore
    ).all()


def count_due_card_states(session: Session, user_id: str, cutoff: datetime) -> int:
    """Count of the rows list_due_card_states would return."""
    return session.exec(
        select(func.count())
        .select_from(CardState)
        .where(
            CardState.user_id == user_id,
            CardState.due <= cutoff,  # type: ignore
            CardState.state != CardLifecycleState.NEW.value
        )
    ).one()


def list_new_card_states(session: Session, user_id: str, limit: int) -> List[CardState]:
    """Up to `limit` new card states, ordered by card id so pages are reproducible."""
    return session.exec(
        select(CardState)
        .where(
            CardState.user_id == user_id,
            CardState.state == CardLifecycleState.NEW.value
        )
        .order_by(CardState.card_id)
        .limit(limit)
    ).all()
