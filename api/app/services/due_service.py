"""
Due-set queries: which cards to show next.

Read-only layer over the card state store that fills in the defaults callers
leave out (cutoff = now, bounded page size for new cards).
"""
import logging
from datetime import datetime
from typing import List, Optional
from sqlmodel import Session

from app.core.config import settings
from app.core.exceptions import ValidationError
from app.models.card_state import CardState
from app.services.card_state_service import (
    list_due_card_states,
    count_due_card_states,
    list_new_card_states,
)
from app.utils.time_utils import utc_now, ensure_utc

logger = logging.getLogger(__name__)


def resolve_cutoff(cutoff: Optional[datetime] = None) -> datetime:
    """Cutoff as an aware UTC instant; defaults to now."""
    if cutoff is None:
        return utc_now()
    return ensure_utc(cutoff)


def resolve_new_card_limit(limit: Optional[int] = None) -> int:
    """
    Page size for the new-card query.

    Defaults to settings.default_new_cards_limit and is capped at
    settings.max_new_cards_page.

    Raises:
        ValidationError: If limit is not positive
    """
    if limit is None:
        return settings.default_new_cards_limit
    if limit < 1:
        raise ValidationError("limit must be >= 1")
    if limit > settings.max_new_cards_page:
        logger.warning(f"New card limit {limit} capped at {settings.max_new_cards_page}")
        return settings.max_new_cards_page
    return limit


def get_due_cards(session: Session, user_id: str, cutoff: Optional[datetime] = None) -> List[CardState]:
    """Cards (not New) due at or before the cutoff, earliest first."""
    return list_due_card_states(session, user_id, resolve_cutoff(cutoff))


def count_due_cards(session: Session, user_id: str, cutoff: Optional[datetime] = None) -> int:
    """Number of cards get_due_cards would return."""
    return count_due_card_states(session, user_id, resolve_cutoff(cutoff))


def get_new_cards(session: Session, user_id: str, limit: Optional[int] = None) -> List[CardState]:
    """A bounded page of New cards."""
    return list_new_card_states(session, user_id, resolve_new_card_limit(limit))
