"""
Card state endpoints.
"""
from fastapi import APIRouter, Depends, Path, Query
from sqlmodel import Session
from typing import List, Optional
from datetime import datetime
import logging

from app.core.database import get_session
from app.core.identity import get_current_user_id
from app.schemas.card_state import CardStateUpsert, CardStateResponse
from app.schemas.common import OkResponse, CountResponse
from app.services.card_state_service import get_card_state, save_card_state, list_card_states
from app.services.due_service import get_due_cards, get_new_cards, count_due_cards

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/card-states", tags=["card-states"])


@router.get("", response_model=List[CardStateResponse])
async def list_all_card_states(
    user_id: str = Depends(get_current_user_id),
    session: Session = Depends(get_session)
):
    """List every card state of the user, earliest due first."""
    return list_card_states(session, user_id)


@router.get("/due", response_model=List[CardStateResponse])
async def list_due_card_states(
    cutoff: Optional[datetime] = Query(None, description="Include cards due at or before this instant (default: now)"),
    user_id: str = Depends(get_current_user_id),
    session: Session = Depends(get_session)
):
    """List cards that are due for review, excluding New cards."""
    return get_due_cards(session, user_id, cutoff)


@router.get("/count-due", response_model=CountResponse)
async def count_due_card_states(
    cutoff: Optional[datetime] = Query(None, description="Count cards due at or before this instant (default: now)"),
    user_id: str = Depends(get_current_user_id),
    session: Session = Depends(get_session)
):
    """Count cards that are due for review, excluding New cards."""
    return CountResponse(count=count_due_cards(session, user_id, cutoff))


@router.get("/new", response_model=List[CardStateResponse])
async def list_new_card_states(
    limit: Optional[int] = Query(None, description="Maximum number of cards to return (default 20)"),
    user_id: str = Depends(get_current_user_id),
    session: Session = Depends(get_session)
):
    """List a bounded page of cards that have never been reviewed."""
    return get_new_cards(session, user_id, limit)


@router.get("/{card_id}", response_model=Optional[CardStateResponse])
async def get_card_state_by_id(
    card_id: str = Path(..., max_length=255, description="Card key in the content catalog"),
    user_id: str = Depends(get_current_user_id),
    session: Session = Depends(get_session)
):
    """Get one card state; returns null if the card was never touched."""
    return get_card_state(session, user_id, card_id)


@router.put("/{card_id}", response_model=OkResponse)
async def put_card_state(
    card_state: CardStateUpsert,
    card_id: str = Path(..., max_length=255, description="Card key in the content catalog"),
    user_id: str = Depends(get_current_user_id),
    session: Session = Depends(get_session)
):
    """
    Create or fully replace a card state.
    
    Every scheduling field is overwritten with the request's values.
    """
    save_card_state(session, user_id, card_id, card_state)
    return OkResponse()
