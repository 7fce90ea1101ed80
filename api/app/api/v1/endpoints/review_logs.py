"""
Review log endpoints.
"""
from fastapi import APIRouter, Depends, Query
from sqlmodel import Session
from typing import List, Optional
from datetime import datetime
import logging

from app.core.database import get_session
from app.core.identity import get_current_user_id
from app.schemas.common import OkResponse, CountResponse
from app.schemas.review_log import ReviewLogCreate, ReviewLogResponse
from app.services.review_log_service import query_review_logs, save_review_log, count_review_logs
from app.utils.time_utils import ensure_utc

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/review-logs", tags=["review-logs"])


@router.get("", response_model=List[ReviewLogResponse])
async def list_review_logs(
    card_id: Optional[str] = Query(None, description="Only reviews of this card"),
    lesson_id: Optional[str] = Query(None, description="Only reviews made in this lesson"),
    since: Optional[datetime] = Query(None, description="Only reviews at or after this instant"),
    user_id: str = Depends(get_current_user_id),
    session: Session = Depends(get_session)
):
    """
    List review history.
    
    At most one filter may be given. Filtered results are chronological;
    the unfiltered list is most recent first.
    """
    return query_review_logs(
        session,
        user_id,
        card_id=card_id,
        lesson_id=lesson_id,
        since=ensure_utc(since)
    )


@router.post("", response_model=OkResponse)
async def create_review_log(
    entry: ReviewLogCreate,
    user_id: str = Depends(get_current_user_id),
    session: Session = Depends(get_session)
):
    """Append one review event without touching the card state."""
    save_review_log(session, user_id, entry)
    return OkResponse()


@router.get("/count", response_model=CountResponse)
async def get_review_log_count(
    user_id: str = Depends(get_current_user_id),
    session: Session = Depends(get_session)
):
    """Total number of reviews made by the user."""
    return CountResponse(count=count_review_logs(session, user_id))
