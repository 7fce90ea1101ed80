"""
Review commit endpoint.
"""
from fastapi import APIRouter, Depends
from sqlmodel import Session

from app.core.database import get_session
from app.core.identity import get_current_user_id
from app.schemas.common import OkResponse
from app.schemas.review import CommitReviewRequest
from app.services.review_service import commit_review

router = APIRouter(prefix="/review", tags=["review"])


@router.post("", response_model=OkResponse)
async def submit_review(
    request: CommitReviewRequest,
    user_id: str = Depends(get_current_user_id),
    session: Session = Depends(get_session)
):
    """
    Commit a review: store the scheduler's new card state and append the
    review log in one transaction.
    
    Either both writes are applied or neither is, so a failed request can be
    re-submitted safely.
    """
    commit_review(session, user_id, request)
    return OkResponse()
