"""
User data endpoints (export and reset).
"""
from fastapi import APIRouter, Depends
from sqlmodel import Session

from app.core.database import get_session
from app.core.identity import get_current_user_id
from app.schemas.common import OkResponse
from app.schemas.user_data import UserDataExport
from app.services.user_service import reset_user_data, export_user_data

router = APIRouter(prefix="/data", tags=["data"])


@router.get("/export", response_model=UserDataExport)
async def export_data(
    user_id: str = Depends(get_current_user_id),
    session: Session = Depends(get_session)
):
    """Export every card state, review log, lesson progress row and setting of the user."""
    return export_user_data(session, user_id)


@router.delete("/clear", response_model=OkResponse)
async def clear_data(
    user_id: str = Depends(get_current_user_id),
    session: Session = Depends(get_session)
):
    """
    Start over: delete all scheduling data, history, lesson progress and
    settings of the user, then restore default settings.
    
    All-or-nothing; on failure nothing is deleted.
    """
    reset_user_data(session, user_id)
    return OkResponse()
