"""
User settings endpoints.
"""
from fastapi import APIRouter, Depends
from sqlmodel import Session

from app.core.database import get_session
from app.core.identity import get_current_user_id
from app.schemas.user_settings import UserSettingsResponse, UpdateUserSettingsRequest
from app.services.settings_service import get_or_create_user_settings, update_user_settings

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("", response_model=UserSettingsResponse)
async def get_settings(
    user_id: str = Depends(get_current_user_id),
    session: Session = Depends(get_session)
):
    """Get the user's settings, creating defaults on first access."""
    return get_or_create_user_settings(session, user_id)


@router.put("", response_model=UserSettingsResponse)
async def put_settings(
    update: UpdateUserSettingsRequest,
    user_id: str = Depends(get_current_user_id),
    session: Session = Depends(get_session)
):
    """Update any subset of settings; returns the full updated settings."""
    return update_user_settings(session, user_id, update)
