"""
Lesson progress endpoints.
"""
from fastapi import APIRouter, Depends, Path
from sqlmodel import Session
from typing import List, Optional

from app.core.database import get_session
from app.core.identity import get_current_user_id
from app.schemas.common import OkResponse
from app.schemas.lesson_progress import LessonProgressResponse, UpdateLessonProgressRequest
from app.services.lesson_progress_service import (
    get_lesson_progress,
    list_lesson_progress,
    save_lesson_progress,
)

router = APIRouter(prefix="/lesson-progress", tags=["lesson-progress"])


@router.get("", response_model=List[LessonProgressResponse])
async def list_all_lesson_progress(
    user_id: str = Depends(get_current_user_id),
    session: Session = Depends(get_session)
):
    """List progress for every lesson the user has opened."""
    return list_lesson_progress(session, user_id)


@router.get("/{lesson_id}", response_model=Optional[LessonProgressResponse])
async def get_lesson_progress_by_id(
    lesson_id: str = Path(..., max_length=255, description="Lesson id, e.g. 1.1"),
    user_id: str = Depends(get_current_user_id),
    session: Session = Depends(get_session)
):
    """Get progress for one lesson; returns null if never opened."""
    return get_lesson_progress(session, user_id, lesson_id)


@router.put("/{lesson_id}", response_model=OkResponse)
async def put_lesson_progress(
    update: UpdateLessonProgressRequest,
    lesson_id: str = Path(..., max_length=255, description="Lesson id, e.g. 1.1"),
    user_id: str = Depends(get_current_user_id),
    session: Session = Depends(get_session)
):
    """Merge a partial update into the lesson's progress."""
    save_lesson_progress(session, user_id, lesson_id, update)
    return OkResponse()
