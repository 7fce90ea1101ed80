"""
User data export schemas.
"""
from pydantic import BaseModel
from typing import List, Optional

from app.schemas.card_state import CardStateResponse
from app.schemas.review_log import ReviewLogResponse
from app.schemas.lesson_progress import LessonProgressResponse
from app.schemas.user_settings import UserSettingsResponse


class UserDataExport(BaseModel):
    """Everything stored for one user."""
    card_states: List[CardStateResponse]
    review_logs: List[ReviewLogResponse]
    lesson_progress: List[LessonProgressResponse]
    settings: Optional[UserSettingsResponse] = None
