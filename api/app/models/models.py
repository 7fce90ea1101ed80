"""
Models module - re-exports all models.

Allows imports like:
    from app.models.models import CardState

All models live in separate files in the models package.
"""
from app.models.enums import CardLifecycleState, Rating, Theme, FontSize, LessonStatus
from app.models.card_state import CardState
from app.models.review_log import ReviewLog
from app.models.user_settings import UserSettings, DEFAULT_USER_SETTINGS
from app.models.lesson_progress import LessonProgress

__all__ = [
    'CardLifecycleState',
    'Rating',
    'Theme',
    'FontSize',
    'LessonStatus',
    'CardState',
    'ReviewLog',
    'UserSettings',
    'DEFAULT_USER_SETTINGS',
    'LessonProgress',
]
