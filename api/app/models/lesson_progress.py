"""
LessonProgress model.
"""
from sqlmodel import SQLModel, Field
from sqlalchemy import Column, JSON
from typing import Optional, List
from datetime import datetime

from app.models.enums import LessonStatus
from app.models.column_types import UTCDateTime


class LessonProgress(SQLModel, table=True):
    """LessonProgress table - tracks a user's progress through one lesson."""
    __tablename__ = "lesson_progress"

    user_id: str = Field(primary_key=True, max_length=255)
    lesson_id: str = Field(primary_key=True, max_length=255)
    status: str = Field(default=LessonStatus.AVAILABLE.value, max_length=20)
    sections_read: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    quiz_attempts: int = Field(default=0)
    best_quiz_score: int = Field(default=0)  # 0-100
    last_accessed_at: Optional[datetime] = Field(default=None, sa_column=Column(UTCDateTime(), nullable=True))
    completed_at: Optional[datetime] = Field(default=None, sa_column=Column(UTCDateTime(), nullable=True))
    total_time_spent: int = Field(default=0)  # Milliseconds
