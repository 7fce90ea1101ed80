"""
Lesson progress schemas.
"""
from pydantic import BaseModel, Field, AwareDatetime
from typing import List, Optional
from datetime import datetime

from app.models.enums import LessonStatus


class LessonProgressResponse(BaseModel):
    """Stored progress for one lesson."""
    lesson_id: str
    status: str
    sections_read: List[str]
    quiz_attempts: int
    best_quiz_score: int
    last_accessed_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    total_time_spent: int

    class Config:
        from_attributes = True


class UpdateLessonProgressRequest(BaseModel):
    """Partial lesson progress update; omitted or null fields keep their stored value."""
    status: Optional[LessonStatus] = Field(None, description="locked, available, in-progress, completed or mastered")
    sections_read: Optional[List[str]] = Field(None, description="Section ids the learner has read")
    quiz_attempts: Optional[int] = Field(None, ge=0)
    best_quiz_score: Optional[int] = Field(None, ge=0, le=100)
    last_accessed_at: Optional[AwareDatetime] = None
    completed_at: Optional[AwareDatetime] = None
    total_time_spent: Optional[int] = Field(None, ge=0, description="Cumulative time in milliseconds")
