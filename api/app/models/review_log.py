"""
ReviewLog model.
"""
from sqlmodel import SQLModel, Field
from sqlalchemy import Column, Index
from typing import Optional
from datetime import datetime

from app.models.column_types import UTCDateTime


class ReviewLog(SQLModel, table=True):
    """ReviewLog table - append-only history of review events."""
    __tablename__ = "review_log"
    __table_args__ = (
        Index("ix_review_log_user_timestamp", "user_id", "timestamp"),
        Index("ix_review_log_user_card", "user_id", "card_id"),
        Index("ix_review_log_user_lesson", "user_id", "lesson_id"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: str = Field(max_length=255)
    card_id: str = Field(max_length=255)
    lesson_id: Optional[str] = Field(default=None, max_length=255)
    rating: int  # 1=Again, 2=Hard, 3=Good, 4=Easy
    timestamp: datetime = Field(sa_column=Column(UTCDateTime(), nullable=False))
    scheduled_days: float = Field(default=0.0)
    elapsed_days: float = Field(default=0.0)
    state: int  # Lifecycle stage at the time of this review
    duration: int = Field(default=0)  # Milliseconds spent on the card
    context: Optional[str] = Field(default=None, max_length=50)  # e.g. 'inline', 'quiz', 'review-session'
