"""
Review log schemas.
"""
from pydantic import BaseModel, Field, AwareDatetime
from typing import Optional
from datetime import datetime

from app.models.enums import CardLifecycleState, Rating


class ReviewLogCreate(BaseModel):
    """One review event to append to the history."""
    card_id: str = Field(..., min_length=1, max_length=255, description="Card key in the content catalog")
    lesson_id: Optional[str] = Field(None, max_length=255, description="Lesson in which the review happened")
    rating: Rating = Field(..., description="1=Again, 2=Hard, 3=Good, 4=Easy")
    timestamp: AwareDatetime = Field(..., description="When the review happened")
    scheduled_days: float = Field(0, ge=0, description="Interval scheduled after this review")
    elapsed_days: float = Field(0, ge=0, description="Days since the previous review")
    state: CardLifecycleState = Field(..., description="Lifecycle stage at the time of the review")
    duration: int = Field(0, ge=0, description="Time spent on the card in milliseconds")
    context: Optional[str] = Field(None, max_length=50, description="Where the review happened, e.g. 'review-session'")

    class Config:
        json_schema_extra = {
            "example": {
                "card_id": "card-1-1-3",
                "lesson_id": "1.1",
                "rating": 3,
                "timestamp": "2024-01-01T10:00:00Z",
                "scheduled_days": 1,
                "elapsed_days": 0,
                "state": 0,
                "duration": 5400,
                "context": "review-session"
            }
        }


class ReviewLogResponse(BaseModel):
    """Stored review event."""
    id: int
    card_id: str
    lesson_id: Optional[str] = None
    rating: int
    timestamp: datetime
    scheduled_days: float
    elapsed_days: float
    state: int
    duration: int
    context: Optional[str] = None

    class Config:
        from_attributes = True
