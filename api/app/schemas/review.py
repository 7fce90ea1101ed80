"""
Review commit schemas.
"""
from pydantic import BaseModel, Field

from app.schemas.card_state import CardStateRecord
from app.schemas.review_log import ReviewLogCreate


class CommitReviewRequest(BaseModel):
    """A single review: the scheduler's new card state plus the event to log."""
    card_state: CardStateRecord = Field(..., description="Full replacement card state")
    review_log: ReviewLogCreate = Field(..., description="Review event to append")

    class Config:
        json_schema_extra = {
            "example": {
                "card_state": {
                    "card_id": "card-1-1-3",
                    "due": "2024-01-02T10:00:00Z",
                    "stability": 3.17,
                    "difficulty": 5.28,
                    "elapsed_days": 0,
                    "scheduled_days": 1,
                    "reps": 1,
                    "lapses": 0,
                    "state": 1,
                    "last_review": "2024-01-01T10:00:00Z",
                    "scheduler_blob": None
                },
                "review_log": {
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
        }
