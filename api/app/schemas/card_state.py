"""
Card state schemas.
"""
from pydantic import BaseModel, Field, AwareDatetime, model_validator
from typing import Optional
from datetime import datetime

from app.models.enums import CardLifecycleState


class CardStateUpsert(BaseModel):
    """Full replacement scheduling record for one card, as computed by the scheduler."""
    due: AwareDatetime = Field(..., description="When the card becomes eligible for review")
    stability: float = Field(..., description="Scheduler memory stability")
    difficulty: float = Field(..., description="Scheduler difficulty")
    elapsed_days: float = Field(0, ge=0, description="Days elapsed at the last scheduling decision")
    scheduled_days: float = Field(0, ge=0, description="Days scheduled at the last scheduling decision")
    reps: int = Field(0, ge=0, description="Completed reviews")
    lapses: int = Field(0, ge=0, description="Times the card was forgotten")
    state: CardLifecycleState = Field(..., description="0=New, 1=Learning, 2=Review, 3=Relearning")
    last_review: Optional[AwareDatetime] = Field(None, description="Most recent review, null if never reviewed")
    scheduler_blob: Optional[str] = Field(None, description="Opaque scheduler snapshot, stored verbatim")

    @model_validator(mode="after")
    def check_new_card_has_no_history(self):
        if self.state == CardLifecycleState.NEW and (self.reps != 0 or self.last_review is not None):
            raise ValueError("A card in state New must have reps=0 and no last_review")
        return self

    class Config:
        json_schema_extra = {
            "example": {
                "due": "2024-01-02T10:00:00Z",
                "stability": 3.17,
                "difficulty": 5.28,
                "elapsed_days": 0,
                "scheduled_days": 1,
                "reps": 1,
                "lapses": 0,
                "state": 1,
                "last_review": "2024-01-01T10:00:00Z",
                "scheduler_blob": "{\"due\":\"2024-01-02T10:00:00.000Z\",\"stability\":3.17}"
            }
        }


class CardStateRecord(CardStateUpsert):
    """Card state addressed by its card id, used inside a review commit."""
    card_id: str = Field(..., min_length=1, max_length=255, description="Card key in the content catalog")


class CardStateResponse(BaseModel):
    """Stored scheduling record for one card."""
    card_id: str
    due: datetime
    stability: float
    difficulty: float
    elapsed_days: float
    scheduled_days: float
    reps: int
    lapses: int
    state: int
    last_review: Optional[datetime] = None
    scheduler_blob: Optional[str] = None

    class Config:
        from_attributes = True
