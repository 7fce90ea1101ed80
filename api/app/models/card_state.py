"""
CardState model.
"""
from sqlmodel import SQLModel, Field
from sqlalchemy import Column, Index, Text
from typing import Optional
from datetime import datetime

from app.models.enums import CardLifecycleState
from app.models.column_types import UTCDateTime


class CardState(SQLModel, table=True):
    """UserCardState table - one scheduling record per (user, card).

    Every field except the key is produced by the external scheduler and
    replaced as a whole on each write.
    """
    __tablename__ = "user_card_state"
    __table_args__ = (
        Index("ix_user_card_state_user_due", "user_id", "due"),
        Index("ix_user_card_state_user_state", "user_id", "state"),
    )

    user_id: str = Field(primary_key=True, max_length=255)
    card_id: str = Field(primary_key=True, max_length=255)
    due: datetime = Field(sa_column=Column(UTCDateTime(), nullable=False))
    stability: float = Field(default=0.0)
    difficulty: float = Field(default=0.0)
    elapsed_days: float = Field(default=0.0)
    scheduled_days: float = Field(default=0.0)
    reps: int = Field(default=0)
    lapses: int = Field(default=0)
    state: int = Field(default=CardLifecycleState.NEW.value)  # 0=New, 1=Learning, 2=Review, 3=Relearning
    last_review: Optional[datetime] = Field(default=None, sa_column=Column(UTCDateTime(), nullable=True))
    scheduler_blob: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))  # Opaque, never parsed
