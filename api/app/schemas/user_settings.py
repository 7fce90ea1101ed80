"""
User settings schemas.
"""
from pydantic import BaseModel, Field
from typing import Optional

from app.models.enums import Theme, FontSize


class UserSettingsResponse(BaseModel):
    """Full settings row for the user."""
    theme: str
    daily_review_goal: int
    new_cards_per_day: int
    font_size: str
    reduced_motion: bool
    desired_retention: float

    class Config:
        from_attributes = True


class UpdateUserSettingsRequest(BaseModel):
    """Partial settings update; omitted or null fields keep their stored value."""
    theme: Optional[Theme] = Field(None, description="light, dark or system")
    daily_review_goal: Optional[int] = Field(None, ge=1, le=10000, description="Target reviews per day")
    new_cards_per_day: Optional[int] = Field(None, ge=0, le=1000, description="Maximum new cards introduced per day")
    font_size: Optional[FontSize] = Field(None, description="small, medium or large")
    reduced_motion: Optional[bool] = Field(None, description="Respect prefers-reduced-motion")
    desired_retention: Optional[float] = Field(None, ge=0.7, le=0.97, description="Scheduler target retention (0.7-0.97)")
