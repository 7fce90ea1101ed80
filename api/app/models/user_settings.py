"""
UserSettings model.
"""
from sqlmodel import SQLModel, Field

from app.models.enums import Theme, FontSize

# Defaults for a user seen for the first time
DEFAULT_USER_SETTINGS = {
    "theme": Theme.SYSTEM.value,
    "daily_review_goal": 50,
    "new_cards_per_day": 20,
    "font_size": FontSize.MEDIUM.value,
    "reduced_motion": False,
    "desired_retention": 0.9,
}


class UserSettings(SQLModel, table=True):
    """UserSettings table - per-user scheduling preferences, one row per user."""
    __tablename__ = "user_settings"

    user_id: str = Field(primary_key=True, max_length=255)
    theme: str = Field(default=DEFAULT_USER_SETTINGS["theme"], max_length=10)
    daily_review_goal: int = Field(default=DEFAULT_USER_SETTINGS["daily_review_goal"])
    new_cards_per_day: int = Field(default=DEFAULT_USER_SETTINGS["new_cards_per_day"])
    font_size: str = Field(default=DEFAULT_USER_SETTINGS["font_size"], max_length=10)
    reduced_motion: bool = Field(default=DEFAULT_USER_SETTINGS["reduced_motion"])
    desired_retention: float = Field(default=DEFAULT_USER_SETTINGS["desired_retention"])  # FSRS target, 0.7 - 0.97
