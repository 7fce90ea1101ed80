"""
Model enums.
"""
from enum import Enum, IntEnum


class CardLifecycleState(IntEnum):
    """Lifecycle stage of a card, numbered as the scheduler reports it."""
    NEW = 0
    LEARNING = 1
    REVIEW = 2
    RELEARNING = 3


class Rating(IntEnum):
    """Self-reported recall quality for a single review."""
    AGAIN = 1
    HARD = 2
    GOOD = 3
    EASY = 4


class Theme(str, Enum):
    """Color theme preference."""
    LIGHT = "light"
    DARK = "dark"
    SYSTEM = "system"


class FontSize(str, Enum):
    """Reading text size preference."""
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class LessonStatus(str, Enum):
    """Progress status of a lesson: locked -> available -> in-progress -> completed -> mastered."""
    LOCKED = "locked"
    AVAILABLE = "available"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    MASTERED = "mastered"
