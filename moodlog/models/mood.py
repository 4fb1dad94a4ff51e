"""Mood vocabulary and MoodEntry data model."""

from datetime import date as date_type
from datetime import datetime
from enum import IntEnum

from pydantic import BaseModel, Field, computed_field, field_validator

from moodlog.dates import parse_date


class Mood(IntEnum):
    """Daily mood rating on a 1-5 scale."""

    TERRIBLE = 1
    NOT_GREAT = 2
    OKAY = 3
    GOOD = 4
    AMAZING = 5

    @property
    def emoji(self) -> str:
        return MOOD_DISPLAY[self][0]

    @property
    def label(self) -> str:
        return MOOD_DISPLAY[self][1]

    @property
    def color(self) -> str:
        return MOOD_DISPLAY[self][2]

    @property
    def feedback(self) -> str:
        return MOOD_DISPLAY[self][3]

    @classmethod
    def parse(cls, value: str) -> "Mood":
        """Parse a mood from its number or name.

        Accepts ``"4"``, ``"good"``, ``"not-great"``, ``"Not Great"`` and
        similar spellings.

        Raises:
            ValueError: If the value names no mood.
        """
        text = value.strip()
        if text.isdigit():
            return cls(int(text))

        key = text.upper().replace("-", "_").replace(" ", "_")
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"Unknown mood '{value}'") from None


# emoji, label, colour, feedback
MOOD_DISPLAY: dict[Mood, tuple[str, str, str, str]] = {
    Mood.TERRIBLE: (
        "😢",
        "Terrible",
        "#FF3B30",
        "I'm sorry you're having a tough day. Remember, tomorrow is a new opportunity.",
    ),
    Mood.NOT_GREAT: (
        "😔",
        "Not Great",
        "#FF9500",
        "Hope things get better for you soon. Take care of yourself.",
    ),
    Mood.OKAY: (
        "😐",
        "Okay",
        "#FFCC00",
        "An okay day is still a day. Small steps forward count.",
    ),
    Mood.GOOD: (
        "😊",
        "Good",
        "#34C759",
        "Great to hear you're doing well! Keep up the positive energy.",
    ),
    Mood.AMAZING: (
        "😄",
        "Amazing",
        "#007AFF",
        "Wonderful! Your positive energy is contagious. Keep shining!",
    ),
}


class MoodEntry(BaseModel):
    """One mood rating for a calendar date."""

    date: date_type = Field(..., description="Entry date, unique per journal")
    mood: Mood = Field(..., description="Mood rating (1-5)")
    timestamp: datetime = Field(
        default_factory=datetime.now, description="Time of the last write"
    )

    model_config = {"frozen": True}

    @field_validator("date", mode="before")
    @classmethod
    def parse_iso_date(cls, value):
        if isinstance(value, str):
            return parse_date(value)
        # datetime is a date subclass; a time of day is not an entry date
        if isinstance(value, datetime) or not isinstance(value, date_type):
            raise ValueError(f"Invalid date {value!r}: expected a date or YYYY-MM-DD")
        return value

    @field_validator("mood", mode="before")
    @classmethod
    def check_mood_value(cls, value):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"Invalid mood {value!r}: expected an integer 1-5")
        return value

    @computed_field
    @property
    def emoji(self) -> str:
        return self.mood.emoji

    @computed_field
    @property
    def label(self) -> str:
        return self.mood.label
