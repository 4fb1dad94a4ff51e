"""Statistics snapshot models."""

from datetime import date as date_type

from pydantic import BaseModel, Field

from moodlog.models.mood import Mood


class MoodStats(BaseModel):
    """Aggregate statistics over a set of mood entries.

    Derived on demand and never stored.
    """

    average_mood: float = Field(default=0.0, ge=0, le=5, description="Mean mood, 0 when empty")
    total_entries: int = Field(default=0, ge=0, description="Number of entries")
    mood_distribution: dict[Mood, int] = Field(
        default_factory=dict, description="Entry count per mood value that occurs"
    )
    current_streak: int = Field(default=0, ge=0, description="Run ending today or yesterday")
    longest_streak: int = Field(default=0, ge=0, description="Longest run in the history")

    model_config = {"frozen": True}

    def distribution_percentages(self) -> dict[Mood, float]:
        """Share of entries per mood, in percent."""
        if self.total_entries == 0:
            return {}
        return {
            mood: count / self.total_entries * 100
            for mood, count in self.mood_distribution.items()
        }


class TrendPoint(BaseModel):
    """One point of the chronological mood series."""

    index: int = Field(..., ge=1, description="Position in the series, starting at 1")
    date: date_type = Field(..., description="Entry date")
    mood: Mood = Field(..., description="Mood on that date")

    model_config = {"frozen": True}
