from datetime import date

from pydantic import BaseModel


class HoursDay(BaseModel):
    """Single day item used in the hours window response."""

    date: date
    text: str
    is_today: bool


class HoursWindowResponse(BaseModel):
    """Rolling hours window for one location."""

    location: str
    num_weeks: int
    days: list[HoursDay]
