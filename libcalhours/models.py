from datetime import date

from pydantic import BaseModel
from pydantic import ConfigDict


class DisplayDay(BaseModel):
    """One row of the rolling hours calendar."""

    model_config = ConfigDict(frozen=True)

    date: date
    text: str
    is_today: bool = False
