"""CalendarDay data model."""

from pydantic import BaseModel, Field


class CalendarDay(BaseModel):
    """One cell of a month calendar grid."""

    date: str = Field(..., description="ISO date (YYYY-MM-DD)")
    day_of_month: int = Field(..., ge=1, le=31, description="Day of month")
    is_current_month: bool = Field(..., description="Whether the day is in the shown month")
    has_trading: bool = Field(default=False, description="Whether trades closed that day")
    profit: float = Field(default=0.0, description="Total profit for the day")
    trade_count: int = Field(default=0, ge=0, description="Number of trades that day")

    model_config = {"frozen": True}
