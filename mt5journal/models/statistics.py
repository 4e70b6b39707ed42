"""Statistics data model."""

from pydantic import BaseModel, Field


class Statistics(BaseModel):
    """Performance statistics computed over a full set of trades."""

    total_trades: int = Field(default=0, ge=0, description="Number of trades")
    winning_trades: int = Field(default=0, ge=0, description="Trades with profit > 0")
    losing_trades: int = Field(default=0, ge=0, description="Trades with profit <= 0")
    total_profit: float = Field(default=0.0, description="Sum of trade profits")
    win_rate: float = Field(default=0.0, ge=0, le=100, description="Win rate percentage")
    average_win: float = Field(default=0.0, description="Mean profit of winning trades")
    average_loss: float = Field(default=0.0, description="Mean profit of losing trades")
    largest_win: float = Field(default=0.0, description="Best winning trade")
    largest_loss: float = Field(default=0.0, description="Worst losing trade")

    model_config = {"frozen": True}
