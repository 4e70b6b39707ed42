"""Trade and OpenPosition data models."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


class OpenPosition(BaseModel):
    """A position that has been opened but not yet fully closed.

    Partial closes shrink ``remaining_volume``, ``commission`` and ``swap``
    in place until the position is consumed.
    """

    order_id: str = Field(..., min_length=1, description="Order/ticket identifier")
    symbol: str = Field(default="", description="Trading symbol")
    type: Literal["buy", "sell"] = Field(..., description="Position direction")
    open_time: datetime = Field(..., description="Open timestamp")
    open_price: float = Field(..., description="Open price")
    remaining_volume: float = Field(..., gt=0, description="Volume not yet closed")
    commission: float = Field(default=0.0, description="Commission still attributed")
    swap: float = Field(default=0.0, description="Swap still attributed")


class Trade(BaseModel):
    """Represents a completed round trip (open plus the close that ended it)."""

    id: str = Field(..., min_length=1, description="Order/ticket identifier")
    symbol: str = Field(default="", description="Trading symbol")
    type: Literal["buy", "sell"] = Field(..., description="Trade direction")
    open_time: datetime = Field(..., description="Open timestamp")
    close_time: datetime = Field(..., description="Close timestamp")
    open_price: float = Field(..., description="Open price")
    close_price: float = Field(..., description="Close price")
    volume: float = Field(..., gt=0, description="Volume closed in this trade")
    profit: float = Field(..., description="Realized profit reported by the broker")
    commission: float = Field(default=0.0, description="Apportioned commission")
    swap: float = Field(default=0.0, description="Apportioned swap")

    model_config = {"frozen": True}

    @property
    def net_profit(self) -> float:
        """Profit including commission and swap."""
        return self.profit + self.commission + self.swap
