from dataclasses import dataclass
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


@dataclass(frozen=True)
class TradeRecord:
    timestamp: datetime
    code: str
    price: int


class CandleResponse(BaseModel):
    # "ope" is the key existing clients read for the open price
    model_config = ConfigDict(populate_by_name=True)

    open: int = Field(..., ge=0, alias="ope")
    close: int = Field(..., ge=0)
    high: int = Field(..., ge=0)
    low: int = Field(..., ge=0)


class HourlyCandle(CandleResponse):
    hour: int = Field(..., ge=0, le=23)
