from typing import List

from fastapi import APIRouter, Query

from candles.models import CandleResponse, HourlyCandle
from candles.service import compute_candle, compute_daily_candles, parse_uint16

router = APIRouter(tags=["Candles"])


@router.get("/candle", response_model=CandleResponse)
def get_candle(
    code: str = Query(""),
    year: str = Query(""),
    month: str = Query(""),
    day: str = Query(""),
    hour: str = Query(""),
):
    # checked in this order so the first bad field is the one reported
    return compute_candle(
        code,
        parse_uint16(year, "year"),
        parse_uint16(month, "month"),
        parse_uint16(day, "day"),
        parse_uint16(hour, "hour"),
    )


@router.get("/candles", response_model=List[HourlyCandle])
def get_daily_candles(
    code: str = Query(""),
    year: str = Query(""),
    month: str = Query(""),
    day: str = Query(""),
):
    return compute_daily_candles(
        code,
        parse_uint16(year, "year"),
        parse_uint16(month, "month"),
        parse_uint16(day, "day"),
    )
