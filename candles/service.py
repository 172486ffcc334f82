import csv
import logging
import re
from datetime import datetime, timedelta, timezone, tzinfo
from pathlib import Path
from typing import List, Optional
from zoneinfo import ZoneInfo

import pandas as pd

from candles.errors import DataSourceUnavailable, InvalidInput, MalformedDataset, NoData
from candles.models import CandleResponse, HourlyCandle, TradeRecord
from config import settings

logger = logging.getLogger(__name__)

WINDOW = timedelta(hours=1)

# e.g. "2021-12-22 10:05:00 +0900 JST"
_TIMESTAMP = re.compile(
    r"(\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2} [+-]\d{4}) ([A-Z][A-Za-z]{2,4}|[+-]\d{2,4})"
)
_DIGITS = re.compile(r"[0-9]+")

UINT16_MAX = 2 ** 16 - 1
UINT64_MAX = 2 ** 64 - 1


# =====================================
# PARSING
# =====================================

def parse_unsigned(value: str, limit: int) -> int:
    if value is None or not _DIGITS.fullmatch(value):
        raise ValueError(f"not an unsigned integer: {value!r}")

    number = int(value)
    if number > limit:
        raise ValueError(f"{number} out of range (max {limit})")
    return number


def parse_uint16(value: str, field: str) -> int:
    try:
        return parse_unsigned(value, UINT16_MAX)
    except ValueError as e:
        raise InvalidInput(field) from e


def parse_timestamp(value: str) -> datetime:
    match = _TIMESTAMP.fullmatch(value)
    if not match:
        raise ValueError(f"unexpected timestamp format: {value!r}")

    # the zone name is informational, the numeric offset is authoritative
    return datetime.strptime(match.group(1), "%Y-%m-%d %H:%M:%S %z")


def load_trades(path) -> List[TradeRecord]:
    """
    Read every trade row of the order book CSV.

    The first non-empty row is the header. Rows with an unparsable time or
    price are logged and skipped, the rest of the file is still used. A row
    whose field count differs from the header makes the whole file malformed.
    """

    path = Path(path)
    trades = []
    skipped = 0

    try:
        with open(path, newline="", encoding="utf-8") as f:
            reader = csv.reader(f)

            header = next((row for row in reader if row), None)
            if header is None:
                raise MalformedDataset(f"{path} has no rows")
            if len(header) < 3:
                raise MalformedDataset(f"{path} header has {len(header)} fields, expected 3")

            for row in reader:
                if not row:
                    continue

                if len(row) != len(header):
                    raise MalformedDataset(
                        f"line {reader.line_num} of {path} has {len(row)} fields, header has {len(header)}"
                    )

                try:
                    timestamp = parse_timestamp(row[0])
                except ValueError as e:
                    logger.warning("Error parsing time on line %d: %s", reader.line_num, e)
                    skipped += 1
                    continue

                try:
                    price = parse_unsigned(row[2], UINT64_MAX)
                except ValueError as e:
                    logger.warning("Error parsing price on line %d: %s", reader.line_num, e)
                    skipped += 1
                    continue

                trades.append(TradeRecord(timestamp=timestamp, code=row[1], price=price))

    except csv.Error as e:
        raise MalformedDataset(f"{path} is not valid CSV: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise DataSourceUnavailable(f"cannot read {path}: {e}") from e

    logger.debug("Loaded %d trades from %s (%d rows skipped)", len(trades), path, skipped)
    return trades


# =====================================
# WINDOW
# =====================================

def resolve_zone(name: Optional[str] = None) -> Optional[tzinfo]:
    name = name if name is not None else settings.TIMEZONE
    return ZoneInfo(name) if name else None


def window_start(year: int, month: int, day: int, hour: int, tz: Optional[tzinfo] = None) -> datetime:
    """
    Start of the one hour window, minute and second zero.

    Values past their calendar range carry over, so month 13 is January of
    the next year and day 0 the last day of the previous month. Without
    ``tz`` the process local zone is used. A wall-clock hour skipped by a
    DST change resolves to the instant just after the change, and an hour
    that repeats resolves to its first occurrence. A year the calendar
    cannot hold has no trades, so it raises ``NoData``.
    """

    years, month_index = divmod(month - 1, 12)

    try:
        naive = datetime(year + years, month_index + 1, 1) + timedelta(days=day - 1, hours=hour)
        if tz is None:
            return naive.astimezone()
        # round trip through UTC so the start is a real instant in tz
        return naive.replace(tzinfo=tz).astimezone(timezone.utc).astimezone(tz)
    except (ValueError, OverflowError) as e:
        raise NoData(f"year {year} is outside the calendar") from e


def window_end(start: datetime) -> datetime:
    # elapsed time, not wall clock, so a DST change cannot stretch the window
    return start.astimezone(timezone.utc) + WINDOW


def filter_trades(trades: List[TradeRecord], code: str, start: datetime, end: datetime) -> List[TradeRecord]:
    # both ends exclusive
    return [
        trade for trade in trades
        if trade.code == code and start < trade.timestamp < end
    ]


# =====================================
# CANDLES
# =====================================

def reduce_candle(trades: List[TradeRecord]) -> CandleResponse:
    if not trades:
        raise NoData("no trades in window")

    # open/close follow file order, not timestamp order
    prices = sorted(trade.price for trade in trades)

    return CandleResponse(
        open=trades[0].price,
        close=trades[-1].price,
        high=prices[-1],
        low=prices[0],
    )


def compute_candle(code: str, year: int, month: int, day: int, hour: int, path=None) -> CandleResponse:
    start = window_start(year, month, day, hour, resolve_zone())
    end = window_end(start)

    trades = load_trades(path or settings.ORDER_BOOKS_CSV)
    filtered = filter_trades(trades, code, start, end)

    logger.debug("%s %s..%s: %d of %d trades in window", code, start, end, len(filtered), len(trades))
    return reduce_candle(filtered)


def compute_daily_candles(code: str, year: int, month: int, day: int, path=None) -> List[HourlyCandle]:
    """
    Hourly candles for the 24 windows following the start of ``day``.

    Uses the same rules as ``compute_candle``: a trade exactly on an hour
    boundary belongs to no window and open/close follow file order. Hours
    with no trades are left out.
    """

    day_start = window_start(year, month, day, 0, resolve_zone())

    trades = [trade for trade in load_trades(path or settings.ORDER_BOOKS_CSV) if trade.code == code]
    if not trades:
        raise NoData(f"no trades for {code}")

    df = pd.DataFrame({
        "timestamp": pd.to_datetime([trade.timestamp for trade in trades], utc=True),
        "price": [trade.price for trade in trades],
    })

    elapsed = df["timestamp"] - pd.Timestamp(day_start).tz_convert("UTC")
    df["hour"] = elapsed // pd.Timedelta(WINDOW)

    on_boundary = (elapsed % pd.Timedelta(WINDOW)) == pd.Timedelta(0)
    df = df[~on_boundary & (df["hour"] >= 0) & (df["hour"] < 24)]

    if df.empty:
        raise NoData(f"no trades for {code} on {day_start.date()}")

    # groupby keeps row order inside each group
    ohlc = df.groupby("hour", sort=True)["price"].agg(["first", "last", "max", "min"])

    return [
        HourlyCandle(
            hour=int(row.Index),
            open=int(row.first),
            close=int(row.last),
            high=int(row.max),
            low=int(row.min),
        )
        for row in ohlc.itertuples()
    ]
