# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from config import settings
from main import app

ORDER_BOOK_ROWS = [
    "time,code,price",
    "2021-12-22 09:59:59 +0900 JST,FTHD,9999",
    "2021-12-22 10:00:00 +0900 JST,FTHD,1",
    "2021-12-22 10:01:12 +0900 JST,FTHD,3122",
    "2021-12-22 10:05:00 +0900 JST,ABCD,5000",
    "2021-12-22 10:12:30 +0900 JST,FTHD,3177",
    "2021-12-22 10:20:00 +0900 JST,fthd,100",
    "2021-12-22 01:30:00 +0000 UTC,FTHD,3000",
    "not a time,FTHD,4000",
    "2021-12-22 10:31:45 +0900 JST,FTHD,2865",
    "2021-12-22 10:40:00 +0900 JST,FTHD,-12",
    "2021-12-22 10:48:03 +0900 JST,FTHD,3010",
    "2021-12-22 10:59:59 +0900 JST,FTHD,2924",
    "2021-12-22 11:00:00 +0900 JST,FTHD,7",
    "2021-12-22 11:15:00 +0900 JST,FTHD,3200",
]


@pytest.fixture
def order_books_csv(tmp_path, monkeypatch):
    """Sample order book wired into the settings, windows read in JST."""
    path = tmp_path / "order_books.csv"
    path.write_text("\n".join(ORDER_BOOK_ROWS) + "\n", encoding="utf-8")

    monkeypatch.setattr(settings, "ORDER_BOOKS_CSV", str(path))
    monkeypatch.setattr(settings, "TIMEZONE", "Asia/Tokyo")
    return path


@pytest.fixture
def client():
    return TestClient(app)
