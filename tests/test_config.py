import pytest
from pydantic import ValidationError

from config import Settings


class TestSettings:

    def test_defaults(self):
        config = Settings(_env_file=None)

        assert config.ORDER_BOOKS_CSV == "order_books.csv"
        assert config.FAKE_FLAG == "flag{this_is_fake_flag}"

    def test_known_timezone(self):
        assert Settings(_env_file=None, TIMEZONE="America/New_York").TIMEZONE == "America/New_York"

    def test_blank_timezone_means_local(self):
        assert Settings(_env_file=None, TIMEZONE="").TIMEZONE is None

    def test_unknown_timezone_fails_at_startup(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, TIMEZONE="Mars/Olympus")
