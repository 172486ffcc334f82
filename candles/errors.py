class CandleError(Exception):
    """Base class for failures while building a candle."""


class InvalidInput(CandleError, ValueError):
    def __init__(self, field: str):
        super().__init__(f"invalid value for {field}")
        self.field = field


class DataSourceUnavailable(CandleError):
    pass


class MalformedDataset(CandleError):
    pass


class NoData(CandleError):
    pass
