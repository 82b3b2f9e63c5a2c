"""scoreslice — date-range extraction of scored time series."""

__version__ = "0.1.0"
