import pandas as pd
import pytest


TZ = "Europe/Stockholm"


@pytest.fixture
def make_intervals():
    """Factory for price intervals of a fixed length starting at `start`."""
    def _make(prices, minutes=15, start="2025-10-01 00:00"):
        starts = pd.date_range(start, periods=len(prices), freq=f"{minutes}min", tz=TZ)
        return pd.DataFrame({
            "time_start": starts,
            "time_end": starts + pd.Timedelta(minutes=minutes),
            "SEK_per_kWh": [float(p) for p in prices],
        })
    return _make


@pytest.fixture
def make_buckets():
    """Factory for hourly buckets starting at `start`."""
    def _make(prices, start="2025-10-01 00:00"):
        starts = pd.date_range(start, periods=len(prices), freq="1h", tz=TZ)
        return pd.DataFrame({
            "start": starts,
            "end": starts + pd.Timedelta(hours=1),
            "price": [float(p) for p in prices],
        })
    return _make
