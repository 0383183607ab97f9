import logging
from datetime import date, timedelta

import pandas as pd
import requests

from elpris_optimizer.config import PRICE_API_URL, PRICE_ZONES, REQUEST_TIMEOUT, TIMEZONE
from elpris_optimizer.hourly_prices import quarters_to_hours


_LOGGER = logging.getLogger(__name__)

INTERVAL_COLUMNS = ["time_start", "time_end", "SEK_per_kWh"]

# ---------------------------
# PRICE INTERVALS
# ---------------------------

def empty_intervals():
    return pd.DataFrame({
        "time_start": pd.Series(dtype=f"datetime64[ns, {TIMEZONE}]"),
        "time_end": pd.Series(dtype=f"datetime64[ns, {TIMEZONE}]"),
        "SEK_per_kWh": pd.Series(dtype=float),
    })


def build_price_url(day, zone):
    if zone not in PRICE_ZONES:
        raise ValueError("Unknown price zone")
    return PRICE_API_URL.format(year=day.year, month=day.month, day=day.day, zone=zone)


def parse_price_intervals(entries):
    """
    Convert the JSON price list returned by the API into a DataFrame.

    Parameters
    ----------
    entries : list of dict
        Objects with at least "time_start", "time_end" and "SEK_per_kWh".

    Returns
    -------
    pd.DataFrame
        Columns time_start, time_end (tz-aware, local time) and SEK_per_kWh,
        sorted chronologically.
    """
    if not entries:
        return empty_intervals()

    df = pd.DataFrame(entries)
    df["time_start"] = pd.to_datetime(df["time_start"], utc=True).dt.tz_convert(TIMEZONE)
    df["time_end"] = pd.to_datetime(df["time_end"], utc=True).dt.tz_convert(TIMEZONE)
    df["SEK_per_kWh"] = df["SEK_per_kWh"].astype(float)
    return df[INTERVAL_COLUMNS].sort_values("time_start").reset_index(drop=True)


def fetch_day_prices(day: date, zone: str, session=None) -> pd.DataFrame:
    """
    Fetch the spot prices of one calendar day for one price zone.

    A day that is not published yet (HTTP 404) gives an empty frame. Any other
    HTTP or connection error is raised as a requests exception.
    """
    url = build_price_url(day, zone)
    http = session if session is not None else requests

    _LOGGER.debug("Fetching prices from %s", url)
    r = http.get(url, timeout=REQUEST_TIMEOUT)
    if r.status_code == 404:
        _LOGGER.debug("No prices published for %s in %s", day, zone)
        return empty_intervals()
    r.raise_for_status()

    df = parse_price_intervals(r.json())
    _LOGGER.debug("Got %d price intervals for %s in %s", len(df), day, zone)
    return df

# ---------------------------
# MERGED DAYS
# ---------------------------

def fetch_merged_prices(day: date, zone: str, session=None) -> pd.DataFrame:
    """Fetch `day` and the day after it as one chronological frame."""
    frames = [
        fetch_day_prices(day, zone, session=session),
        fetch_day_prices(day + timedelta(days=1), zone, session=session),
    ]
    frames = [df for df in frames if not df.empty]
    if not frames:
        return empty_intervals()
    return pd.concat(frames).sort_values("time_start").reset_index(drop=True)


def prepare_hourly_prices(day: date, zone: str, session=None) -> pd.DataFrame:
    """
    Prepare the hourly price buckets for a day plus its rollover day.

    Returns
    -------
    pd.DataFrame with columns:
        - start
        - end
        - price (SEK/kWh)
    """
    intervals = fetch_merged_prices(day, zone, session=session)
    return quarters_to_hours(intervals)
