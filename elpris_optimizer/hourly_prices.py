import pandas as pd


HOUR = pd.Timedelta(hours=1)


def empty_buckets(tz=None):
    dtype = "datetime64[ns]" if tz is None else f"datetime64[ns, {tz}]"
    return pd.DataFrame({
        "start": pd.Series(dtype=dtype),
        "end": pd.Series(dtype=dtype),
        "price": pd.Series(dtype=float),
    })


def is_hourly(intervals):
    """True if every interval ends on a whole hour."""
    return bool((intervals["time_end"].dt.minute == 0).all())


def quarters_to_hours(intervals):
    """
    Normalise price intervals of 15 or 60 minutes into hourly buckets.

    Every interval starting on a whole hour opens a new bucket, and each
    following interval that does not is folded into the open bucket. An
    interval adds its price weighted by its share of an hour, so four quarters
    priced p give a bucket priced p. A run of fewer than four quarters before
    the next whole hour gives a bucket shorter than an hour.

    Parameters
    ----------
    intervals : pd.DataFrame
        Chronological price intervals with columns time_start, time_end and
        SEK_per_kWh.

    Returns
    -------
    pd.DataFrame
        Hourly buckets with columns start, end and price, in the same order.
    """
    if intervals.empty:
        start_dtype = intervals.get("time_start", pd.Series(dtype="datetime64[ns]")).dtype
        return empty_buckets(getattr(start_dtype, "tz", None))

    if is_hourly(intervals):
        return pd.DataFrame({
            "start": intervals["time_start"],
            "end": intervals["time_end"],
            "price": intervals["SEK_per_kWh"].astype(float),
        }).reset_index(drop=True)

    share = (intervals["time_end"] - intervals["time_start"]) / HOUR
    weighted = intervals.assign(weighted_price=intervals["SEK_per_kWh"] * share)

    # Each whole-hour start begins a new group
    bucket = (weighted["time_start"].dt.minute == 0).cumsum()

    hours = weighted.groupby(bucket.to_numpy(), sort=False).agg(
        start=("time_start", "first"),
        end=("time_end", "last"),
        price=("weighted_price", "sum"),
    )
    return hours.reset_index(drop=True)
