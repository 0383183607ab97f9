from dataclasses import dataclass

import pandas as pd


@dataclass(frozen=True)
class ChargeWindow:
    start: pd.Timestamp
    end: pd.Timestamp
    hours: int
    average_price: float
    start_index: int


def cheapest_window(buckets, hours):
    """
    Find the contiguous run of `hours` buckets with the lowest total price.

    The window sum is kept as a running total: each step drops the bucket
    leaving the window and adds the one entering it. The minimum is only
    replaced by a strictly smaller sum, so among equally cheap windows the
    earliest one is returned.

    Parameters
    ----------
    buckets : pd.DataFrame
        Chronological hourly buckets with columns start, end and price.
    hours : int
        Window length in buckets, 1 <= hours <= len(buckets).

    Returns
    -------
    ChargeWindow
    """
    if hours < 1 or hours > len(buckets):
        raise ValueError(f"Window of {hours} hours does not fit {len(buckets)} price buckets")

    prices = buckets["price"].tolist()

    window_sum = sum(prices[:hours])
    lowest_sum = window_sum
    lowest_start = 0

    for i in range(hours, len(prices)):
        window_sum += prices[i] - prices[i - hours]
        if window_sum < lowest_sum:
            lowest_sum = window_sum
            lowest_start = i - hours + 1

    return ChargeWindow(
        start=buckets["start"].iloc[lowest_start],
        end=buckets["end"].iloc[lowest_start + hours - 1],
        hours=hours,
        average_price=lowest_sum / hours,
        start_index=lowest_start,
    )


def window_buckets(buckets, window):
    """Return the buckets covered by `window`."""
    return buckets.iloc[window.start_index:window.start_index + window.hours]
