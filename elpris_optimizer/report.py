import altair as alt
import pandas as pd

from elpris_optimizer.config import ORE_PER_SEK


NO_DATA = "Found no data"

# ---------------------------
# SORTING AND STATISTICS
# ---------------------------

def sort_by_price(buckets):
    """Sort buckets by price, most expensive first; equal prices keep time order."""
    return buckets.sort_values(
        ["price", "start"], ascending=[False, True], kind="mergesort"
    ).reset_index(drop=True)


def price_summary(buckets):
    """Lowest, highest and mean price (SEK/kWh) of the buckets."""
    return {
        "lowest": float(buckets["price"].min()),
        "highest": float(buckets["price"].max()),
        "mean": float(buckets["price"].mean()),
    }

# ---------------------------
# CONSOLE TEXT
# ---------------------------

def format_ore(price_sek):
    """SEK/kWh as öre with two decimals and a decimal comma, e.g. 0.1234 -> '12,34'."""
    return f"{price_sek * ORE_PER_SEK:.2f}".replace(".", ",")


def format_hours(start, end):
    return f"{start.hour:02d}-{end.hour:02d}"


def format_price_list(buckets):
    if buckets.empty:
        return NO_DATA

    lines = ["Prislista:"]
    for row in buckets.itertuples(index=False):
        lines.append(f"{format_hours(row.start, row.end)} {format_ore(row.price)} öre")

    summary = price_summary(buckets)
    lines.append(f"Lägsta pris: {format_ore(summary['lowest'])} öre")
    lines.append(f"Högsta pris: {format_ore(summary['highest'])} öre")
    lines.append(f"Medelpris: {format_ore(summary['mean'])} öre")
    return "\n".join(lines)


def format_charge_window(window):
    return "\n".join([
        f"Medelpris för fönster: {format_ore(window.average_price)} öre",
        f"Påbörja laddning kl {window.start.hour:02d}:00",
    ])

# ---------------------------
# CHART
# ---------------------------

def price_chart(buckets, window=None):
    """Bar chart of hourly prices in öre/kWh, highlighting the charge window if given."""
    in_window = pd.Series(False, index=buckets.index)
    if window is not None:
        in_window.iloc[window.start_index:window.start_index + window.hours] = True

    chart_data = pd.DataFrame({
        "start": buckets["start"],
        "price_ore": buckets["price"] * ORE_PER_SEK,
        "in_window": in_window,
    })

    return (
        alt.Chart(chart_data)
        .mark_bar()
        .encode(
            x=alt.X("start:T", title="Hour"),
            y=alt.Y("price_ore:Q", title="Price (öre/kWh)"),
            color=alt.condition("datum.in_window", alt.value("orange"), alt.value("steelblue")),
            tooltip=[alt.Tooltip("start:T", title="Hour"), alt.Tooltip("price_ore:Q", format=".2f")],
        )
        .properties(title="Spot prices", height=250)
    )
