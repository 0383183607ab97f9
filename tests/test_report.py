import altair as alt
import pandas as pd
import pytest

from elpris_optimizer.charge_window import ChargeWindow, cheapest_window
from elpris_optimizer.report import (
    format_charge_window,
    format_ore,
    format_price_list,
    price_chart,
    price_summary,
    sort_by_price,
)


def test_sort_by_price_descending_then_by_time(make_buckets):
    buckets = make_buckets([3, 1, 3, 2])

    result = sort_by_price(buckets)

    assert result["price"].tolist() == [3.0, 3.0, 2.0, 1.0]
    assert list(result["start"]) == [buckets["start"][0], buckets["start"][2],
                                     buckets["start"][3], buckets["start"][1]]


def test_price_summary(make_buckets):
    summary = price_summary(make_buckets([0.5, -0.25, 1.25]))

    assert summary == {"lowest": -0.25, "highest": 1.25, "mean": pytest.approx(0.5)}


@pytest.mark.parametrize("price, expected", [
    (0.1234, "12,34"),
    (1.5, "150,00"),
    (-0.05, "-5,00"),
    (0.0, "0,00"),
])
def test_format_ore(price, expected):
    assert format_ore(price) == expected


def test_format_price_list(make_buckets):
    buckets = make_buckets([0.5, 1.0], start="2025-10-01 23:00")

    assert format_price_list(buckets).splitlines() == [
        "Prislista:",
        "23-00 50,00 öre",
        "00-01 100,00 öre",
        "Lägsta pris: 50,00 öre",
        "Högsta pris: 100,00 öre",
        "Medelpris: 75,00 öre",
    ]


def test_format_price_list_without_data(make_buckets):
    assert format_price_list(make_buckets([])) == "Found no data"


def test_format_charge_window():
    window = ChargeWindow(
        start=pd.Timestamp("2025-10-01 22:00", tz="Europe/Stockholm"),
        end=pd.Timestamp("2025-10-02 02:00", tz="Europe/Stockholm"),
        hours=4,
        average_price=0.25,
        start_index=22,
    )

    assert format_charge_window(window) == (
        "Medelpris för fönster: 25,00 öre\n"
        "Påbörja laddning kl 22:00"
    )


def test_price_chart_highlights_window(make_buckets):
    buckets = make_buckets([5, 1, 1, 5])

    chart = price_chart(buckets, cheapest_window(buckets, 2))

    assert isinstance(chart, alt.Chart)
    assert chart.data["in_window"].tolist() == [False, True, True, False]
    assert chart.data["price_ore"].tolist() == [500.0, 100.0, 100.0, 500.0]


def test_price_chart_without_window(make_buckets):
    chart = price_chart(make_buckets([5, 1]))

    assert not chart.data["in_window"].any()
