import pandas as pd
import requests
import streamlit as st

from elpris_optimizer.charge_window import cheapest_window, window_buckets
from elpris_optimizer.config import CHARGING_DURATIONS, PRICE_ZONES, TIMEZONE
from elpris_optimizer.prepare_data import prepare_hourly_prices
from elpris_optimizer.report import format_ore, price_chart, price_summary, sort_by_price


st.set_page_config(
    page_title="Elpris Optimizer",
    page_icon="⚡",
    layout="wide"
)
st.title("Cheapest Charging Window ⚡")

tab_info, tab_prices = st.tabs(["Info ℹ️", "Prices 📊"])

with tab_info:
    st.markdown("""
# Elpris Optimizer
This app fetches day-ahead spot prices for a Swedish price zone from [elprisetjustnu.se](https://www.elprisetjustnu.se/),
for the chosen day and the day after. Prices published per quarter hour are combined into hourly prices.

## How to Use
1. Choose a price zone, a day and how many hours you need to charge.
2. Open the prices tab.
    - The chart highlights the cheapest contiguous charging window.
    - The table lists every hour from most to least expensive.
    """)

with tab_prices:
    col1, col2, col3 = st.columns(3)
    with col1:
        zone = st.selectbox("Price zone", PRICE_ZONES, index=2)
    with col2:
        day = st.date_input("Day", value=pd.Timestamp.now(tz=TIMEZONE).date())
    with col3:
        hours = st.selectbox("Charging window (h)", CHARGING_DURATIONS)

    try:
        buckets = prepare_hourly_prices(day, zone)
    except requests.RequestException as e:
        st.error(f"Could not fetch prices: {e}")
        st.stop()

    if buckets.empty:
        st.write("No prices published for this day yet!")
        st.stop()

    # --- KPIs ---
    summary = price_summary(buckets)
    kpi_col1, kpi_col2, kpi_col3 = st.columns(3)
    with kpi_col1:
        st.metric(label="Lowest price", value=f"{format_ore(summary['lowest'])} öre")
    with kpi_col2:
        st.metric(label="Highest price", value=f"{format_ore(summary['highest'])} öre")
    with kpi_col3:
        st.metric(label="Mean price", value=f"{format_ore(summary['mean'])} öre")

    window = None
    if len(buckets) >= hours:
        window = cheapest_window(buckets, hours)
        st.success(
            f"✅ Start charging at {window.start:%H:00} on {window.start:%Y-%m-%d}, "
            f"mean price {format_ore(window.average_price)} öre"
        )
    else:
        st.warning(f"⚠️ Not enough price data for a {hours}h window.")

    st.altair_chart(price_chart(buckets, window), use_container_width=True)

    col_window, col_sorted = st.columns([2, 3])
    with col_window:
        if window is not None:
            st.subheader("Charging window")
            st.dataframe(window_buckets(buckets, window), use_container_width=True)
    with col_sorted:
        st.subheader("Most expensive first")
        st.dataframe(sort_by_price(buckets), use_container_width=True)

    # --- Download button ---
    csv = buckets.to_csv(index=False).encode("utf-8")
    st.download_button(
        label="Download Prices as CSV",
        data=csv,
        file_name=f"prices_{zone}_{day}.csv",
        mime="text/csv"
    )
