import argparse
import logging
from datetime import date

import pandas as pd
import requests

from elpris_optimizer.charge_window import cheapest_window
from elpris_optimizer.config import CHARGING_DURATIONS, PRICE_ZONES, TIMEZONE
from elpris_optimizer.prepare_data import prepare_hourly_prices
from elpris_optimizer.report import format_charge_window, format_price_list, sort_by_price


_LOGGER = logging.getLogger(__name__)


def build_parser():
    durations = "|".join(f"{h}h" for h in CHARGING_DURATIONS)
    parser = argparse.ArgumentParser(
        prog="elpris-optimizer",
        description="Show Swedish spot prices for a day and the day after, "
                    "sorted or as the cheapest charging window.",
    )
    parser.add_argument("--zone", metavar="|".join(PRICE_ZONES),
                        help="price zone (required)")
    parser.add_argument("--date", metavar="YYYY-MM-DD",
                        help="day to show, defaults to today")
    parser.add_argument("--sorted", action="store_true",
                        help="list prices from most to least expensive")
    parser.add_argument("--charging", metavar=durations,
                        help="find the cheapest charging window of this length")
    parser.add_argument("--verbose", action="store_true",
                        help="log debug output")
    return parser


def parse_charging(value):
    """'4h' -> 4, or None if it is not one of the supported durations."""
    if not value or not value.endswith("h") or not value[:-1].isdigit():
        return None
    hours = int(value[:-1])
    return hours if hours in CHARGING_DURATIONS else None


def invalid(parser, message):
    parser.print_help()
    print(message)
    return 2


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.zone is None and args.date is None and args.charging is None and not args.sorted:
        parser.print_help()
        return 0

    if args.zone not in PRICE_ZONES:
        return invalid(parser, "Invalid zone input")

    if args.date is None:
        day = pd.Timestamp.now(tz=TIMEZONE).date()
    else:
        try:
            day = date.fromisoformat(args.date)
        except ValueError:
            return invalid(parser, "Invalid date")

    hours = None
    if args.charging is not None:
        hours = parse_charging(args.charging)
        if hours is None:
            return invalid(parser, "Invalid charging duration")

    try:
        buckets = prepare_hourly_prices(day, args.zone)
    except requests.RequestException as e:
        _LOGGER.debug("Price fetch failed", exc_info=True)
        print(f"Could not fetch prices: {e}")
        return 1

    if hours is not None:
        if len(buckets) < hours:
            print(f"Not enough price data for a {hours}h window")
            return 1
        print(format_charge_window(cheapest_window(buckets, hours)))
    elif args.sorted:
        print(format_price_list(sort_by_price(buckets)))
    else:
        print(format_price_list(buckets))
    return 0
