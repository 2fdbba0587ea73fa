"""CLI for today's offshore helicopter schedules."""

import argparse
import logging
import os
import sys

from rotorschedule.flights.config import ScheduleConfig
from rotorschedule.flights.models import ScheduleResult
from rotorschedule.flights.pinned import PinnedFlightStore
from rotorschedule.flights.service import FlightAggregator
from rotorschedule.reference.operators import Operator, get_operator

SUPPORTED_OPERATORS = [Operator.BHL.value, Operator.NHV.value, Operator.CHC.value]


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Show today's helicopter flights from Bristow, NHV and CHC"
    )
    parser.add_argument(
        "--operator",
        "-p",
        action="append",
        choices=SUPPORTED_OPERATORS,
        type=str.upper,
        help="Only show this operator (repeatable)",
    )
    parser.add_argument(
        "--stats",
        "-s",
        action="store_true",
        help="Include statistics summary",
    )
    parser.add_argument(
        "--output",
        "-o",
        help="Write results to CSV file",
    )
    parser.add_argument(
        "--pinned",
        help="Only show flights pinned in this JSON file (today's entries)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="count",
        default=0,
        help="Increase log verbosity (-v info, -vv debug)",
    )
    return parser.parse_args(argv)


def configure_logging(verbosity: int) -> None:
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = os.environ.get("ROTOR_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv=None):
    args = parse_args(argv)
    configure_logging(args.verbose)

    try:
        config = ScheduleConfig.from_env()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    operators = [get_operator(code) for code in args.operator] if args.operator else None
    service = FlightAggregator(config=config)
    result = service.query(operators=operators)

    if args.pinned:
        pinned_ids = {(f.operator, f.id) for f in PinnedFlightStore(args.pinned).load()}
        result = ScheduleResult(
            flights=[f for f in result.flights if (f.operator, f.id) in pinned_ids],
            day=result.day,
        )

    if args.stats:
        stats = service.statistics(result.flights)
        print(f"\nTotal flights: {stats.total_flights}")
        print(f"Late departures: {stats.late_flights}")
        if stats.by_operator:
            print("\nBy operator:")
            for op, count in sorted(stats.by_operator.items()):
                print(f"  {op}: {count}")
        if stats.by_status:
            print("\nBy status:")
            for status, count in sorted(stats.by_status.items(), key=lambda x: -x[1]):
                print(f"  {status}: {count}")
        if stats.by_client:
            print("\nBy client:")
            for client, count in sorted(stats.by_client.items(), key=lambda x: -x[1]):
                print(f"  {client}: {count}")
        print()

    df = result.to_dataframe()
    if df.empty:
        print("No flights found.", file=sys.stderr)
    else:
        print(df.to_string(index=False))

    if args.output and not df.empty:
        df.to_csv(args.output, index=False)
        print(f"\nWrote {len(df)} rows to {args.output}", file=sys.stderr)


if __name__ == "__main__":
    main()
