#!/usr/bin/env python
"""
Refresh stored market data from FRED and Yahoo Finance.

Runs without the web server (cron, CI). Indicators are fetched one at a time
with a pause between requests. Exits 1 if any indicator failed.

    python scripts/update_data.py                 # every indicator
    python scripts/update_data.py --region japan  # Japan dashboard only
    python scripts/update_data.py sp500 gold      # specific indicators
    python scripts/update_data.py --status        # show what is stored
"""

import argparse
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from config import config
from registry import registry
from sources import DataSourceManager
from store import SeriesStore


logger = logging.getLogger("update_data")


def print_status(store: SeriesStore) -> None:
    print("\nStored data:")
    print("-" * 78)
    for info in registry.all():
        doc = store.read(info.key)
        if doc is None:
            print(f"{info.key:10} | {'-':>6} obs | Last: {'N/A':10} | {info.name}")
            continue
        last = doc['dates'][-1] if doc['dates'] else 'N/A'
        print(f"{info.key:10} | {len(doc['dates']):6} obs | Last: {last:10} | {info.name}")


def main(argv=None) -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    parser = argparse.ArgumentParser(description="Refresh stored market data")
    parser.add_argument(
        "indicators",
        nargs="*",
        help="Indicator keys to refresh (default: all)",
    )
    parser.add_argument(
        "--region",
        choices=["us", "japan"],
        help="Only refresh indicators for one region",
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=config.refresh_delay_seconds,
        help="Seconds to wait between requests",
    )
    parser.add_argument(
        "--status",
        action="store_true",
        help="Show stored data status and exit",
    )
    args = parser.parse_args(argv)

    store = SeriesStore(config.data_dir)
    if args.status:
        print_status(store)
        return 0

    keys = args.indicators or registry.keys(region=args.region)
    unknown = [key for key in keys if key not in registry]
    if unknown:
        print(f"Unknown indicator(s): {', '.join(unknown)}")
        print(f"Available: {', '.join(registry.keys())}")
        return 1

    print(f"Starting data update at {datetime.now(timezone.utc).isoformat()}")
    manager = DataSourceManager(store, delay_seconds=args.delay)
    results = manager.refresh_many_sync(keys)

    succeeded = [key for key, result in results.items() if result.ok]
    failed = {key: result.error for key, result in results.items() if not result.ok}

    print("\n" + "=" * 60)
    print("Update complete!")
    print(f"   Success: {len(succeeded)}/{len(keys)}")
    print(f"   Failed: {len(failed)}/{len(keys)}")
    for key, error in failed.items():
        print(f"     {key}: {error}")
    print("=" * 60)

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
