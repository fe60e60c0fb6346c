#!/usr/bin/env python3
"""
POT Attractions CLI
Harvest attractions from rit.poland.travel into out/attractions.{json,csv}
"""
import sys
import argparse
from pathlib import Path
from typing import List, Optional

from pot_attractions.config import (
    HarvestConfig,
    MAX_RETRIES,
    OUTPUT_DIR,
    REQUEST_TIMEOUT,
    RETRY_DELAY,
    SLICE_SIZE,
)
from pot_attractions.errors import HarvestError
from pot_attractions.export import CsvExporter, summarize
from pot_attractions.fetch import Fetcher, FixedBackoff
from pot_attractions.harvest import build_harvester
from pot_attractions.store import JsonStore


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="🏰 Fetch Polish tourism attractions and export them to CSV",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Full (resumable) harvest into ./out
  pot-attractions

  # Rebuild the CSV from the cache only
  pot-attractions --export-only

  # Impatient retries while testing
  pot-attractions --max-retries 2 --retry-delay 5
        """
    )
    parser.add_argument("--out-dir", type=str, default=str(OUTPUT_DIR),
                        help="Directory for attractions.json / attractions.csv")
    parser.add_argument("--slice-size", type=int, default=SLICE_SIZE,
                        help="Ids fetched between two cache checkpoints")
    parser.add_argument("--max-retries", type=int, default=MAX_RETRIES,
                        help="Retries per request on transient errors")
    parser.add_argument("--retry-delay", type=float, default=RETRY_DELAY,
                        help="Seconds to wait between retries")
    parser.add_argument("--timeout", type=float, default=REQUEST_TIMEOUT,
                        help="Per-request timeout in seconds")
    parser.add_argument("--export-only", action="store_true",
                        help="Skip the network and re-export the CSV from the cache")
    return parser


def config_from_args(args: argparse.Namespace) -> HarvestConfig:
    return HarvestConfig(
        output_dir=Path(args.out_dir),
        slice_size=args.slice_size,
        max_retries=args.max_retries,
        retry_delay=args.retry_delay,
        timeout=args.timeout,
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        config = config_from_args(args)
    except ValueError as e:
        print(f"❌ {e}")
        return 2

    print("🚀 Starting attractions harvest")
    print("=" * 60)
    print(f"   Cache:  {config.json_path}")
    print(f"   Export: {config.csv_path}")
    print("=" * 60)

    try:
        if args.export_only:
            records = JsonStore(config.json_path).load()
            count = CsvExporter(config.csv_path).export(records)
            stats = summarize(records)
            print(f"✅ Exported {count} attractions ({stats['with_lat_lng']} with coordinates)")
            return 0

        fetcher = Fetcher(
            max_retries=config.max_retries,
            backoff=FixedBackoff(config.retry_delay),
            timeout=config.timeout,
        )
        with fetcher:
            summary = build_harvester(config, fetcher=fetcher).run()
    except HarvestError as e:
        print(f"❌ {type(e).__name__}: {e}")
        print("💡 Progress up to the last saved slice is kept; rerun to resume.")
        return 1

    print(f"\n{'='*60}")
    print(f"   Listed:  {summary.total}")
    print(f"   Fetched: {summary.fetched}")
    print(f"   Skipped: {summary.skipped}")
    print(f"   Cached:  {summary.records}")
    print(f"{'='*60}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
