#!/usr/bin/env python3
"""
Fill the database with random person records.

Usage:
  python scripts/seed_people.py --count 50 [--seed 42]
"""
from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path

# Make the api package importable when run directly
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from api.core.config import get_settings
from api.core.logging_config import setup_logging
from api.db.create_tables import create_all
from api.services.person_service import PersonService


def main() -> None:
    ap = argparse.ArgumentParser(description="Create random person records")
    ap.add_argument("--count", type=int, required=True, help="Number of records to create")
    ap.add_argument("--seed", type=int, help="Seed for the random generator (default: RANDOM_SEED or entropy)")
    args = ap.parse_args()

    settings = get_settings()
    setup_logging(settings.log_level, settings.log_file)
    if args.count < 0:
        raise SystemExit("--count must be >= 0")

    create_all()
    seed = args.seed if args.seed is not None else settings.random_seed
    svc = PersonService(rng=random.Random(seed))
    print(svc.create_random_persons(args.count))


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
