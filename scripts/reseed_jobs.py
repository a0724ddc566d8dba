#!/usr/bin/env python3
"""
Reseed Script

Replaces the job collection with a freshly generated dataset. Users,
applications and companies are left alone.

Usage: python scripts/reseed_jobs.py [--seed N] [--size N]
"""
import argparse
import random
import sys
sys.path.insert(0, '.')

from jobportal.core.config import get_settings
from jobportal.db.storage import get_storage
from jobportal.services.document_service import JobPortalDB


def main():
    parser = argparse.ArgumentParser(description="Regenerate the seeded job listings")
    parser.add_argument("--seed", type=int, default=None, help="random seed for a reproducible dataset")
    parser.add_argument("--size", type=int, default=None, help="number of jobs to generate")
    args = parser.parse_args()

    settings = get_settings()
    if args.size is not None:
        settings = settings.model_copy(update={"seed_target_jobs": args.size})
    seed = args.seed if args.seed is not None else settings.seed_random_seed
    rng = random.Random(seed) if seed is not None else None

    # init() may seed first; the rng is handed only to the final reseed
    db = JobPortalDB(get_storage(), settings)
    count = db.reseed_jobs(rng=rng)
    print(f"✅ Seeded {count} jobs into {settings.storage_backend} storage")


if __name__ == "__main__":
    main()
