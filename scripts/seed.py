#!/usr/bin/env python3
"""
Seed the configured storage with demo profiles, posts, connections and listings.
Run: python scripts/seed.py [--seed N]

Only useful with STORAGE_BACKEND=supabase; the memory backend is seeded
in-process with SEED_ON_START=true instead.
"""

import argparse
import asyncio
import random
import sys
import os

# Add parent dir to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Load env
from dotenv import load_dotenv
load_dotenv()

from config.settings import Settings
from adapters.api.loader import build_container
from adapters.api.seed import seed_demo_data, DEMO_PASSWORD


async def main(seed: int = None):
    settings = Settings()
    if settings.storage_backend != "supabase":
        print("⚠️  STORAGE_BACKEND is not 'supabase'; data would vanish when this script exits.")
        print("   Use SEED_ON_START=true to seed the in-memory store instead.")
        sys.exit(1)

    container = build_container(settings)
    print(f"🌱 Seeding {settings.supabase_url} (schema: {settings.db_schema})...")
    counts = await seed_demo_data(container, random.Random(seed))

    for kind, count in counts.items():
        print(f"   {kind}: {count}")
    print(f"✅ Done. Demo users log in with password '{DEMO_PASSWORD}'")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed demo data")
    parser.add_argument("--seed", type=int, default=None, help="random seed for reproducible data")
    args = parser.parse_args()
    asyncio.run(main(args.seed))
