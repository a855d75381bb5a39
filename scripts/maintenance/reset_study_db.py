"""
Reset the study database.

DANGEROUS: This deletes all cards and progress!
The seed catalogue is written again so the app starts fresh.

Usage:
    python -m scripts.maintenance.reset_study_db
    python -m scripts.maintenance.reset_study_db --yes
"""

import argparse

from core import config
from core.content import build_seed_cards
from core.srs import SqlBlobStore, StudyStore


def reset(database_url: str) -> StudyStore:
    """Drop all blobs and reseed the card catalogue."""
    blob_store = SqlBlobStore(database_url)
    blob_store.reset_db()
    store = StudyStore(blob_store, daily_goal=config.get_initial_daily_goal())
    store.initialize_cards(build_seed_cards(config.now()))
    return store


def main():
    parser = argparse.ArgumentParser(description="Reset the study database")
    parser.add_argument("--yes", action="store_true", help="Skip the confirmation prompt")
    args = parser.parse_args()

    database_url = config.get_database_url()
    print("=" * 60)
    print("WARNING: Reset Study Database")
    print("=" * 60)
    print()
    print(f"Database: {database_url}")
    print("This will DELETE:")
    print("  - All card review state (ease, intervals, due dates)")
    print("  - Streaks, totals and the daily goal")
    print()

    if not args.yes:
        response = input("Are you sure you want to reset? (type 'yes' to confirm): ")
        if response.lower() != "yes":
            print("\nCancelled. No changes made.")
            return

    print("\nResetting database...")
    store = reset(database_url)
    print(f"✓ Database reset complete! {len(store.cards)} seed cards written.")


if __name__ == "__main__":
    main()
