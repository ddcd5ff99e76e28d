"""Bookmarket database management CLI.

Creates and drops the tables behind the bookmarket domain's RDBMS providers.
Point PROTEAN_ENV at an overlay with a real database (``production`` uses
sqlite); the default in-memory provider needs no schema.

Usage:
    PROTEAN_ENV=production python src/manage.py setup-db   # Create all tables
    PROTEAN_ENV=production python src/manage.py drop-db    # Drop all tables
"""

import argparse
import sys


def setup_database():
    from bookmarket.domain import bookmarket
    from bookmarket.utils.db import setup_db

    print("Initializing bookmarket domain...")
    bookmarket.init()
    print("Creating database schema...")
    touched = setup_db(bookmarket)
    if touched:
        print(f"  schema ready on: {', '.join(touched)}")
    else:
        print("  no database providers configured; nothing to create.")

    print("Done.")


def drop_database():
    from bookmarket.domain import bookmarket
    from bookmarket.utils.db import drop_db

    print("Initializing bookmarket domain...")
    bookmarket.init()
    print("Dropping database schema...")
    touched = drop_db(bookmarket)
    if touched:
        print(f"  schema dropped on: {', '.join(touched)}")
    else:
        print("  no database providers configured; nothing to drop.")

    print("Done.")


def main():
    parser = argparse.ArgumentParser(description="Bookmarket database management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
