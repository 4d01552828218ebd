"""Fulfilment database management CLI.

Provides commands to create and drop the database schema of the fulfilment
domain. The active provider comes from the PROTEAN_ENV overlay, so run with
``PROTEAN_ENV=production`` to target PostgreSQL.

Usage:
    python src/manage.py setup-db   # Create all tables
    python src/manage.py drop-db    # Drop all tables
"""

import argparse
import sys


def setup_databases():
    """Create database schema for the fulfilment domain."""
    from fulfilment.domain import fulfilment

    print("Initializing fulfilment domain...")
    fulfilment.init()
    print("Creating fulfilment database schema...")
    with fulfilment.domain_context():
        fulfilment.setup_database()
    print("  fulfilment schema ready.")

    print("Done.")


def drop_databases():
    """Drop database schema for the fulfilment domain."""
    from fulfilment.domain import fulfilment

    print("Initializing fulfilment domain...")
    fulfilment.init()
    print("Dropping fulfilment database schema...")
    with fulfilment.domain_context():
        fulfilment.drop_database()
    print("  fulfilment schema dropped.")

    print("Done.")


def main():
    parser = argparse.ArgumentParser(description="Fulfilment database management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_databases()
    elif args.command == "drop-db":
        drop_databases()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
