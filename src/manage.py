"""Orderly database management CLI.

Creates or drops the RDBMS schema when the domain is configured with a
SQL provider. With the default in-memory provider both commands are no-ops.

Usage:
    python src/manage.py setup-db   # Create all tables
    python src/manage.py drop-db    # Drop all tables
"""

import argparse
import sys


def setup_databases():
    from orderly.domain import orderly
    from orderly.utils.db import setup_db

    print("Initializing orderly domain...")
    orderly.init()
    print("Creating database schema...")
    setup_db(orderly)
    print("Done.")


def drop_databases():
    from orderly.domain import orderly
    from orderly.utils.db import drop_db

    print("Initializing orderly domain...")
    orderly.init()
    print("Dropping database schema...")
    drop_db(orderly)
    print("Done.")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Orderly database management")
    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    args = parser.parse_args(argv)

    if args.command == "setup-db":
        setup_databases()
    elif args.command == "drop-db":
        drop_databases()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
