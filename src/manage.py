"""QKart database management CLI.

Creates and drops the database schema for SQL-backed providers
(PostgreSQL or SQLite, selected through PROTEAN_ENV and domain.toml).
The in-memory provider needs no setup.

Usage:
    python src/manage.py setup-db   # Create all tables
    python src/manage.py drop-db    # Drop all tables
"""

import argparse
import sys


def setup_database():
    from qkart.domain import qkart
    from qkart.utils.db import setup_db

    print("Initializing qkart domain...")
    qkart.init()
    print("Creating qkart database schema...")
    setup_db(qkart)
    print("Done.")


def drop_database():
    from qkart.domain import qkart
    from qkart.utils.db import drop_db

    print("Initializing qkart domain...")
    qkart.init()
    print("Dropping qkart database schema...")
    drop_db(qkart)
    print("Done.")


def main():
    parser = argparse.ArgumentParser(description="QKart database management")
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
