"""EShop database management CLI.

Creates and drops the database schema for the eshop domain, and seeds the
catalog from a JSON file.

Usage:
    python src/manage.py setup-db                 # Create all tables
    python src/manage.py drop-db                  # Drop all tables
    python src/manage.py seed-goods goods.json    # Register catalog goods
"""

import argparse
import json
import sys


def setup_database():
    """Create the database schema for the eshop domain."""
    from eshop.domain import eshop
    from eshop.utils.db import setup_db

    print("Initializing eshop domain...")
    eshop.init()
    print("Creating eshop database schema...")
    setup_db(eshop)
    print("Done.")


def drop_database():
    """Drop the database schema for the eshop domain."""
    from eshop.domain import eshop
    from eshop.utils.db import drop_db

    print("Initializing eshop domain...")
    eshop.init()
    print("Dropping eshop database schema...")
    drop_db(eshop)
    print("Done.")


def seed_goods(path):
    """Register every good listed in a JSON file of {title, price, quantity, description}."""
    from eshop.domain import eshop
    from eshop.good.catalogue import RegisterGood

    with open(path, encoding="utf-8") as fh:
        goods = json.load(fh)

    eshop.init()
    with eshop.domain_context():
        for good in goods:
            good_id = eshop.process(
                RegisterGood(
                    title=good["title"],
                    price=good["price"],
                    quantity=good.get("quantity", 0),
                    description=good.get("description"),
                ),
                asynchronous=False,
            )
            print(f"  {good['title']} → {good_id}")

    print(f"Registered {len(goods)} goods.")


def main():
    parser = argparse.ArgumentParser(description="EShop database management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    seed_parser = subparsers.add_parser("seed-goods", help="Register catalog goods from a JSON file")
    seed_parser.add_argument("path", help="JSON file with a list of goods")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    elif args.command == "seed-goods":
        seed_goods(args.path)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
