#!/usr/bin/env python3
"""
Script: init_db.py
Purpose: Create the storefront tables and optionally seed sample products

This script:
1. Waits for the database to accept connections (with retries)
2. Creates products, orders and order_products if they do not exist
3. With --seed, inserts sample products when the catalog is empty

Usage:
    python scripts/init_db.py [--seed] [--retries N]
"""

import sys
import argparse
from decimal import Decimal
from pathlib import Path

# Add project root to path
PROJECT_DIR = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_DIR))

from dotenv import load_dotenv

load_dotenv(PROJECT_DIR / '.env')

from storefront import models  # noqa: F401  (registers tables on Base.metadata)
from storefront.core.config import settings
from storefront.core.database import Base, SessionLocal, engine, wait_for_database
from storefront.repositories.product_repository import ProductRepository

SAMPLE_PRODUCTS = [
    {
        'name': 'Laptop',
        'image_url': 'https://via.placeholder.com/300x300?text=Laptop',
        'price': Decimal('899.00'),
    },
    {
        'name': 'Wireless Mouse',
        'image_url': 'https://via.placeholder.com/300x300?text=Mouse',
        'price': Decimal('29.80'),
    },
    {
        'name': 'Mechanical Keyboard',
        'image_url': 'https://via.placeholder.com/300x300?text=Keyboard',
        'price': Decimal('129.90'),
    },
]


def print_header(title: str):
    """Print formatted header"""
    print(f"\n{'='*60}")
    print(f"  {title}")
    print(f"{'='*60}\n")


def seed_products() -> int:
    """Insert SAMPLE_PRODUCTS when the catalog is empty; returns rows inserted"""
    session = SessionLocal()
    try:
        repo = ProductRepository(session)
        if repo.find_all():
            print("Catalog already has products, skipping seed.")
            return 0

        for values in SAMPLE_PRODUCTS:
            product = repo.create(values)
            print(f"  + {product.name} ({product.id})")
        return len(SAMPLE_PRODUCTS)
    finally:
        session.close()


def main():
    parser = argparse.ArgumentParser(description="Initialize the storefront database")
    parser.add_argument('--seed', action='store_true', help="Insert sample products")
    parser.add_argument('--retries', type=int, default=5, help="Connection attempts before giving up")
    args = parser.parse_args()

    print_header("Storefront database initialization")
    print(f"Target: {settings.safe_database_url}")

    wait_for_database(max_retries=args.retries)

    print("Creating tables...")
    Base.metadata.create_all(bind=engine)
    for table in Base.metadata.sorted_tables:
        print(f"  ✅ {table.name}")

    if args.seed:
        print("\nSeeding products...")
        inserted = seed_products()
        print(f"Inserted {inserted} product(s)")

    print("\n✅ Done")


if __name__ == "__main__":
    main()
