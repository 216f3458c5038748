#!/usr/bin/env python3
"""
Seed demo trucks, menus and a customer account.

Reads an optional JSON file shaped like:

    {"trucks": [{"owner": {"name": ..., "email": ...}, "name": ...,
                 "menu": [{"name": ..., "price": "5.00", "category": ..., "description": ...}]}],
     "customers": [{"name": ..., "email": ...}]}

Accounts that already exist are left alone, so the script can be re-run.
Every seeded account gets the password given with --password.

Usage:
    python scripts/seed_demo.py --file demo.json --password changeme
"""
import argparse
import json
import logging
import os
import sys
from decimal import Decimal

# allow running from repo/scripts
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from foodtruck.config import settings
from foodtruck.db import Database
from foodtruck.errors import ValidationError
from foodtruck.logging_config import configure_logging
from foodtruck.models.user import UserRole
from foodtruck.services.auth_service import AuthService
from foodtruck.services.catalog_service import CatalogService

log = logging.getLogger("seed_demo")

DEFAULT_DATA = {
    "trucks": [
        {
            "owner": {"name": "Olga", "email": "olga@demo.foodtrucks.io"},
            "name": "Taco Tank",
            "menu": [
                {"name": "Al Pastor", "price": "5.00", "category": "tacos"},
                {"name": "Carnitas", "price": "5.50", "category": "tacos"},
                {"name": "Horchata", "price": "3.50", "category": "drinks"},
            ],
        },
        {
            "owner": {"name": "Omar", "email": "omar@demo.foodtrucks.io"},
            "name": "Kebab Kart",
            "menu": [
                {"name": "Chicken Shawarma", "price": "7.25", "category": "wraps"},
                {"name": "Falafel Plate", "price": "8.00", "category": "plates"},
            ],
        },
    ],
    "customers": [{"name": "Cara", "email": "cara@demo.foodtrucks.io"}],
}


def _register(auth: AuthService, password: str, role: UserRole, **fields):
    try:
        return auth.register(password=password, role=role, **fields)
    except ValidationError:
        log.info("skipping existing account %s", fields["email"])
        return None


def seed(db_handle: Database, data: dict, password: str) -> dict:
    counts = {"owners": 0, "items": 0, "customers": 0}
    db = db_handle.session()
    try:
        auth = AuthService(db)
        catalog = CatalogService(db)
        for t in data.get("trucks", []):
            owner = t["owner"]
            identity = _register(
                auth,
                password,
                UserRole.truck_owner,
                name=owner["name"],
                email=owner["email"],
                truck_name=t.get("name"),
            )
            if identity is None:
                continue
            counts["owners"] += 1
            for entry in t.get("menu", []):
                catalog.create_item(
                    identity.truck_id,
                    entry["name"],
                    Decimal(str(entry["price"])),
                    entry["category"],
                    entry.get("description"),
                )
                counts["items"] += 1
        for c in data.get("customers", []):
            if _register(auth, password, UserRole.customer, name=c["name"], email=c["email"]):
                counts["customers"] += 1
    finally:
        db.close()
    return counts


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--file", "-f", default=None, help="JSON file with trucks/customers to seed")
    parser.add_argument("--password", "-p", required=True, help="password for every seeded account")
    args = parser.parse_args()

    configure_logging(settings.LOG_LEVEL)
    data = DEFAULT_DATA
    if args.file:
        if not os.path.exists(args.file):
            print("File not found:", args.file)
            sys.exit(1)
        with open(args.file, "r", encoding="utf-8") as f:
            data = json.load(f)

    handle = Database(settings.DATABASE_URL, echo=settings.SQL_ECHO)
    handle.init_db()
    try:
        print("Seeded:", seed(handle, data, args.password))
    finally:
        handle.dispose()
