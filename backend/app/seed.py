"""
Commerce Backend — Sample Data Seeder
======================================

What:  Inserts a small catalogue of users, products and couriers.
How:   Goes through the same services the API uses, inside one
       Database.session() unit of work.
Usage:
    python -m app.seed            # add sample rows
    python -m app.seed --reset    # clear all commerce tables first

On SQLite the tables are created if missing; PostgreSQL deployments run
`alembic upgrade head` first.
"""

import argparse
import asyncio
import logging
import sys
from decimal import Decimal

from sqlalchemy import delete

from app.config import Settings, settings as default_settings
from app.database import Database
from app.models import Courier, Delivery, Order, Product, User
from app.schemas.courier import CourierCreate
from app.schemas.product import ProductCreate
from app.schemas.user import UserCreate
from app.services.courier_service import CourierService
from app.services.product_service import ProductService
from app.services.user_service import UserService

logger = logging.getLogger("commerce.seed")

SAMPLE_USERS = [
    UserCreate(email="john.doe@example.com", name="John Doe", password="hashed_password_1"),
    UserCreate(email="jane.smith@example.com", name="Jane Smith", password="hashed_password_2"),
    UserCreate(email="bob.wilson@example.com", name="Bob Wilson", password="hashed_password_3"),
]

SAMPLE_PRODUCTS = [
    ("Laptop Pro 15", "High-performance laptop with 15-inch display", "1299.99", 25),
    ("Wireless Mouse", "Ergonomic wireless mouse with precision tracking", "29.99", 150),
    ("Mechanical Keyboard", "RGB mechanical keyboard with blue switches", "89.99", 75),
    ("USB-C Hub", "7-in-1 USB-C hub with HDMI and card reader", "49.99", 100),
    ("Webcam HD", "1080p HD webcam with built-in microphone", "79.99", 50),
    ("Monitor 27 inch", "4K UHD monitor with HDR support", "399.99", 30),
    ("Desk Lamp LED", "Adjustable LED desk lamp with touch control", "34.99", 80),
    ("Headphones Wireless", "Noise-cancelling wireless headphones", "199.99", 60),
    ("External SSD 1TB", "Portable SSD with USB 3.2 Gen 2", "129.99", 45),
    ("Laptop Stand", "Aluminum laptop stand with adjustable height", "39.99", 120),
]

SAMPLE_COURIERS = [
    CourierCreate(name="Speedy Sam", is_available=True),
    CourierCreate(name="Rapid Rita", is_available=True),
    CourierCreate(name="Off-duty Oscar", is_available=False),
]


async def seed(app_settings: Settings, reset: bool = False) -> dict:
    """Insert the sample rows; returns how many of each were created."""
    database = Database(app_settings)
    try:
        if app_settings.is_sqlite:
            await database.create_all()

        async with database.session() as session:
            if reset:
                logger.info("Clearing existing data...")
                # Children first so no foreign key is left dangling
                for model in (Delivery, Order, Product, User, Courier):
                    await session.execute(delete(model))

            users = UserService(session)
            for data in SAMPLE_USERS:
                await users.create(data)

            products = ProductService(session)
            for name, description, price, stock in SAMPLE_PRODUCTS:
                await products.create(
                    ProductCreate(name=name, description=description, price=Decimal(price), stock=stock)
                )

            couriers = CourierService(session)
            for data in SAMPLE_COURIERS:
                await couriers.create(data)
    finally:
        await database.dispose()

    counts = {
        "users": len(SAMPLE_USERS),
        "products": len(SAMPLE_PRODUCTS),
        "couriers": len(SAMPLE_COURIERS),
    }
    logger.info("Seeding complete: %s", counts)
    return counts


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Insert sample commerce data.")
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Delete every existing user, product, order, delivery and courier first",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, default_settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )

    try:
        asyncio.run(seed(default_settings, reset=args.reset))
    except Exception as e:
        logger.error("Seeding failed: %s", e, exc_info=True)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
