from __future__ import annotations

from decimal import Decimal

from demo_admin.models.schemas import Product, User
from demo_admin.services.entity_service import EntityService

DEMO_PRODUCTS = [
    Product(name="Laptop", description="High-performance laptop", price=Decimal("999.99"), quantity=50),
    Product(name="Smartphone", description="Latest smartphone model", price=Decimal("699.99"), quantity=100),
]

DEMO_USERS = [
    User(name="John Doe", email="john@example.com", age=30),
    User(name="Jane Smith", email="jane@example.com", age=25),
]


def seed_demo_data(products: EntityService[Product], users: EntityService[User]) -> None:
    """Load the demo records through the regular create path."""

    for product in DEMO_PRODUCTS:
        products.create(product)
    for user in DEMO_USERS:
        users.create(user)
