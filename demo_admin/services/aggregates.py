"""Summary statistics over repository snapshots.

Pure functions: callers pass the result of ``list_all()`` so every value is
computed from one consistent snapshot. Absent numeric fields count as zero.
"""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal

from demo_admin.models.schemas import Product, User


def total_quantity(products: Iterable[Product]) -> int:
    return sum(p.quantity or 0 for p in products)


def total_value(products: Iterable[Product]) -> Decimal:
    total = Decimal("0")
    for p in products:
        price = p.price if p.price is not None else Decimal("0")
        total += price * (p.quantity or 0)
    return total


def average_age(users: Iterable[User]) -> float:
    ages = [u.age or 0 for u in users]
    if not ages:
        return 0.0
    return sum(ages) / len(ages)
