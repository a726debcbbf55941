"""Demo catalog for local development (`ecoshop db seed`)."""

from __future__ import annotations

from ecoshop.domain.model.value_objects import Money
from ecoshop.domain.repository.unit_of_work import UnitOfWorkFactory

DEMO_PRODUCTS = [
    (
        "Bamboo Toothbrush",
        "Biodegradable bamboo toothbrush with soft bristles. "
        "Eco-friendly alternative to plastic toothbrushes.",
        "5.99",
        100,
    ),
    (
        "Reusable Water Bottle",
        "Stainless steel water bottle that keeps drinks cold for 24 hours "
        "and hot for 12 hours.",
        "24.99",
        50,
    ),
    (
        "Organic Cotton Tote Bag",
        "Durable organic cotton tote bag perfect for grocery shopping and everyday use.",
        "12.99",
        75,
    ),
    (
        "Solar Power Bank",
        "Portable solar power bank with 20000mAh capacity. "
        "Charge your devices with renewable energy.",
        "39.99",
        30,
    ),
    (
        "Beeswax Food Wraps",
        "Set of 3 reusable beeswax wraps to replace plastic wrap for food storage.",
        "18.99",
        60,
    ),
]


def seed_catalog(uow_factory: UnitOfWorkFactory) -> int:
    """Insert any demo product not already present.  Returns how many were added."""
    added = 0
    with uow_factory() as uow:
        for name, description, price, stock in DEMO_PRODUCTS:
            if uow.products.get_by_name(name) is not None:
                continue
            uow.products.add(
                name=name, price=Money.of(price), stock=stock, description=description
            )
            added += 1
        uow.commit()
    return added
