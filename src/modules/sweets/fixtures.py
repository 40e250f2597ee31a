"""Starter catalog the ledger is seeded with.

Values are illustrative only.
"""

from __future__ import annotations

from decimal import Decimal

STARTER_CATALOG = [
    {
        "name": "Belgian Dark Chocolate",
        "category": "chocolates",
        "price": Decimal("12.99"),
        "quantity": 25,
        "description": "Rich, velvety dark chocolate imported from Belgium",
    },
    {
        "name": "Strawberry Macarons",
        "category": "pastries",
        "price": Decimal("8.50"),
        "quantity": 15,
        "description": "Delicate French macarons with strawberry filling",
    },
    {
        "name": "Caramel Fudge",
        "category": "candies",
        "price": Decimal("6.99"),
        "quantity": 40,
        "description": "Handmade buttery caramel fudge squares",
    },
    {
        "name": "Vanilla Bean Cupcake",
        "category": "cakes",
        "price": Decimal("4.50"),
        "quantity": 0,
        "description": "Fluffy vanilla cupcake with buttercream frosting",
    },
    {
        "name": "Chocolate Chip Cookies",
        "category": "cookies",
        "price": Decimal("3.99"),
        "quantity": 50,
        "description": "Classic homemade cookies with premium chocolate chips",
    },
    {
        "name": "Mango Sorbet",
        "category": "ice-cream",
        "price": Decimal("5.99"),
        "quantity": 20,
        "description": "Refreshing tropical mango sorbet",
    },
    {
        "name": "Gulab Jamun",
        "category": "traditional",
        "price": Decimal("7.50"),
        "quantity": 30,
        "description": "Classic Indian sweet dumplings in rose syrup",
    },
    {
        "name": "Salted Caramel Truffles",
        "category": "chocolates",
        "price": Decimal("14.99"),
        "quantity": 3,
        "description": "Luxurious truffles with sea salt caramel center",
    },
]
