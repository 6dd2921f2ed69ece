# tests/conftest.py
import os

# Must be set before app.core.config.get_settings() is first called.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel

from app.database import engine
from app.main import app


@pytest.fixture
def client():
    """
    TestClient with lifespan enabled, so tables are created the same way
    as on a real startup. Tables are dropped afterwards.
    """
    with TestClient(app) as c:
        yield c
    SQLModel.metadata.drop_all(engine)


@pytest.fixture
def seed(client):
    """
    Insert rows directly through the ORM and return them refreshed.

        product = seed(Product(title="x"))
        a, b = seed(Product(...), Product(...))
    """

    def _seed(*rows):
        with Session(engine) as session:
            for row in rows:
                session.add(row)
            session.commit()
            for row in rows:
                session.refresh(row)
                session.expunge(row)
        return rows[0] if len(rows) == 1 else rows

    return _seed


@pytest.fixture
def product_payload():
    return {
        "title": "Essence Mascara Lash Princess",
        "description": "A popular mascara known for its volumizing effects.",
        "category": "beauty",
        "price": 9.99,
        "discountPercentage": 7.17,
        "rating": 4.94,
        "stock": 5,
        "tags": ["beauty", "mascara"],
        "brand": "Essence",
        "sku": "RCH45Q1A",
        "weight": 2,
        "dimensions": {"width": 23.17, "height": 14.43, "depth": 28.01},
        "availabilityStatus": "Low Stock",
        "minimumOrderQuantity": 24,
        "meta": {
            "createdAt": "2024-05-23T08:56:21.618Z",
            "updatedAt": "2024-05-23T08:56:21.618Z",
            "barcode": "9164035109868",
        },
        "images": ["https://cdn.example.com/products/mascara/1.png"],
        "thumbnail": "https://cdn.example.com/products/mascara/thumbnail.png",
    }
