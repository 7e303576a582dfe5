"""
Public delivery zone listing: GET /api/zones.
"""

from unittest.mock import MagicMock

from fastapi.testclient import TestClient
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from app import create_app
from app.database.connection import get_session
from app.models.company.delivery_zone import DeliveryZone

SQUARE = [
    {"lat": 36.85, "lng": 42.95},
    {"lat": 36.85, "lng": 43.05},
    {"lat": 36.80, "lng": 43.05},
    {"lat": 36.80, "lng": 42.95},
]


def add_zone(session: Session, name: str, is_active: bool = True, **kwargs) -> None:
    session.add(
        DeliveryZone(
            name=name,
            color=kwargs.pop("color", "#3388ff"),
            coordinates=kwargs.pop("coordinates", SQUARE),
            is_active=is_active,
            **kwargs,
        )
    )
    session.commit()


def test_zones_empty(client: TestClient) -> None:
    r = client.get("/api/zones")
    assert r.status_code == 200
    assert r.json() == {"zones": []}


def test_zones_only_active(client: TestClient, session: Session) -> None:
    add_zone(session, "Downtown")
    add_zone(session, "Industrial", is_active=False)
    add_zone(session, "Airport")

    r = client.get("/api/zones")
    assert r.status_code == 200
    names = [zone["name"] for zone in r.json()["zones"]]
    assert "Industrial" not in names
    assert sorted(names) == ["Airport", "Downtown"]


def test_zones_sorted_by_name(client: TestClient, session: Session) -> None:
    for name in ["Zakho", "Duhok Center", "Malta", "Azadi"]:
        add_zone(session, name)

    r = client.get("/api/zones")
    names = [zone["name"] for zone in r.json()["zones"]]
    assert names == ["Azadi", "Duhok Center", "Malta", "Zakho"]


def test_zone_fields_projection(client: TestClient, session: Session) -> None:
    add_zone(
        session,
        "Downtown",
        color="#ff0000",
        delivery_fee=2500.0,
        description="City center",
    )

    r = client.get("/api/zones")
    zone = r.json()["zones"][0]
    assert set(zone.keys()) == {"id", "name", "color", "coordinates", "deliveryFee", "description"}
    assert zone["name"] == "Downtown"
    assert zone["color"] == "#ff0000"
    assert zone["coordinates"] == SQUARE
    assert zone["deliveryFee"] == 2500.0
    assert zone["description"] == "City center"
    assert isinstance(zone["id"], str) and zone["id"]


def test_zone_optional_fields_are_null(client: TestClient, session: Session) -> None:
    add_zone(session, "Outskirts")

    zone = client.get("/api/zones").json()["zones"][0]
    assert zone["deliveryFee"] is None
    assert zone["description"] is None
    assert "isActive" not in zone
    assert "is_active" not in zone


def test_zones_store_failure_returns_500() -> None:
    broken = MagicMock(spec=Session)
    broken.exec.side_effect = SQLAlchemyError("connection refused")

    application = create_app()
    application.dependency_overrides[get_session] = lambda: broken
    client = TestClient(application)

    r = client.get("/api/zones")
    assert r.status_code == 500
    assert r.json() == {"error": "Failed to fetch delivery zones"}
