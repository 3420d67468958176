"""
Shared test fixtures: in-memory database, API client and seed data.
"""
import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

from datetime import date, datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import wayfarer.models  # noqa: F401
from wayfarer.db.base import Base
from wayfarer.db.session import get_db
from wayfarer.main import app
from wayfarer.models import User, Trip, TripMember, MemberRole, DailyItinerary, Activity


@pytest.fixture
def engine():
    """Fresh in-memory SQLite database with foreign keys enforced."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine, "connect")
    def enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    """API client whose requests run against the test database."""
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def _make_user(db, username):
    user = User(
        email=f"{username}@example.com",
        username=username,
        password_hash="not-a-real-hash"
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def alice(db):
    return _make_user(db, "alice")


@pytest.fixture
def bob(db):
    return _make_user(db, "bob")


@pytest.fixture
def carol(db):
    return _make_user(db, "carol")


@pytest.fixture
def trip(db, alice, bob, carol):
    """Trip owned by alice with bob and carol as members."""
    trip = Trip(
        user_id=alice.id,
        title="Lisbon Long Weekend",
        destination="Lisbon",
        start_date=datetime(2024, 1, 1),
        end_date=datetime(2024, 1, 5),
    )
    db.add(trip)
    db.flush()
    db.add(TripMember(trip_id=trip.id, user_id=alice.id, role=MemberRole.OWNER))
    db.add(TripMember(trip_id=trip.id, user_id=bob.id))
    db.add(TripMember(trip_id=trip.id, user_id=carol.id))
    db.commit()
    db.refresh(trip)
    return trip


@pytest.fixture
def itinerary(db, trip):
    itinerary = DailyItinerary(trip_id=trip.id, date=date(2024, 1, 1), title="Day 1")
    db.add(itinerary)
    db.commit()
    db.refresh(itinerary)
    return itinerary


@pytest.fixture
def activity_ids(db, itinerary):
    """Five activities titled "Activity 1".."Activity 5" at indices 0-4."""
    ids = []
    for index in range(5):
        activity = Activity(
            daily_itinerary_id=itinerary.id,
            title=f"Activity {index + 1}",
            location_name="Test Location",
            order_index=index,
        )
        db.add(activity)
        db.flush()
        ids.append(activity.id)
    db.commit()
    return ids
