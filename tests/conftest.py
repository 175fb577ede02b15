"""
Pytest configuration and fixtures for unit and integration tests.
"""

import os
from datetime import datetime, timezone
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from gymdesk.db.database import Base, get_db
from gymdesk.domain.enums import Role

# Import models to register with Base.metadata
from gymdesk.models import (  # noqa: F401
    Exercise,
    Profile,
    User,
    UserWorkout,
    Workout,
    WorkoutExercise,
)
from gymdesk.utils.jwt import create_access_token
from gymdesk.utils.password import hash_password


# Use test database URL from env, or default to SQLite in-memory
TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite:///:memory:")


@pytest.fixture(scope="function")
def test_engine():
    """Create a test database engine."""
    if TEST_DATABASE_URL.startswith("sqlite"):
        # SQLite in-memory for fast tests
        engine = create_engine(
            TEST_DATABASE_URL,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
            echo=False,
        )
    else:
        # Postgres for more realistic integration tests
        engine = create_engine(TEST_DATABASE_URL, echo=False)

    # Create all tables
    Base.metadata.create_all(bind=engine)

    yield engine

    # Drop all tables after test
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def test_db(test_engine):
    """Create a test database session."""
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)
    session = TestSessionLocal()

    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def override_get_db(test_db):
    """Override get_db dependency for FastAPI."""

    def _get_db():
        try:
            yield test_db
        finally:
            pass  # Don't close, we'll handle it in fixture

    return _get_db


@pytest.fixture(scope="function")
def client(override_get_db):
    """TestClient bound to the test database. Redirects are not followed."""
    from gymdesk.main import app

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app, follow_redirects=False)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def make_account(test_db):
    """
    Factory creating a user plus (optionally) its profile.

    Returns the (user, profile) pair; profile is None when with_profile=False.
    """

    def _make_account(
        email,
        role=Role.CUSTOMER,
        full_name=None,
        password="password123",
        with_profile=True,
        created_at=None,
    ):
        user = User(email=email, password_hash=hash_password(password))
        test_db.add(user)
        test_db.commit()
        test_db.refresh(user)

        profile = None
        if with_profile:
            profile = Profile(
                id=user.id,
                email=email,
                full_name=full_name,
                role=role.value,
            )
            if created_at is not None:
                profile.created_at = created_at
            test_db.add(profile)
            test_db.commit()
            test_db.refresh(profile)

        return user, profile

    return _make_account


@pytest.fixture
def admin_account(make_account):
    return make_account("coach@example.com", role=Role.ADMIN, full_name="Coach")


@pytest.fixture
def member_account(make_account):
    return make_account("member@example.com", full_name="Mia Member")


def auth_headers(user):
    """Authorization header for a user."""
    return {"Authorization": f"Bearer {create_access_token(user.id)}"}


@pytest.fixture
def admin_headers(admin_account):
    return auth_headers(admin_account[0])


@pytest.fixture
def member_headers(member_account):
    return auth_headers(member_account[0])


@pytest.fixture
def make_exercise(test_db):
    """Factory for catalog exercises."""

    def _make_exercise(name, difficulty_level="beginner", muscle_groups=None):
        exercise = Exercise(
            name=name,
            difficulty_level=difficulty_level,
            muscle_groups=muscle_groups or [],
        )
        test_db.add(exercise)
        test_db.commit()
        test_db.refresh(exercise)
        return exercise

    return _make_exercise


@pytest.fixture
def make_workout(test_db):
    """Factory for a workout with exercise slots in the given order."""

    def _make_workout(name, exercises=(), created_at=None):
        workout = Workout(name=name)
        if created_at is not None:
            workout.created_at = created_at
        test_db.add(workout)
        test_db.commit()
        for index, exercise in enumerate(exercises):
            test_db.add(
                WorkoutExercise(
                    workout_id=workout.id,
                    exercise_id=exercise.id,
                    sets=3,
                    reps=10,
                    order_index=index,
                )
            )
        test_db.commit()
        test_db.refresh(workout)
        return workout

    return _make_workout


@pytest.fixture
def make_assignment(test_db):
    """Factory for assignment rows with explicit timestamps."""

    def _make_assignment(member, workout, assigned_at=None, completed_at=None, notes=None):
        assignment = UserWorkout(
            user_id=member.id,
            workout_id=workout.id,
            assigned_at=assigned_at or datetime.now(timezone.utc),
            completed_at=completed_at,
            notes=notes,
        )
        test_db.add(assignment)
        test_db.commit()
        test_db.refresh(assignment)
        return assignment

    return _make_assignment


@pytest.fixture
def headers_for():
    """Build the Authorization header for any user."""
    return auth_headers
