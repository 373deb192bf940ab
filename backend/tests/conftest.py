"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest
from datetime import datetime, timezone, timedelta
from unittest.mock import MagicMock, patch
import jwt  # PyJWT

from api.dependencies import get_auth_service, reset_container
from modules.auth.service import AuthService
from modules.users.models import Profile
from modules.users.repository import ProfileRepository
from shared.models import UserRole


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"

WORKER_ID = "worker-123"
ADMIN_ID = "admin-456"


def create_test_token(
    user_id: str = WORKER_ID,
    email: str = "worker@example.com",
    expired: bool = False,
    secret: str = TEST_JWT_SECRET,
    audience: str = "authenticated",
) -> str:
    """
    Create a test JWT token for authentication.

    Args:
        user_id: User ID to include in the token
        email: Email to include in the token
        expired: If True, creates an expired token
        secret: Signing secret
        audience: Token audience

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    exp = now - timedelta(hours=1) if expired else now + timedelta(hours=1)

    payload = {
        "sub": user_id,
        "email": email,
        "email_confirmed_at": now.isoformat(),
        "aud": audience,
        "role": "authenticated",
        "exp": int(exp.timestamp()),
        "iat": int(now.timestamp()),
    }
    return jwt.encode(payload, secret, algorithm="HS256")


def make_profile(
    user_id: str = WORKER_ID,
    email: str = "worker@example.com",
    name: str = "Wendy Worker",
    role: UserRole = UserRole.WORKER,
    is_blocked: bool = False,
    phone_number: str | None = None,
    created_at: datetime | None = None,
) -> Profile:
    """Helper to build a profile."""
    return Profile(
        id=user_id,
        email=email,
        name=name,
        role=role,
        is_blocked=is_blocked,
        phone_number=phone_number,
        created_at=created_at or datetime(2025, 6, 1, 9, 0, tzinfo=timezone.utc),
    )


@pytest.fixture(autouse=True)
def reset_service_container():
    """Reset the service container before and after each test."""
    reset_container()
    yield
    reset_container()


@pytest.fixture
def worker_profile() -> Profile:
    return make_profile()


@pytest.fixture
def admin_profile() -> Profile:
    return make_profile(
        user_id=ADMIN_ID,
        email="admin@example.com",
        name="Ada Admin",
        role=UserRole.ADMIN,
    )


@pytest.fixture
def profile_store(worker_profile, admin_profile) -> dict[str, Profile]:
    """Profiles known to the mocked repository, keyed by user ID."""
    return {worker_profile.id: worker_profile, admin_profile.id: admin_profile}


@pytest.fixture
def profile_repository(profile_store) -> MagicMock:
    """ProfileRepository mock backed by ``profile_store``."""
    repo = MagicMock(spec=ProfileRepository)
    repo.get_by_id.side_effect = profile_store.get
    return repo


@pytest.fixture
def auth_service(profile_repository) -> AuthService:
    """Auth service using the test secret and the mocked profiles."""
    with patch("modules.auth.service.get_settings") as mock_settings:
        mock_settings.return_value.supabase_jwt_secret = TEST_JWT_SECRET
        yield AuthService(profile_repository)


@pytest.fixture
def app(auth_service):
    """Create a fresh app for each test, authenticating against mocks."""
    from api.app import create_app

    application = create_app()
    application.dependency_overrides[get_auth_service] = lambda: auth_service
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def worker_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {create_test_token()}"}


@pytest.fixture
def admin_headers() -> dict[str, str]:
    token = create_test_token(user_id=ADMIN_ID, email="admin@example.com")
    return {"Authorization": f"Bearer {token}"}
