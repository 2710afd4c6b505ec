"""
Pytest configuration and fixtures.

Provides shared fixtures for testing including:
- Fast password hashers (minimum bcrypt cost)
- Signature and webhook helpers
- A FastAPI test application wired with the toolkit's dependencies
"""

from collections.abc import Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from credcore.api import Passwords, VerifiedBody, register_error_handlers
from credcore.api.deps import get_password_service, get_webhook_verifier
from credcore.application.password_service import PasswordService
from credcore.application.webhooks import WebhookVerifier
from credcore.core.config import get_settings
from credcore.core.errors import InvalidArgumentError
from credcore.domain.services import SensitiveDataMasker
from credcore.infrastructure.crypto.hashing import PasswordHasher
from credcore.infrastructure.crypto.signatures import SignatureService

WEBHOOK_SECRET = b"whsec_test_5f1c0d9e2b7a4c8e"


@pytest.fixture(autouse=True)
def clear_cached_settings() -> Iterator[None]:
    """Reset cached settings and dependencies around each test."""
    get_settings.cache_clear()
    get_webhook_verifier.cache_clear()
    get_password_service.cache_clear()
    yield
    get_settings.cache_clear()
    get_webhook_verifier.cache_clear()
    get_password_service.cache_clear()


@pytest.fixture
def fast_hasher() -> PasswordHasher:
    """Create hasher using the cheapest bcrypt cost."""
    return PasswordHasher(default_work_factor=4, min_work_factor=4, max_work_factor=6)


@pytest.fixture
def signer() -> SignatureService:
    """Create signature service instance."""
    return SignatureService()


@pytest.fixture
def masker() -> SensitiveDataMasker:
    """Create masker instance."""
    return SensitiveDataMasker()


@pytest.fixture
def webhook_secret() -> bytes:
    """Shared webhook secret for tests."""
    return WEBHOOK_SECRET


@pytest.fixture
def webhook_verifier() -> WebhookVerifier:
    """Create webhook verifier with the test secret."""
    return WebhookVerifier(secret=WEBHOOK_SECRET)


@pytest.fixture
def password_service(fast_hasher: PasswordHasher) -> PasswordService:
    """Create password service backed by the fast hasher."""
    return PasswordService(hasher=fast_hasher)


@pytest.fixture
def test_app(
    webhook_verifier: WebhookVerifier,
    password_service: PasswordService,
) -> FastAPI:
    """Create a small application consuming the toolkit."""
    app = FastAPI()
    register_error_handlers(app)

    @app.post("/webhooks/payment")
    async def payment_webhook(body: VerifiedBody) -> dict:
        return {"status": "success", "received": len(body)}

    @app.post("/register")
    async def register(payload: dict, passwords: Passwords) -> dict:
        password_hash = await passwords.register(payload.get("password", ""))
        return {"status": "success", "work_factor": int(password_hash.split("$")[2])}

    @app.get("/bad-argument")
    async def bad_argument() -> dict:
        raise InvalidArgumentError("windowMs must be positive")

    app.dependency_overrides[get_webhook_verifier] = lambda: webhook_verifier
    app.dependency_overrides[get_password_service] = lambda: password_service
    return app


@pytest.fixture
def test_client(test_app: FastAPI) -> Iterator[TestClient]:
    """Create test client for the toolkit application."""
    with TestClient(test_app) as client:
        yield client
