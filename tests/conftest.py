"""
Shared test fixtures for the post translation sync service.

Provides: fake language model, bearer-token factory
"""

import time

import pytest
from jose import jwt

from tests.fakes import UppercaseLanguageModel

JWT_SECRET = "test-shared-secret"


@pytest.fixture
def uppercase_llm() -> UppercaseLanguageModel:
    return UppercaseLanguageModel()


@pytest.fixture
def jwt_secret() -> str:
    return JWT_SECRET


@pytest.fixture
def make_token():
    """Return a factory producing signed HS256 tokens."""

    def _make(secret: str = JWT_SECRET, expires_in: int = 300, **claims) -> str:
        payload = {"sub": "source-site", "exp": int(time.time()) + expires_in}
        payload.update(claims)
        return jwt.encode(payload, secret, algorithm="HS256")

    return _make
