"""
Infrastructure adapter: HS256 shared-secret JWT → ITokenValidator.

The source site signs its webhook calls (and operators sign settings calls)
with a secret shared with this service. Signature and expiry are verified;
the audience claim is checked only when one is configured.
"""

from typing import Optional

from jose import JWTError, jwt

from src.domain.ports.token_validator_port import ITokenValidator


class SharedSecretTokenValidator(ITokenValidator):
    """Validates HS256 JWTs signed with a shared secret."""

    ALGORITHM = "HS256"

    def __init__(self, secret: str, audience: Optional[str] = None) -> None:
        if not secret:
            raise ValueError("A non-empty JWT secret is required.")
        self._secret = secret
        self._audience = audience

    def validate(self, token: str) -> dict:
        """Decode and validate a bearer token.

        Raises:
            ValueError: on any validation failure (bad signature, expiry,
                        wrong audience).
        """
        try:
            return jwt.decode(
                token,
                self._secret,
                algorithms=[self.ALGORITHM],
                audience=self._audience,
                options={"verify_aud": self._audience is not None},
            )
        except JWTError as exc:
            raise ValueError(f"Token validation failed: {exc}") from exc
