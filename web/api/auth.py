"""Cognito bearer-token authentication.

Access tokens are verified against the user pool's JWKS (RS256 signature,
issuer, expiry with 10 s leeway, `token_use == "access"`, and `client_id`
when a client id is configured). When the access token carries no email, a
verified ID token from the `X-Id-Token` header may supply it.
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Any

import jwt
from fastapi import Depends, Header
from jwt import PyJWKClient
from loguru import logger

from settings import COGNITO_CLIENT_ID, COGNITO_REGION, COGNITO_USER_POOL_ID
from web.api.errors import AuthError

CLOCK_TOLERANCE = 10


@dataclass
class AuthenticatedUser:
    """Identity extracted from verified Cognito tokens."""

    sub: str
    email: str | None = None
    scope: str | None = None
    client_id: str | None = None
    source: str = "cognito"


class CognitoVerifier:
    """Verifies Cognito access and ID tokens."""

    def __init__(
        self,
        region: str | None,
        user_pool_id: str | None,
        client_id: str | None = None,
        jwks_client: PyJWKClient | None = None,
    ):
        self._region = region
        self._user_pool_id = user_pool_id
        self._client_id = client_id
        self._jwks_client = jwks_client

    @property
    def issuer(self) -> str:
        if not self._region or not self._user_pool_id:
            raise jwt.InvalidTokenError("Missing COGNITO_REGION or COGNITO_USER_POOL_ID")
        return f"https://cognito-idp.{self._region}.amazonaws.com/{self._user_pool_id}"

    def _signing_key(self, token: str) -> Any:
        if self._jwks_client is None:
            self._jwks_client = PyJWKClient(f"{self.issuer}/.well-known/jwks.json")
        return self._jwks_client.get_signing_key_from_jwt(token).key

    def verify_access_token(self, token: str) -> dict:
        """Decoded claims of a valid access token; raises jwt.PyJWTError otherwise."""
        claims = jwt.decode(
            token,
            self._signing_key(token),
            algorithms=["RS256"],
            issuer=self.issuer,
            leeway=CLOCK_TOLERANCE,
            options={"require": ["exp", "iss", "sub"], "verify_aud": False},
        )
        if claims.get("token_use") != "access":
            raise jwt.InvalidTokenError("Invalid token_use")
        if self._client_id and claims.get("client_id") != self._client_id:
            raise jwt.InvalidTokenError("Invalid client_id")
        return claims

    def verify_id_token(self, token: str) -> dict:
        """Decoded claims of a valid ID token; audience must be the client id."""
        claims = jwt.decode(
            token,
            self._signing_key(token),
            algorithms=["RS256"],
            issuer=self.issuer,
            audience=self._client_id,
            leeway=CLOCK_TOLERANCE,
            options={"verify_aud": self._client_id is not None},
        )
        if claims.get("token_use") != "id":
            raise jwt.InvalidTokenError("Invalid token_use for ID token")
        return claims


@lru_cache(maxsize=1)
def get_verifier() -> CognitoVerifier:
    """Process-wide verifier; the JWKS client caches signing keys."""
    return CognitoVerifier(COGNITO_REGION, COGNITO_USER_POOL_ID, COGNITO_CLIENT_ID)


def _bearer_token(authorization: str | None) -> str | None:
    if authorization and authorization.startswith("Bearer "):
        return authorization[7:].strip() or None
    return None


def current_user(
    authorization: str | None = Header(default=None),
    x_id_token: str | None = Header(default=None),
    verifier: CognitoVerifier = Depends(get_verifier),
) -> AuthenticatedUser:
    """FastAPI dependency: the caller's identity from the bearer token."""
    token = _bearer_token(authorization)
    if token is None:
        raise AuthError("Access token required", status_code=401)

    try:
        claims = verifier.verify_access_token(token)
    except jwt.PyJWTError as e:
        logger.error("[Cognito] Access token verification failed: {}", e)
        raise AuthError("Invalid or expired token", status_code=403) from e

    user = AuthenticatedUser(
        sub=claims["sub"],
        email=claims.get("email"),
        scope=claims.get("scope"),
        client_id=claims.get("client_id"),
    )

    if not user.email and x_id_token:
        try:
            user.email = verifier.verify_id_token(x_id_token).get("email")
        except jwt.PyJWTError as e:
            logger.warning("[Cognito] ID token enrichment failed: {}", e)

    return user
