"""Tests for Cognito token verification."""

import time

import jwt
import pytest
from conftest import make_id_token, make_token
from cryptography.hazmat.primitives.asymmetric import rsa

from web.api.auth import CognitoVerifier, current_user
from web.api.errors import AuthError


class TestVerifyAccessToken:
    def test_valid(self, verifier):
        claims = verifier.verify_access_token(make_token())
        assert claims["sub"] == "user-123"

    def test_id_token_rejected(self, verifier):
        with pytest.raises(jwt.InvalidTokenError):
            verifier.verify_access_token(make_token(token_use="id"))

    def test_wrong_client(self, verifier):
        with pytest.raises(jwt.InvalidTokenError):
            verifier.verify_access_token(make_token(client_id="other"))

    def test_wrong_issuer(self, verifier):
        with pytest.raises(jwt.InvalidIssuerError):
            verifier.verify_access_token(make_token(iss="https://evil.example.com"))

    def test_expired(self, verifier):
        with pytest.raises(jwt.ExpiredSignatureError):
            verifier.verify_access_token(make_token(exp=int(time.time()) - 60))

    def test_clock_skew_tolerated(self, verifier):
        verifier.verify_access_token(make_token(exp=int(time.time()) - 5))

    def test_wrong_signature(self, verifier):
        other = rsa.generate_private_key(public_exponent=65537, key_size=2048)
        with pytest.raises(jwt.InvalidSignatureError):
            verifier.verify_access_token(make_token(key=other))

    def test_not_configured(self):
        with pytest.raises(jwt.InvalidTokenError):
            CognitoVerifier(None, None).verify_access_token(make_token())


class TestVerifyIdToken:
    def test_valid(self, verifier):
        assert verifier.verify_id_token(make_id_token())["token_use"] == "id"

    def test_wrong_audience(self, verifier):
        with pytest.raises(jwt.InvalidAudienceError):
            verifier.verify_id_token(make_token(token_use="id", aud="someone-else"))


class TestCurrentUser:
    def test_missing_token(self, verifier):
        with pytest.raises(AuthError) as exc:
            current_user(authorization=None, x_id_token=None, verifier=verifier)
        assert exc.value.status_code == 401

    def test_not_bearer(self, verifier):
        with pytest.raises(AuthError) as exc:
            current_user(authorization="Basic abc", x_id_token=None, verifier=verifier)
        assert exc.value.status_code == 401

    def test_invalid_token(self, verifier):
        with pytest.raises(AuthError) as exc:
            current_user(authorization="Bearer garbage", x_id_token=None, verifier=verifier)
        assert exc.value.status_code == 403

    def test_valid_token(self, verifier):
        user = current_user(authorization=f"Bearer {make_token()}", x_id_token=None, verifier=verifier)
        assert user.sub == "user-123"
        assert user.email == "jane@student.example.edu"
        assert user.source == "cognito"

    def test_email_from_id_token(self, verifier):
        token = make_token(email=None)
        id_token = make_id_token(email="joe@example.edu")
        user = current_user(authorization=f"Bearer {token}", x_id_token=id_token, verifier=verifier)
        assert user.email == "joe@example.edu"

    def test_bad_id_token_ignored(self, verifier):
        token = make_token(email=None)
        user = current_user(authorization=f"Bearer {token}", x_id_token="garbage", verifier=verifier)
        assert user.email is None
