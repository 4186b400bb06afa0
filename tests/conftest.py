"""Shared fixtures: dataset files, fake remote client, clock, in-memory DB, signed tokens."""

import json
import time
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import duckdb
import jwt
import pytest
from cryptography.hazmat.primitives.asymmetric import rsa

from app.models.university import University
from app.repositories.common import DatasetCache
from app.repositories.db import init_tables
from app.repositories.university import DatasetRepository
from web.api.auth import CognitoVerifier

SAMPLE_DATASET = [
    {"name": "University of Manchester", "country": "United Kingdom", "domains": ["manchester.ac.uk"]},
    {"name": "Sorbonne University", "country": "France", "domains": ["sorbonne-universite.fr"]},
    {"name": "Universite Paris Cite", "country": "France", "domains": ["u-paris.fr"]},
    {"name": "Trailing Space College", "country": "france ", "domains": ["tsc.fr"]},
    {"name": "Example University", "country": "United States", "domains": ["example.edu"]},
]

COGNITO_REGION = "eu-west-1"
COGNITO_POOL = "eu-west-1_TESTPOOL"
COGNITO_CLIENT = "test-client-id"
COGNITO_ISSUER = f"https://cognito-idp.{COGNITO_REGION}.amazonaws.com/{COGNITO_POOL}"

PRIVATE_KEY = rsa.generate_private_key(public_exponent=65537, key_size=2048)


def make_records(*domains: str) -> list[University]:
    return [
        University(id=100000 + i, name=f"University {d}", country="Testland", domain=d)
        for i, d in enumerate(domains)
    ]


class FakeClock:
    def __init__(self):
        self.now = datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: int) -> None:
        self.now += timedelta(seconds=seconds)


class FakeClient:
    """Stands in for UniversitiesClient."""

    def __init__(self, payload=None, error: Exception | None = None):
        self.payload = payload
        self.error = error
        self.calls = 0

    async def __aenter__(self):
        return self

    async def __aexit__(self, *_):
        return None

    async def search(self):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.payload


class FakeJwks:
    """Stands in for PyJWKClient."""

    def __init__(self, key):
        self.key = key

    def get_signing_key_from_jwt(self, token):
        return SimpleNamespace(key=self.key)


def write_dataset(path, data) -> str:
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


def make_token(key=PRIVATE_KEY, **overrides) -> str:
    """Signed Cognito-style access token; None values drop a claim."""
    now = int(time.time())
    claims = {
        "sub": "user-123",
        "iss": COGNITO_ISSUER,
        "exp": now + 3600,
        "iat": now,
        "token_use": "access",
        "client_id": COGNITO_CLIENT,
        "email": "jane@student.example.edu",
    }
    claims.update(overrides)
    claims = {k: v for k, v in claims.items() if v is not None}
    return jwt.encode(claims, key, algorithm="RS256", headers={"kid": "test"})


def make_id_token(**overrides) -> str:
    return make_token(token_use="id", aud=COGNITO_CLIENT, client_id=None, **overrides)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def dataset_file(tmp_path):
    return write_dataset(tmp_path / "world_universities.json", SAMPLE_DATASET)


@pytest.fixture
def dataset_repo(dataset_file, clock):
    return DatasetRepository(cache=DatasetCache(ttl=3600), path=dataset_file, candidates=[], clock=clock)


@pytest.fixture
def db_conn():
    conn = duckdb.connect(":memory:")
    init_tables(conn)
    yield conn
    conn.close()


@pytest.fixture
def verifier():
    return CognitoVerifier(
        COGNITO_REGION, COGNITO_POOL, COGNITO_CLIENT, jwks_client=FakeJwks(PRIVATE_KEY.public_key())
    )
