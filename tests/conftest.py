"""
Pytest configuration and fixtures for the Heroes backend.
Only the Azure storage backend is faked; service and routes run for real.
"""

import json
from types import SimpleNamespace
from typing import Callable, Dict, List, Optional, Tuple

import azure.functions as func
import pytest

from heroes.service import HeroService
from shared.errors import BlobExistsError, BlobNotFoundError


class InMemoryGateway:
    """StorageGateway keeping blobs in insertion order, recording every mutation."""

    def __init__(self, blobs: Optional[Dict[str, bytes]] = None):
        self.blobs: Dict[str, bytes] = dict(blobs or {})
        self.writes: List[Tuple[str, bytes, bool]] = []
        self.deletes: List[str] = []

    def list_keys(self):
        return [SimpleNamespace(name=key) for key in self.blobs]

    def read_bytes(self, key: str) -> bytes:
        if key not in self.blobs:
            raise BlobNotFoundError(key)
        return self.blobs[key]

    def write_bytes(self, key: str, payload: bytes, overwrite: bool) -> None:
        if not overwrite and key in self.blobs:
            raise BlobExistsError(key)
        self.writes.append((key, payload, overwrite))
        self.blobs[key] = payload

    def delete_key(self, key: str) -> None:
        if key not in self.blobs:
            raise BlobNotFoundError(key)
        self.deletes.append(key)
        del self.blobs[key]

    def put_hero(self, hero_id: int, name: str, key: Optional[str] = None) -> None:
        """Seed a stored hero without recording a write."""
        self.blobs[key or f"{hero_id}.json"] = json.dumps({"id": hero_id, "name": name}).encode("utf-8")

    def stored(self) -> List[dict]:
        return [json.loads(payload) for payload in self.blobs.values()]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start every test without storage credentials or strict status codes."""
    for name in (
        "PRIMARY_STORAGE_ACCOUNT_NAME",
        "PRIMARY_STORAGE_ACCOUNT_KEY",
        "HEROES_STRICT_STATUS_CODES",
        "AZURE_FUNCTIONS_ENVIRONMENT",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def gateway() -> InMemoryGateway:
    return InMemoryGateway()


@pytest.fixture
def service(gateway: InMemoryGateway) -> HeroService:
    return HeroService(gateway=gateway)


@pytest.fixture
def make_request() -> Callable[..., func.HttpRequest]:
    """Build an azure.functions.HttpRequest for calling handlers directly."""

    def _make(
        method: str,
        route: str = "heroes",
        body=None,
        params: Optional[Dict[str, str]] = None,
        route_params: Optional[Dict[str, str]] = None,
    ) -> func.HttpRequest:
        if body is None:
            payload = b""
        elif isinstance(body, (bytes, str)):
            payload = body.encode("utf-8") if isinstance(body, str) else body
        else:
            payload = json.dumps(body).encode("utf-8")
        return func.HttpRequest(
            method=method,
            url=f"http://localhost/api/{route}",
            headers={"Content-Type": "application/json"},
            params=params or {},
            route_params=route_params or {},
            body=payload,
        )

    return _make


@pytest.fixture(scope="session")
def handlers() -> Dict[str, Callable[[func.HttpRequest], func.HttpResponse]]:
    """User functions registered on the FunctionApp, keyed by function name."""
    from function_app import app

    return {fn.get_function_name(): fn.get_user_function() for fn in app.get_functions()}


@pytest.fixture
def api(handlers, service: HeroService, monkeypatch: pytest.MonkeyPatch):
    """Route handlers wired to the in-memory backed service."""
    monkeypatch.setattr("heroes.routes.HeroService", lambda: service)
    return handlers
