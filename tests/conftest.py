"""Pytest configuration and fixtures."""

from typing import Any, Dict, List, Optional
from unittest.mock import MagicMock

import pytest
import requests

from gridcore.attribute_cache import AttributeCache
from gridcore.data_models import Backdrop, BackdropHex
from gridcore.grid_model import GridModel
from gridcore.remote_cache import RemoteDataCache
from gridcore.session_store import SessionStore

BASE_URL = "https://catalog.test"


# ============================================================================
# HTTP helpers
# ============================================================================

def make_response(payload: Any = None, status_code: int = 200, bad_json: bool = False) -> MagicMock:
    """Build a stand-in for requests.Response."""
    response = MagicMock()
    response.ok = 200 <= status_code < 400
    response.status_code = status_code
    response.reason = "OK" if response.ok else "Server Error"
    if bad_json:
        response.json.side_effect = ValueError("Expecting value: line 1 column 1")
    else:
        response.json.return_value = payload
    return response


class CatalogRoutes:
    """``session.get`` side effect that serves payloads by endpoint path."""

    def __init__(self, routes: Optional[Dict[str, Any]] = None) -> None:
        self.routes: Dict[str, Any] = dict(routes or {})
        self.calls: List[str] = []
        self.headers: List[Dict[str, str]] = []

    def __call__(self, url: str, headers: Optional[Dict[str, str]] = None, timeout: Any = None) -> MagicMock:
        endpoint = url[len(BASE_URL):]
        self.calls.append(endpoint)
        self.headers.append(dict(headers or {}))
        outcome = self.routes.get(endpoint)
        if outcome is None:
            return make_response(status_code=404)
        if isinstance(outcome, Exception):
            raise outcome
        return make_response(outcome)

    def count(self, endpoint: str) -> int:
        return self.calls.count(endpoint)


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def routes() -> CatalogRoutes:
    return CatalogRoutes({
        "/gifts": ["Plush Pepe", "Durov's Cap", "Santa Hat"],
        "/backdrops": [
            {"name": "Onyx Black", "hex": {"edgeColor": "#111111", "centerColor": "#444444"}},
            {"name": "Sky Blue", "hex": {"edgeColor": "#0a3d62", "centerColor": "#82ccdd"}},
        ],
        "/models/plush-pepe?sorted": [
            {"name": "Amalgam", "rarityPermille": 5},
            {"name": "Kung Fu Pepe", "rarityPermille": 15},
        ],
        "/patterns/plush-pepe?sorted": [
            {"name": "Stars", "rarityPermille": 10},
            {"name": "Hearts", "rarityPermille": 20},
        ],
        "/models/santa-hat?sorted": [{"name": "Frosty", "rarityPermille": 25}],
        "/patterns/santa-hat?sorted": [{"name": "Snowflakes", "rarityPermille": 30}],
    })


@pytest.fixture
def http_session(routes) -> MagicMock:
    session = MagicMock(spec=requests.Session)
    session.get.side_effect = routes
    return session


@pytest.fixture
def store() -> SessionStore:
    return SessionStore()


@pytest.fixture
def remote(store, http_session) -> RemoteDataCache:
    return RemoteDataCache(store, base_url=BASE_URL, backoff_seconds=0, session=http_session)


@pytest.fixture
def attributes(remote) -> AttributeCache:
    return AttributeCache(remote)


@pytest.fixture
def grid() -> GridModel:
    return GridModel()


@pytest.fixture
def onyx() -> Backdrop:
    return Backdrop(name="Onyx Black", hex=BackdropHex(edge_color="#111111", center_color="#444444"))
