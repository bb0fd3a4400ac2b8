"""
Shared fixtures: an in-memory appliance served through httpx.MockTransport.
"""

import json
from typing import Dict, List, Optional, Union

import httpx
import pytest

from porticor_client import ApplianceConfig, PorticorClient
from porticor_client.signing import verify_credential_signature

API_KEY = "test-key-id"
API_SECRET = "test-secret"
API_URL = "https://appliance.test"
ITEM_PREFIX = "/api/protected_items/"


class FakeAppliance:
    """Minimal stand-in for the appliance's JSON API."""

    def __init__(self, time: Union[int, float, str] = 1704067200, credential: str = "temp-cred-1"):
        self.time = time
        self.credential = credential
        self.items: Dict[str, str] = {}
        self.requests: List[httpx.Request] = []
        self.time_error = ""
        self.down = False

    def count(self, path: str) -> int:
        return sum(1 for r in self.requests if r.url.path == path)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.down:
            raise httpx.ConnectError("appliance unreachable", request=request)

        path = request.url.path
        if path == "/api/creds/get_time":
            return httpx.Response(200, json={"time": self.time, "error": self.time_error})

        if path == "/api/creds/get_temporary_credential":
            params = request.url.params
            valid = verify_credential_signature(
                API_SECRET,
                params.get("api_key_id", ""),
                params.get("nonce", ""),
                params.get("time", ""),
                params.get("api_signature", ""),
            )
            if not valid:
                return httpx.Response(200, json={"credential": None, "error": "Invalid signature"})
            return httpx.Response(200, json={"credential": self.credential, "error": ""})

        if path.startswith(ITEM_PREFIX):
            name = path[len(ITEM_PREFIX):]
            if request.method == "GET":
                return self._get_item(name, request.url.params.get("api_cred"))
            if request.method == "PUT":
                return self._put_item(name, json.loads(request.content))

        return httpx.Response(404, text="not found")

    def _get_item(self, name: str, api_cred: Optional[str]) -> httpx.Response:
        if api_cred != self.credential:
            return httpx.Response(200, json={"item": None, "error": "Invalid credential"})
        if name not in self.items:
            return httpx.Response(200, json={"item": None, "error": "Item not found"})
        return httpx.Response(200, json={"item": self.items[name], "error": ""})

    def _put_item(self, name: str, body: dict) -> httpx.Response:
        if body.get("api_cred") != self.credential:
            return httpx.Response(200, json={"error": "Invalid credential", "error_code": "AuthFailed"})
        if name in self.items:
            return httpx.Response(
                200,
                json={"item": None, "error": "Item already exists", "error_code": "CreateDuplicate"},
            )
        self.items[name] = f"-----BEGIN {body['algorithm']} KEY {name}-----"
        return httpx.Response(200, json={"item": self.items[name], "error": ""})


@pytest.fixture
def appliance():
    return FakeAppliance()


@pytest.fixture
def config(tmp_path):
    return ApplianceConfig(
        api_key=API_KEY,
        api_secret=API_SECRET,
        api_url=API_URL,
        storage_path=str(tmp_path),
        max_attempts=1,
        credential_ttl_seconds=None,
        cache_failed_credentials=False,
    )


@pytest.fixture
def client(config, appliance):
    with PorticorClient(config, transport=httpx.MockTransport(appliance.handler)) as c:
        yield c
