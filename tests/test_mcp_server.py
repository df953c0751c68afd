import asyncio

import httpx
import pytest

import pkgcheck_mcp_server as server


def test_api_request_success():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/v1/dataset/packages/@asyncapi/cli"
        return httpx.Response(
            200,
            json={"package_name": "@asyncapi/cli", "affected_versions": ["4.1.3"]},
        )

    result = asyncio.run(
        server._api_request(
            "get",
            "/v1/dataset/packages/@asyncapi/cli",
            transport=httpx.MockTransport(handler),
        )
    )

    assert result["ok"] is True
    assert result["data"]["affected_versions"] == ["4.1.3"]


def test_api_request_error_envelope():
    transport = httpx.MockTransport(
        lambda request: httpx.Response(
            400,
            json={"error": {"code": "MALFORMED_MANIFEST", "message": "Invalid JSON format."}},
        )
    )

    result = asyncio.run(
        server._api_request(
            "POST",
            "/v1/checks",
            json_body={"manifest": "{oops"},
            transport=transport,
        )
    )

    assert result["ok"] is False
    assert result["status_code"] == 400
    assert result["error"]["code"] == "MALFORMED_MANIFEST"


@pytest.fixture
def api_calls(monkeypatch):
    calls = []

    async def fake_api_request(method, path, *, params=None, json_body=None, transport=None):
        calls.append((method, path, json_body))
        return {"ok": True, "status_code": 200, "data": {}, "url": path}

    monkeypatch.setattr(server, "_api_request", fake_api_request)
    return calls


@pytest.mark.parametrize(
    "tool,args,expected",
    [
        (server.health, (), ("GET", "/v1/health", None)),
        (server.dataset_info, (), ("GET", "/v1/dataset", None)),
        (
            server.lookup_package,
            ("@asyncapi/cli",),
            ("GET", "/v1/dataset/packages/@asyncapi/cli", None),
        ),
        (
            server.check_manifest,
            ('{"dependencies": {}}',),
            ("POST", "/v1/checks", {"manifest": '{"dependencies": {}}'}),
        ),
        (
            server.validate_manifest,
            ("{}",),
            ("POST", "/v1/manifests/validate", {"manifest": "{}"}),
        ),
        (server.sample_manifest, (), ("GET", "/v1/manifests/sample", None)),
    ],
)
def test_tools_call_matching_endpoint(api_calls, tool, args, expected):
    result = asyncio.run(tool(*args))

    assert result["ok"] is True
    assert api_calls == [expected]
