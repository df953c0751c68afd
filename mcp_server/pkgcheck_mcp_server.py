"""
PkgCheck MCP Server (stdio-first).

Environment variables:
- PKGCHECK_API_BASE (default: http://127.0.0.1:8000)
- PKGCHECK_TIMEOUT_SECONDS (default: 30)
"""

from __future__ import annotations

import argparse
import inspect
import os
from typing import Any

import httpx
from mcp.server.fastmcp import FastMCP


API_BASE = os.getenv("PKGCHECK_API_BASE", "http://127.0.0.1:8000").rstrip("/")
TIMEOUT_SECONDS = float(os.getenv("PKGCHECK_TIMEOUT_SECONDS", "30"))
DEFAULT_PORT = int(os.getenv("PORT", "8000"))

mcp = FastMCP("PkgCheck MCP")


async def _api_request(
    method: str,
    path: str,
    *,
    params: dict[str, Any] | None = None,
    json_body: dict[str, Any] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> dict[str, Any]:
    url = f"{API_BASE}{path}"
    async with httpx.AsyncClient(timeout=TIMEOUT_SECONDS, transport=transport) as client:
        resp = await client.request(
            method=method.upper(),
            url=url,
            params=params,
            json=json_body,
        )
    try:
        payload = resp.json() if resp.content else {}
    except ValueError:
        payload = {"raw": resp.text}

    if resp.status_code >= 400:
        return {
            "ok": False,
            "status_code": resp.status_code,
            "error": payload.get("error", payload),
            "url": url,
        }

    return {
        "ok": True,
        "status_code": resp.status_code,
        "data": payload,
        "url": url,
    }


@mcp.tool()
async def health() -> dict[str, Any]:
    """Check PkgCheck API health and whether the affected dataset is loaded."""
    return await _api_request("GET", "/v1/health")


@mcp.tool()
async def dataset_info() -> dict[str, Any]:
    """Describe the loaded affected packages snapshot."""
    return await _api_request("GET", "/v1/dataset")


@mcp.tool()
async def lookup_package(package_name: str) -> dict[str, Any]:
    """List the affected versions recorded for one npm package name."""
    return await _api_request("GET", f"/v1/dataset/packages/{package_name}")


@mcp.tool()
async def check_manifest(manifest: str) -> dict[str, Any]:
    """
    Check package.json text (dependencies/devDependencies) against the
    affected packages snapshot.
    """
    return await _api_request("POST", "/v1/checks", json_body={"manifest": manifest})


@mcp.tool()
async def validate_manifest(manifest: str) -> dict[str, Any]:
    """Check that pasted text holds only dependencies and devDependencies."""
    return await _api_request(
        "POST",
        "/v1/manifests/validate",
        json_body={"manifest": manifest},
    )


@mcp.tool()
async def sample_manifest() -> dict[str, Any]:
    """Return a sample manifest fragment to try a check with."""
    return await _api_request("GET", "/v1/manifests/sample")


def main() -> None:
    parser = argparse.ArgumentParser(description="PkgCheck MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "streamable-http", "sse"],
        default=os.getenv("MCP_TRANSPORT", "stdio"),
        help="MCP transport to run",
    )
    parser.add_argument(
        "--host",
        default=os.getenv("MCP_HOST", "127.0.0.1"),
        help="Host for HTTP/SSE transports",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=int(os.getenv("MCP_PORT", str(DEFAULT_PORT))),
        help="Port for HTTP/SSE transports",
    )
    parser.add_argument(
        "--path",
        default=os.getenv("MCP_PATH", "/mcp"),
        help="Path for Streamable HTTP transport",
    )
    args = parser.parse_args()

    # Support multiple MCP SDK versions by passing only supported kwargs.
    run_sig = inspect.signature(mcp.run)
    kwargs: dict[str, Any] = {}
    if "transport" in run_sig.parameters:
        kwargs["transport"] = args.transport
    if args.transport != "stdio":
        if "host" in run_sig.parameters:
            kwargs["host"] = args.host
        if "port" in run_sig.parameters:
            kwargs["port"] = args.port
        if "path" in run_sig.parameters and args.transport == "streamable-http":
            kwargs["path"] = args.path

    mcp.run(**kwargs)


if __name__ == "__main__":
    main()
