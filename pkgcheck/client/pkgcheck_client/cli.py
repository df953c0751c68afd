import asyncio
import sys
from pathlib import Path

import httpx

DEFAULT_SERVER = "http://localhost:8000"


def format_report(report: dict) -> str:
    total = report["totalPackages"]
    affected = report["affectedPackages"]
    lines = [
        f"Total packages:    {total}",
        f"Affected packages: {len(affected)}",
        f"Safe packages:     {report['safePackages']}",
    ]

    if not affected:
        lines.append("")
        lines.append("No affected packages found.")
        return "\n".join(lines)

    lines.append("")
    for pkg in affected:
        kinds = []
        if pkg["isDependency"]:
            kinds.append("dependency")
        if pkg["isDevDependency"]:
            kinds.append("devDependency")
        lines.append(f"  ! {pkg['packageName']}@{pkg['installedVersion']} ({', '.join(kinds)})")
        lines.append(f"    affected versions: {', '.join(pkg['affectedVersions'])}")
    return "\n".join(lines)


async def run(manifest_text: str, server_url: str, transport: httpx.AsyncBaseTransport | None = None) -> int:
    url = f"{server_url.rstrip('/')}/v1/checks"
    async with httpx.AsyncClient(timeout=30.0, transport=transport) as client:
        try:
            resp = await client.post(url, json={"manifest": manifest_text})
        except httpx.HTTPError as e:
            print(f"Error: could not reach {url}: {e}")
            return 2

    if resp.status_code >= 400:
        try:
            message = resp.json()["error"]["message"]
        except (ValueError, TypeError, KeyError):
            message = resp.text
        print(f"Error ({resp.status_code}): {message}")
        return 2

    try:
        report = resp.json()
        summary = format_report(report)
    except (ValueError, TypeError, KeyError):
        print(f"Error: unexpected response from {url}: {resp.text[:200]}")
        return 2

    print(summary)
    return 1 if report["affectedPackages"] else 0


def main():
    if len(sys.argv) < 3 or sys.argv[1] != "check":
        print("Usage: pkgcheck check <package.json> [--server <url>]")
        sys.exit(2)

    path = Path(sys.argv[2])
    server = DEFAULT_SERVER
    if "--server" in sys.argv:
        idx = sys.argv.index("--server")
        if idx + 1 < len(sys.argv):
            server = sys.argv[idx + 1]

    try:
        manifest_text = path.read_text(encoding="utf-8")
    except OSError as e:
        print(f"Error: cannot read {path}: {e}")
        sys.exit(2)

    print(f"Checking {path} against {server}...")
    sys.exit(asyncio.run(run(manifest_text, server)))


if __name__ == "__main__":
    main()
