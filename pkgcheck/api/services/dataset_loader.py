import json
import logging
from pathlib import Path

import httpx
from fastapi import Request
from pydantic import ValidationError

from api.config import settings
from api.schemas.dataset import AffectedDataset, DatasetSummary
from api.utils.errors import PkgCheckError

logger = logging.getLogger(__name__)


async def load_dataset(
    path: str | None = None,
    url: str | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> AffectedDataset:
    """
    Load the affected packages snapshot.

    A configured URL takes precedence over the file path. Every failure
    (missing file, HTTP error, bad JSON, wrong shape) surfaces as
    PkgCheckError.dataset_unavailable.
    """
    url = settings.AFFECTED_DATASET_URL if url is None else url
    path = settings.AFFECTED_DATASET_PATH if path is None else path

    try:
        if url:
            raw = await _fetch_remote(url, transport)
            source = url
        else:
            raw = Path(path).read_text(encoding="utf-8")
            source = path
        dataset = AffectedDataset.model_validate(json.loads(raw))
    except PkgCheckError:
        raise
    except (OSError, ValueError, RecursionError) as e:
        logger.error("Failed to load affected packages: %s", e)
        raise PkgCheckError.dataset_unavailable(_short_reason(e))

    logger.info(
        "Loaded %d affected package entries from %s (crawled at %s)",
        len(dataset.packages),
        source,
        dataset.crawled_at,
    )
    return dataset


async def _fetch_remote(url: str, transport: httpx.AsyncBaseTransport | None) -> str:
    try:
        async with httpx.AsyncClient(
            timeout=settings.DATASET_TIMEOUT_SECONDS,
            transport=transport,
        ) as client:
            resp = await client.get(url)
    except httpx.HTTPError as e:
        logger.error("Failed to fetch affected packages data from %s: %s", url, e)
        raise PkgCheckError.dataset_unavailable(f"request to {url} failed")

    if resp.status_code >= 400:
        logger.error("Failed to fetch affected packages data: HTTP %s", resp.status_code)
        raise PkgCheckError.dataset_unavailable(f"HTTP {resp.status_code} from {url}")
    return resp.text


def _short_reason(exc: Exception) -> str:
    if isinstance(exc, FileNotFoundError):
        return f"file '{exc.filename}' not found"
    if isinstance(exc, json.JSONDecodeError):
        return "snapshot is not valid JSON"
    if isinstance(exc, RecursionError):
        return "snapshot is nested too deeply"
    if isinstance(exc, ValidationError):
        return "snapshot does not match the expected shape"
    return str(exc)[:200]


def summarize(dataset: AffectedDataset) -> DatasetSummary:
    return DatasetSummary(
        crawled_at=dataset.crawled_at,
        total_packages=dataset.total_packages,
        source_url=dataset.source_url,
        entries=len(dataset.packages),
        distinct_packages=len({p.package_name for p in dataset.packages}),
    )


async def get_dataset(request: Request) -> AffectedDataset:
    """FastAPI dependency: the snapshot loaded at startup, or 503."""
    dataset = getattr(request.app.state, "affected_dataset", None)
    if dataset is None:
        raise PkgCheckError.dataset_unavailable()
    return dataset
