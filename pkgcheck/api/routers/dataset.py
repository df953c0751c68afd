import logging

from fastapi import APIRouter, Depends, Query, Request

from api.core.index import build_affected_index
from api.schemas.dataset import (
    AffectedDataset,
    AffectedPackageListResponse,
    AffectedPackageResponse,
    DatasetSummary,
)
from api.schemas.errors import ErrorResponse
from api.services.dataset_loader import get_dataset, load_dataset, summarize
from api.utils.errors import PkgCheckError
from api.utils.pagination import paginate

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Dataset"])


@router.get(
    "/v1/dataset",
    response_model=DatasetSummary,
    responses={503: {"model": ErrorResponse}},
)
async def get_dataset_summary(dataset: AffectedDataset = Depends(get_dataset)):
    return summarize(dataset)


@router.post(
    "/v1/dataset/reload",
    response_model=DatasetSummary,
    responses={503: {"model": ErrorResponse}},
)
async def reload_dataset(request: Request):
    dataset = await load_dataset()
    request.app.state.affected_dataset = dataset
    logger.info("Affected packages dataset reloaded")
    return summarize(dataset)


@router.get(
    "/v1/dataset/packages",
    response_model=AffectedPackageListResponse,
)
async def list_affected_packages(
    dataset: AffectedDataset = Depends(get_dataset),
    page: int = Query(1, ge=1),
    per_page: int = Query(20, ge=1, le=100),
    q: str | None = None,
):
    index = build_affected_index(dataset)
    names = list(index)
    if q:
        needle = q.lower()
        names = [n for n in names if needle in n.lower()]

    items, meta = paginate(names, page, per_page)
    return AffectedPackageListResponse(
        data=[
            AffectedPackageResponse(package_name=n, affected_versions=index[n])
            for n in items
        ],
        pagination=meta,
    )


@router.get(
    "/v1/dataset/packages/{package_name:path}",
    response_model=AffectedPackageResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_affected_package(
    package_name: str,
    dataset: AffectedDataset = Depends(get_dataset),
):
    index = build_affected_index(dataset)
    if package_name not in index:
        raise PkgCheckError.not_found("Package", package_name)
    return AffectedPackageResponse(
        package_name=package_name,
        affected_versions=index[package_name],
    )
