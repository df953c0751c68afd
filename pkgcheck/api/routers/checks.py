from fastapi import APIRouter, Depends

from api.core.checker import check_packages
from api.core.manifest import parse_manifest
from api.schemas.check import CheckReport
from api.schemas.dataset import AffectedDataset
from api.schemas.errors import ErrorResponse
from api.schemas.manifest import ManifestRequest
from api.services.dataset_loader import get_dataset
from api.utils.errors import PkgCheckError

router = APIRouter(tags=["Checks"])


@router.post(
    "/v1/checks",
    response_model=CheckReport,
    responses={400: {"model": ErrorResponse}, 503: {"model": ErrorResponse}},
)
async def create_check(
    body: ManifestRequest,
    dataset: AffectedDataset = Depends(get_dataset),
):
    manifest = parse_manifest(body.manifest)
    if manifest is None:
        raise PkgCheckError.malformed_manifest()
    return check_packages(manifest, dataset)
