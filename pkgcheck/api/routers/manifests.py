from fastapi import APIRouter

from api.core.manifest import sample_manifest_text, validate_manifest_shape
from api.schemas.manifest import (
    ManifestRequest,
    ManifestValidationResponse,
    SampleManifestResponse,
)

router = APIRouter(tags=["Manifests"])


@router.post("/v1/manifests/validate", response_model=ManifestValidationResponse)
async def validate_manifest(body: ManifestRequest):
    message = validate_manifest_shape(body.manifest)
    return ManifestValidationResponse(valid=message is None, message=message)


@router.get("/v1/manifests/sample", response_model=SampleManifestResponse)
async def sample_manifest():
    return SampleManifestResponse(manifest=sample_manifest_text())
