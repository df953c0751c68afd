from fastapi import APIRouter, Request

from api.schemas.health import HealthResponse

router = APIRouter(tags=["Health"])

VERSION = "1.0.0"


@router.get("/v1/health", response_model=HealthResponse)
async def health(request: Request):
    dataset = getattr(request.app.state, "affected_dataset", None)
    return HealthResponse(
        status="healthy" if dataset is not None else "degraded",
        version=VERSION,
        dataset_loaded=dataset is not None,
        affected_entries=len(dataset.packages) if dataset is not None else 0,
    )
