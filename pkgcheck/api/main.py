import logging
import uuid

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.config import settings
from api.routers import checks, dataset, health, manifests
from api.services.dataset_loader import load_dataset
from api.utils.errors import PkgCheckError

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="PkgCheck API",
    description="Check package.json dependencies against a snapshot of affected npm packages",
    version=health.VERSION,
    debug=settings.DEBUG,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.state.affected_dataset = None


@app.middleware("http")
async def add_request_id(request, call_next):
    request_id = str(uuid.uuid4())
    response = await call_next(request)
    response.headers["X-Request-ID"] = request_id
    return response


@app.exception_handler(PkgCheckError)
async def pkgcheck_error_handler(request, exc: PkgCheckError):
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": {
                "type": exc.type,
                "message": exc.message,
                "code": exc.code,
                "param": exc.param,
            }
        },
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request, exc: RequestValidationError):
    return JSONResponse(
        status_code=422,
        content={
            "error": {
                "type": "validation_error",
                "message": str(exc),
                "code": "VALIDATION_ERROR",
            }
        },
    )


app.include_router(health.router)
app.include_router(checks.router)
app.include_router(manifests.router)
app.include_router(dataset.router)


@app.on_event("startup")
async def startup():
    try:
        app.state.affected_dataset = await load_dataset()
    except PkgCheckError as e:
        # Checks answer 503 until /v1/dataset/reload succeeds.
        logger.error("Starting without affected packages data: %s", e.message)
        app.state.affected_dataset = None
