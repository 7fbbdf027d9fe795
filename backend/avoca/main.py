import logging
from importlib.metadata import PackageNotFoundError, version

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api import classify, lawyers
from .config import settings
from .errors import ClassificationError
from .schemas import HealthResponse

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

try:
    __version__ = version("avoca-case-classifier")
except PackageNotFoundError:
    __version__ = "0.0.0"

app = FastAPI(
    title=f"{settings.app_name} Case Classification API",
    description="Rule-based triage of legal problems into category, court level and lawyer tier.",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(classify.router)
app.include_router(lawyers.router)


@app.exception_handler(ClassificationError)
async def classification_error_handler(request: Request, exc: ClassificationError):
    if exc.status_code >= 500:
        logger.error("%s %s -> %d", request.method, request.url.path, exc.status_code)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.get("/health", response_model=HealthResponse, tags=["general"])
async def health():
    return HealthResponse(status="ok", app=settings.app_name, version=__version__)


def run():
    import uvicorn

    uvicorn.run("avoca.main:app", host=settings.host, port=settings.port)
