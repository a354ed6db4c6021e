# apps/api/main.py

from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from apps.api.deps import get_settings
from apps.api.routers import demos, scoring, workflows
from core.config import Settings, settings
from core.logging import configure_logging, logger


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    logger.info("%s starting", settings.API_TITLE)
    yield


app = FastAPI(title=settings.API_TITLE, version="0.1.0", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(workflows.router)
app.include_router(scoring.router)
app.include_router(demos.router)


@app.get("/healthz")
def healthz(cfg: Settings = Depends(get_settings)) -> dict[str, str]:  # noqa: B008
    return {"status": "ok", "service": cfg.API_TITLE}
