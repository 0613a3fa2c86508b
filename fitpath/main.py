import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from fitpath.config import settings
from fitpath.plan.router import router as plan_router

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str) -> None:
    """Attach a stream handler if none exists and set the root level."""
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger().setLevel(level.upper())


@asynccontextmanager
async def lifespan(_: FastAPI):
    configure_logging(settings.log_level)
    yield


app = FastAPI(title=settings.app_title, version="0.1.0", lifespan=lifespan)
app.include_router(plan_router)


@app.get("/")
async def root() -> dict:
    return {
        "status": "ok",
        "docs": "/docs",
        "health": "/health",
        "plan": {
            "generate": "/plan/generate",
            "profile": "/plan/profile",
            "today": "/plan/today",
            "meals": "/plan/catalog/meals",
            "workouts": "/plan/catalog/workouts",
        },
    }


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
