"""FastAPI application entrypoint. No business logic; only wiring and middleware."""

from dotenv import load_dotenv

load_dotenv()

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from roomkey.api.exception_handlers import setup_exception_handlers
from roomkey.api.v1 import router as v1_router
from roomkey.core.config import settings


def _cors_origins() -> list[str]:
    if settings.CORS_ALLOW_ORIGINS:
        return settings.CORS_ALLOW_ORIGINS
    return ["*"] if settings.APP_ENV == "dev" else []


app = FastAPI(
    title="RoomKey API",
    version="0.1.0",
    docs_url="/docs" if settings.APP_ENV == "dev" else None,
    redoc_url="/redoc" if settings.APP_ENV == "dev" else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

setup_exception_handlers(app)
app.include_router(v1_router, prefix=settings.API_V1_PREFIX)


@app.get("/")
def root() -> dict[str, object]:
    """Root route; minimal payload for discovery."""
    return {"success": True, "message": "RoomKey API", "health": f"{settings.API_V1_PREFIX}/health"}
