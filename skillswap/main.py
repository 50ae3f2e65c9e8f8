# skillswap/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from skillswap import models  # noqa: F401 - register all tables on Base.metadata
from skillswap.api import admin, auth, review, search, session, skill, users
from skillswap.config import settings
from skillswap.database import Base, engine

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    # Create database tables (use Alembic for managed deployments)
    Base.metadata.create_all(bind=engine)
    logger.info("SkillSwap API started (env=%s)", settings.APP_ENV)
    yield


# Initialize FastAPI app
app = FastAPI(title="SkillSwap API", lifespan=lifespan)

# CORS Middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ======================
# ERROR MAPPING
# ======================
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Schema violations are a 400 with a per-field message map."""
    errors = {}
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        field = ".".join(loc) or "__root__"
        errors.setdefault(field, []).append(error.get("msg", "Invalid value"))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Invalid input", "errors": errors},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("API Error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "An error occurred. Please try again."},
    )


# API routers
app.include_router(auth.router, prefix="/api")     # /api/auth/*
app.include_router(users.router, prefix="/api")    # /api/users/*
app.include_router(skill.router, prefix="/api")    # /api/skills/*
app.include_router(search.router, prefix="/api")   # /api/search
app.include_router(session.router, prefix="/api")  # /api/sessions/*
app.include_router(review.router, prefix="/api")   # /api/reviews/*
app.include_router(admin.router, prefix="/api")    # /api/admin/*


@app.get("/health")
def health_check():
    return {
        "status": "healthy",
        "message": "SkillSwap API is running",
        "version": "1.0.0",
    }
