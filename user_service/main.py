"""FastAPI application entrypoint. No business logic; only wiring, logging and startup checks."""

from dotenv import load_dotenv

load_dotenv()

import logging
import time
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

from user_service.api.v1 import router as v1_router
from user_service.core.config import settings
from user_service.core.database import SessionLocal
from user_service.repositories import RoleStore
from user_service.services.exceptions import DefaultRoleNotFoundError
from user_service.services.role_service import RoleService

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
# Timestamps carry a Z suffix, so render them in UTC.
logging.Formatter.converter = time.gmtime
logger = logging.getLogger(__name__)


def check_default_role() -> bool:
    """Resolve the configured default role once at startup; True if signups can proceed."""
    db = SessionLocal()
    try:
        role = RoleService(RoleStore(db), settings.DEFAULT_ROLE_NAME).get_default_role()
        logger.info(
            "Default role resolved: role_id=%s role_name=%s", role.role_id, role.role_name
        )
        return True
    except DefaultRoleNotFoundError:
        return False
    except SQLAlchemyError as e:
        logger.error("Could not check default role at startup: %s", e)
        return False
    finally:
        db.close()


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    check_default_role()
    yield


app = FastAPI(
    title="User Service API",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.APP_ENV == "dev" else [],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(v1_router, prefix=settings.API_V1_PREFIX)


@app.get("/")
def root() -> dict[str, str]:
    """Root route; minimal payload for discovery."""
    return {"message": "User Service API"}
