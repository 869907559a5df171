"""FastAPI dependencies that build per-request services on the request's DB session."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from user_service.core.config import Settings, get_settings
from user_service.core.database import get_db
from user_service.repositories import RoleStore, UserStore
from user_service.services.role_service import RoleService
from user_service.services.user_service import UserService


def get_role_service(
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> RoleService:
    return RoleService(RoleStore(db), settings.DEFAULT_ROLE_NAME)


def get_user_service(
    db: Annotated[Session, Depends(get_db)],
    role_service: Annotated[RoleService, Depends(get_role_service)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> UserService:
    return UserService(UserStore(db), role_service, bcrypt_rounds=settings.BCRYPT_ROUNDS)
