"""Shared write path for stores: commit one unit of work, translate integrity errors."""

import logging
import re
from typing import TypeVar

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from user_service.models import Base
from user_service.services.exceptions import ConstraintViolationError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)

CONSTRAINT_FIELDS = ("role_name", "username", "email", "role_id")

# Postgres: 'DETAIL: Key (email)=(...)'; SQLite: 'UNIQUE constraint failed: users.email'.
_KEY_PATTERNS = (
    re.compile(r"key \((\w+)\)"),
    re.compile(r"constraint failed: \w+\.(\w+)"),
)


def _violated_field(error: IntegrityError) -> str:
    """Best-effort name of the column behind an IntegrityError."""
    text = str(error.orig).lower()
    for pattern in _KEY_PATTERNS:
        match = pattern.search(text)
        if match and match.group(1) in CONSTRAINT_FIELDS:
            return match.group(1)
    for field in CONSTRAINT_FIELDS:
        if field in text:
            return field
    if "foreign key" in text:
        return "role_id"
    return "unknown"


def _violation_message(field: str) -> str:
    if field == "role_id":
        return "Referenced role does not exist or is still in use"
    label = field.replace("_", " ").capitalize()
    return f"{label} already exists"


class BaseStore:
    """Session-bound store; every write is committed as its own transaction."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def _commit(self) -> None:
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            field = _violated_field(e)
            logger.warning("Constraint violation on %s: %s", field, e.orig)
            raise ConstraintViolationError(field, _violation_message(field)) from e

    def save(self, record: ModelT) -> ModelT:
        """Insert or update record and return it refreshed from the database."""
        self.session.add(record)
        self._commit()
        self.session.refresh(record)
        return record

    def delete(self, record: Base) -> None:
        """Delete record in its own transaction."""
        self.session.delete(record)
        self._commit()
