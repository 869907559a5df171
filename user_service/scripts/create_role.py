"""
Create roles (e.g. seed or repair the default signup role). Run from project root:
  python -m user_service.scripts.create_role ROLE_NAME [ROLE_NAME ...]
Example:
  python -m user_service.scripts.create_role admin customer
"""
import argparse
import logging
import sys

from user_service.core.config import get_settings
from user_service.core.database import SessionLocal
from user_service.repositories import RoleStore
from user_service.schemas.role import RoleCreate
from user_service.services.exceptions import ConstraintViolationError
from user_service.services.role_service import RoleService

logger = logging.getLogger(__name__)


def create_roles(service: RoleService, role_names: list[str]) -> int:
    """Create each missing role; existing names are skipped. Returns a process exit code."""
    for raw_name in role_names:
        name = raw_name.strip()
        if not name or len(name) > 255:
            print(f"Invalid role name {raw_name!r} (1-255 chars).", file=sys.stderr)
            return 1
        if service.store.get_by_name(name) is not None:
            print(f"Role '{name}' already exists.")
            continue
        try:
            role = service.save_role(RoleCreate(role_name=name))
        except ConstraintViolationError as e:
            # Created concurrently between the lookup and the insert.
            print(f"Role '{name}' already exists ({e.message}).")
            continue
        print(f"Created role '{role.role_name}' with id {role.role_id}.")
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description="Create user-service roles.")
    parser.add_argument("role_names", nargs="+", help="Role names (1-255 chars each)")
    args = parser.parse_args()

    settings = get_settings()
    logging.basicConfig(level=settings.LOG_LEVEL)
    db = SessionLocal()
    try:
        service = RoleService(RoleStore(db), settings.DEFAULT_ROLE_NAME)
        exit_code = create_roles(service, args.role_names)
        if exit_code == 0 and service.store.get_by_name(settings.DEFAULT_ROLE_NAME) is None:
            logger.warning(
                "Default role '%s' still does not exist; signups will be refused.",
                settings.DEFAULT_ROLE_NAME,
            )
        return exit_code
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
