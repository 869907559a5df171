"""Unit tests for user_service.repositories: commit and IntegrityError translation."""

import unittest
from unittest.mock import MagicMock

from sqlalchemy.exc import IntegrityError

from user_service.models import Role
from user_service.repositories import RoleStore, UserStore
from user_service.repositories.base import _violated_field
from user_service.services.exceptions import ConstraintViolationError


def _integrity_error(message: str) -> IntegrityError:
    return IntegrityError("INSERT ...", {}, Exception(message))


class TestViolatedField(unittest.TestCase):
    """_violated_field reads the column name from Postgres and SQLite messages."""

    def test_sqlite_unique(self) -> None:
        err = _integrity_error("UNIQUE constraint failed: users.email")
        self.assertEqual(_violated_field(err), "email")
        err = _integrity_error("UNIQUE constraint failed: roles.role_name")
        self.assertEqual(_violated_field(err), "role_name")

    def test_postgres_unique_prefers_key_detail(self) -> None:
        err = _integrity_error(
            'duplicate key value violates unique constraint "ix_users_email"\n'
            "DETAIL:  Key (email)=(username@x.com) already exists."
        )
        self.assertEqual(_violated_field(err), "email")

    def test_foreign_key(self) -> None:
        self.assertEqual(
            _violated_field(_integrity_error("FOREIGN KEY constraint failed")), "role_id"
        )
        err = _integrity_error(
            'insert or update on table "users" violates foreign key constraint '
            '"users_role_id_fkey"\nDETAIL:  Key (role_id)=(9) is not present in table "roles".'
        )
        self.assertEqual(_violated_field(err), "role_id")

    def test_unknown(self) -> None:
        self.assertEqual(_violated_field(_integrity_error("CHECK constraint failed")), "unknown")


class TestSaveTranslatesIntegrityError(unittest.TestCase):
    def test_rolls_back_and_raises_constraint_violation(self) -> None:
        session = MagicMock()
        session.commit.side_effect = _integrity_error("UNIQUE constraint failed: roles.role_name")
        store = RoleStore(session)
        with self.assertRaises(ConstraintViolationError) as ctx:
            store.save(Role(role_name="admin"))
        self.assertEqual(ctx.exception.field, "role_name")
        self.assertEqual(ctx.exception.message, "Role name already exists")
        session.rollback.assert_called_once()
        session.refresh.assert_not_called()

    def test_successful_save_commits_and_refreshes(self) -> None:
        session = MagicMock()
        store = RoleStore(session)
        role = Role(role_name="admin")
        self.assertIs(store.save(role), role)
        session.add.assert_called_once_with(role)
        session.commit.assert_called_once()
        session.refresh.assert_called_once_with(role)

    def test_delete_commits(self) -> None:
        session = MagicMock()
        store = UserStore(session)
        record = MagicMock()
        store.delete(record)
        session.delete.assert_called_once_with(record)
        session.commit.assert_called_once()
        session.rollback.assert_not_called()


if __name__ == "__main__":
    unittest.main()
