"""Tests for user_service.services.role_service against an in-memory SQLite database."""

import unittest
from unittest.mock import patch

from sqlalchemy.orm import sessionmaker

from user_service.core.database import build_engine, init_db
from user_service.models import User
from user_service.repositories import RoleStore
from user_service.schemas.role import RoleCreate, RoleUpdate
from user_service.services.exceptions import (
    ConstraintViolationError,
    DefaultRoleNotFoundError,
    InvalidInputError,
    RoleInUseError,
)
from user_service.services.role_service import RoleService


class RoleServiceTestCase(unittest.TestCase):
    """Fresh database and RoleService per test."""

    def setUp(self) -> None:
        self.engine = build_engine("sqlite://")
        init_db(self.engine)
        self.session = sessionmaker(bind=self.engine, autoflush=False)()
        self.service = RoleService(RoleStore(self.session), "customer")

    def tearDown(self) -> None:
        self.session.close()
        self.engine.dispose()


class TestSaveRole(RoleServiceTestCase):
    def test_first_role_gets_id_1(self) -> None:
        role = self.service.save_role(RoleCreate(role_name="admin"))
        self.assertEqual(role.role_id, 1)
        self.assertEqual(role.role_name, "admin")

    def test_duplicate_name_is_constraint_violation(self) -> None:
        self.service.save_role(RoleCreate(role_name="admin"))
        with self.assertRaises(ConstraintViolationError) as ctx:
            self.service.save_role(RoleCreate(role_name="admin"))
        self.assertEqual(ctx.exception.field, "role_name")
        self.assertIn("already exists", ctx.exception.message)

    def test_session_usable_after_violation(self) -> None:
        self.service.save_role(RoleCreate(role_name="admin"))
        with self.assertRaises(ConstraintViolationError):
            self.service.save_role(RoleCreate(role_name="admin"))
        role = self.service.save_role(RoleCreate(role_name="customer"))
        self.assertEqual(role.role_name, "customer")
        self.assertEqual(len(self.service.get_all_roles()), 2)


class TestReadRoles(RoleServiceTestCase):
    def test_get_by_id_found_and_missing(self) -> None:
        created = self.service.save_role(RoleCreate(role_name="admin"))
        self.assertEqual(self.service.get_role_by_id(created.role_id).role_name, "admin")
        self.assertIsNone(self.service.get_role_by_id(42))

    def test_get_all_empty_then_ordered(self) -> None:
        self.assertEqual(self.service.get_all_roles(), [])
        self.service.save_role(RoleCreate(role_name="admin"))
        self.service.save_role(RoleCreate(role_name="customer"))
        names = [r.role_name for r in self.service.get_all_roles()]
        self.assertEqual(names, ["admin", "customer"])

    def test_non_positive_id_is_invalid_input(self) -> None:
        for bad in (0, -1):
            with self.assertRaises(InvalidInputError):
                self.service.get_role_by_id(bad)


class TestDeleteRole(RoleServiceTestCase):
    def test_delete_existing(self) -> None:
        role = self.service.save_role(RoleCreate(role_name="admin"))
        self.assertTrue(self.service.delete_role_by_id(role.role_id))
        self.assertIsNone(self.service.get_role_by_id(role.role_id))

    def test_delete_missing_is_false_repeatedly(self) -> None:
        self.assertFalse(self.service.delete_role_by_id(999))
        self.assertFalse(self.service.delete_role_by_id(999))

    def test_delete_referenced_role_is_refused(self) -> None:
        role = self.service.save_role(RoleCreate(role_name="customer"))
        self.session.add(
            User(
                email="a@x.com",
                password_hash="x",
                contact_number="555",
                state="CA",
                role_id=role.role_id,
            )
        )
        self.session.commit()
        with self.assertRaises(RoleInUseError) as ctx:
            self.service.delete_role_by_id(role.role_id)
        self.assertEqual(ctx.exception.user_count, 1)
        self.assertIsInstance(ctx.exception, ConstraintViolationError)
        self.assertIsNotNone(self.service.get_role_by_id(role.role_id))

    def test_foreign_key_blocks_delete_when_pre_check_misses_a_user(self) -> None:
        # A user inserted after count_users ran: the RESTRICT foreign key still refuses.
        role = self.service.save_role(RoleCreate(role_name="customer"))
        role_id = role.role_id
        self.session.add(
            User(
                email="late@x.com",
                password_hash="x",
                contact_number="555",
                state="CA",
                role_id=role_id,
            )
        )
        self.session.commit()
        with patch.object(RoleStore, "count_users", return_value=0):
            with self.assertRaises(ConstraintViolationError) as ctx:
                self.service.delete_role_by_id(role_id)
        self.assertNotIsInstance(ctx.exception, RoleInUseError)
        self.assertEqual(ctx.exception.field, "role_id")
        self.assertIsNotNone(self.service.get_role_by_id(role_id))
        self.assertEqual(self.service.store.count_users(role_id), 1)


class TestUpdateRole(RoleServiceTestCase):
    def test_update_renames(self) -> None:
        role = self.service.save_role(RoleCreate(role_name="admin"))
        updated = self.service.update_role_by_id(role.role_id, RoleUpdate(role_name="superuser"))
        self.assertEqual(updated.role_id, role.role_id)
        self.assertEqual(updated.role_name, "superuser")

    def test_update_missing_returns_none(self) -> None:
        self.assertIsNone(self.service.update_role_by_id(7, RoleUpdate(role_name="x")))

    def test_update_ignores_extra_fields(self) -> None:
        role = self.service.save_role(RoleCreate(role_name="admin"))
        patch = RoleUpdate.model_validate({"role_name": "ops", "role_id": 99})
        updated = self.service.update_role_by_id(role.role_id, patch)
        self.assertEqual(updated.role_id, role.role_id)

    def test_update_to_taken_name_is_constraint_violation(self) -> None:
        self.service.save_role(RoleCreate(role_name="admin"))
        other = self.service.save_role(RoleCreate(role_name="customer"))
        with self.assertRaises(ConstraintViolationError):
            self.service.update_role_by_id(other.role_id, RoleUpdate(role_name="admin"))


class TestDefaultRole(RoleServiceTestCase):
    def test_resolves_configured_role(self) -> None:
        self.service.save_role(RoleCreate(role_name="admin"))
        self.service.save_role(RoleCreate(role_name="customer"))
        role = self.service.get_default_role()
        self.assertEqual((role.role_id, role.role_name), (2, "customer"))

    def test_missing_default_role_is_fatal(self) -> None:
        self.service.save_role(RoleCreate(role_name="admin"))
        with self.assertLogs("user_service.services.role_service", level="CRITICAL"):
            with self.assertRaises(DefaultRoleNotFoundError) as ctx:
                self.service.get_default_role()
        self.assertEqual(ctx.exception.role_name, "customer")

    def test_resolution_is_by_name_not_id(self) -> None:
        self.service.save_role(RoleCreate(role_name="customer"))
        self.assertEqual(self.service.get_default_role().role_id, 1)


if __name__ == "__main__":
    unittest.main()
