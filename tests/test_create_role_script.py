"""Tests for the create_role operator CLI helper."""

import io
import unittest
from contextlib import redirect_stderr, redirect_stdout

from sqlalchemy.orm import sessionmaker

from user_service.core.database import build_engine, init_db
from user_service.repositories import RoleStore
from user_service.scripts.create_role import create_roles
from user_service.services.role_service import RoleService


class TestCreateRoles(unittest.TestCase):
    def setUp(self) -> None:
        self.engine = build_engine("sqlite://")
        init_db(self.engine)
        self.session = sessionmaker(bind=self.engine)()
        self.service = RoleService(RoleStore(self.session), "customer")

    def tearDown(self) -> None:
        self.session.close()
        self.engine.dispose()

    def test_creates_missing_and_skips_existing(self) -> None:
        out = io.StringIO()
        with redirect_stdout(out):
            self.assertEqual(create_roles(self.service, ["admin", "customer"]), 0)
            self.assertEqual(create_roles(self.service, ["customer"]), 0)
        self.assertIn("Created role 'admin' with id 1.", out.getvalue())
        self.assertIn("Role 'customer' already exists.", out.getvalue())
        self.assertEqual(self.service.get_default_role().role_id, 2)

    def test_invalid_name_exits_1(self) -> None:
        err = io.StringIO()
        with redirect_stderr(err):
            self.assertEqual(create_roles(self.service, ["   "]), 1)
        self.assertIn("Invalid role name", err.getvalue())
        self.assertEqual(self.service.get_all_roles(), [])


if __name__ == "__main__":
    unittest.main()
