"""Test environment: an in-memory SQLite URL and cheap bcrypt, set before the app is imported."""

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["DEFAULT_ROLE_NAME"] = "customer"
