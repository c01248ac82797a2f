"""Root conftest - shared test configuration."""

import os

# Fast hashing, empty store, and a fixed signing key for every test
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("SEED_DEMO_DATA", "false")
os.environ.setdefault("LOG_FORMAT", "text")
