"""Service fixtures - a fresh, unseeded Registrar with fast hashing.

Design Decisions:
    - Registrar built through build_registrar() so wiring is exercised too
    - `user` fixture registers one credential and returns its CurrentUser
"""

import pytest

from campus.config import Settings
from campus.schemas.auth import CredentialsIn
from campus.schemas.learner import LearnerCreate
from campus.schemas.subject import SubjectCreate
from campus.services.registrar import build_registrar


@pytest.fixture
def settings():
    return Settings(
        jwt_secret_key="test-secret-key", bcrypt_rounds=4, seed_demo_data=False,
    )


@pytest.fixture
def registrar(settings):
    return build_registrar(settings)


@pytest.fixture
def user(registrar):
    result = registrar.register_credential(
        CredentialsIn(email="admin@campus.edu", password="password123"),
    )
    return result.user


@pytest.fixture
def make_learner(registrar, user):
    def _make(name="Ada", email="ada@x.com", age=30, field_of_study=None):
        return registrar.create_learner(
            user,
            LearnerCreate(name=name, email=email, age=age, field_of_study=field_of_study),
        )
    return _make


@pytest.fixture
def make_subject(registrar, user):
    def _make(code="CS101", name="Intro", credit_hours=3, educator="Dr. Lee"):
        return registrar.create_subject(
            user,
            SubjectCreate(name=name, code=code, credit_hours=credit_hours, educator=educator),
        )
    return _make
