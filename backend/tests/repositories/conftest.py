"""Repository fixtures - fresh allocator, enrollment store, and repositories per test."""

import pytest

from campus.core.enrollment_store import EnrollmentStore
from campus.core.id_allocator import IdAllocator
from campus.repositories.credentials import CredentialRepository
from campus.repositories.learners import LearnerRepository
from campus.repositories.subjects import SubjectRepository


@pytest.fixture
def allocator():
    return IdAllocator()


@pytest.fixture
def enrollments():
    return EnrollmentStore()


@pytest.fixture
def learners(allocator, enrollments):
    return LearnerRepository(allocator, enrollments)


@pytest.fixture
def subjects(allocator, enrollments):
    return SubjectRepository(allocator, enrollments)


@pytest.fixture
def credentials(allocator):
    return CredentialRepository(allocator)
