"""Entity Models - plain dataclasses for every in-memory collection.

Invariants:
    - Models hold stored fields only; derived fields are resolved on demand
    - No model carries relationship lists (the enrollment store owns edges)

Design Decisions:
    - One file per entity for locality
"""

from campus.models.learner import Learner  # noqa: F401
from campus.models.subject import Subject  # noqa: F401
from campus.models.credential import Credential, CurrentUser  # noqa: F401
