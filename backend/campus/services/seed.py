"""Demo Seed - the starter dataset of four learners, four subjects, and their enrollments.

Invariants:
    - Loaded through the repositories, so IDs come from the allocator (1..4 per kind)
    - Enrollment pairs reference seeded rows by position, not by hard-coded ID
    - Bypasses the auth gate (runs at startup, before any request)
"""

import logging

from campus.services.registrar import Registrar

logger = logging.getLogger(__name__)

DEMO_LEARNERS = (
    ("Salma Youssef", "salma.y@example.com", 23, "Software Engineering"),
    ("Karim Adel", "karim.a@example.com", 22, "Cybersecurity"),
    ("Laila Ibrahim", "laila.i@example.com", 24, "Software Engineering"),
    ("Omar Sherif", "omar.s@example.com", 21, "Artificial Intelligence"),
)

DEMO_SUBJECTS = (
    ("Web Development Fundamentals", "WD101", 4, "Prof. Nadia"),
    ("Introduction to AI", "AI202", 3, "Prof. Khaled"),
    ("Network Security", "CS405", 4, "Prof. Mona"),
    ("Mobile App Development", "SE310", 3, "Prof. Hany"),
)

# (learner index, subject index)
DEMO_ENROLLMENTS = ((0, 0), (0, 3), (1, 2), (2, 0), (2, 1), (3, 1))


def seed_demo_records(registrar: Registrar) -> None:
    """Load the demo dataset into an empty registrar."""
    learners, subjects = registrar.load_records(
        DEMO_LEARNERS, DEMO_SUBJECTS, DEMO_ENROLLMENTS,
    )
    logger.info(
        f"Seeded {len(learners)} learners, {len(subjects)} subjects, "
        f"{len(DEMO_ENROLLMENTS)} enrollments",
        extra={"operation": "seed"},
    )
