"""Sample members and sessions loaded into a fresh in-memory store.

Sessions are created and joined through the ledger, so the seeded counters
and balances obey the same rules as live traffic.
"""

import logging
from datetime import datetime, timezone

from marketplace.domain import Capacity, Level, NewSession, NewUser, Rating, UserId
from marketplace.services.enrollment_ledger import EnrollmentLedger
from marketplace.stores.interfaces import MarketplaceStore

logger = logging.getLogger(__name__)

DEMO_USERS = [
    {
        "username": "testuser",
        "email": "test@example.com",
        "full_name": "Test User",
        "bio": (
            "Passionate software developer with 5 years of experience in React and "
            "JavaScript. Love teaching and helping others learn to code!"
        ),
        "points": 20,
        "teachable_skills": ("JavaScript", "React", "UI Design"),
        "learning_skills": ("Node.js", "TypeScript", "Python"),
        "rating": 48,
    },
    {
        "username": "janesmitty",
        "email": "jane@example.com",
        "full_name": "Jane Smith",
        "bio": "Frontend developer and UI/UX enthusiast",
        "points": 30,
        "teachable_skills": ("UI/UX Design", "Figma", "Design Systems"),
        "learning_skills": ("React", "Vue.js"),
        "rating": 50,
    },
    {
        "username": "mikejohnson",
        "email": "mike@example.com",
        "full_name": "Mike Johnson",
        "bio": "Data scientist and Python developer",
        "points": 25,
        "teachable_skills": ("Python", "Data Science", "Machine Learning"),
        "learning_skills": ("JavaScript", "Web Development"),
        "rating": 46,
    },
]

# (title, description, host, category, level, capacity, cost, starts_at, duration, participants)
DEMO_SESSIONS = [
    (
        "Introduction to React",
        "Learn the fundamentals of React development and build your first "
        "interactive components. Perfect for beginners!",
        "janesmitty", "Programming", Level.BEGINNER, 10, 2,
        datetime(2024, 12, 15, 14, 0, tzinfo=timezone.utc), 90,
        ("testuser", "mikejohnson"),
    ),
    (
        "UI/UX Design Principles",
        "Master the fundamentals of user interface and user experience design. "
        "Learn design thinking and prototyping.",
        "janesmitty", "Design", Level.INTERMEDIATE, 8, 3,
        datetime(2024, 12, 16, 10, 0, tzinfo=timezone.utc), 120,
        ("testuser",),
    ),
    (
        "Python for Data Science",
        "Introduction to Python programming for data analysis. Learn pandas, "
        "numpy, and matplotlib basics.",
        "mikejohnson", "Data Science", Level.INTERMEDIATE, 12, 4,
        datetime(2024, 12, 17, 18, 0, tzinfo=timezone.utc), 150,
        (),
    ),
    (
        "Advanced React Patterns",
        "Learn advanced React patterns including render props, higher-order "
        "components, and compound components.",
        "testuser", "Programming", Level.ADVANCED, 6, 5,
        datetime(2024, 12, 20, 15, 0, tzinfo=timezone.utc), 180,
        ("janesmitty", "mikejohnson"),
    ),
]


def seed_demo_data(store: MarketplaceStore) -> None:
    ledger = EnrollmentLedger(store)
    ids: dict[str, UserId] = {}
    for spec in DEMO_USERS:
        user = store.create_user(
            NewUser(
                username=spec["username"],
                email=spec["email"],
                full_name=spec["full_name"],
                bio=spec["bio"],
                points=spec["points"],
                teachable_skills=spec["teachable_skills"],
                learning_skills=spec["learning_skills"],
            )
        )
        store.update_user(user.id, average_rating=Rating(spec["rating"]))
        ids[user.username] = user.id

    for title, description, host, category, level, capacity, cost, starts_at, duration, members in DEMO_SESSIONS:
        session = ledger.create_session(
            ids[host],
            NewSession(
                title=title,
                description=description,
                host_id=ids[host],
                category=category,
                level=level,
                max_participants=Capacity(capacity),
                cost=cost,
                starts_at=starts_at,
                duration=duration,
            ),
        )
        for member in members:
            ledger.join_session(session.id, ids[member])

    logger.info("Seeded %d demo users and %d demo sessions", len(DEMO_USERS), len(DEMO_SESSIONS))
