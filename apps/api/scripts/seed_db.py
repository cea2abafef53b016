"""
Seed the database with sample directory profiles in every moderation status.
Approved profiles vary in completeness so the default ranking is visible.
Run from apps/api: python scripts/seed_db.py
"""
import asyncio
import logging
import random
import sys
import uuid
from pathlib import Path

# Ensure talent_directory is importable when run from repo root or apps/api
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

logger = logging.getLogger(__name__)

from talent_directory.db.session import async_session
from talent_directory.db.models import Profile
from talent_directory.domain import INTEREST_CATEGORIES, LANGUAGES, MEMBERSHIPS, ProfileStatus

NUM_PROFILES = 60
# Status mix: mostly approved, some pending review, a few rejected
STATUSES = [ProfileStatus.APPROVED, ProfileStatus.PENDING, ProfileStatus.REJECTED]
STATUS_WEIGHTS = [0.7, 0.2, 0.1]

FIRST_NAMES = [
    "Elena", "Maria", "Sofia", "Anna", "Christina", "Katerina", "Ioanna", "Despina",
    "Andrea", "Natalia", "Irene", "Georgia", "Lina", "Marina", "Olga", "Petra",
    "Helena", "Nicole", "Vasiliki", "Eleni", "Chloe", "Daphne", "Theodora", "Zoe",
]
LAST_NAMES = [
    "Georgiou", "Christodoulou", "Ioannou", "Constantinou", "Nicolaou", "Demetriou",
    "Papadopoulos", "Charalambous", "Savva", "Michael", "Kyriakou", "Antoniou",
]
JOB_TITLES = [
    "Chief Executive Officer", "Chief Financial Officer", "Head of Legal", "Managing Partner",
    "Data Science Lead", "Marketing Director", "Board Advisor", "Founder", "Economist",
    "Head of Sustainability", "Engineering Manager", "Investment Analyst",
]
COMPANIES = [
    "Bank of Cyprus", "Hellenic Bank", "PwC Cyprus", "Deloitte", "KPMG", "Wargaming",
    "Eurobank", "Cyta", "University of Cyprus", "Amdocs", "Logicom", "Vassiliko Cement",
]
EXPERTISE = [
    "Corporate Governance", "Fintech", "Data Science", "ESG", "Shipping", "Energy",
    "Digital Transformation", "Public Policy", "Tax", "Entrepreneurship", "Healthcare",
    "Tourism", "Real Estate", "Cybersecurity", "Leadership",
]
KEYWORDS = [
    "keynote", "mentoring", "diversity", "innovation", "startups", "regulation",
    "AI", "climate", "finance", "women in tech", "board effectiveness",
]
NATIONALITIES = ["Cypriot", "Greek", "British", "Russian", "Romanian", "Lebanese"]


def _sample(pool, lo: int, hi: int) -> list[str]:
    return random.sample(list(pool), random.randint(lo, min(hi, len(pool))))


def _maybe(value, p: float = 0.7):
    return value if random.random() < p else None


def build_profile(i: int) -> Profile:
    first, last = random.choice(FIRST_NAMES), random.choice(LAST_NAMES)
    name = f"{first} {last}"
    status = random.choices(STATUSES, weights=STATUS_WEIGHTS)[0]
    expertise = _sample(EXPERTISE, 0, 5)
    return Profile(
        id=str(uuid.uuid4()),
        user_id=str(uuid.uuid4()),
        status=status.value,
        name=name,
        job_title=_maybe(random.choice(JOB_TITLES)),
        company_name=_maybe(random.choice(COMPANIES)),
        nationality=_maybe(random.choice(NATIONALITIES), 0.5),
        short_bio=_maybe(f"{random.choice(JOB_TITLES)} focused on {', '.join(expertise[:2]) or 'leadership'}."),
        long_bio=_maybe(
            f"{first} has spent over {random.randint(5, 25)} years working across "
            f"{random.choice(COMPANIES)} and {random.choice(COMPANIES)}.",
            0.5,
        ),
        interested_in=_sample(INTEREST_CATEGORIES, 1, 3),
        languages=_sample(LANGUAGES, 0, 4),
        areas_of_expertise=expertise,
        memberships=_sample(MEMBERSHIPS, 0, 2),
        keywords=_sample(KEYWORDS, 0, 5),
        profile_picture=_maybe(f"https://images.example.com/profiles/{i}.jpg", 0.4),
        social_media_links=_maybe({"linkedin": f"https://www.linkedin.com/in/seed-{i}"}, 0.5),
        email=f"seed.profile{i}@example.com",
        contact_number=_maybe(f"+3579{random.randint(1000000, 9999999)}", 0.5),
    )


async def run_seed() -> None:
    random.seed(42)
    profiles = [build_profile(i) for i in range(1, NUM_PROFILES + 1)]
    async with async_session() as session:
        session.add_all(profiles)
        await session.commit()

    by_status: dict[str, int] = {}
    for p in profiles:
        by_status[p.status] = by_status.get(p.status, 0) + 1
    logger.info("Done. Seeded %s profiles", len(profiles))
    for status, count in sorted(by_status.items()):
        logger.info("  %s: %s", status, count)


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
    )
    logger.info("Starting directory seed: %s profiles", NUM_PROFILES)
    asyncio.run(run_seed())
