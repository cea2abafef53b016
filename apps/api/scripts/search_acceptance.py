"""
Acceptance checks for the directory search pipeline against a live database.

Covers: approved-only results, facet overlap semantics, completeness ordering,
oversized-term fallback, and facet catalog shape.

Run from apps/api (with DB seeded and migrations applied):
  python scripts/search_acceptance.py
"""
import asyncio
import logging
import sys
from pathlib import Path

_app_api = Path(__file__).resolve().parent.parent
if str(_app_api) not in sys.path:
    sys.path.insert(0, str(_app_api))

from talent_directory.db.session import async_session
from talent_directory.domain import ProfileStatus
from talent_directory.services.directory import DirectorySearchSession, SqlAlchemyRecordStore
from talent_directory.services.directory.ranking import completeness_score

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


async def main() -> int:
    session = DirectorySearchSession(SqlAlchemyRecordStore(async_session))
    failures = 0

    catalog = await session.get_facet_catalog()
    logger.info(
        "Facet catalog: %d languages, %d areas, %d memberships",
        len(catalog.languages), len(catalog.areas_of_expertise), len(catalog.memberships),
    )
    if catalog.languages != sorted(set(catalog.languages)):
        logger.error("FAIL: language catalog is not sorted/deduplicated")
        failures += 1

    everything = await session.search()
    if everything.error:
        logger.error("FAIL: unfiltered search reported a store error")
        return 1
    if any(r.status != ProfileStatus.APPROVED for r in everything.results):
        logger.error("FAIL: non-approved profile in results")
        failures += 1
    scores = [completeness_score(r) for r in everything.results]
    if scores != sorted(scores, reverse=True):
        logger.error("FAIL: results are not ordered by completeness")
        failures += 1
    logger.info("Unfiltered: %d approved profiles", len(everything.results))

    if len(catalog.languages) >= 2:
        picked = set(catalog.languages[:2])
        session.set_filter(languages=sorted(picked))
        by_language = await session.search()
        if any(not picked.intersection(r.languages) for r in by_language.results):
            logger.error("FAIL: language overlap filter returned a non-matching profile")
            failures += 1
        logger.info("Languages %s: %d profiles", sorted(picked), len(by_language.results))
        session.set_filter(languages=[])

    session.set_filter(search_term="x" * 101)
    oversized = await session.search()
    if not oversized.validation_failed or oversized.error:
        logger.error("FAIL: oversized term should fall back without a store error")
        failures += 1

    logger.info("Done: %d failure(s)", failures)
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
