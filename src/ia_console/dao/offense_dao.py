import logging
import threading
from collections.abc import Iterable

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from ia_console.catalog import CATALOG_VERSION, OFFENSE_CATALOG
from ia_console.models.offense import Offense, CatalogSeed

logger = logging.getLogger(__name__)

_seed_lock = threading.Lock()

# Signed 64-bit range of an INTEGER primary key on SQLite and MySQL
_MIN_ID, _MAX_ID = -2**63, 2**63 - 1


def seed_once(db: Session, version: str = CATALOG_VERSION, catalog: list[dict] = OFFENSE_CATALOG) -> bool:
    """
    Load the static catalog if this catalog version has not been seeded yet.
    Safe to call redundantly: the lock serializes callers in this process and the
    catalog_seeds primary key rejects a second marker from any other process.
    Returns True only for the call that actually wrote rows.
    """
    with _seed_lock:
        if db.get(CatalogSeed, version) is not None:
            logger.debug("Catalog %s already seeded, skipping", version)
            return False

        existing = db.query(Offense).count()
        if existing == 0:
            db.add_all([Offense(**entry) for entry in catalog])
        db.add(CatalogSeed(version=version, offense_count=existing or len(catalog)))

        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            logger.info("Catalog %s seeded concurrently by another worker", version)
            return False

    if existing:
        logger.info("Offense table already populated (%d rows); marked catalog %s as seeded", existing, version)
        return False
    logger.info("Seeded catalog %s with %d offenses", version, len(catalog))
    return True


def list_offenses(db: Session) -> list[Offense]:
    return db.query(Offense).order_by(Offense.id).all()


def resolve_offenses(db: Session, ids: Iterable[int]) -> list[Offense]:
    """
    Offenses whose id appears in `ids`, in catalog order.
    Unknown ids are dropped silently so a stale selection still renders.
    """
    ids = list(ids)
    wanted = {i for i in ids if _MIN_ID <= i <= _MAX_ID}
    if len(wanted) < len(set(ids)):
        logger.warning("Ignoring out-of-range offense ids: %s", sorted(set(ids) - wanted))
    if not wanted:
        return []
    offenses = db.query(Offense).filter(Offense.id.in_(wanted)).order_by(Offense.id).all()
    if len(offenses) < len(wanted):
        missing = sorted(wanted - {o.id for o in offenses})
        logger.warning("Ignoring unknown offense ids: %s", missing)
    return offenses


def search_offenses(db: Session, query: str | None = None, category: str | None = None) -> list[Offense]:
    """Case-insensitive substring match on code, description or category."""
    q = db.query(Offense)
    if category:
        q = q.filter(Offense.category == category)
    if query and query.strip():
        term = query.strip()
        q = q.filter(
            Offense.code.icontains(term, autoescape=True)
            | Offense.description.icontains(term, autoescape=True)
            | Offense.category.icontains(term, autoescape=True)
        )
    return q.order_by(Offense.id).all()


def group_by_category(offenses: Iterable[Offense]) -> dict[str, list[Offense]]:
    groups: dict[str, list[Offense]] = {}
    for o in offenses:
        groups.setdefault(o.category, []).append(o)
    return {category: groups[category] for category in sorted(groups)}
