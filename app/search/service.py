import logging
from sqlalchemy.orm import Session

from app.db.search_text import fold
from app.models.about import About
from app.models.contact import Contact
from app.models.education import Education
from app.models.project import Project
from app.models.skill import Skill
from app.models.user import User

logger = logging.getLogger("portfolio.search")

# collection name -> model; searchable fields live on each model's __search_fields__
COLLECTIONS = {
    "users": User,
    "projects": Project,
    "skills": Skill,
    "education": Education,
    "about": About,
    "contact": Contact,
}


def search_collection(db: Session, name: str, term: str) -> list:
    model = COLLECTIONS[name]
    return (db.query(model)
              .filter(model.search_text.contains(fold(term), autoescape=True))
              .order_by(model.id)
              .all())


def search_all(db: Session, term: str, filters: list[str] | None = None) -> dict:
    """Case-insensitive substring search across the selected collections.

    Matching runs against each row's folded ``search_text``, so it is
    Unicode case-insensitive and only sees string values, never JSON keys.
    ``filters`` limits which collections are queried; ``None`` means all of
    them. Skipped collections come back as empty lists.
    """
    term = term.strip()
    results = {}
    for name in COLLECTIONS:
        if filters is None or name in filters:
            results[name] = search_collection(db, name, term)
        else:
            results[name] = []
    results["total"] = sum(len(v) for v in results.values())
    logger.debug("Search %r over %s -> %d hits", term, filters or "all", results["total"])
    return results
