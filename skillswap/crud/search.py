# skillswap/crud/search.py
from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session, contains_eager

from skillswap import models


def _like_pattern(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


def search_skills(
    db: Session,
    query: Optional[str] = None,
    category: Optional[str] = None,
) -> List[models.Skill]:
    """
    Skills joined with their owner, newest first.

    ``query`` is a case-insensitive substring match against name or
    description; ``category`` must match exactly. Empty values do not filter.
Case folding is Unicode-aware on SQLite too (see ``skillswap.database``).
    """
    q = (
        db.query(models.Skill)
        .join(models.User, models.Skill.user_id == models.User.id)
        .options(contains_eager(models.Skill.user))
    )

    if query:
        pattern = _like_pattern(query)
        q = q.filter(
            or_(
                models.Skill.name.ilike(pattern, escape="\\"),
                models.Skill.description.ilike(pattern, escape="\\"),
            )
        )

    if category:
        q = q.filter(models.Skill.category == category)

    return q.order_by(models.Skill.created_at.desc(), models.Skill.id.desc()).all()
