# skillswap/services/stats_service.py
from typing import Any, Dict, List

from sqlalchemy import func
from sqlalchemy.orm import Session

from skillswap import models


def _histogram(db: Session, column) -> List[Dict[str, Any]]:
    rows = (
        db.query(column, func.count())
        .group_by(column)
        .order_by(column)
        .all()
    )
    return [{"name": name, "value": int(count)} for name, count in rows]


def get_platform_stats(db: Session) -> Dict[str, Any]:
    """Totals plus skills-per-category and sessions-per-status histograms."""
    return {
        "total_users": db.query(models.User).count(),
        "total_skills": db.query(models.Skill).count(),
        "total_sessions": db.query(models.Session).count(),
        "skills_by_category": _histogram(db, models.Skill.category),
        "sessions_by_status": _histogram(db, models.Session.status),
    }
