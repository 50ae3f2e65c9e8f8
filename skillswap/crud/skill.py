from typing import List, Optional

from sqlalchemy.orm import Session

from skillswap import models


def get_skill(db: Session, skill_id: int) -> Optional[models.Skill]:
    return db.query(models.Skill).filter(models.Skill.id == skill_id).first()


def get_skills_by_user(db: Session, user_id: int) -> List[models.Skill]:
    return (
        db.query(models.Skill)
        .filter(models.Skill.user_id == user_id)
        .order_by(models.Skill.created_at.desc(), models.Skill.id.desc())
        .all()
    )


def create_skill(
    db: Session,
    *,
    user_id: int,
    name: str,
    category: str,
    skill_type: str,
    description: Optional[str] = None,
    experience_level: Optional[str] = None,
) -> models.Skill:
    skill = models.Skill(
        user_id=user_id,
        name=name,
        description=description,
        category=category,
        type=skill_type,
        experience_level=experience_level,
    )
    db.add(skill)
    db.commit()
    db.refresh(skill)
    return skill


def delete_skill(db: Session, skill: models.Skill) -> None:
    db.delete(skill)
    db.commit()
