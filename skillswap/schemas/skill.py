from datetime import datetime
from typing import Optional

from pydantic import ConfigDict, Field

from skillswap.models.skill import ExperienceLevel, SkillType

from .common import APIModel


# ======================
# SKILL SCHEMAS
# ======================

class SkillCreate(APIModel):
    # Strip before the length rules run
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=2)
    description: Optional[str] = None
    category: str = Field(..., min_length=1)
    type: SkillType
    experience_level: Optional[ExperienceLevel] = None


class Skill(APIModel):
    id: int
    user_id: int
    name: str
    description: Optional[str] = None
    category: str
    type: str
    experience_level: Optional[str] = None
    created_at: datetime
