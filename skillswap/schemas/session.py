from datetime import datetime
from typing import List, Optional

from .common import APIModel
from .skill import Skill
from .user import User


# ======================
# SESSION REQUEST MODELS
# ======================

class SessionRequest(APIModel):
    skill_id: int
    provider_id: int
    message: Optional[str] = None
    scheduled_at: Optional[datetime] = None


# ======================
# SESSION UPDATE MODELS
# ======================

class SessionStatusUpdate(APIModel):
    # Checked by the lifecycle service so unknown values get its error message.
    status: str


# ======================
# SESSION RESPONSE MODELS
# ======================

class Session(APIModel):
    id: int
    requester_id: int
    provider_id: int
    skill_id: int
    status: str
    scheduled_at: Optional[datetime] = None
    message: Optional[str] = None
    created_at: datetime


class SessionWithDetails(Session):
    """Listing view: session plus both participants and the skill."""
    requester: User
    provider: User
    skill: Skill
    available_actions: List[str] = []
