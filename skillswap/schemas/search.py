# skillswap/schemas/search.py
from .skill import Skill
from .user import User


class SkillSearchResult(Skill):
    """A skill together with the user offering or seeking it."""
    user: User
