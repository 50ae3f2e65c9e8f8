# skillswap/api/__init__.py
# This file makes the api directory a Python package.

from . import admin
from . import auth
from . import review
from . import search
from . import session
from . import skill
from . import users

__all__ = [
    "admin",
    "auth",
    "users",
    "skill",
    "session",
    "search",
    "review",
]
