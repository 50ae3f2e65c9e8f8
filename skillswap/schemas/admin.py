from typing import List

from .common import APIModel


class CountBucket(APIModel):
    name: str
    value: int


class PlatformStats(APIModel):
    total_users: int
    total_skills: int
    total_sessions: int
    skills_by_category: List[CountBucket]
    sessions_by_status: List[CountBucket]
