from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from skillswap.crud.search import search_skills
from skillswap.database import get_db
from skillswap.schemas import SkillSearchResult

router = APIRouter(prefix="/search", tags=["Search"])


# ======================
# GET: Search skills with their owners
# ======================
@router.get("", response_model=List[SkillSearchResult])
@router.get("/", response_model=List[SkillSearchResult], include_in_schema=False)
def search(
    q: Optional[str] = Query(None, description="Matches skill name or description"),
    category: Optional[str] = Query(None, description="Exact category"),
    db: Session = Depends(get_db),
):
    return search_skills(db, query=q, category=category)
