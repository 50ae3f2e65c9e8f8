from __future__ import annotations

from factories import create_skill, create_user
from skillswap.crud.search import search_skills


def _seed(db):
    owner = create_user(db, "tutor")
    python = create_skill(db, owner, "Python Programming", category="Programming")
    guitar = create_skill(
        db, owner, "Guitar", category="Music", description="Acoustic basics, no PYTHON here"
    )
    return owner, python, guitar


def test_query_matches_name_case_insensitively(db_session):
    owner = create_user(db_session, "tutor")
    python = create_skill(db_session, owner, "Python Programming", category="Programming")
    create_skill(db_session, owner, "Guitar", category="Music")

    results = search_skills(db_session, query="python")

    assert [s.id for s in results] == [python.id]
    assert results[0].user.username == "tutor"


def test_query_matches_description(db_session):
    _, python, guitar = _seed(db_session)

    results = search_skills(db_session, query="PyThOn")

    assert {s.id for s in results} == {python.id, guitar.id}


def test_category_is_exact_match(db_session):
    _, python, _ = _seed(db_session)

    assert [s.id for s in search_skills(db_session, category="Programming")] == [python.id]
    assert search_skills(db_session, category="programming") == []
    assert search_skills(db_session, category="Program") == []


def test_query_and_category_combine(db_session):
    _, _, guitar = _seed(db_session)

    results = search_skills(db_session, query="python", category="Music")

    assert [s.id for s in results] == [guitar.id]


def test_empty_filters_return_everything_newest_first(db_session):
    _, python, guitar = _seed(db_session)
    other = create_user(db_session, "learner")
    spanish = create_skill(db_session, other, "Spanish", category="Languages", skill_type="seeking")

    for results in (search_skills(db_session), search_skills(db_session, query="", category="")):
        assert [s.id for s in results] == [spanish.id, guitar.id, python.id]


def test_wildcards_in_query_are_literal(db_session):
    owner = create_user(db_session, "tutor")
    create_skill(db_session, owner, "Python Programming")
    percent = create_skill(db_session, owner, "100% Excel", category="Office")

    assert [s.id for s in search_skills(db_session, query="%")] == [percent.id]
    assert search_skills(db_session, query="_") == []


def test_query_folds_non_ascii_case(db_session):
    owner = create_user(db_session, "tutor")
    french = create_skill(db_session, owner, "École de cuisine", category="Cooking")
    create_skill(db_session, owner, "Guitar", category="Music")

    assert [s.id for s in search_skills(db_session, query="éCOLE")] == [french.id]
    assert [s.id for s in search_skills(db_session, query="É")] == [french.id]
