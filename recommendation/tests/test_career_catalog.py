"""
Career catalog loading from the rec_careers table.
"""

import logging

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from db import Base
from recommendation.logic import Career, RecommendationEngine, StudentProfile
from recommendation.logic.career_catalog import DEFAULT_CAREERS, load_career_catalog, seed_career_catalog
from recommendation.logic.clusters import CLUSTER_BY_ID
from recommendation.models import RecCareer


@pytest.fixture
def db():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    session = sessionmaker(bind=engine)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


def test_built_in_catalog_is_consistent():
    ids = [career.career_id for career in DEFAULT_CAREERS]
    assert len(ids) == len(set(ids))
    for career in DEFAULT_CAREERS:
        assert career.primary_cluster in CLUSTER_BY_ID
        assert career.secondary_cluster is None or career.secondary_cluster in CLUSTER_BY_ID
    # Every cluster has careers
    assert {career.primary_cluster for career in DEFAULT_CAREERS} == set(CLUSTER_BY_ID)


def test_no_session_uses_built_in_catalog():
    assert load_career_catalog(None) == list(DEFAULT_CAREERS)


def test_empty_table_falls_back_with_warning(db, caplog):
    with caplog.at_level(logging.WARNING):
        careers = load_career_catalog(db)
    assert careers == list(DEFAULT_CAREERS)
    assert "rec_careers is empty" in caplog.text


def test_table_rows_replace_built_in_catalog(db):
    custom = [
        Career(career_id="beekeeper", name="Beekeeper", primary_cluster="C8", secondary_cluster="C10",
               edu_required_level=0, challenge_level=1, physical_demand=2, time_to_entry_years=1,
               cost_level=0, irregular_hours=True, description="Keeps bees"),
        Career(career_id="archivist", name="Archivist", primary_cluster="C7",
               edu_required_level=3, challenge_level=2, physical_demand=0, time_to_entry_years=6,
               cost_level=1),
    ]
    assert seed_career_catalog(db, custom) == 2
    db.commit()

    assert db.query(RecCareer).count() == 2
    assert load_career_catalog(db) == custom


def test_seeded_default_catalog_round_trips(db):
    seed_career_catalog(db)
    db.commit()
    assert load_career_catalog(db) == list(DEFAULT_CAREERS)


def test_engine_scores_database_catalog(db, helping_answers):
    seed_career_catalog(db, [
        Career(career_id="nurse-aide", name="Nurse Aide", primary_cluster="C2",
               edu_required_level=1, challenge_level=1, physical_demand=2,
               time_to_entry_years=0.5, cost_level=0),
    ])
    db.commit()

    engine = RecommendationEngine(careers=load_career_catalog(db))
    result = engine.recommend(StudentProfile(**helping_answers))
    assert [rec.career.career_id for rec in result.career_recommendations.best_fit] == ["nurse-aide"]
