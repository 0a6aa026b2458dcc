"""
Test the scoring engine end to end with the built-in career catalog.
"""

import pytest

from recommendation.logic import (
    Career,
    RecommendationEngine,
    StudentProfile,
    UnrecognizedAnswerValue,
    get_recommendations,
)
from recommendation.logic.career_catalog import DEFAULT_CAREERS
from recommendation.logic.clusters import CLUSTER_ORDER
from recommendation.logic.constants import DISCLAIMER

FIXED_TIMESTAMP = "2026-01-15T12:00:00+00:00"


def test_helping_profile_ranks_healthcare_and_education_on_top(engine, helping_answers):
    result = engine.recommend(StudentProfile(**helping_answers))

    top_ids = [cs.cluster_id for cs in result.top_clusters]
    assert len(top_ids) == 3
    assert "C2" in top_ids
    assert "C6" in top_ids
    assert result.top_clusters[0].cluster_id == "C2"


def test_education_gap_career_is_a_stretch(engine, make_profile):
    profile = make_profile(
        educationWillingness="Work immediately after high school",
        workStyle=["helping"],
        traits=["compassionate", "patient"],
        academicInterests=["science"],
    )
    run = engine.score(profile)

    stretch = {rec.career.career_id: rec for rec in run.buckets["stretch_option"]}
    physician = stretch["physician"]
    assert physician.feasibility_notes[0].startswith("Education gap")

    other_buckets = run.buckets["best_fit"] + run.buckets["good_fit"]
    assert "physician" not in {rec.career.career_id for rec in other_buckets}


def test_education_gap_with_custom_catalog(make_profile):
    surgeon = Career(
        career_id="surgeon", name="Surgeon", primary_cluster="C2",
        edu_required_level=3, challenge_level=3, physical_demand=1,
        time_to_entry_years=12, cost_level=1,
    )
    engine = RecommendationEngine(careers=[surgeon])
    profile = make_profile(
        educationWillingness="Work immediately after high school",
        workStyle=["helping"],
        traits=["compassionate"],
    )
    result = engine.recommend(profile)

    assert result.career_recommendations.best_fit == []
    assert result.career_recommendations.good_fit == []
    rec = result.career_recommendations.stretch_options[0]
    assert rec.fit_category == "stretch_option"
    assert any(note.startswith("Education gap") for note in rec.feasibility_notes)


def test_unknown_answer_is_rejected(engine, make_profile):
    profile = make_profile(riskTolerance="Totally unsure what risk means")
    with pytest.raises(UnrecognizedAnswerValue) as exc:
        engine.recommend(profile)
    assert exc.value.field == "riskTolerance"


def test_determinism(engine, helping_answers):
    profile = StudentProfile(**helping_answers)
    first = engine.recommend(profile, generated_at=FIXED_TIMESTAMP)
    second = engine.recommend(profile, generated_at=FIXED_TIMESTAMP)
    assert first.model_dump() == second.model_dump()


def test_selection_order_does_not_matter(engine, make_profile):
    a = make_profile(workStyle=["helping", "technology"], traits=["curious", "analytical"])
    b = make_profile(workStyle=["technology", "helping", "helping"], traits=["analytical", "curious"])
    assert (
        engine.recommend(a, generated_at=FIXED_TIMESTAMP).model_dump()
        == engine.recommend(b, generated_at=FIXED_TIMESTAMP).model_dump()
    )


def test_score_bounds_and_cluster_ranking(engine, make_profile):
    profile = make_profile(
        workEnvironment=["remote", "outdoors"],
        workStyle=["creative", "data"],
        thinkingStyle=["inventing"],
        traits=["adventurous", "independent", "outgoing"],
        academicPerformance={"Art / Creative Subjects": "Excellent", "Math": "Good"},
        riskTolerance="Very comfortable with risk",
        incomeImportance="Very important",
        experience="I started a small etsy shop selling my drawings",
    )
    run = engine.score(profile)

    assert len(run.cluster_scores) == 10
    for cs in run.cluster_scores:
        assert 0 <= cs.score <= 100

    for previous, current in zip(run.cluster_scores, run.cluster_scores[1:]):
        assert previous.score > current.score or (
            previous.score == current.score
            and CLUSTER_ORDER[previous.cluster_id] < CLUSTER_ORDER[current.cluster_id]
        )

    for bucket in run.buckets.values():
        for rec in bucket:
            assert 0 <= rec.score <= 100


def test_neutral_ties_follow_cluster_order(engine, make_profile):
    run = engine.score(make_profile())
    scores = [(cs.score, CLUSTER_ORDER[cs.cluster_id]) for cs in run.cluster_scores]
    assert scores == sorted(scores, key=lambda s: (-s[0], s[1]))


def test_buckets_are_disjoint_and_complete(engine, helping_answers):
    run = engine.score(StudentProfile(**helping_answers))
    ids = [rec.career.career_id for bucket in run.buckets.values() for rec in bucket]
    assert len(ids) == len(set(ids))
    assert not set(ids) & set(run.held_out)
    assert set(ids) | set(run.held_out) == {career.career_id for career in DEFAULT_CAREERS}


def test_good_fit_respects_the_floor(engine, make_profile):
    policy = engine.policy
    run = engine.score(make_profile(traits=["creative"]))

    feasible = [
        rec.score
        for bucket in run.buckets.values()
        for rec in bucket
        if not rec.feasibility_notes
    ]
    top_feasible = max(feasible)
    for rec in run.buckets["good_fit"]:
        assert (
            rec.score >= policy.good_fit_threshold
            or rec.score >= policy.good_fit_relative_threshold * top_feasible
        )


def test_caps_per_category(engine, helping_answers):
    recs = engine.recommend(StudentProfile(**helping_answers)).career_recommendations
    assert len(recs.best_fit) <= 3
    assert len(recs.good_fit) <= 3
    assert len(recs.stretch_options) <= 2


def test_every_stretch_option_explains_itself(engine, make_profile):
    profile = make_profile(
        educationWillingness="Start working right after high school",
        supportLevel="Limited support",
        constraints=["earn-quickly", "physical-limitations", "predictable-hours"],
    )
    run = engine.score(profile)
    assert run.buckets["stretch_option"]
    for rec in run.buckets["stretch_option"]:
        assert rec.feasibility_notes


def test_result_shape(engine, helping_answers):
    result = engine.recommend(StudentProfile(**helping_answers))
    data = result.to_response()

    assert set(data) == {
        "student_profile_summary", "top_clusters", "career_recommendations",
        "four_year_plan", "comparison_questions", "disclaimer", "generated_at",
    }
    assert data["disclaimer"] == DISCLAIMER
    assert data["generated_at"]


def test_score_single_career(engine, helping_answers):
    nurse = next(c for c in DEFAULT_CAREERS if c.career_id == "registered-nurse")
    details = engine.score_single_career(StudentProfile(**helping_answers), nurse)
    assert details["career_id"] == "registered-nurse"
    assert set(details["cluster_scores"]) == {"C2", "C6"}
    assert details["category"] in {"best_fit", "good_fit", "stretch_option"}


def test_get_recommendations_convenience(helping_answers):
    result = get_recommendations(StudentProfile(**helping_answers))
    assert result.top_clusters[0].cluster_id == "C2"


def test_recommend_from_dict_accepts_snake_case(engine):
    result = engine.recommend_from_dict({
        "grade": 12,
        "zip_code": "10001",
        "work_style": ["technology"],
        "education_willingness": "4+ years (college and possibly graduate school)",
        "income_importance": "Very important",
        "stability_importance": "Somewhat important",
        "helping_importance": "Not very important",
        "decision_pressure": "Need a plan soon",
        "risk_tolerance": "Somewhat comfortable",
        "support_level": "Strong",
        "career_confidence": "Very confident",
    })
    assert result.top_clusters[0].cluster_id == "C3"
    assert result.four_year_plan.grade_12 is not None
    assert result.four_year_plan.grade_11 is None
