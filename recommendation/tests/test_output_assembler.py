"""
Output assembly: profile summary, four-year plan and comparison questions.
"""

from datetime import datetime, timezone

from recommendation.logic import Career, StudentProfile
from recommendation.logic.constants import MAX_COMPARISON_FACTORS
from recommendation.logic.output_assembler import assemble_output, comparison_factors
from recommendation.logic.plan_templates import post_graduation_plan

FIXED_TIMESTAMP = "2026-01-15T12:00:00+00:00"


def test_assembly_is_idempotent(engine, helping_answers):
    run = engine.score(StudentProfile(**helping_answers))

    first = assemble_output(run, generated_at=FIXED_TIMESTAMP)
    second = assemble_output(run, generated_at=FIXED_TIMESTAMP)
    assert first == second

    later = assemble_output(run, generated_at="2027-01-01T00:00:00+00:00")
    assert first.model_dump(exclude={"generated_at"}) == later.model_dump(exclude={"generated_at"})


def test_generated_at_defaults_to_utc_now(engine, helping_answers):
    run = engine.score(StudentProfile(**helping_answers))
    stamp = datetime.fromisoformat(assemble_output(run).generated_at)
    assert stamp.tzinfo is not None
    assert stamp.utcoffset() == timezone.utc.utcoffset(None)


def test_datetime_generated_at_is_formatted(engine, helping_answers):
    run = engine.score(StudentProfile(**helping_answers))
    moment = datetime(2026, 3, 1, 9, 30, tzinfo=timezone.utc)
    assert assemble_output(run, generated_at=moment).generated_at == "2026-03-01T09:30:00+00:00"


def test_summary_readiness_and_strengths(engine, make_profile):
    profile = make_profile(
        grade=11,
        workStyle=["technology"],
        traits=["creative", "analytical"],
        academicPerformance={"Math": "Excellent", "Technology / Computer Science": "Good", "English / Language Arts": "Average"},
        educationWillingness="4+ years (college and possibly graduate school)",
        careerConfidence="Very confident",
        decisionPressure="Ready to confirm path",
    )
    summary = engine.recommend(profile).student_profile_summary

    assert summary.grade == 11
    assert summary.readiness_level.startswith("High")
    assert summary.decision_readiness == "High - Ready to make decisions"
    # Strong subjects first, then traits by affinity to the top clusters
    assert summary.key_strengths == [
        "Math",
        "Technology / Computer Science",
        "Creative and artistic",
        "Analytical and logical",
    ]
    assert summary.primary_interests == ["Working with computers or technology"]


def test_early_readiness_without_grades(engine, make_profile):
    profile = make_profile(educationWillingness="Work immediately after high school")
    summary = engine.recommend(profile).student_profile_summary
    assert summary.readiness_level.startswith("Early")
    assert summary.decision_readiness.startswith("Early")
    assert summary.key_strengths == []


def test_primary_interests_are_capped(engine, make_profile):
    profile = make_profile(
        workEnvironment=["indoors", "remote"],
        workStyle=["helping", "technology"],
        thinkingStyle=["helping"],
        academicInterests=["science", "english"],
    )
    interests = engine.recommend(profile).student_profile_summary.primary_interests
    # Ranked by affinity to the top clusters (C2, C6, C3), table order on ties
    assert interests == [
        "Indoors (offices, hospitals, schools)",
        "Helping people directly",
        "Helping people overcome challenges",
        "Science (Biology, Chemistry, Physics)",
    ]


def test_four_year_plan_covers_remaining_grades(engine, helping_answers):
    plan = engine.recommend(StudentProfile(**helping_answers)).four_year_plan  # grade 10

    assert plan.grade_9 is None
    assert plan.grade_10 is not None
    assert plan.grade_12 is not None
    # Healthcare is the top cluster
    assert "Health Sciences" in plan.grade_10.courses
    assert "HOSA (Health Occupations)" in plan.grade_10.activities
    assert plan.post_graduation.education_path


def test_post_graduation_without_career():
    plan = post_graduation_plan(None)
    assert plan.education_path == "To be determined based on career choice"


def test_post_graduation_from_career():
    career = Career(
        career_id="welder", name="Welder", primary_cluster="C1", edu_required_level=1,
        challenge_level=1, physical_demand=3, time_to_entry_years=1, cost_level=0,
    )
    plan = post_graduation_plan(career)
    assert plan.education_path == "Certificate or apprenticeship"
    assert plan.timeline == "1 years to career entry"
    assert plan.estimated_cost == "$5,000 - $15,000"


def test_comparison_questions(engine, helping_answers):
    result = engine.recommend(StudentProfile(**helping_answers))
    questions = result.comparison_questions
    recs = result.career_recommendations

    assert 1 <= len(questions) <= 3
    compared = {q.career_a for q in questions} | {q.career_b for q in questions}
    pool = {rec.career.name for rec in recs.best_fit + recs.good_fit}
    assert compared <= pool
    for question in questions:
        assert question.career_a != question.career_b
        assert question.question == f"Which appeals to you more: {question.career_a} or {question.career_b}?"
        assert 1 <= len(question.factors) <= MAX_COMPARISON_FACTORS


def test_comparison_factors_rank_largest_differences():
    desk = Career(
        career_id="a", name="A", primary_cluster="C4", edu_required_level=3,
        challenge_level=2, physical_demand=0, time_to_entry_years=4, cost_level=1,
    )
    field = Career(
        career_id="b", name="B", primary_cluster="C1", edu_required_level=0,
        challenge_level=2, physical_demand=3, time_to_entry_years=0.5, cost_level=0,
    )
    assert comparison_factors(desk, field) == ["Education requirements", "Cost of training", "Physical demands"]
    assert comparison_factors(desk, desk) == ["Work environment", "Daily tasks", "Long-term goals"]
