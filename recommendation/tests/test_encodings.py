"""
Encoding tables and answer normalization.
"""

import pytest
from pydantic import ValidationError

from recommendation.logic import StudentProfile, UnrecognizedAnswerValue, MissingRequiredField
from recommendation.logic.adapter import normalize_profile
from recommendation.logic.clusters import resolve_option, CONSTRAINT_QUICK_INCOME
from recommendation.logic.encodings import (
    EDUCATION_LEVEL_MAP,
    FIELD_TABLES,
    VALUES_IMPORTANCE_MAP,
    encode,
    encode_performance,
    table_snapshot,
)


def test_not_sure_answers_are_explicit_entries():
    assert encode("riskTolerance", "Not sure") == 0.50
    assert encode("supportLevel", "Not sure about support") == 0.50
    assert encode("incomeImportance", "I'm not sure yet") == 0.50
    assert encode("educationWillingness", "I'm not sure yet") == 2


def test_education_ordinals():
    assert encode("educationWillingness", "Work immediately after high school") == 0
    assert encode("educationWillingness", "A few months to 2 years (certifications or training)") == 1
    assert encode("educationWillingness", "2-4 years (college or technical school)") == 2
    assert encode("educationWillingness", "4+ years (college and possibly graduate school)") == 3
    assert set(EDUCATION_LEVEL_MAP.values()) == {0, 1, 2, 3}


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        VALUES_IMPORTANCE_MAP["Kind of"] = 0.4


def test_surrounding_whitespace_is_ignored():
    assert encode("careerConfidence", "  Very confident ") == 1.0


def test_unknown_risk_answer_is_rejected():
    with pytest.raises(UnrecognizedAnswerValue) as exc:
        encode("riskTolerance", "Totally unsure what risk means")
    assert exc.value.field == "riskTolerance"
    assert exc.value.value == "Totally unsure what risk means"
    assert exc.value.to_dict()["field"] == "riskTolerance"


def test_blank_required_answer_is_missing():
    with pytest.raises(MissingRequiredField) as exc:
        encode("supportLevel", "   ")
    assert "supportLevel" in str(exc.value)
    # MissingRequiredField is a kind of UnrecognizedAnswerValue
    assert isinstance(exc.value, UnrecognizedAnswerValue)


def test_unregistered_field_is_a_programming_error():
    with pytest.raises(KeyError):
        encode("favoriteColor", "Blue")


def test_performance_field_names_the_subject():
    assert encode_performance("Math", "Haven't taken yet") == 0.33
    with pytest.raises(UnrecognizedAnswerValue) as exc:
        encode_performance("Math", "A+")
    assert exc.value.field == "academicPerformance[Math]"


def test_table_snapshot_covers_every_single_choice_field():
    snapshot = table_snapshot()
    assert set(FIELD_TABLES) <= set(snapshot)
    assert snapshot["academicPerformance"]["Excellent"] == 1.0


def test_short_tags_resolve_to_labels():
    assert resolve_option("workStyle", "helping") == "Helping people directly"
    assert resolve_option("traits", "Compassionate") == "Compassionate and caring"
    assert resolve_option("constraints", "earn-quickly") == CONSTRAINT_QUICK_INCOME
    with pytest.raises(UnrecognizedAnswerValue):
        resolve_option("workStyle", "juggling")


def test_normalize_orders_and_dedupes_selections(make_profile):
    normalized = normalize_profile(make_profile(
        traits=["Practical and hands-on", "compassionate", "Compassionate and caring"],
    ))
    assert normalized.selected("traits") == ("Compassionate and caring", "Practical and hands-on")


def test_normalize_rejects_unknown_option(make_profile):
    with pytest.raises(UnrecognizedAnswerValue) as exc:
        normalize_profile(make_profile(workStyle=["juggling"]))
    assert exc.value.field == "workStyle"


def test_normalize_rejects_unknown_subject(make_profile):
    with pytest.raises(UnrecognizedAnswerValue) as exc:
        normalize_profile(make_profile(academicPerformance={"Underwater Basketry": "Good"}))
    assert exc.value.field == "academicPerformance"


def test_normalize_encodes_performance_by_subject_label(make_profile):
    normalized = normalize_profile(make_profile(
        academicPerformance={"science": "Excellent", "Math": "Average"},
    ))
    assert normalized.performance == {"Math": 0.33, "Science (Biology, Chemistry, Physics)": 1.0}


def test_empty_optional_fields_are_fine(make_profile):
    normalized = normalize_profile(make_profile(interests=None, experience=None))
    assert normalized.interests_text == ""
    assert normalized.selected("workStyle") == ()


def test_structural_checks_happen_at_the_boundary(make_answers):
    with pytest.raises(ValidationError):
        StudentProfile(**make_answers(grade=8))
    with pytest.raises(ValidationError):
        StudentProfile(**make_answers(zipCode="3030"))

    answers = make_answers()
    del answers["riskTolerance"]
    with pytest.raises(ValidationError):
        StudentProfile(**answers)


def test_grade_label_is_parsed(make_answers):
    assert StudentProfile(**make_answers(grade="11th")).grade == 11
