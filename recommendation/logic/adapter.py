"""
Profile Adapter

Transforms a StudentProfile (raw questionnaire answers) into the normalized
form the scoring engine consumes:

- every single-choice answer encoded through its table
- multi-select answers resolved to canonical option labels, de-duplicated and
  put in table order, so answer order never changes a result
- academic performance keyed by canonical subject label

Unknown answers raise UnrecognizedAnswerValue naming the offending field.
Empty optional answers are fine and simply contribute nothing.
"""

import logging
from typing import Dict, Iterable, Tuple

from .clusters import resolve_option, option_order
from .contracts import StudentProfile, NormalizedProfile
from .encodings import encode, encode_performance
from .errors import UnrecognizedAnswerValue

logger = logging.getLogger(__name__)


def normalize_profile(profile: StudentProfile) -> NormalizedProfile:
    """
    Validate a profile against the encoding tables and normalize it.

    Args:
        profile: Structurally valid student profile

    Returns:
        NormalizedProfile ready for scoring

    Raises:
        MissingRequiredField: a required single-choice answer is blank
        UnrecognizedAnswerValue: an answer is not in its table
    """
    selections = {
        "workEnvironment": _canonical_options("workEnvironment", profile.work_environment),
        "workStyle": _canonical_options("workStyle", profile.work_style),
        "thinkingStyle": _canonical_options("thinkingStyle", profile.thinking_style),
        "academicInterests": _canonical_options("academicInterests", profile.academic_interests),
        "traits": _canonical_options("traits", profile.traits),
    }
    normalized = NormalizedProfile(
        grade=profile.grade,
        zip_code=profile.zip_code,
        selections=selections,
        constraints=_canonical_options("constraints", profile.constraints),
        performance=_normalize_performance(profile.academic_performance),
        education_level=int(encode("educationWillingness", profile.education_willingness)),
        income=float(encode("incomeImportance", profile.income_importance)),
        stability=float(encode("stabilityImportance", profile.stability_importance)),
        helping=float(encode("helpingImportance", profile.helping_importance)),
        urgency=float(encode("decisionPressure", profile.decision_pressure)),
        risk=float(encode("riskTolerance", profile.risk_tolerance)),
        support=float(encode("supportLevel", profile.support_level)),
        confidence=float(encode("careerConfidence", profile.career_confidence)),
        interests_text=(profile.interests or "").strip(),
        experience_text=(profile.experience or "").strip(),
    )

    logger.debug(
        "Normalized profile: %s",
        {category: len(options) for category, options in selections.items()},
    )
    return normalized


def _canonical_options(category: str, values: Iterable[str]) -> Tuple[str, ...]:
    """Resolve, de-duplicate and order multi-select answers."""
    resolved = {resolve_option(category, value) for value in values or ()}
    order = option_order(category)
    return tuple(sorted(resolved, key=lambda label: order[label]))


def _normalize_performance(matrix: Dict[str, str]) -> Dict[str, float]:
    """Encode the academic performance matrix, keyed by canonical subject."""
    encoded: Dict[str, float] = {}
    for subject, level in (matrix or {}).items():
        try:
            canonical = resolve_option("academicInterests", subject)
        except UnrecognizedAnswerValue:
            raise UnrecognizedAnswerValue("academicPerformance", subject) from None
        encoded[canonical] = encode_performance(canonical, level)

    order = option_order("academicInterests")
    return {subject: encoded[subject] for subject in sorted(encoded, key=lambda s: order[s])}
