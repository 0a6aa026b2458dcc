"""
Encoding Tables

Static lookup tables converting categorical questionnaire answers into
normalized weights in [0, 1] (or an education ordinal 0-3).

Every accepted answer is an explicit entry, including the "not sure" answers
and the shorter labels used by earlier questionnaire versions. Anything else
is rejected with UnrecognizedAnswerValue.
"""

from types import MappingProxyType
from typing import Dict, Mapping, Union

from .errors import MissingRequiredField, UnrecognizedAnswerValue

# =============================================================================
# TABLES
# =============================================================================

PERFORMANCE_MAP: Mapping[str, float] = MappingProxyType({
    "Excellent": 1.00,
    "Good": 0.67,
    "Average": 0.33,
    "Needs Improvement": 0.00,
    "Haven't taken yet": 0.33,
})

VALUES_IMPORTANCE_MAP: Mapping[str, float] = MappingProxyType({
    "Very important": 1.00,
    "Very": 1.00,
    "Somewhat important": 0.67,
    "Somewhat": 0.67,
    "Not very important": 0.33,
    "Not very": 0.33,
    "Not sure": 0.50,
    "I'm not sure yet": 0.50,
})

RISK_MAP: Mapping[str, float] = MappingProxyType({
    "Very comfortable with risk": 1.00,
    "Very comfortable": 1.00,
    "Somewhat comfortable": 0.67,
    "Prefer stability": 0.33,
    "Not sure": 0.50,
    "I'm not sure yet": 0.50,
})

URGENCY_MAP: Mapping[str, float] = MappingProxyType({
    "Just exploring options": 0.00,
    "I'm just exploring right now": 0.00,
    "Want to narrow this year": 0.33,
    "Need a plan soon": 0.67,
    "Ready to confirm path": 1.00,
})

SUPPORT_MAP: Mapping[str, float] = MappingProxyType({
    "Strong family/financial support": 1.00,
    "Strong": 1.00,
    "Some support available": 0.67,
    "Some": 0.67,
    "Limited support": 0.33,
    "Limited": 0.33,
    "Not sure about support": 0.50,
    "I'm not sure": 0.50,
})

CONFIDENCE_MAP: Mapping[str, float] = MappingProxyType({
    "Very confident": 1.00,
    "Somewhat confident": 0.67,
    "Unsure": 0.33,
    "Very unsure": 0.00,
})

EDUCATION_LEVEL_MAP: Mapping[str, int] = MappingProxyType({
    "Start working right after high school": 0,
    "Work immediately after high school": 0,
    "A few months to 2 years (certifications or training)": 1,
    "2–4 years (college or technical school)": 2,
    "2-4 years (college or technical school)": 2,
    "4+ years (college and possibly graduate school)": 3,
    "I'm not sure yet": 2,
})

EDUCATION_LEVEL_NAMES: Mapping[int, str] = MappingProxyType({
    0: "High school diploma",
    1: "Certificate or apprenticeship",
    2: "Associate degree (2-4 years)",
    3: "Bachelor's degree or higher",
})

MAX_EDUCATION_LEVEL = 3

# Single-choice profile fields and the table each one is encoded with
FIELD_TABLES: Mapping[str, Mapping[str, Union[float, int]]] = MappingProxyType({
    "educationWillingness": EDUCATION_LEVEL_MAP,
    "incomeImportance": VALUES_IMPORTANCE_MAP,
    "stabilityImportance": VALUES_IMPORTANCE_MAP,
    "helpingImportance": VALUES_IMPORTANCE_MAP,
    "decisionPressure": URGENCY_MAP,
    "riskTolerance": RISK_MAP,
    "supportLevel": SUPPORT_MAP,
    "careerConfidence": CONFIDENCE_MAP,
})


# =============================================================================
# LOOKUPS
# =============================================================================

def encode(field: str, value: str) -> Union[float, int]:
    """
    Encode a single-choice answer using the table registered for ``field``.

    Raises:
        MissingRequiredField: value is None or blank
        UnrecognizedAnswerValue: value is not a table key
    """
    table = FIELD_TABLES.get(field)
    if table is None:
        raise KeyError(f"No encoding table registered for field '{field}'")
    return lookup(table, field, value)


def lookup(
    table: Mapping[str, Union[float, int]],
    field: str,
    value: str,
) -> Union[float, int]:
    """Exact-key lookup in an encoding table (surrounding whitespace ignored)."""
    if value is None or (isinstance(value, str) and not value.strip()):
        raise MissingRequiredField(field)
    if not isinstance(value, str):
        raise UnrecognizedAnswerValue(field, value)
    key = value.strip()
    if key not in table:
        raise UnrecognizedAnswerValue(field, value)
    return table[key]


def encode_performance(subject: str, value: str) -> float:
    return float(lookup(PERFORMANCE_MAP, f"academicPerformance[{subject}]", value))


def education_level_name(level: int) -> str:
    return EDUCATION_LEVEL_NAMES.get(level, "Unknown")


def table_snapshot() -> Dict[str, Dict[str, Union[float, int]]]:
    """Plain-dict copy of every single-choice table, for API consumers."""
    snapshot = {field: dict(table) for field, table in FIELD_TABLES.items()}
    snapshot["academicPerformance"] = dict(PERFORMANCE_MAP)
    return snapshot
