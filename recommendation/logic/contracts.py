"""
Data Contracts for the Career Scoring Engine

Defines Pydantic models for StudentProfile (input) and RecommendationResult (output),
plus the static reference entities (clusters, careers) and the intermediate
structures passed between pipeline stages.
"""

from typing import List, Optional, Dict, Tuple
from pydantic import BaseModel, Field, field_validator

from .constants import (
    FitCategory,
    BEST_FIT_THRESHOLD,
    GOOD_FIT_THRESHOLD,
    BEST_FIT_RELATIVE_THRESHOLD,
    GOOD_FIT_RELATIVE_THRESHOLD,
    PRIMARY_CLUSTER_WEIGHT,
    SECONDARY_CLUSTER_WEIGHT,
    EDUCATION_GAP_PENALTY,
    QUICK_INCOME_MAX_YEARS,
    QUICK_INCOME_PENALTY_PER_YEAR,
    PHYSICAL_DEMAND_THRESHOLD,
    PHYSICAL_DEMAND_PENALTY,
    IRREGULAR_HOURS_PENALTY,
    LOW_SUPPORT_THRESHOLD,
    COST_PENALTY,
    HIGH_CHALLENGE_LEVEL,
    CHALLENGE_READINESS_FLOOR,
    CHALLENGE_PENALTY,
    HANDS_ON_BONUS,
    CHALLENGE_BONUS_LEVEL,
    CHALLENGE_BONUS_READINESS,
    CHALLENGE_BONUS,
    MAX_RECOMMENDATIONS_PER_CATEGORY,
)


# =============================================================================
# STATIC REFERENCE ENTITIES
# =============================================================================

class ClusterValueProfile(BaseModel):
    """A cluster's fixed stance on income/stability/helping/risk."""
    income: float = Field(ge=0.0, le=1.0)
    stability: float = Field(ge=0.0, le=1.0)
    helping: float = Field(ge=0.0, le=1.0)
    risk: float = Field(ge=0.0, le=1.0)

    class Config:
        frozen = True


class ClusterDefinition(BaseModel):
    """One of the ten fixed career clusters."""
    id: str
    name: str
    description: str
    value_profile: ClusterValueProfile
    typical_education_level: int = Field(ge=0, le=3)
    keywords: Tuple[str, ...] = ()

    class Config:
        frozen = True


class Career(BaseModel):
    """Static career reference entry."""
    career_id: str
    name: str
    primary_cluster: str
    secondary_cluster: Optional[str] = None
    edu_required_level: int = Field(ge=0, le=3)   # 0=HS, 1=cert, 2=associate, 3=bachelor+
    challenge_level: int = Field(ge=0, le=3)
    physical_demand: int = Field(ge=0, le=3)
    time_to_entry_years: float = Field(ge=0.0)
    cost_level: int = Field(ge=0, le=1)
    irregular_hours: bool = False
    description: str = ""

    class Config:
        frozen = True


# =============================================================================
# INPUT CONTRACTS
# =============================================================================

class StudentProfile(BaseModel):
    """
    Input contract for the scoring engine.
    Represents a student's questionnaire answers.

    JSON keys follow the questionnaire (camelCase); attributes are snake_case.
    Structural checks (grade range, ZIP format, required answers present)
    happen here; answer values are checked against the encoding tables by
    the engine.
    """
    # Basic Information
    grade: int = Field(ge=9, le=12)
    zip_code: str = Field(alias="zipCode", pattern=r"^\d{5}$")

    # Multi-select preferences
    work_environment: List[str] = Field(default_factory=list, alias="workEnvironment")
    work_style: List[str] = Field(default_factory=list, alias="workStyle")
    thinking_style: List[str] = Field(default_factory=list, alias="thinkingStyle")
    academic_interests: List[str] = Field(default_factory=list, alias="academicInterests")
    traits: List[str] = Field(default_factory=list)
    constraints: List[str] = Field(default_factory=list)

    # Academic Performance (matrix: subject -> performance label)
    academic_performance: Dict[str, str] = Field(default_factory=dict, alias="academicPerformance")

    # Single-choice answers
    education_willingness: str = Field(alias="educationWillingness")
    income_importance: str = Field(alias="incomeImportance")
    stability_importance: str = Field(alias="stabilityImportance")
    helping_importance: str = Field(alias="helpingImportance")
    decision_pressure: str = Field(alias="decisionPressure")
    risk_tolerance: str = Field(alias="riskTolerance")
    support_level: str = Field(alias="supportLevel")
    career_confidence: str = Field(alias="careerConfidence")

    # Free text
    interests: str = ""
    experience: str = ""
    other_traits: Optional[str] = Field(default=None, alias="otherTraits")
    impact_statement: Optional[str] = Field(default=None, alias="impactStatement")
    inspiration: Optional[str] = None

    class Config:
        populate_by_name = True

    @field_validator("grade", mode="before")
    @classmethod
    def _parse_grade_label(cls, value):
        # Questionnaire sends "11th"
        if isinstance(value, str):
            digits = value.strip().lower().removesuffix("th")
            if digits.isdigit():
                return int(digits)
        return value

    @field_validator("interests", "experience", mode="before")
    @classmethod
    def _none_to_empty(cls, value):
        return "" if value is None else value


class ScoringPolicy(BaseModel):
    """
    Tunable career scoring constants.

    Defaults come from constants.py; the values are policy, not invariants.
    """
    primary_cluster_weight: float = PRIMARY_CLUSTER_WEIGHT
    secondary_cluster_weight: float = SECONDARY_CLUSTER_WEIGHT

    education_gap_penalty: float = EDUCATION_GAP_PENALTY
    quick_income_max_years: float = QUICK_INCOME_MAX_YEARS
    quick_income_penalty_per_year: float = QUICK_INCOME_PENALTY_PER_YEAR
    physical_demand_threshold: int = PHYSICAL_DEMAND_THRESHOLD
    physical_demand_penalty: float = PHYSICAL_DEMAND_PENALTY
    irregular_hours_penalty: float = IRREGULAR_HOURS_PENALTY
    low_support_threshold: float = LOW_SUPPORT_THRESHOLD
    cost_penalty: float = COST_PENALTY
    high_challenge_level: int = HIGH_CHALLENGE_LEVEL
    challenge_readiness_floor: float = CHALLENGE_READINESS_FLOOR
    challenge_penalty: float = CHALLENGE_PENALTY
    hands_on_bonus: float = HANDS_ON_BONUS
    challenge_bonus_level: int = CHALLENGE_BONUS_LEVEL
    challenge_bonus_readiness: float = CHALLENGE_BONUS_READINESS
    challenge_bonus: float = CHALLENGE_BONUS

    best_fit_threshold: float = BEST_FIT_THRESHOLD
    good_fit_threshold: float = GOOD_FIT_THRESHOLD
    best_fit_relative_threshold: float = BEST_FIT_RELATIVE_THRESHOLD
    good_fit_relative_threshold: float = GOOD_FIT_RELATIVE_THRESHOLD

    max_best_fit: int = MAX_RECOMMENDATIONS_PER_CATEGORY[FitCategory.BEST_FIT]
    max_good_fit: int = MAX_RECOMMENDATIONS_PER_CATEGORY[FitCategory.GOOD_FIT]
    max_stretch_options: int = MAX_RECOMMENDATIONS_PER_CATEGORY[FitCategory.STRETCH_OPTION]

    class Config:
        frozen = True

    def cap_for(self, category: FitCategory) -> int:
        return {
            FitCategory.BEST_FIT: self.max_best_fit,
            FitCategory.GOOD_FIT: self.max_good_fit,
            FitCategory.STRETCH_OPTION: self.max_stretch_options,
        }[category]


# =============================================================================
# OUTPUT CONTRACTS
# =============================================================================

class ClusterScore(BaseModel):
    """Cluster score with the reasons behind it."""
    cluster_id: str
    name: str
    score: int = Field(ge=0, le=100)
    reasoning: List[str] = Field(default_factory=list)
    dimension_scores: Dict[str, float] = Field(default_factory=dict)


class CareerRecommendation(BaseModel):
    """Single career recommendation with fit category and notes."""
    career: Career
    score: int = Field(ge=0, le=100)
    fit_category: FitCategory
    reasoning: List[str] = Field(default_factory=list)
    feasibility_notes: Optional[List[str]] = None

    class Config:
        use_enum_values = True


class CareerRecommendations(BaseModel):
    best_fit: List[CareerRecommendation] = Field(default_factory=list)
    good_fit: List[CareerRecommendation] = Field(default_factory=list)
    stretch_options: List[CareerRecommendation] = Field(default_factory=list)


class StudentProfileSummary(BaseModel):
    grade: int
    readiness_level: str
    decision_readiness: str
    key_strengths: List[str] = Field(default_factory=list)
    primary_interests: List[str] = Field(default_factory=list)


class YearPlan(BaseModel):
    focus: str
    courses: List[str] = Field(default_factory=list)
    activities: List[str] = Field(default_factory=list)
    milestones: List[str] = Field(default_factory=list)


class PostGradPlan(BaseModel):
    immediate_steps: List[str] = Field(default_factory=list)
    education_path: str
    timeline: str
    estimated_cost: str


class FourYearPlan(BaseModel):
    grade_9: Optional[YearPlan] = None
    grade_10: Optional[YearPlan] = None
    grade_11: Optional[YearPlan] = None
    grade_12: Optional[YearPlan] = None
    post_graduation: PostGradPlan


class ComparisonQuestion(BaseModel):
    question: str
    career_a: str
    career_b: str
    factors: List[str] = Field(default_factory=list)


class RecommendationResult(BaseModel):
    """
    Output contract for the scoring engine.
    The only externally visible artifact; JSON-serializable.
    """
    student_profile_summary: StudentProfileSummary
    top_clusters: List[ClusterScore] = Field(default_factory=list)
    career_recommendations: CareerRecommendations
    four_year_plan: FourYearPlan
    comparison_questions: List[ComparisonQuestion] = Field(default_factory=list)
    disclaimer: str
    generated_at: str

    def to_response(self) -> dict:
        """JSON-ready dict; unset optional parts are omitted."""
        return self.model_dump(mode="json", exclude_none=True)


# =============================================================================
# INTERMEDIATE DATA STRUCTURES
# =============================================================================

class NormalizedProfile(BaseModel):
    """
    StudentProfile after every answer has been checked against the tables.
    Multi-select answers are canonical labels in table order, without duplicates.
    Used internally by the scoring pipeline.
    """
    grade: int
    zip_code: str

    selections: Dict[str, Tuple[str, ...]] = Field(default_factory=dict)
    constraints: Tuple[str, ...] = ()
    performance: Dict[str, float] = Field(default_factory=dict)

    education_level: int
    income: float
    stability: float
    helping: float
    risk: float
    urgency: float
    support: float
    confidence: float

    interests_text: str = ""
    experience_text: str = ""

    class Config:
        frozen = True

    def selected(self, category: str) -> Tuple[str, ...]:
        return self.selections.get(category, ())


class Contribution(BaseModel):
    """One selected answer's share of a cluster score, used for reasoning."""
    weight: float
    rank: Tuple[int, int]    # (category position, option position) for ties
    reason: str


class DimensionScore(BaseModel):
    """Individual dimension score for one cluster."""
    dimension: str
    score: float = Field(ge=0.0, le=1.0)
    weight: float = Field(ge=0.0, le=1.0)
    weighted_score: float = Field(ge=0.0, le=1.0)
    contributions: List[Contribution] = Field(default_factory=list)
    explanation: str = ""


class ScoredCareer(BaseModel):
    """
    A career with its adjusted score and feasibility findings.
    Used between career scoring and classification stages.
    """
    career: Career
    catalog_index: int
    base_score: float
    score: float
    reasoning: List[str] = Field(default_factory=list)
    feasibility_notes: List[str] = Field(default_factory=list)
    education_gap: bool = False


class ScoringRun(BaseModel):
    """
    Everything the engine computed for one profile, before output assembly.

    buckets holds every classified career (sorted, uncapped) keyed by fit category
    value; held_out lists the ids of careers without feasibility notes that
    scored below the good-fit floor. recommendations holds the capped lists
    used in the output.
    """
    profile: NormalizedProfile
    cluster_scores: List[ClusterScore] = Field(default_factory=list)
    buckets: Dict[str, List[CareerRecommendation]] = Field(default_factory=dict)
    held_out: List[str] = Field(default_factory=list)
    recommendations: CareerRecommendations
