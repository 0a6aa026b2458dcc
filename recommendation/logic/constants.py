"""
Scoring Engine Constants

Defines dimension weights, fit thresholds, feasibility penalties and enums used
by the career scoring engine. All values are deterministic with no AI/ML components.
"""

from enum import Enum
from typing import Dict

# =============================================================================
# DIMENSION WEIGHTS
# =============================================================================

# Weights for each cluster scoring dimension (must sum to 1.0)
DIMENSION_WEIGHTS: Dict[str, float] = {
    "interests_preferences": 0.35,  # Work environment, style, thinking, subjects
    "academic_readiness": 0.25,     # Performance + education willingness
    "personality_traits": 0.20,     # Self-described traits
    "values": 0.20,                 # Income/stability/helping/risk alignment
}

# Additive bonus on top of the weighted 1.00
EXPERIENCE_BONUS_MAX = 0.05

# Share of the bonus granted for any substantive experience text;
# the rest scales with keyword hits against the cluster.
EXPERIENCE_PRESENCE_SHARE = 0.5
EXPERIENCE_KEYWORD_SATURATION = 2
EXPERIENCE_MIN_LENGTH = 10

# Academic readiness split
PERFORMANCE_SHARE = 0.6
EDUCATION_REACH_SHARE = 0.4

# Reasoning
MAX_REASONS_PER_CLUSTER = 3
VALUES_REASON_THRESHOLD = 0.7

# =============================================================================
# CAREER SCORING
# =============================================================================

PRIMARY_CLUSTER_WEIGHT = 0.75
SECONDARY_CLUSTER_WEIGHT = 0.25

EDUCATION_GAP_PENALTY = 15        # points per education level above willingness
QUICK_INCOME_MAX_YEARS = 2
QUICK_INCOME_PENALTY_PER_YEAR = 10
PHYSICAL_DEMAND_THRESHOLD = 2
PHYSICAL_DEMAND_PENALTY = 20
IRREGULAR_HOURS_PENALTY = 10
LOW_SUPPORT_THRESHOLD = 0.5
COST_PENALTY = 15
HIGH_CHALLENGE_LEVEL = 3
CHALLENGE_READINESS_FLOOR = 0.4
CHALLENGE_PENALTY = 10
HANDS_ON_BONUS = 5
CHALLENGE_BONUS_LEVEL = 2
CHALLENGE_BONUS_READINESS = 0.67
CHALLENGE_BONUS = 5

# =============================================================================
# CLASSIFICATION THRESHOLDS
# =============================================================================

class FitCategory(str, Enum):
    """Classification categories for career fit."""
    BEST_FIT = "best_fit"              # Strong match, no feasibility concerns
    GOOD_FIT = "good_fit"              # Realistic alternative
    STRETCH_OPTION = "stretch_option"  # Real affinity with a feasibility gap


BEST_FIT_THRESHOLD = 55
GOOD_FIT_THRESHOLD = 35
BEST_FIT_RELATIVE_THRESHOLD = 0.85
GOOD_FIT_RELATIVE_THRESHOLD = 0.70   # careers without notes below both floors are held out

# =============================================================================
# OUTPUT CONFIGURATION
# =============================================================================

MAX_TOP_CLUSTERS = 3

MAX_RECOMMENDATIONS_PER_CATEGORY: Dict[FitCategory, int] = {
    FitCategory.BEST_FIT: 3,
    FitCategory.GOOD_FIT: 3,
    FitCategory.STRETCH_OPTION: 2,
}

MAX_KEY_STRENGTHS = 5
MAX_PRIMARY_INTERESTS = 4
MAX_COMPARISON_CAREERS = 3
MAX_COMPARISON_FACTORS = 3

# Readiness banding (academic readiness of the top cluster)
READINESS_BANDS = (
    (0.67, "High - Academically prepared for your top career paths"),
    (0.40, "Moderate - Building the academic foundation you need"),
    (0.0, "Early - Time to strengthen key subjects"),
)

DECISION_READINESS_BANDS = (
    (0.75, "High - Ready to make decisions"),
    (0.50, "Moderate - Exploring options"),
    (0.0, "Early - Just beginning exploration"),
)

DISCLAIMER = (
    "These recommendations are based on your assessment responses and are meant to "
    "guide your exploration. Consider your personal circumstances, local opportunities, "
    "and changing interests as you make decisions about your future."
)

ENGINE_VERSION = "1.0.0"
