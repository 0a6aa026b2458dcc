"""
Cluster Definitions & Affinity Maps

The ten fixed career clusters and, for every multi-select question, the
partial-credit affinity each answer option gives to each cluster.
Affinities are independent weights, not a distribution: an option may give
full credit to two clusters at once. A cluster missing from an option's map
has zero affinity.
"""

from types import MappingProxyType
from typing import Dict, Mapping, Tuple

from .contracts import ClusterDefinition, ClusterValueProfile
from .errors import UnrecognizedAnswerValue

# =============================================================================
# CLUSTERS
# =============================================================================

CLUSTERS: Tuple[ClusterDefinition, ...] = (
    ClusterDefinition(
        id="C1",
        name="Skilled Trades & Technical",
        description="Hands-on work with tools, construction, maintenance, and technical skills",
        value_profile=ClusterValueProfile(income=0.6, stability=0.8, helping=0.5, risk=0.3),
        typical_education_level=1,
        keywords=("construction", "repair", "repairs", "repairing", "mechanic", "mechanics",
                  "carpentry", "welding", "electrical", "plumbing", "tools", "farm", "farming",
                  "auto", "shop", "fix", "fixing"),
    ),
    ClusterDefinition(
        id="C2",
        name="Healthcare & Life Sciences",
        description="Caring for people, medical services, and life sciences",
        value_profile=ClusterValueProfile(income=0.7, stability=0.9, helping=0.9, risk=0.2),
        typical_education_level=2,
        keywords=("hospital", "hospitals", "patient", "patients", "nurse", "nursing", "clinic",
                  "health", "medical", "doctor", "doctors", "first aid", "caregiver",
                  "caregiving", "elderly", "biology"),
    ),
    ClusterDefinition(
        id="C3",
        name="Engineering & Technology",
        description="Problem-solving with technology, systems, and innovation",
        value_profile=ClusterValueProfile(income=0.8, stability=0.65, helping=0.4, risk=0.55),
        typical_education_level=3,
        keywords=("computer", "computers", "coding", "programming", "robotics", "engineering",
                  "software", "technology", "electronics", "app", "apps", "website", "websites"),
    ),
    ClusterDefinition(
        id="C4",
        name="Business, Finance & Management",
        description="Managing resources, finances, and business operations",
        value_profile=ClusterValueProfile(income=0.8, stability=0.55, helping=0.3, risk=0.55),
        typical_education_level=3,
        keywords=("business", "finance", "money", "accounting", "manage", "managed", "manager",
                  "managing", "budget", "budgeting", "cashier", "treasurer", "investing", "economics"),
    ),
    ClusterDefinition(
        id="C5",
        name="Arts, Media & Design",
        description="Creative expression, visual arts, and media production",
        value_profile=ClusterValueProfile(income=0.45, stability=0.35, helping=0.4, risk=0.75),
        typical_education_level=2,
        keywords=("art", "drawing", "drawings", "painting", "paintings", "design", "designing",
                  "music", "film", "films", "photography", "video", "videos", "theater", "writing", "band"),
    ),
    ClusterDefinition(
        id="C6",
        name="Education & Social Services",
        description="Teaching, counseling, and supporting community development",
        value_profile=ClusterValueProfile(income=0.5, stability=0.8, helping=0.9, risk=0.25),
        typical_education_level=3,
        keywords=("tutor", "tutored", "tutoring", "teach", "teaching", "mentor", "mentoring",
                  "coach", "coaching", "volunteer", "volunteered", "volunteering", "camp counselor",
                  "childcare", "babysit", "babysitting", "community", "library"),
    ),
    ClusterDefinition(
        id="C7",
        name="Law, Policy & Public Service",
        description="Legal services, policy development, and government work",
        value_profile=ClusterValueProfile(income=0.65, stability=0.8, helping=0.6, risk=0.25),
        typical_education_level=3,
        keywords=("debate", "model un", "model united nations", "student government", "law",
                  "policy", "politics", "court", "justice", "police", "military"),
    ),
    ClusterDefinition(
        id="C8",
        name="Natural Sciences & Research",
        description="Scientific research, environmental work, and discovery",
        value_profile=ClusterValueProfile(income=0.55, stability=0.55, helping=0.6, risk=0.5),
        typical_education_level=3,
        keywords=("research", "lab", "labs", "science fair", "experiment", "experiments",
                  "environment", "nature", "chemistry", "physics", "astronomy", "animals"),
    ),
    ClusterDefinition(
        id="C9",
        name="Sales, Marketing & Communication",
        description="Persuasion, communication, and relationship building",
        value_profile=ClusterValueProfile(income=0.65, stability=0.45, helping=0.3, risk=0.75),
        typical_education_level=2,
        keywords=("sales", "marketing", "social media", "customer", "customers", "retail",
                  "fundraising", "journalism", "newspaper", "public speaking", "yearbook"),
    ),
    ClusterDefinition(
        id="C10",
        name="Entrepreneurship & Innovation",
        description="Starting businesses, innovation, and high-risk ventures",
        value_profile=ClusterValueProfile(income=0.9, stability=0.3, helping=0.45, risk=0.9),
        typical_education_level=2,
        keywords=("started", "own business", "startup", "invent", "invented", "inventing",
                  "side hustle", "sold", "selling", "entrepreneur", "founded", "lemonade", "etsy"),
    ),
)

CLUSTER_BY_ID: Mapping[str, ClusterDefinition] = MappingProxyType({c.id: c for c in CLUSTERS})
CLUSTER_ORDER: Mapping[str, int] = MappingProxyType({c.id: i for i, c in enumerate(CLUSTERS)})

# =============================================================================
# AFFINITY MAPS
# =============================================================================

WORK_ENVIRONMENT_AFFINITY = MappingProxyType({
    "Outdoors (construction sites, farms, parks)": {"C1": 1.0, "C8": 0.5},
    "Indoors (offices, hospitals, schools)": {"C2": 1.0, "C3": 0.5, "C4": 0.5, "C6": 0.5, "C7": 0.5},
    "A mix of indoor and outdoor work": {"C1": 0.75, "C8": 0.75, "C9": 0.5},
    "From home / remote": {"C3": 1.0, "C5": 0.5, "C10": 0.5},
    "Traveling to different locations": {"C9": 1.0, "C10": 0.5, "C7": 0.5},
})

WORK_STYLE_AFFINITY = MappingProxyType({
    "Building, fixing, or working with tools": {"C1": 1.0, "C3": 0.5},
    "Helping people directly": {"C2": 1.0, "C6": 1.0, "C7": 0.5},
    "Working with computers or technology": {"C3": 1.0, "C10": 0.5, "C5": 0.5},
    "Working with numbers, data, or analysis": {"C4": 1.0, "C3": 0.5, "C8": 0.5},
    "Creating designs, art, music, or media": {"C5": 1.0, "C9": 0.5, "C10": 0.5},
})

THINKING_STYLE_AFFINITY = MappingProxyType({
    "Troubleshooting and fixing things": {"C1": 1.0, "C3": 0.5},
    "Helping people overcome challenges": {"C6": 1.0, "C2": 0.5, "C7": 0.5},
    "Understanding how systems or machines work": {"C3": 1.0, "C8": 0.5, "C1": 0.5},
    "Inventing or designing new solutions": {"C10": 1.0, "C5": 0.5, "C3": 0.5},
    "Planning, organizing, or managing projects": {"C4": 1.0, "C7": 0.5, "C6": 0.5},
})

ACADEMIC_INTEREST_AFFINITY = MappingProxyType({
    "Math": {"C3": 1.0, "C4": 0.5, "C8": 0.5},
    "Science (Biology, Chemistry, Physics)": {"C2": 1.0, "C8": 1.0, "C3": 0.5},
    "English / Language Arts": {"C6": 1.0, "C9": 0.5, "C7": 0.5},
    "Social Studies / History": {"C7": 1.0, "C6": 0.5, "C9": 0.5},
    "Art / Creative Subjects": {"C5": 1.0, "C9": 0.5},
    "Physical Education / Health": {"C2": 0.75, "C6": 0.5, "C1": 0.5},
    "Technology / Computer Science": {"C3": 1.0, "C10": 0.5},
    "Foreign Languages": {"C7": 0.75, "C9": 0.5, "C6": 0.5},
    "Business / Economics": {"C4": 1.0, "C10": 0.5, "C9": 0.5},
})

TRAIT_AFFINITY = MappingProxyType({
    "Creative and artistic": {"C5": 1.0, "C10": 0.5},
    "Analytical and logical": {"C3": 1.0, "C4": 0.5, "C8": 0.5},
    "Compassionate and caring": {"C2": 1.0, "C6": 1.0},
    "Leadership-oriented": {"C4": 1.0, "C10": 0.5, "C7": 0.5},
    "Detail-oriented and organized": {"C7": 1.0, "C4": 0.5, "C3": 0.5},
    "Adventurous and willing to take risks": {"C10": 1.0, "C9": 0.5, "C5": 0.5},
    "Patient and persistent": {"C2": 1.0, "C8": 0.5, "C6": 0.5},
    "Outgoing and social": {"C9": 1.0, "C6": 0.5, "C10": 0.5},
    "Independent and self-reliant": {"C10": 1.0, "C1": 0.5, "C5": 0.5},
    "Collaborative and team-focused": {"C6": 1.0, "C4": 0.5, "C2": 0.5},
    "Curious and inquisitive": {"C8": 1.0, "C3": 0.5, "C10": 0.5},
    "Practical and hands-on": {"C1": 1.0, "C2": 0.5},
})

AFFINITY_MAPS: Mapping[str, Mapping[str, Dict[str, float]]] = MappingProxyType({
    "workEnvironment": WORK_ENVIRONMENT_AFFINITY,
    "workStyle": WORK_STYLE_AFFINITY,
    "thinkingStyle": THINKING_STYLE_AFFINITY,
    "academicInterests": ACADEMIC_INTEREST_AFFINITY,
    "traits": TRAIT_AFFINITY,
})

# Categories feeding the interests_preferences dimension, in scoring order
INTEREST_CATEGORIES: Tuple[str, ...] = (
    "workEnvironment", "workStyle", "thinkingStyle", "academicInterests",
)

# Short tags accepted in place of the full option labels
OPTION_ALIASES: Mapping[str, Mapping[str, str]] = MappingProxyType({
    "workEnvironment": MappingProxyType({
        "outdoors": "Outdoors (construction sites, farms, parks)",
        "indoors": "Indoors (offices, hospitals, schools)",
        "mixed": "A mix of indoor and outdoor work",
        "remote": "From home / remote",
        "traveling": "Traveling to different locations",
    }),
    "workStyle": MappingProxyType({
        "hands-on": "Building, fixing, or working with tools",
        "helping": "Helping people directly",
        "technology": "Working with computers or technology",
        "data": "Working with numbers, data, or analysis",
        "creative": "Creating designs, art, music, or media",
    }),
    "thinkingStyle": MappingProxyType({
        "troubleshooting": "Troubleshooting and fixing things",
        "helping": "Helping people overcome challenges",
        "systems": "Understanding how systems or machines work",
        "inventing": "Inventing or designing new solutions",
        "planning": "Planning, organizing, or managing projects",
    }),
    "academicInterests": MappingProxyType({
        "math": "Math",
        "science": "Science (Biology, Chemistry, Physics)",
        "english": "English / Language Arts",
        "social-studies": "Social Studies / History",
        "art": "Art / Creative Subjects",
        "pe-health": "Physical Education / Health",
        "computer-science": "Technology / Computer Science",
        "foreign-languages": "Foreign Languages",
        "business": "Business / Economics",
    }),
    "traits": MappingProxyType({
        "creative": "Creative and artistic",
        "analytical": "Analytical and logical",
        "compassionate": "Compassionate and caring",
        "leadership": "Leadership-oriented",
        "detail-oriented": "Detail-oriented and organized",
        "adventurous": "Adventurous and willing to take risks",
        "patient": "Patient and persistent",
        "outgoing": "Outgoing and social",
        "independent": "Independent and self-reliant",
        "collaborative": "Collaborative and team-focused",
        "curious": "Curious and inquisitive",
        "practical": "Practical and hands-on",
    }),
})

# =============================================================================
# CONSTRAINTS
# =============================================================================

CONSTRAINT_CLOSE_TO_HOME = "Stay close to home"
CONSTRAINT_PREDICTABLE_HOURS = "Predictable hours"
CONSTRAINT_PHYSICAL = "Physical work may be difficult for me"
CONSTRAINT_QUICK_INCOME = "Start earning money as soon as possible"

CONSTRAINT_OPTIONS: Tuple[str, ...] = (
    CONSTRAINT_CLOSE_TO_HOME,
    CONSTRAINT_PREDICTABLE_HOURS,
    CONSTRAINT_PHYSICAL,
    CONSTRAINT_QUICK_INCOME,
)

CONSTRAINT_ALIASES: Mapping[str, str] = MappingProxyType({
    "close-to-home": CONSTRAINT_CLOSE_TO_HOME,
    "predictable-hours": CONSTRAINT_PREDICTABLE_HOURS,
    "physical-limitations": CONSTRAINT_PHYSICAL,
    "earn-quickly": CONSTRAINT_QUICK_INCOME,
})

HANDS_ON_TRAIT = "Practical and hands-on"


# =============================================================================
# LOOKUPS
# =============================================================================

def resolve_option(category: str, value: str) -> str:
    """
    Map an answer (full label or short tag) to its canonical option label.

    Raises:
        UnrecognizedAnswerValue: the answer is not an option of the category
    """
    if category == "constraints":
        options, aliases = CONSTRAINT_OPTIONS, CONSTRAINT_ALIASES
    else:
        options, aliases = AFFINITY_MAPS[category], OPTION_ALIASES[category]

    if isinstance(value, str):
        key = value.strip()
        if key in options:
            return key
        if key.lower() in aliases:
            return aliases[key.lower()]
    raise UnrecognizedAnswerValue(category, value)


def option_order(category: str) -> Mapping[str, int]:
    """Position of every option in its table, used for deterministic ordering."""
    options = CONSTRAINT_OPTIONS if category == "constraints" else tuple(AFFINITY_MAPS[category])
    return {label: i for i, label in enumerate(options)}


def affinity(category: str, option: str, cluster_id: str) -> float:
    return AFFINITY_MAPS[category][option].get(cluster_id, 0.0)
