"""
Text Explanations

Deterministic, template-based prose built from a RecommendationResult.
Used by the explanations endpoint; no AI involved.
"""

from typing import Dict, List, Optional

from .contracts import CareerRecommendation, ClusterScore, FourYearPlan, RecommendationResult
from .plan_templates import GRADES

CLUSTER_THEMES: Dict[str, str] = {
    "C1": "hands-on work, building, and technical problem-solving",
    "C2": "helping people, healthcare, and life sciences",
    "C3": "technology, engineering, and systematic thinking",
    "C4": "business operations, finance, and management",
    "C5": "creative expression, design, and artistic work",
    "C6": "education, social services, and community support",
    "C7": "law, policy, and public service",
    "C8": "scientific research and discovery",
    "C9": "communication, sales, and relationship building",
    "C10": "entrepreneurship, innovation, and high-risk ventures",
}


def build_explanations(result: RecommendationResult, profile: Optional[dict] = None) -> dict:
    """
    Generate the full explanation bundle for a recommendation result.

    Args:
        result: Result previously produced by the engine
        profile: Optional raw profile, used only to personalize the overview

    Returns:
        Dict with overview, cluster/career/plan explanations and next steps
    """
    return {
        "overview": overview_explanation(result, profile),
        "cluster_explanations": cluster_explanations(result.top_clusters),
        "career_explanations": career_explanations(result),
        "plan_explanation": plan_explanation(result.four_year_plan),
        "next_steps": next_steps(result),
    }


def overview_explanation(result: RecommendationResult, profile: Optional[dict] = None) -> str:
    recs = result.career_recommendations
    top_cluster = result.top_clusters[0].name if result.top_clusters else "several career areas"
    top_career = recs.best_fit[0].career.name if recs.best_fit else "several options"
    readiness = result.student_profile_summary.decision_readiness

    opener = "Based on your assessment"
    if profile and profile.get("grade"):
        opener = f"Based on your assessment as a grade {profile['grade']} student"

    return (
        f"{opener}, you show strong alignment with {top_cluster} careers, particularly {top_career}. "
        f"Your career readiness level is {readiness.lower()}, which means {_readiness_description(readiness)}. "
        f"We've identified {len(recs.best_fit)} best-fit careers, {len(recs.good_fit)} good alternatives, "
        f"and {len(recs.stretch_options)} stretch options for your consideration."
    )


def cluster_explanations(clusters: List[ClusterScore]) -> List[dict]:
    explanations = []
    for cluster in clusters:
        because = ", ".join(cluster.reasoning[:3]).lower() or "of your overall answers"
        explanations.append({
            "cluster_name": cluster.name,
            "score": cluster.score,
            "explanation": (
                f"You scored {cluster.score}% in {cluster.name} because {because}. "
                f"This suggests you would thrive in careers that involve "
                f"{CLUSTER_THEMES.get(cluster.cluster_id, 'various professional activities')}."
            ),
        })
    return explanations


def career_explanations(result: RecommendationResult) -> Dict[str, List[dict]]:
    recs = result.career_recommendations
    return {
        "best_fit": [_explain(rec, _best_fit_text) for rec in recs.best_fit],
        "good_fit": [_explain(rec, _good_fit_text) for rec in recs.good_fit],
        "stretch_options": [_explain(rec, _stretch_text) for rec in recs.stretch_options],
    }


def plan_explanation(plan: FourYearPlan) -> str:
    first_grade = next((g for g in GRADES if getattr(plan, f"grade_{g}") is not None), None)
    first_year = getattr(plan, f"grade_{first_grade}") if first_grade else None
    focus = first_year.focus.lower() if first_year else "academic foundation building"
    start = f"grade {first_grade}" if first_grade else "high school"

    return (
        f"Your four-year plan starts in {start} with a focus to {focus}. "
        f"Each year builds toward your career goals with specific courses, activities, and milestones. "
        f"After graduation, you'll pursue {plan.post_graduation.education_path.lower()} "
        f"with an estimated timeline of {plan.post_graduation.timeline}."
    )


def next_steps(result: RecommendationResult) -> List[str]:
    steps = [
        "Review your top career matches and research what daily work looks like",
        "Talk to professionals in your fields of interest through informational interviews",
        "Explore relevant courses and activities mentioned in your four-year plan",
    ]
    if result.comparison_questions:
        steps.append("Consider the comparison questions to help narrow your choices")
    steps.append("Meet with your school counselor to discuss these recommendations and create an action plan")
    return steps


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def _explain(rec: CareerRecommendation, text) -> dict:
    return {"career_name": rec.career.name, "score": rec.score, "explanation": text(rec)}


def _best_fit_text(rec: CareerRecommendation) -> str:
    tail = (
        "Note: " + " ".join(rec.feasibility_notes)
        if rec.feasibility_notes
        else "This career aligns well with your current preferences and constraints."
    )
    return f"{rec.career.name} is a {rec.score}% match because {' and '.join(r.lower() for r in rec.reasoning)}. {tail}"


def _good_fit_text(rec: CareerRecommendation) -> str:
    parts = [f"{rec.career.name} scored {rec.score}% as a good alternative option.", ". ".join(rec.reasoning) + "."]
    if rec.feasibility_notes:
        parts.append("Consider: " + ". ".join(rec.feasibility_notes) + ".")
    return " ".join(parts)


def _stretch_text(rec: CareerRecommendation) -> str:
    detail = (
        ". ".join(rec.feasibility_notes) + "."
        if rec.feasibility_notes
        else "This career may require additional preparation or different circumstances."
    )
    return f"{rec.career.name} is a stretch option that could be worth exploring as you develop. {detail}"


def _readiness_description(readiness: str) -> str:
    if readiness.startswith("High"):
        return "you're ready to make concrete decisions about your future"
    if readiness.startswith("Moderate"):
        return "you're actively exploring and narrowing your options"
    return "you're in the early stages of career exploration, which is perfectly normal"
