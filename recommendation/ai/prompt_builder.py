from typing import Dict, Any, List
import json
from .safety_rules import SAFETY_RULES, SYSTEM_ROLE_DEFINITION, JSON_OUTPUT_FORMAT_INSTRUCTION

def build_system_prompt() -> str:
    """Constructs the static system prompt."""
    rules_str = "\n".join([f"- {rule}" for rule in SAFETY_RULES])

    return f"""{SYSTEM_ROLE_DEFINITION}

SAFETY RULES (NON-NEGOTIABLE):
{rules_str}

OUTPUT FORMAT:
{JSON_OUTPUT_FORMAT_INSTRUCTION}
"""

def build_user_prompt(student_profile: Dict[str, Any], engine_output: Dict[str, Any], limit: int = 3) -> str:
    """
    Constructs the user prompt from profile and engine results.
    Truncates each career category to save tokens.
    """

    # 1. Sanitize and Format Profile (free text and ZIP code stay out of the prompt)
    profile_summary = {
        "grade": student_profile.get("grade"),
        "work_style": student_profile.get("workStyle", student_profile.get("work_style")),
        "academic_interests": student_profile.get("academicInterests", student_profile.get("academic_interests")),
        "traits": student_profile.get("traits"),
        "constraints": student_profile.get("constraints"),
        "education_willingness": student_profile.get("educationWillingness", student_profile.get("education_willingness")),
        "support_level": student_profile.get("supportLevel", student_profile.get("support_level")),
    }

    # 2. Extract Top Clusters and Careers
    clusters = [
        {"cluster": c.get("name"), "score": c.get("score"), "reasons": c.get("reasoning", [])}
        for c in engine_output.get("top_clusters", [])
    ]

    careers = engine_output.get("career_recommendations", {})
    minimized = {
        category: _minimize_career_data(careers.get(category, [])[:limit])
        for category in ("best_fit", "good_fit", "stretch_options")
    }

    summary = engine_output.get("student_profile_summary", {})

    user_content = f"""
STUDENT PROFILE:
{json.dumps(profile_summary, indent=2)}

ENGINE OUTPUT SUMMARY:
- Academic Readiness: {summary.get("readiness_level")}
- Decision Readiness: {summary.get("decision_readiness")}
- Key Strengths: {json.dumps(summary.get("key_strengths", []))}

TOP CLUSTERS (Ranked):
{json.dumps(clusters, indent=2)}

CAREER RECOMMENDATIONS:
{json.dumps(minimized, indent=2)}

TASK:
Explain these recommendations to the student. Adhere strictly to the safety rules.
"""
    return user_content

def _minimize_career_data(recommendations: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Helper to reduce career dict size for prompt."""
    minimized = []
    for rec in recommendations:
        career = rec.get("career", {})
        minimized.append({
            "id": career.get("career_id"),
            "career": career.get("name"),
            "score": rec.get("score"),
            "reasons": rec.get("reasoning", []),
            "feasibility_notes": rec.get("feasibility_notes", []),
        })
    return minimized
