"""
Plan Templates

Static text used to build the four-year plan skeleton: core courses, focus
and milestones per grade, plus cluster-specific courses and activities.
Nothing here is computed; the assembler only selects entries.
"""

from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple

from .contracts import Career, PostGradPlan, YearPlan
from .encodings import education_level_name

GRADES: Tuple[int, ...] = (9, 10, 11, 12)

BASE_COURSES: Mapping[int, Tuple[str, ...]] = MappingProxyType({
    9: ("English I", "Algebra I", "Biology", "World History", "PE/Health"),
    10: ("English II", "Geometry", "Chemistry", "World Geography", "PE/Health"),
    11: ("English III", "Algebra II", "Physics", "US History", "Government"),
    12: ("English IV", "Pre-Calculus/Statistics", "Economics", "Electives"),
})

GRADE_FOCUS: Mapping[int, str] = MappingProxyType({
    9: "Build strong academic foundation and explore interests",
    10: "Develop skills and gain experience through activities",
    11: "Focus on career preparation and post-secondary planning",
    12: "Finalize plans and prepare for next steps",
})

GRADE_MILESTONES: Mapping[int, Tuple[str, ...]] = MappingProxyType({
    9: ("Maintain good grades", "Explore career interests", "Join activities"),
    10: ("Take relevant courses", "Gain work experience", "Build skills"),
    11: ("Take SAT/ACT or plan for training programs", "Research programs", "Apply for scholarships"),
    12: ("Complete applications", "Secure funding", "Plan transition"),
})

BASE_ACTIVITIES: Tuple[str, ...] = (
    "Join relevant clubs",
    "Volunteer in community",
    "Part-time work experience",
)

# cluster id -> (extra courses, extra activities)
CLUSTER_ADDITIONS: Mapping[str, Tuple[Tuple[str, ...], Tuple[str, ...]]] = MappingProxyType({
    "C1": (("Shop Class", "Construction Technology"), ("SkillsUSA", "Construction/trade clubs")),
    "C2": (("Health Sciences", "Anatomy & Physiology"), ("HOSA (Health Occupations)", "Hospital volunteering")),
    "C3": (("Computer Science", "Advanced Mathematics"), ("Robotics club", "Coding projects or hackathons")),
    "C4": (("Accounting", "Business Management"), ("FBLA or DECA", "School store or budget committee")),
    "C5": (("Studio Art or Digital Media", "Music or Theater"), ("Build a creative portfolio", "Art, band or drama club")),
    "C6": (("Psychology", "Child Development"), ("Tutoring or peer mentoring", "Youth program volunteering")),
    "C7": (("AP Government", "Speech & Debate"), ("Model UN or mock trial", "Student government")),
    "C8": (("AP Biology or Chemistry", "Environmental Science"), ("Science fair", "Nature or lab internship")),
    "C9": (("Communications", "Marketing"), ("Yearbook or school newspaper", "Fundraising campaigns")),
    "C10": (("Entrepreneurship", "Business Economics"), ("Start a small venture or side project", "Junior Achievement")),
})

# cost_level -> estimate
ESTIMATED_COSTS: Mapping[int, str] = MappingProxyType({
    0: "$5,000 - $15,000",
    1: "$60,000+",
})

UNDECIDED_POST_GRAD = PostGradPlan(
    immediate_steps=["Complete high school", "Explore career options", "Apply to programs"],
    education_path="To be determined based on career choice",
    timeline="1-4 years depending on path",
    estimated_cost="$5,000 - $50,000 depending on program",
)


def year_plan(grade: int, cluster_id: Optional[str]) -> YearPlan:
    """Template plan for one high-school year, tailored to a cluster."""
    courses: List[str] = list(BASE_COURSES.get(grade, ("Core Academic Courses",)))
    activities: List[str] = list(BASE_ACTIVITIES)

    extra_courses, extra_activities = CLUSTER_ADDITIONS.get(cluster_id, ((), ()))
    courses.extend(extra_courses)
    activities.extend(extra_activities)

    return YearPlan(
        focus=GRADE_FOCUS.get(grade, "Academic and career preparation"),
        courses=courses,
        activities=activities,
        milestones=list(GRADE_MILESTONES.get(grade, ("Continue academic progress",))),
    )


def post_graduation_plan(career: Optional[Career]) -> PostGradPlan:
    if career is None:
        return UNDECIDED_POST_GRAD.model_copy(deep=True)

    education = education_level_name(career.edu_required_level)
    return PostGradPlan(
        immediate_steps=[
            "Complete high school with a strong GPA",
            f"Research {education} programs",
            "Apply for financial aid and scholarships",
            "Gain relevant work or volunteer experience",
        ],
        education_path=education,
        timeline=f"{career.time_to_entry_years:g} years to career entry",
        estimated_cost=ESTIMATED_COSTS.get(career.cost_level, ESTIMATED_COSTS[1]),
    )
