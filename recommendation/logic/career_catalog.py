"""
Career Catalog

Static career reference data. The built-in catalog is used unless the
rec_careers table holds rows, in which case the table wins.
"""

import logging
from typing import List, Optional, Tuple

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .contracts import Career

logger = logging.getLogger(__name__)

# (career_id, name, primary, secondary, edu, challenge, physical, years, cost, irregular_hours, description)
_CATALOG_ROWS = (
    # C1 Skilled Trades & Technical
    ("electrician", "Electrician", "C1", "C3", 1, 2, 2, 4, 0, False,
     "Installs and maintains electrical systems in homes and businesses"),
    ("plumber", "Plumber", "C1", None, 1, 2, 3, 4, 0, True,
     "Installs and repairs water, gas and drainage systems"),
    ("hvac-technician", "HVAC Technician", "C1", "C3", 1, 2, 2, 1.5, 0, True,
     "Services heating, ventilation and air conditioning equipment"),
    ("automotive-technician", "Automotive Technician", "C1", None, 1, 1, 2, 1, 0, False,
     "Diagnoses and repairs cars and light trucks"),
    ("welder", "Welder", "C1", None, 1, 1, 3, 1, 0, False,
     "Joins metal parts for construction and manufacturing"),
    ("carpenter", "Carpenter", "C1", "C10", 0, 1, 3, 3, 0, False,
     "Builds and repairs wooden structures and frameworks"),
    # C2 Healthcare & Life Sciences
    ("registered-nurse", "Registered Nurse", "C2", "C6", 2, 2, 2, 3, 1, True,
     "Provides and coordinates patient care in hospitals and clinics"),
    ("medical-assistant", "Medical Assistant", "C2", None, 1, 1, 1, 1, 0, False,
     "Supports physicians with clinical and administrative tasks"),
    ("physical-therapist", "Physical Therapist", "C2", "C6", 3, 3, 2, 7, 1, False,
     "Helps patients recover movement after injury or illness"),
    ("dental-hygienist", "Dental Hygienist", "C2", None, 2, 2, 1, 3, 0, False,
     "Cleans teeth and educates patients on oral health"),
    ("emt-paramedic", "EMT / Paramedic", "C2", "C7", 1, 2, 3, 1, 0, True,
     "Responds to medical emergencies and provides urgent care"),
    ("physician", "Physician", "C2", "C8", 3, 3, 1, 11, 1, True,
     "Diagnoses and treats illness and injury"),
    # C3 Engineering & Technology
    ("software-developer", "Software Developer", "C3", "C10", 3, 3, 0, 4, 1, False,
     "Designs and builds applications and software systems"),
    ("it-support-specialist", "IT Support Specialist", "C3", "C1", 1, 1, 0, 1, 0, False,
     "Keeps computers, networks and users running smoothly"),
    ("mechanical-engineer", "Mechanical Engineer", "C3", "C1", 3, 3, 1, 4, 1, False,
     "Designs machines, engines and mechanical systems"),
    ("civil-engineer", "Civil Engineer", "C3", "C7", 3, 3, 1, 4, 1, False,
     "Plans and oversees roads, bridges and public infrastructure"),
    ("cybersecurity-analyst", "Cybersecurity Analyst", "C3", "C7", 3, 3, 0, 4, 1, True,
     "Protects organizations from digital threats"),
    ("engineering-technician", "Engineering Technician", "C3", "C1", 2, 2, 1, 2, 0, False,
     "Supports engineers with testing, drafting and production"),
    # C4 Business, Finance & Management
    ("accountant", "Accountant", "C4", None, 3, 2, 0, 4, 1, False,
     "Prepares and examines financial records"),
    ("financial-analyst", "Financial Analyst", "C4", "C10", 3, 3, 0, 4, 1, False,
     "Evaluates investments and financial performance"),
    ("bookkeeper", "Bookkeeper", "C4", None, 1, 1, 0, 1, 0, False,
     "Records day-to-day financial transactions"),
    ("operations-manager", "Operations Manager", "C4", "C9", 3, 2, 0, 6, 1, False,
     "Runs the daily operations of a business"),
    ("human-resources-specialist", "Human Resources Specialist", "C4", "C6", 3, 2, 0, 4, 1, False,
     "Recruits, trains and supports employees"),
    # C5 Arts, Media & Design
    ("graphic-designer", "Graphic Designer", "C5", "C9", 2, 2, 0, 2, 0, False,
     "Creates visual concepts for print and digital media"),
    ("photographer", "Photographer", "C5", "C10", 0, 1, 1, 1, 0, True,
     "Captures images for clients, publications and events"),
    ("video-editor", "Video Editor", "C5", "C3", 2, 2, 0, 2, 0, True,
     "Assembles footage into finished film and video"),
    ("ux-designer", "UX Designer", "C5", "C3", 3, 2, 0, 4, 1, False,
     "Designs how people experience apps and websites"),
    ("musician", "Musician", "C5", None, 0, 2, 1, 2, 0, True,
     "Performs, composes or records music"),
    # C6 Education & Social Services
    ("elementary-teacher", "Elementary School Teacher", "C6", None, 3, 2, 1, 4, 1, False,
     "Teaches core subjects to young students"),
    ("school-counselor", "School Counselor", "C6", "C2", 3, 2, 0, 6, 1, False,
     "Guides students through academic and personal challenges"),
    ("social-worker", "Social Worker", "C6", "C7", 3, 2, 1, 4, 1, True,
     "Helps individuals and families cope with life challenges"),
    ("teacher-assistant", "Teacher Assistant", "C6", None, 1, 1, 1, 1, 0, False,
     "Supports teachers with instruction and classroom management"),
    ("childcare-worker", "Childcare Worker", "C6", "C2", 0, 1, 2, 0.5, 0, False,
     "Cares for children in daycare and after-school programs"),
    # C7 Law, Policy & Public Service
    ("lawyer", "Lawyer", "C7", "C4", 3, 3, 0, 7, 1, True,
     "Advises and represents clients in legal matters"),
    ("paralegal", "Paralegal", "C7", None, 2, 2, 0, 2, 0, False,
     "Supports lawyers with research and case preparation"),
    ("police-officer", "Police Officer", "C7", "C6", 1, 2, 3, 1, 0, True,
     "Protects communities and enforces laws"),
    ("policy-analyst", "Policy Analyst", "C7", "C8", 3, 3, 0, 5, 1, False,
     "Researches and evaluates public policy"),
    ("firefighter", "Firefighter", "C7", "C2", 1, 2, 3, 1, 0, True,
     "Responds to fires and emergencies to protect lives and property"),
    # C8 Natural Sciences & Research
    ("environmental-scientist", "Environmental Scientist", "C8", "C7", 3, 3, 1, 4, 1, False,
     "Studies and protects the natural environment"),
    ("lab-technician", "Laboratory Technician", "C8", "C2", 2, 2, 1, 2, 0, False,
     "Runs tests and experiments in scientific labs"),
    ("wildlife-biologist", "Wildlife Biologist", "C8", None, 3, 3, 2, 4, 1, True,
     "Studies animals and their habitats"),
    ("chemist", "Chemist", "C8", "C3", 3, 3, 1, 4, 1, False,
     "Researches chemical substances and develops new materials"),
    ("forestry-technician", "Forestry Technician", "C8", "C1", 1, 1, 3, 1.5, 0, False,
     "Maintains forests and collects field data"),
    # C9 Sales, Marketing & Communication
    ("marketing-specialist", "Marketing Specialist", "C9", "C4", 3, 2, 0, 4, 1, False,
     "Plans campaigns that promote products and brands"),
    ("sales-representative", "Sales Representative", "C9", "C4", 0, 1, 1, 0.5, 0, True,
     "Builds client relationships and sells products"),
    ("public-relations-specialist", "Public Relations Specialist", "C9", "C5", 3, 2, 0, 4, 1, True,
     "Shapes how organizations communicate with the public"),
    ("journalist", "Journalist", "C9", "C5", 3, 2, 1, 4, 1, True,
     "Researches, writes and reports the news"),
    ("social-media-coordinator", "Social Media Coordinator", "C9", "C5", 2, 1, 0, 2, 0, False,
     "Creates content and manages social media channels"),
    # C10 Entrepreneurship & Innovation
    ("small-business-owner", "Small Business Owner", "C10", "C4", 0, 2, 1, 1, 0, True,
     "Starts and runs an independent business"),
    ("startup-founder", "Startup Founder", "C10", "C3", 2, 3, 0, 2, 1, True,
     "Builds a new company around an innovative product"),
    ("product-manager", "Product Manager", "C10", "C3", 3, 3, 0, 5, 1, False,
     "Decides what a product should do and guides its development"),
    ("real-estate-agent", "Real Estate Agent", "C10", "C9", 1, 1, 1, 0.5, 0, True,
     "Helps clients buy and sell property"),
)


def _build_catalog(rows) -> Tuple[Career, ...]:
    return tuple(
        Career(
            career_id=career_id,
            name=name,
            primary_cluster=primary,
            secondary_cluster=secondary,
            edu_required_level=edu,
            challenge_level=challenge,
            physical_demand=physical,
            time_to_entry_years=years,
            cost_level=cost,
            irregular_hours=irregular,
            description=description,
        )
        for career_id, name, primary, secondary, edu, challenge, physical, years, cost, irregular, description in rows
    )


DEFAULT_CAREERS: Tuple[Career, ...] = _build_catalog(_CATALOG_ROWS)


def load_career_catalog(db: Optional[Session] = None) -> List[Career]:
    """
    Load the career catalog.

    Reads rec_careers (ordered by sort_order, then id) when a session is
    given and the table has rows; otherwise returns the built-in catalog.

    Args:
        db: Optional database session

    Returns:
        Careers in catalog order
    """
    if db is None:
        return list(DEFAULT_CAREERS)

    from ..models.career import RecCareer

    try:
        rows = db.execute(
            select(RecCareer).order_by(RecCareer.sort_order, RecCareer.id)
        ).scalars().all()
    except SQLAlchemyError as e:
        logger.warning(f"⚠️ Could not read career catalog from database, using built-in catalog: {e}")
        return list(DEFAULT_CAREERS)

    if not rows:
        logger.warning("⚠️ rec_careers is empty, using built-in catalog")
        return list(DEFAULT_CAREERS)

    careers = [row.to_career() for row in rows]
    logger.info(f"📚 Loaded {len(careers)} careers from database")
    return careers


def seed_career_catalog(db: Session, careers: Optional[List[Career]] = None) -> int:
    """Insert the given (default: built-in) careers into rec_careers. Returns rows added."""
    from ..models.career import RecCareer

    careers = careers if careers is not None else list(DEFAULT_CAREERS)
    for index, career in enumerate(careers):
        db.add(RecCareer.from_career(career, sort_order=index))
    db.flush()
    return len(careers)
