from sqlalchemy import Boolean, Column, Float, Integer, String, Text

from .base import Base
from recommendation.logic.contracts import Career


class RecCareer(Base):
    __tablename__ = "rec_careers"

    id = Column(Integer, primary_key=True)
    career_id = Column(String, unique=True, nullable=False, index=True)
    name = Column(String, nullable=False)
    primary_cluster = Column(String, nullable=False)
    secondary_cluster = Column(String)
    edu_required_level = Column(Integer, nullable=False, default=0)
    challenge_level = Column(Integer, nullable=False, default=0)
    physical_demand = Column(Integer, nullable=False, default=0)
    time_to_entry_years = Column(Float, nullable=False, default=0.0)
    cost_level = Column(Integer, nullable=False, default=0)
    irregular_hours = Column(Boolean, nullable=False, default=False)
    description = Column(Text)
    sort_order = Column(Integer, nullable=False, default=0)

    def to_career(self) -> Career:
        return Career(
            career_id=self.career_id,
            name=self.name,
            primary_cluster=self.primary_cluster,
            secondary_cluster=self.secondary_cluster or None,
            edu_required_level=self.edu_required_level,
            challenge_level=self.challenge_level,
            physical_demand=self.physical_demand,
            time_to_entry_years=self.time_to_entry_years,
            cost_level=self.cost_level,
            irregular_hours=bool(self.irregular_hours),
            description=self.description or "",
        )

    @classmethod
    def from_career(cls, career: Career, sort_order: int = 0) -> "RecCareer":
        return cls(sort_order=sort_order, **career.model_dump())
