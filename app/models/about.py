from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, JSON, func
from sqlalchemy.orm import relationship
from app.db.session import Base
from app.db.search_text import Searchable

class About(Searchable, Base):
    __tablename__ = "abouts"
    __search_fields__ = ("title", "description", "objectives", "skills_focus", "career_goals")
    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    objectives = Column(JSON, default=list)
    skills_focus = Column(JSON, default=list)
    career_goals = Column(JSON, default=list)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    owner = relationship("User", back_populates="abouts", lazy="joined")
