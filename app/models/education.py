from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, JSON, func
from sqlalchemy.orm import relationship
from app.db.session import Base
from app.db.search_text import Searchable

class Education(Searchable, Base):
    __tablename__ = "educations"
    __search_fields__ = (
        "school", "degree", "field_of_study", "description",
        "achievements", "certificates", "activities",
    )
    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    school = Column(String(255), nullable=False)
    degree = Column(String(255), default="")
    field_of_study = Column(String(255), default="")
    start_date = Column(String(32), default="")
    end_date = Column(String(32), default="")
    grade = Column(String(60), default="")
    description = Column(Text, default="")
    achievements = Column(JSON, default=list)
    certificates = Column(JSON, default=list)
    activities = Column(JSON, default=list)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    owner = relationship("User", back_populates="educations", lazy="joined")
