from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, JSON, func
from sqlalchemy.orm import relationship
from app.db.session import Base
from app.db.search_text import Searchable

class Skill(Searchable, Base):
    __tablename__ = "skills"
    __search_fields__ = ("category", ("skills", "name"))
    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    category = Column(String(120), nullable=False)
    # [{"name": str, "level": int}]
    skills = Column(JSON, default=list)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    owner = relationship("User", back_populates="skills", lazy="joined")
