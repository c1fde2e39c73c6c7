from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, JSON, func
from sqlalchemy.orm import relationship
from app.db.session import Base
from app.db.search_text import Searchable

class Project(Searchable, Base):
    __tablename__ = "projects"
    __search_fields__ = (
        "title", "description", "role", "github_url", "demo_url", "project_type", "status",
        ("technologies", "category"), ("technologies", "items"),
        "main_features", "responsibilities", "achievements",
    )
    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, default="")
    image_url = Column(String(512), default="")
    role = Column(String(120), default="")
    team_size = Column(Integer, default=1)
    github_url = Column(String(512), default="")
    demo_url = Column(String(512), default="")
    start_date = Column(String(32), default="")
    end_date = Column(String(32), default="")
    # [{"category": str, "items": [str]}]
    technologies = Column(JSON, default=list)
    main_features = Column(JSON, default=list)
    responsibilities = Column(JSON, default=list)
    achievements = Column(JSON, default=list)
    project_type = Column(String(60), default="")
    status = Column(String(60), default="")
    grade = Column(String(60), default="")
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    owner = relationship("User", back_populates="projects", lazy="joined")
