from sqlalchemy import Column, Integer, String, DateTime, func
from sqlalchemy.orm import relationship
from app.db.session import Base
from app.db.search_text import Searchable

class User(Searchable, Base):
    __tablename__ = "users"
    __search_fields__ = ("fullname", "email", "phone", "address", "specialization")
    id = Column(Integer, primary_key=True, index=True)
    fullname = Column(String(120), nullable=False)
    birthday = Column(String(32), default="")
    email = Column(String(255), unique=True, index=True, nullable=False)
    phone = Column(String(32), default="")
    password_hash = Column(String(255), nullable=False)
    address = Column(String(255), default="")
    specialization = Column(String(255), default="")
    avatar_url = Column(String(512), default="")
    role = Column(String(20), default="user", nullable=False)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    projects = relationship("Project", back_populates="owner", cascade="all, delete-orphan")
    skills = relationship("Skill", back_populates="owner", cascade="all, delete-orphan")
    educations = relationship("Education", back_populates="owner", cascade="all, delete-orphan")
    abouts = relationship("About", back_populates="owner", cascade="all, delete-orphan")
    contacts = relationship("Contact", back_populates="owner", cascade="all, delete-orphan")
