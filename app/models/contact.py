from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, JSON, func
from sqlalchemy.orm import relationship
from app.db.session import Base
from app.db.search_text import Searchable

class Contact(Searchable, Base):
    __tablename__ = "contacts"
    # icons are display hints, not content
    __search_fields__ = (
        "email", "phone", "address", ("social_links", "platform"), ("social_links", "url"), "availability",
    )
    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    email = Column(String(255), nullable=False)
    phone = Column(String(32), nullable=False)
    address = Column(String(255), nullable=False)
    # [{"platform": str, "url": str, "icon": str}]
    social_links = Column(JSON, default=list)
    availability = Column(String(255), nullable=False)
    preferred_contact = Column(String(60), nullable=False)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    owner = relationship("User", back_populates="contacts", lazy="joined")
