from datetime import datetime
from pydantic import BaseModel, Field
from app.schemas.user import OwnerOut


class Technology(BaseModel):
    category: str
    items: list[str] = []

class SkillItem(BaseModel):
    name: str
    level: int = Field(50, ge=0, le=100)

class SocialLink(BaseModel):
    platform: str
    url: str
    icon: str = ""


class ContentOut(BaseModel):
    id: int
    user_id: int
    owner: OwnerOut | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    class Config:
        from_attributes = True


class OwnedIn(BaseModel):
    # only honoured for admin callers
    user_id: int | None = None


class ProjectCreate(OwnedIn):
    title: str = Field(min_length=1, max_length=255)
    description: str = ""
    image_url: str = ""
    role: str = ""
    team_size: int = Field(1, ge=1)
    github_url: str = ""
    demo_url: str = ""
    start_date: str = ""
    end_date: str = ""
    technologies: list[Technology] = []
    main_features: list[str] = []
    responsibilities: list[str] = []
    achievements: list[str] = []
    project_type: str = ""
    status: str = ""
    grade: str = ""

class ProjectUpdate(BaseModel):
    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    image_url: str | None = None
    role: str | None = None
    team_size: int | None = Field(default=None, ge=1)
    github_url: str | None = None
    demo_url: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    technologies: list[Technology] | None = None
    main_features: list[str] | None = None
    responsibilities: list[str] | None = None
    achievements: list[str] | None = None
    project_type: str | None = None
    status: str | None = None
    grade: str | None = None

class ProjectOut(ContentOut):
    title: str
    description: str | None = ""
    image_url: str | None = ""
    role: str | None = ""
    team_size: int | None = 1
    github_url: str | None = ""
    demo_url: str | None = ""
    start_date: str | None = ""
    end_date: str | None = ""
    technologies: list[Technology] = []
    main_features: list[str] = []
    responsibilities: list[str] = []
    achievements: list[str] = []
    project_type: str | None = ""
    status: str | None = ""
    grade: str | None = ""


class SkillCreate(OwnedIn):
    category: str = Field(min_length=1, max_length=120)
    skills: list[SkillItem] = []

class SkillUpdate(BaseModel):
    category: str | None = Field(default=None, min_length=1, max_length=120)
    skills: list[SkillItem] | None = None

class SkillOut(ContentOut):
    category: str
    skills: list[SkillItem] = []


class EducationCreate(OwnedIn):
    school: str = Field(min_length=1, max_length=255)
    degree: str = ""
    field_of_study: str = ""
    start_date: str = ""
    end_date: str = ""
    grade: str = ""
    description: str = ""
    achievements: list[str] = []
    certificates: list[str] = []
    activities: list[str] = []

class EducationUpdate(BaseModel):
    school: str | None = Field(default=None, min_length=1, max_length=255)
    degree: str | None = None
    field_of_study: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    grade: str | None = None
    description: str | None = None
    achievements: list[str] | None = None
    certificates: list[str] | None = None
    activities: list[str] | None = None

class EducationOut(ContentOut):
    school: str
    degree: str | None = ""
    field_of_study: str | None = ""
    start_date: str | None = ""
    end_date: str | None = ""
    grade: str | None = ""
    description: str | None = ""
    achievements: list[str] = []
    certificates: list[str] = []
    activities: list[str] = []


class AboutCreate(OwnedIn):
    title: str = Field(min_length=1, max_length=255)
    description: str = Field(min_length=1)
    objectives: list[str] = []
    skills_focus: list[str] = []
    career_goals: list[str] = []

class AboutUpdate(BaseModel):
    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = Field(default=None, min_length=1)
    objectives: list[str] | None = None
    skills_focus: list[str] | None = None
    career_goals: list[str] | None = None

class AboutOut(ContentOut):
    title: str
    description: str
    objectives: list[str] = []
    skills_focus: list[str] = []
    career_goals: list[str] = []


class ContactCreate(OwnedIn):
    email: str = Field(min_length=3, max_length=255)
    phone: str = Field(min_length=1, max_length=32)
    address: str = Field(min_length=1, max_length=255)
    social_links: list[SocialLink] = []
    availability: str = Field(min_length=1, max_length=255)
    preferred_contact: str = Field(min_length=1, max_length=60)

class ContactUpdate(BaseModel):
    email: str | None = Field(default=None, min_length=3, max_length=255)
    phone: str | None = Field(default=None, min_length=1, max_length=32)
    address: str | None = Field(default=None, min_length=1, max_length=255)
    social_links: list[SocialLink] | None = None
    availability: str | None = Field(default=None, min_length=1, max_length=255)
    preferred_contact: str | None = Field(default=None, min_length=1, max_length=60)

class ContactOut(ContentOut):
    email: str
    phone: str
    address: str
    social_links: list[SocialLink] = []
    availability: str
    preferred_contact: str
