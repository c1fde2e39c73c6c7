from app.content.crud import build_router
from app.models.about import About
from app.models.contact import Contact
from app.models.education import Education
from app.models.project import Project
from app.models.skill import Skill
from app.schemas.content import (
    AboutCreate, AboutOut, AboutUpdate,
    ContactCreate, ContactOut, ContactUpdate,
    EducationCreate, EducationOut, EducationUpdate,
    ProjectCreate, ProjectOut, ProjectUpdate,
    SkillCreate, SkillOut, SkillUpdate,
)

projects_router = build_router(
    prefix="/api/projects", tag="projects", model=Project, label="Project",
    create_schema=ProjectCreate, update_schema=ProjectUpdate, out_schema=ProjectOut,
    # signed-in non-admins manage their own projects
    scope_list_to_caller=True,
)

skills_router = build_router(
    prefix="/api/skills", tag="skills", model=Skill, label="Skill",
    create_schema=SkillCreate, update_schema=SkillUpdate, out_schema=SkillOut,
)

educations_router = build_router(
    prefix="/api/educations", tag="educations", model=Education, label="Education",
    create_schema=EducationCreate, update_schema=EducationUpdate, out_schema=EducationOut,
)

about_router = build_router(
    prefix="/api/about", tag="about", model=About, label="About",
    create_schema=AboutCreate, update_schema=AboutUpdate, out_schema=AboutOut,
)

contact_router = build_router(
    prefix="/api/contact", tag="contact", model=Contact, label="Contact",
    create_schema=ContactCreate, update_schema=ContactUpdate, out_schema=ContactOut,
)

routers = [projects_router, skills_router, educations_router, about_router, contact_router]
