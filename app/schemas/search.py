from typing import Literal
from pydantic import BaseModel
from app.schemas.user import UserOut
from app.schemas.content import ProjectOut, SkillOut, EducationOut, AboutOut, ContactOut

Collection = Literal["users", "projects", "skills", "education", "about", "contact"]

class SearchIn(BaseModel):
    query: str | None = None
    filters: list[Collection] | None = None

class SearchResults(BaseModel):
    users: list[UserOut] = []
    projects: list[ProjectOut] = []
    skills: list[SkillOut] = []
    education: list[EducationOut] = []
    about: list[AboutOut] = []
    contact: list[ContactOut] = []
    total: int = 0

class SearchOut(BaseModel):
    query: str
    filters: list[Collection] | None = None
    results: SearchResults
    message: str
