from pydantic import BaseModel
from typing import List
from util.enum import TabId


class Tab(BaseModel):
    id: TabId
    label: str
    icon: str


class Project(BaseModel):
    title: str
    description: str
    image: str
    tech: List[str]
    link: str
    github: str
    preview: str


class Skill(BaseModel):
    name: str
    icon: str


class SkillGroup(BaseModel):
    category: str
    skills: List[Skill]

    @property
    def title(self) -> str:
        return self.category[:1].upper() + self.category[1:]


class SocialLink(BaseModel):
    label: str
    url: str
    icon: str


class Profile(BaseModel):
    name: str
    headline: str
    tagline: str
    greeting: str
    about: List[str]
    avatar: str
    hero_image: str
    cv_url: str
    social_links: List[SocialLink]
