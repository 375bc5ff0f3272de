from typing import List
from fastapi import APIRouter
from core.catalog import TABS, PROJECTS, SKILLS, PROFILE
from schema.content import Tab, Project, SkillGroup, Profile

content_router = APIRouter(tags=["content"])


@content_router.get("/content/tabs", response_model=List[Tab])
def list_tabs():
    """Navigation tabs in display order"""
    return TABS


@content_router.get("/content/projects", response_model=List[Project])
def list_projects():
    return PROJECTS


@content_router.get("/content/skills", response_model=List[SkillGroup])
def list_skills():
    """Skills grouped by category"""
    return SKILLS


@content_router.get("/content/profile", response_model=Profile)
def get_profile():
    return PROFILE
