import os
from typing import Optional
from jinja2 import Environment, FileSystemLoader

from config.setting import settings
from controller.contact import ContactOp
from core.catalog import TABS, PROJECTS, SKILLS, PROFILE, get_tab
from schema.contact import MESSAGE_MAX_LENGTH, MESSAGE_MIN_LENGTH
from util.enum import TabId

ROOT_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

file_loader = FileSystemLoader(
    searchpath=os.path.join(ROOT_DIR, settings.TEMPLATE_FOLDER))
env = Environment(loader=file_loader, auto_reload=True, autoescape=True)


class PortfolioView:

    @staticmethod
    def render_page(tab_id: Optional[str], workflow: ContactOp) -> str:
        """
        Render the whole page with a single section visible.
        Toasts queued for the visitor are consumed by this call.
        """
        active_tab = get_tab(tab_id or TabId.home.value)
        template = env.get_template("index.html")
        return template.render(
            site_title=settings.SITE_TITLE,
            tabs=TABS,
            active_tab=active_tab.id.value,
            profile=PROFILE,
            projects=PROJECTS,
            skill_groups=SKILLS,
            form=workflow.form,
            form_errors=workflow.errors,
            pending=workflow.is_pending,
            notifications=workflow.notifier.drain(),
            recaptcha_site_key=settings.RECAPTCHA_SITE_KEY,
            message_min_length=MESSAGE_MIN_LENGTH,
            message_max_length=MESSAGE_MAX_LENGTH,
        )
