from typing import Dict, List
from schema.content import Tab, Project, Skill, SkillGroup, SocialLink, Profile
from util.enum import TabId
import error


PLACEHOLDER_IMAGE = (
    "https://images.unsplash.com/photo-1498050108023-c5249f4df085"
    "?ixlib=rb-4.0.3&auto=format&fit=crop&w=1172&q=80"
)

TABS: List[Tab] = [
    Tab(id=TabId.home, label="Home", icon="home"),
    Tab(id=TabId.about, label="Sobre Mim", icon="user"),
    Tab(id=TabId.projects, label="Projetos", icon="folder-git-2"),
    Tab(id=TabId.contact, label="Contato", icon="message-square"),
]

PROJECTS: List[Project] = [
    Project(
        title="Meu Portfólio",
        description="Meu portfólio pessoal.",
        image="/imgs/home/porflio.png",
        tech=["TypeScript", "React", "Vite", "Tailwind CSS",
              "HTML/CSS/JavaScript", "EmailJs"],
        link="https://kauhan-dev.vercel.app/",
        github="#",
        preview="https://kauhan-dev.vercel.app/",
    ),
    Project(
        title="Portfólio Nutricionista",
        description=(
            "Este é um projeto de site pessoal para a nutricionista Maria "
            "Evellyn, destacando suas especializações em nutrição "
            "materno-infantil, terapia alimentar e nutrição escolar."
        ),
        image="/imgs/home/nutri1.png",
        tech=["TypeScript", "React", "Vite", "Tailwind CSS",
              "HTML/CSS/JavaScript", "Aos"],
        link="https://nutrievellyn.vercel.app/",
        github="#",
        preview="https://nutrievellyn.vercel.app/",
    ),
    Project(
        title="Sistema de cadastramento",
        description=(
            "Aplicação Web para cadastramento de empresas com todas as "
            "informações possíveis."
        ),
        image="/imgs/home/cadastr.png",
        tech=["TypeScript", "React", "Vite", "Tailwind CSS",
              "HTML/CSS/JavaScript"],
        link="https://sistema-cadastramento.vercel.app/",
        github="#",
        preview="https://sistema-cadastramento.vercel.app/",
    ),
]

# Insertion order is the display order on the about tab
SKILLS: List[SkillGroup] = [
    SkillGroup(category="frontend", skills=[
        Skill(name="HTML", icon="🌐"),
        Skill(name="CSS", icon="🎨"),
        Skill(name="JavaScript", icon="📜"),
        Skill(name="TypeScript", icon="💪"),
        Skill(name="Bootstrap", icon="🅱️"),
        Skill(name="Tailwind CSS", icon="🌊"),
    ]),
    SkillGroup(category="backend", skills=[
        Skill(name="Node.js", icon="🟢"),
        Skill(name="PHP", icon="🐘"),
        Skill(name="SQL", icon="📊"),
        Skill(name="PostgreSQL", icon="🗄️"),
    ]),
    SkillGroup(category="frameworks", skills=[
        Skill(name="React.js", icon="⚛️"),
        Skill(name="Next.js", icon="▲"),
        Skill(name="Laravel", icon="🔥"),
        Skill(name="Vite", icon="⚡"),
    ]),
    SkillGroup(category="others", skills=[
        Skill(name="Git", icon="📚"),
        Skill(name="Docker Básico", icon="🐳"),
        Skill(name="UI/UX", icon="🎨"),
    ]),
]

PROFILE = Profile(
    name="Kauhan Hernandes",
    headline="Desenvolvedor Full Stack",
    tagline=(
        "Transformando ideias em código e criando experiências digitais "
        "memoráveis."
    ),
    greeting="Olá!",
    about=[
        "Experiência acadêmicas referente a listas de exercícios mas, e estou "
        "constantemente buscando novas formas de expandir meu conhecimento e "
        "me desafiar. Estou pronto para contribuir, dedicação e criatividade "
        "para projetos que exijam soluções inovadoras e focadas em "
        "resultados.",
        "Estou em busca de oportunidades que me permitam crescer "
        "profissionalmente, ganhando experiência prática e desenvolvendo "
        "minhas habilidades. Se você precisa de alguém motivado e "
        "comprometido, estou à disposição para colaborar em seu projeto.",
    ],
    avatar="/imgs/home/avatar.jpg",
    hero_image=PLACEHOLDER_IMAGE,
    cv_url="/imgs/curriculum/Curriculo Kauhan Hernandes.pdf",
    social_links=[
        SocialLink(label="GitHub", url="https://github.com/kauhanhernandes",
                   icon="github"),
        SocialLink(label="LinkedIn",
                   url="https://www.linkedin.com/in/kauhanhernandes/",
                   icon="linkedin"),
    ],
)

_TABS_BY_ID: Dict[TabId, Tab] = {tab.id: tab for tab in TABS}


def get_tab(tab_id: str) -> Tab:
    """Look up a navigation tab, raising 404 for unknown ids"""
    try:
        return _TABS_BY_ID[TabId(tab_id)]
    except ValueError:
        raise error.ResourceNotFoundError(f"Tab '{tab_id}' not found")
