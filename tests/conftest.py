from pathlib import Path
from typing import Any

import pytest

CONTACT_SENTENCE = (
    "Contactez Jean Dupont à jean.dupont@example.com ou au 06 12 34 56 78, "
    "chez Dupont Consulting SARL à Paris."
)


@pytest.fixture()
def sample_sentence() -> str:
    """A sentence holding one entity of each default category."""
    return CONTACT_SENTENCE


@pytest.fixture()
def form_data() -> dict[str, Any]:
    """Raw form JSON as submitted by the UI (camelCase keys)."""
    return {
        "name": "Jean Dupont",
        "email": "jean@example.com",
        "profileType": "freelance",
        "tagline": "Consultant data à Lyon",
        "services": ["Audit", "Formation"],
        "valueProp": "",
        "phone": "06 12 34 56 78",
        "address": "",
        "openingHours": "",
        "socialLinks": [{"platform": "linkedin", "url": "https://linkedin.com/in/jdupont"}],
        "socialIsMain": False,
        "projects": [
            {
                "title": "Refonte",
                "description": "Mission pour Dupont Consulting SARL",
                "image": "img/refonte.png",
                "link": "https://example.org/refonte",
            }
        ],
        "testimonials": [],
        "aboutImage": "",
    }


@pytest.fixture()
def templates_dir(tmp_path: Path) -> Path:
    """A templates directory with one small template, ``mini.html``."""
    (tmp_path / "mini.html").write_text(
        "<h1>{{HERO_TITLE}}</h1>\n"
        "<p>{{ABOUT_TEXT}}</p>\n"
        "<!-- IF: showProjects -->\n"
        "<!-- REPEAT: projects -->"
        '<a href="{{PROJECT_LINK}}">{{PROJECT_TITLE}}</a>'
        "<!-- END REPEAT: projects -->\n"
        "<!-- ENDIF: showProjects -->\n"
        "<!-- IF: hasPhone --><p>{{CONTACT_PHONE}}</p><!-- ENDIF: hasPhone -->\n",
        encoding="utf-8",
    )
    return tmp_path
