# portfolio_builder/domain/components.py
from __future__ import annotations

import copy
import uuid
from typing import Any, Dict, List, Optional, TypedDict


class ComponentDefinition(TypedDict):
    """
    Catalog entry used to instantiate new component records.

    defaultProps is never handed out directly; every record gets its own
    deep copy.
    """
    type: str
    name: str
    icon: str
    category: str
    description: str
    defaultProps: Dict[str, Any]


class _ComponentRecordBase(TypedDict):
    id: str
    type: str
    props: Dict[str, Any]


class ComponentRecord(_ComponentRecordBase, total=False):
    children: List["ComponentRecord"]


CATEGORIES = ("layout", "content")

COMPONENT_DEFINITIONS: tuple[ComponentDefinition, ...] = (
    {
        "type": "header",
        "name": "Header",
        "icon": "fas fa-heading",
        "category": "layout",
        "description": "Navigation header with logo and menu",
        "defaultProps": {
            "name": "John Doe",
            "title": "Full Stack Developer",
            "navItems": ["About", "Projects", "Skills", "Contact"],
        },
    },
    {
        "type": "hero",
        "name": "Hero Section",
        "icon": "fas fa-star",
        "category": "layout",
        "description": "Main hero section with title and CTA",
        "defaultProps": {
            "title": "Building Digital Experiences",
            "subtitle": (
                "I'm a passionate developer who loves creating beautiful, "
                "functional websites and applications that make a difference."
            ),
            "primaryButtonText": "View My Work",
            "secondaryButtonText": "Download Resume",
        },
    },
    {
        "type": "about",
        "name": "About Me",
        "icon": "fas fa-user",
        "category": "layout",
        "description": "About section with bio and photo",
        "defaultProps": {
            "title": "About Me",
            "content": "I am a passionate developer with experience in modern web technologies.",
            "imageUrl": "",
        },
    },
    {
        "type": "projects",
        "name": "Projects",
        "icon": "fas fa-code",
        "category": "layout",
        "description": "Showcase of your projects",
        "defaultProps": {
            "title": "Featured Projects",
            "subtitle": "Here are some of the projects I've worked on recently",
            "projects": [
                {
                    "title": "Analytics Dashboard",
                    "description": "A comprehensive dashboard for data visualization",
                    "technologies": ["React", "Node.js"],
                    "imageUrl": "",
                    "link": "#",
                }
            ],
        },
    },
    {
        "type": "skills",
        "name": "Skills",
        "icon": "fas fa-cogs",
        "category": "layout",
        "description": "Display your technical skills",
        "defaultProps": {
            "title": "Skills",
            "skills": ["JavaScript", "React", "Node.js", "Python", "SQL"],
        },
    },
    {
        "type": "contact",
        "name": "Contact",
        "icon": "fas fa-envelope",
        "category": "layout",
        "description": "Contact form and information",
        "defaultProps": {
            "title": "Get In Touch",
            "email": "contact@example.com",
            "phone": "+1 (555) 123-4567",
            "showForm": True,
        },
    },
)

_BY_TYPE = {definition["type"]: definition for definition in COMPONENT_DEFINITIONS}

COMPONENT_TYPES = frozenset(_BY_TYPE)


def list_definitions(category: Optional[str] = None) -> List[ComponentDefinition]:
    """
    Return catalog entries, optionally restricted to one category.

    Entries are deep copies so callers cannot reach the catalog defaults.
    """
    return [
        copy.deepcopy(definition)
        for definition in COMPONENT_DEFINITIONS
        if category is None or definition["category"] == category
    ]


def get_definition(component_type: str) -> Optional[ComponentDefinition]:
    definition = _BY_TYPE.get(component_type)
    return copy.deepcopy(definition) if definition else None


def default_props(component_type: str) -> Dict[str, Any]:
    """Fresh copy of the defaults for a type, empty for unknown types."""
    definition = _BY_TYPE.get(component_type)
    return copy.deepcopy(definition["defaultProps"]) if definition else {}


def new_component_id() -> str:
    return uuid.uuid4().hex


def create_component(
    component_type: str,
    component_id: Optional[str] = None,
) -> ComponentRecord:
    """
    Instantiate a record from the catalog entry for `component_type`.

    Raises:
    - KeyError if the type is not registered
    """
    if component_type not in _BY_TYPE:
        raise KeyError(f"Unknown component type: {component_type}")

    return {
        "id": component_id or new_component_id(),
        "type": component_type,
        "props": default_props(component_type),
    }
