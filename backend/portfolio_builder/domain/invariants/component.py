from portfolio_builder.domain.components import COMPONENT_TYPES
from .exceptions import InvariantViolation
from .url import is_safe_url

# Allowed props per component type. Props may be partial; widgets fall back
# to registry defaults for missing keys.
STRING_LIST = "string_list"
PROJECT_LIST = "project_list"
SAFE_URL = "safe_url"

PROP_SCHEMAS = {
    "header": {"name": str, "title": str, "navItems": STRING_LIST},
    "hero": {
        "title": str,
        "subtitle": str,
        "primaryButtonText": str,
        "secondaryButtonText": str,
    },
    "about": {"title": str, "content": str, "imageUrl": SAFE_URL},
    "projects": {"title": str, "subtitle": str, "projects": PROJECT_LIST},
    "skills": {"title": str, "skills": STRING_LIST},
    "contact": {"title": str, "email": str, "phone": str, "showForm": bool},
}

PROJECT_SCHEMA = {
    "title": str,
    "description": str,
    "technologies": STRING_LIST,
    "imageUrl": SAFE_URL,
    "link": SAFE_URL,
}
PROJECT_REQUIRED = ("title", "description", "technologies")


def _is_string_list(value):
    return isinstance(value, list) and all(isinstance(v, str) for v in value)


def _assert_value(where, key, value, expected):
    if expected == STRING_LIST:
        if not _is_string_list(value):
            raise InvariantViolation(f"{where}.{key} must be a list of strings.")
    elif expected == SAFE_URL:
        # "" means unset
        if not isinstance(value, str) or (value and not is_safe_url(value)):
            raise InvariantViolation(
                f"{where}.{key} must be an http(s), relative or #anchor URL."
            )
    elif expected == PROJECT_LIST:
        if not isinstance(value, list):
            raise InvariantViolation(f"{where}.{key} must be a list.")
        for index, project in enumerate(value):
            assert_project(project, where=f"{where}.{key}[{index}]")
    elif not isinstance(value, expected):
        raise InvariantViolation(
            f"{where}.{key} must be of type {expected.__name__}."
        )


def assert_project(project, where="project"):
    if not isinstance(project, dict):
        raise InvariantViolation(f"{where} must be an object.")

    missing = [key for key in PROJECT_REQUIRED if key not in project]
    if missing:
        raise InvariantViolation(f"{where} is missing {', '.join(missing)}.")

    for key, value in project.items():
        if key not in PROJECT_SCHEMA:
            raise InvariantViolation(f"{where} has unknown field '{key}'.")
        _assert_value(where, key, value, PROJECT_SCHEMA[key])


def assert_component_props(component_type, props, where="props"):
    if not isinstance(props, dict):
        raise InvariantViolation(f"{where} must be an object.")

    schema = PROP_SCHEMAS[component_type]
    for key, value in props.items():
        if key not in schema:
            raise InvariantViolation(
                f"{where} has unknown field '{key}' for {component_type} component."
            )
        _assert_value(where, key, value, schema[key])


def assert_component(component, where="component"):
    if not isinstance(component, dict):
        raise InvariantViolation(f"{where} must be an object.")

    component_id = component.get("id")
    if not isinstance(component_id, str) or not component_id:
        raise InvariantViolation(f"{where}.id must be a non-empty string.")

    component_type = component.get("type")
    if component_type not in COMPONENT_TYPES:
        raise InvariantViolation(
            f"{where} has unknown component type: {component_type!r}"
        )

    extra = set(component) - {"id", "type", "props", "children"}
    if extra:
        raise InvariantViolation(
            f"{where} has unknown fields: {', '.join(sorted(extra))}"
        )

    if "props" not in component:
        raise InvariantViolation(f"{where}.props is required.")
    assert_component_props(component_type, component["props"], where=f"{where}.props")

    children = component.get("children")
    if children is not None and not isinstance(children, list):
        raise InvariantViolation(f"{where}.children must be a list.")
