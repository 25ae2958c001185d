# portfolio_builder/rendering/renderer.py
from __future__ import annotations

import logging
import re
from typing import Any, Dict, Iterable, List, Optional

from jinja2 import Environment, PackageLoader, TemplateError, select_autoescape
from markupsafe import Markup

from portfolio_builder.domain.components import COMPONENT_TYPES, default_props
from portfolio_builder.domain.invariants.url import is_safe_url

logger = logging.getLogger(__name__)

_HANDLER_NAME = re.compile(r"[A-Za-z_$][\w$]*(\.[A-Za-z_$][\w$]*)*")
_CSS_VALUE = re.compile(r"[\w\s#,.%()'\"-]{1,100}")

env = Environment(
    loader=PackageLoader("portfolio_builder", "rendering/templates"),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)
env.filters["safe_url"] = lambda value: value if is_safe_url(value) else ""


def _css_theme(theme: Optional[Dict[str, Any]]) -> Dict[str, Markup]:
    # Values land inside a <style> block, so anything that could close a
    # declaration or the element is dropped rather than escaped.
    safe = {}
    for key, value in (theme or {}).items():
        if isinstance(value, str) and _CSS_VALUE.fullmatch(value):
            safe[key] = Markup(value)
    return safe


def _check_handler(click_handler: Optional[str]) -> None:
    if click_handler is not None and not _HANDLER_NAME.fullmatch(click_handler):
        raise ValueError(f"Invalid click handler name: {click_handler!r}")


def _widget_context(
    component: Dict[str, Any],
    *,
    selected_id: Optional[str],
    editable: bool,
    click_handler: Optional[str],
) -> Dict[str, Any]:
    component_type = component.get("type")
    props = component.get("props")

    defaults = default_props(component_type) if isinstance(component_type, str) else {}
    merged = dict(defaults)
    if isinstance(props, dict):
        merged.update(props)

    # A list-shaped prop holding anything else falls back to its default
    for key, default in defaults.items():
        if isinstance(default, list) and not isinstance(merged.get(key), list):
            merged[key] = default

    return {
        "props": merged,
        "component_id": component.get("id"),
        "component_type": component_type,
        "is_selected": editable and selected_id is not None and component.get("id") == selected_id,
        "is_editable": editable,
        "click_handler": click_handler if editable else None,
    }


def render_component(
    component: Dict[str, Any],
    *,
    selected_id: Optional[str] = None,
    editable: bool = False,
    click_handler: Optional[str] = None,
) -> Markup:
    """
    Render one component record as an HTML fragment.

    The same widget template serves the editor and the published page;
    only `editable` decides whether the selection frame and action strip
    are drawn. Records with an unrecognized type, or whose props break
    their widget, render an inline error block instead of raising.
    """
    _check_handler(click_handler)

    if not isinstance(component, dict):
        component = {"id": None, "type": None, "props": {}}

    context = _widget_context(
        component,
        selected_id=selected_id,
        editable=editable,
        click_handler=click_handler,
    )

    component_type = context["component_type"]
    if isinstance(component_type, str) and component_type in COMPONENT_TYPES:
        template = env.get_template(f"widgets/{component_type}.html")
    else:
        template = env.get_template("widgets/_unknown.html")

    try:
        return Markup(template.render(**context))
    except (TypeError, ValueError, AttributeError, TemplateError):
        logger.warning(
            "render failed for component id=%r type=%r",
            context["component_id"],
            component_type,
            exc_info=True,
        )
        return Markup(env.get_template("widgets/_unknown.html").render(
            component_id=context["component_id"],
            component_type=component_type,
            render_failed=True,
        ))


def render_components(
    components: Iterable[Dict[str, Any]],
    *,
    selected_id: Optional[str] = None,
    editable: bool = False,
    click_handler: Optional[str] = None,
) -> List[Markup]:
    """One fragment per record, in document order."""
    return [
        render_component(
            component,
            selected_id=selected_id,
            editable=editable,
            click_handler=click_handler,
        )
        for component in components
    ]


def render_page(
    components: Iterable[Dict[str, Any]],
    *,
    title: str = "Portfolio",
    theme: Optional[Dict[str, Any]] = None,
    selected_id: Optional[str] = None,
    editable: bool = False,
    click_handler: Optional[str] = None,
) -> str:
    fragments = render_components(
        components,
        selected_id=selected_id,
        editable=editable,
        click_handler=click_handler,
    )
    return env.get_template("page.html").render(
        title=title,
        theme=_css_theme(theme),
        fragments=fragments,
        is_editable=editable,
    )
