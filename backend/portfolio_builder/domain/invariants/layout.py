from .component import assert_component
from .exceptions import InvariantViolation

THEME_FIELDS = ("primaryColor", "secondaryColor", "fontFamily")


def _walk(components, where):
    for index, component in enumerate(components):
        path = f"{where}[{index}]"
        assert_component(component, where=path)
        yield component
        children = component.get("children")
        if children:
            yield from _walk(children, f"{path}.children")


def assert_theme(theme):
    if theme is None:
        return

    if not isinstance(theme, dict):
        raise InvariantViolation("layout.theme must be an object.")

    for key, value in theme.items():
        if key not in THEME_FIELDS:
            raise InvariantViolation(f"layout.theme has unknown field '{key}'.")
        if value is not None and not isinstance(value, str):
            raise InvariantViolation(f"layout.theme.{key} must be a string.")


def assert_layout(layout):
    """
    Validate a persisted layout: {components: [...], theme?: {...}}.

    Component ids must be unique across the whole document, nested
    children included.
    """
    if not isinstance(layout, dict):
        raise InvariantViolation("layout must be an object.")

    extra = set(layout) - {"components", "theme"}
    if extra:
        raise InvariantViolation(
            f"layout has unknown fields: {', '.join(sorted(extra))}"
        )

    components = layout.get("components")
    if not isinstance(components, list):
        raise InvariantViolation("layout.components must be a list.")

    seen = set()
    for component in _walk(components, "layout.components"):
        if component["id"] in seen:
            raise InvariantViolation(
                f"Duplicate component id in layout: {component['id']}"
            )
        seen.add(component["id"])

    assert_theme(layout.get("theme"))
