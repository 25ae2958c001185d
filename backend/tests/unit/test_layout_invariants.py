"""Tests for layout and component props validation."""

import pytest

from portfolio_builder.domain.invariants.exceptions import InvariantViolation
from portfolio_builder.domain.invariants.layout import assert_layout


@pytest.mark.unit
def test_valid_layout(sample_layout):
    assert_layout(sample_layout)


@pytest.mark.unit
def test_empty_layout():
    assert_layout({"components": []})


@pytest.mark.unit
@pytest.mark.parametrize(
    "layout",
    [
        None,
        [],
        {},
        {"components": "nope"},
        {"components": [], "extra": 1},
        {"components": [], "theme": "dark"},
        {"components": [], "theme": {"accent": "#fff"}},
        {"components": [], "theme": {"primaryColor": 3}},
    ],
)
def test_invalid_envelope(layout):
    with pytest.raises(InvariantViolation):
        assert_layout(layout)


@pytest.mark.unit
@pytest.mark.parametrize(
    "component",
    [
        "hero",
        {"type": "hero", "props": {}},
        {"id": "", "type": "hero", "props": {}},
        {"id": "c1", "type": "carousel", "props": {}},
        {"id": "c1", "type": "hero", "props": []},
        {"id": "c1", "type": "hero", "props": {"title": 5}},
        {"id": "c1", "type": "hero", "props": {"color": "red"}},
        {"id": "c1", "type": "hero", "props": {}, "style": {}},
        {"id": "c1", "type": "skills", "props": {"skills": "Python"}},
        {"id": "c1", "type": "skills", "props": {"skills": ["Python", 3]}},
        {"id": "c1", "type": "contact", "props": {"showForm": "yes"}},
        {"id": "c1", "type": "projects", "props": {"projects": [{"title": "x"}]}},
        {"id": "c1", "type": "projects", "props": {"projects": "x"}},
        {"id": "c1", "type": "hero", "props": {}, "children": {}},
    ],
)
def test_invalid_component(component):
    with pytest.raises(InvariantViolation):
        assert_layout({"components": [component]})


@pytest.mark.unit
def test_partial_props_are_accepted():
    assert_layout({"components": [{"id": "c1", "type": "hero", "props": {"title": "Only title"}}]})


@pytest.mark.unit
def test_missing_props_rejected():
    with pytest.raises(InvariantViolation, match="props is required"):
        assert_layout({"components": [{"id": "c1", "type": "about"}]})


@pytest.mark.unit
@pytest.mark.parametrize(
    "url",
    ["", "#", "#contact", "/img/me.png", "img/me.png", "https://example.com/a?b=1", "HTTP://example.com"],
)
def test_safe_urls_accepted(url):
    project = {"title": "x", "description": "y", "technologies": [], "link": url, "imageUrl": url}

    assert_layout({"components": [
        {"id": "c1", "type": "projects", "props": {"projects": [project]}},
        {"id": "c2", "type": "about", "props": {"imageUrl": url}},
    ]})


@pytest.mark.unit
@pytest.mark.parametrize(
    "url",
    [
        "javascript:alert(document.cookie)",
        "JavaScript:alert(1)",
        " javascript:alert(1)",
        "java\tscript:alert(1)",
        "data:text/html;base64,PHNjcmlwdD4=",
        "vbscript:msgbox(1)",
        "//evil.example.com",
        "/\\evil.example.com",
        "https://",
        5,
    ],
)
def test_unsafe_urls_rejected(url):
    project = {"title": "x", "description": "y", "technologies": [], "link": url}

    with pytest.raises(InvariantViolation):
        assert_layout({"components": [{"id": "c1", "type": "projects", "props": {"projects": [project]}}]})
    with pytest.raises(InvariantViolation):
        assert_layout({"components": [{"id": "c1", "type": "about", "props": {"imageUrl": url}}]})


@pytest.mark.unit
def test_project_with_unknown_field():
    project = {"title": "x", "description": "y", "technologies": [], "stars": 10}

    with pytest.raises(InvariantViolation, match="stars"):
        assert_layout({"components": [{"id": "c1", "type": "projects", "props": {"projects": [project]}}]})


@pytest.mark.unit
def test_duplicate_ids_rejected():
    layout = {
        "components": [
            {"id": "same", "type": "hero", "props": {}},
            {"id": "same", "type": "about", "props": {}},
        ]
    }
    with pytest.raises(InvariantViolation, match="Duplicate"):
        assert_layout(layout)


@pytest.mark.unit
def test_children_are_validated():
    layout = {
        "components": [
            {
                "id": "parent",
                "type": "about",
                "props": {},
                "children": [{"id": "parent", "type": "hero", "props": {}}],
            }
        ]
    }
    with pytest.raises(InvariantViolation, match="Duplicate"):
        assert_layout(layout)
