from .renderer import render_component, render_components, render_page

__all__ = ["render_component", "render_components", "render_page"]
