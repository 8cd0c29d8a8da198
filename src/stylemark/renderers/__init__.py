"""Stylemark renderers.

Renderers convert document trees into output formats.

Available Renderers:
- HtmlRenderer: Renders a tree to HTML, applying style directives

Thread Safety:
All renderers keep their output and style state in a context local to
each render() call. Safe for concurrent use from multiple threads.

"""

from stylemark.renderers.base import Renderer
from stylemark.renderers.html import HtmlRenderer, RenderContext

__all__ = ["HtmlRenderer", "RenderContext", "Renderer"]
