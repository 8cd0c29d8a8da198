"""Builtin directive handlers.

Style:
- StyleDirective: color, background-color, font-size, font-family
- ResetDirective: reset

Scopes:
- PushDirective, PopDirective: push, pop
- SectionDirective, EndDirective: section, end
"""

from stylemark.directives.builtins.scope import PopDirective, PushDirective
from stylemark.directives.builtins.section import EndDirective, SectionDirective
from stylemark.directives.builtins.style import ResetDirective, StyleDirective

__all__ = [
    "EndDirective",
    "PopDirective",
    "PushDirective",
    "ResetDirective",
    "SectionDirective",
    "StyleDirective",
]
