"""Directive system for Stylemark.

Directives are inline authoring commands embedded in a document:

    !color red
    !push
    !section .note #intro font-size: 14pt;
    ...
    !end
    !pop

They change the ambient style attached to following block elements, or
open and close styled containers.

Key components:
- DirectiveHandler: Protocol for directive implementations
- DirectiveRegistry: Handler lookup and registration
- parse_section_args: Argument scanner for ``!section``

Thread Safety:
- Registry is immutable after creation
- Handlers are stateless; per-render state lives in RenderContext
"""

from __future__ import annotations

from stylemark.directives.builtins import (
    EndDirective,
    PopDirective,
    PushDirective,
    ResetDirective,
    SectionDirective,
    StyleDirective,
)
from stylemark.directives.options import SectionArgs, parse_section_args
from stylemark.directives.protocol import DirectiveHandler
from stylemark.directives.registry import (
    DirectiveRegistry,
    DirectiveRegistryBuilder,
    create_default_registry,
    create_registry_with_defaults,
)

__all__ = [
    "DirectiveHandler",
    "DirectiveRegistry",
    "DirectiveRegistryBuilder",
    "EndDirective",
    "PopDirective",
    "PushDirective",
    "ResetDirective",
    "SectionArgs",
    "SectionDirective",
    "StyleDirective",
    "create_default_registry",
    "create_registry_with_defaults",
    "parse_section_args",
]
