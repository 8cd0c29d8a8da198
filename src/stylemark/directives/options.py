"""Argument parsing for the ``!section`` directive.

Section arguments mix three token shapes in any order:

- ``.name`` adds a CSS class
- ``#name`` sets the element id (last one wins)
- ``property: value;`` sets a style property (the ``;`` is optional at
  the end of the string)

Anything else between tokens is skipped.

Example:
    >>> args = parse_section_args(".note.wide #intro color: red;")
    >>> args.classes, args.id, args.styles
    (('note', 'wide'), 'intro', {'color': 'red'})
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

_SECTION_ARG = re.compile(
    r"(?:\.(?P<cls>[-_a-zA-Z0-9]+))"
    r"|(?:(?P<prop>[-_a-zA-Z0-9]+):\s*(?P<value>[^;]*);?)"
    r"|(?:#(?P<id>[-_a-zA-Z0-9]+))"
)


@dataclass(frozen=True, slots=True)
class SectionArgs:
    """Parsed ``!section`` arguments.

    Attributes:
        classes: Class names in order of appearance
        styles: Style overrides (later occurrences overwrite earlier ones)
        id: Element id, if given
    """

    classes: tuple[str, ...] = ()
    styles: dict[str, str] = field(default_factory=dict)
    id: str | None = None


def parse_section_args(args: str | None) -> SectionArgs:
    """Scan a section argument string in a single pass.

    Args:
        args: Raw directive arguments (None or empty gives an empty result)

    Returns:
        SectionArgs with the recognized classes, styles and id
    """
    if not args:
        return SectionArgs()

    classes: list[str] = []
    styles: dict[str, str] = {}
    element_id: str | None = None

    for match in _SECTION_ARG.finditer(args):
        if match["cls"]:
            classes.append(match["cls"])
        elif match["prop"]:
            styles[match["prop"]] = match["value"]
        elif match["id"]:
            element_id = match["id"]

    return SectionArgs(classes=tuple(classes), styles=styles, id=element_id)
