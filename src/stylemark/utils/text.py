"""Text escaping for HTML output.

Example:
    >>> from stylemark.utils.text import escape_xml
    >>> escape_xml('<a href="x">')
    '&lt;a href=&quot;x&quot;&gt;'
"""

from __future__ import annotations

import html as html_module


def escape_xml(text: str) -> str:
    """Escape text for use in element content and attribute values.

    Converts ``&``, ``<``, ``>`` and ``"`` to entities. Single quotes are
    left alone since every attribute is emitted double-quoted.

    Args:
        text: Text to escape

    Returns:
        Escaped text

    Examples:
        >>> escape_xml("Tom & Jerry's")
        "Tom &amp; Jerry's"
    """
    if not text:
        return ""
    return html_module.escape(text, quote=False).replace('"', "&quot;")
