"""URL safety checks for safe-mode rendering.

Links and images whose destination uses a script-capable or local-file
scheme are neutralized by the HTML renderer when ``safe`` is enabled.
Inline raster images (``data:image/png`` and friends) are allowed through.

Example:
    >>> from stylemark.sanitize import is_potentially_unsafe
    >>> is_potentially_unsafe("javascript:alert(1)")
    True
    >>> is_potentially_unsafe("data:image/png;base64,AAAA")
    False
"""

import re

UNSAFE_SCHEMES: tuple[str, ...] = ("javascript", "vbscript", "file", "data")

SAFE_DATA_IMAGE_TYPES: tuple[str, ...] = ("png", "gif", "jpeg", "webp")

_UNSAFE_PROTOCOL = re.compile(
    r"^(?:" + "|".join(UNSAFE_SCHEMES) + r"):", re.IGNORECASE
)
_SAFE_DATA_PROTOCOL = re.compile(
    r"^data:image/(?:" + "|".join(SAFE_DATA_IMAGE_TYPES) + r")", re.IGNORECASE
)


def is_potentially_unsafe(url: str | None) -> bool:
    """Check whether a destination should be dropped in safe mode.

    Leading whitespace is ignored, since browsers ignore it too.

    Args:
        url: Link or image destination

    Returns:
        True if the URL starts with an unsafe scheme and is not an
        allowed inline image
    """
    if not url:
        return False
    candidate = url.lstrip()
    return bool(_UNSAFE_PROTOCOL.match(candidate)) and not _SAFE_DATA_PROTOCOL.match(candidate)
