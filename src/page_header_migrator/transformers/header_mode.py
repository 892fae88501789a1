"""Header modes and the states a header transformation passes through."""

from enum import Enum

from schemas.mapping import HeaderMode, PageLayoutMapping


class HeaderState(str, Enum):
    """State of a header transformation.

    REMOVED, DEFAULT_HEADER, CUSTOM_HEADER_RESOLVED and CUSTOM_HEADER_FALLBACK
    are terminal; CUSTOM_HEADER_PENDING lasts while the image is resolved.
    """

    REMOVED = "Removed"
    DEFAULT_HEADER = "DefaultHeader"
    CUSTOM_HEADER_PENDING = "CustomHeaderPending"
    CUSTOM_HEADER_RESOLVED = "CustomHeaderResolved"
    CUSTOM_HEADER_FALLBACK = "CustomHeaderFallback"


def select_header_mode(mapping: PageLayoutMapping) -> HeaderMode:
    """Return the header mode of a mapping.

    Raises:
        ValueError: If the mapping carries a value outside HeaderMode
    """
    mode = mapping.page_header
    if mode == HeaderMode.NONE:
        return HeaderMode.NONE
    elif mode == HeaderMode.DEFAULT:
        return HeaderMode.DEFAULT
    elif mode == HeaderMode.CUSTOM:
        return HeaderMode.CUSTOM
    raise ValueError(f"Unsupported header mode {mode!r} in mapping {mapping.name}")
