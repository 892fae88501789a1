"""Resolution of the page layout mapping that applies to a page."""

import logging
from pathlib import PurePosixPath
from typing import Protocol

from page_header_migrator.exceptions import MappingNotFoundError
from schemas.legacy_page import LegacyPage
from schemas.mapping import PageLayoutMapping

logger = logging.getLogger(__name__)


class DefaultMappingSource(Protocol):
    def get_default_mapping(self, page: LegacyPage) -> PageLayoutMapping | None: ...


class MappingResolver:
    """Picks the configured mapping for a page, or asks the cache for a default."""

    def __init__(
        self,
        configured_mappings: list[PageLayoutMapping],
        mapping_cache: DefaultMappingSource,
    ):
        self.configured_mappings = configured_mappings
        self.mapping_cache = mapping_cache

    def resolve(self, page: LegacyPage) -> PageLayoutMapping:
        """Return the mapping for the page's layout.

        Raises:
            MappingNotFoundError: If neither a configured mapping nor a
                default mapping is available
        """
        page_layout = PurePosixPath(page.page_layout_file()).stem

        mapping = next(
            (m for m in self.configured_mappings if m.matches(page_layout)),
            None,
        )
        if mapping is not None:
            logger.debug(f"Using configured mapping {mapping.name} for page layout {page_layout}")
            return mapping

        mapping = self.mapping_cache.get_default_mapping(page)
        if mapping is None:
            raise MappingNotFoundError(page_layout)

        logger.debug(f"Using default mapping for page layout {page_layout}")
        return mapping
