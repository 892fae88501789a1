"""Default mappings for page layouts without an explicit mapping."""

import logging
from pathlib import PurePosixPath

from schemas.legacy_page import LegacyPage
from schemas.mapping import (
    HeaderAlignment,
    HeaderField,
    HeaderMapping,
    HeaderMode,
    HeaderProperty,
    HeaderType,
    PageLayoutMapping,
)

logger = logging.getLogger(__name__)

DEFAULT_IMAGE_FIELD = "PublishingRollupImage"


class MappingCache:
    """Generates and remembers a default mapping per page layout.

    The cache belongs to whoever drives the migration: create one per run
    and hand it to every MappingResolver of that run.

    Example:
        cache = MappingCache()
        mapping = cache.get_default_mapping(legacy_page)
    """

    def __init__(self, image_field: str = DEFAULT_IMAGE_FIELD):
        self.image_field = image_field
        self._mappings: dict[str, PageLayoutMapping] = {}

    def __len__(self) -> int:
        return len(self._mappings)

    def get_default_mapping(self, page: LegacyPage) -> PageLayoutMapping | None:
        """Return the default mapping for the page's layout.

        Returns:
            A custom-header mapping reading the image from the rollup image
            field, or None when the page does not use a page layout
        """
        page_layout = PurePosixPath(page.page_layout_file()).stem
        if not page_layout:
            logger.warning("Page has no page layout, no default mapping available")
            return None

        key = page_layout.casefold()
        if key not in self._mappings:
            logger.debug(f"Generating default header mapping for page layout {page_layout}")
            self._mappings[key] = self._build_default_mapping(page_layout)
        return self._mappings[key]

    def clear(self) -> None:
        self._mappings.clear()

    def _build_default_mapping(self, page_layout: str) -> PageLayoutMapping:
        return PageLayoutMapping(
            name=page_layout,
            page_header=HeaderMode.CUSTOM,
            header=HeaderMapping(
                type=HeaderType.FULL_WIDTH_IMAGE,
                alignment=HeaderAlignment.LEFT,
                show_published_date=False,
                fields=[
                    HeaderField(
                        name=self.image_field,
                        header_property=HeaderProperty.IMAGE_SERVER_RELATIVE_URL,
                        functions=f"ToImageUrl({{{self.image_field}}})",
                    )
                ],
            ),
        )
