"""Header transformer for migrating publishing page headers.

Configures the header of a modern page from the header metadata of the
legacy publishing page it replaces, as described by the page layout
mapping of that page.
"""

import logging
from pathlib import PurePosixPath
from typing import Callable

from page_header_migrator.assets import AssetTransfer
from page_header_migrator.clients import SiteContext
from page_header_migrator.functions import FunctionProcessor
from page_header_migrator.mapping import MappingResolver
from page_header_migrator.mapping.mapping_resolver import DefaultMappingSource
from schemas.legacy_page import LegacyPage
from schemas.mapping import HeaderMode, HeaderProperty, PageLayoutMapping
from schemas.page_header import ModernPage

from .attribute_mapper import AttributeMapper
from .field_resolver import FieldFunctionProcessor, FieldResolver
from .header_image_resolver import (
    LOG_HEADING,
    AssetCopier,
    HeaderImageResolver,
    ImageResolution,
)
from .header_mode import HeaderState, select_header_mode
from .transformer import PageTransformer

logger = logging.getLogger(__name__)


class HeaderTransformer(PageTransformer):
    """Transform the header of a legacy publishing page onto a modern page.

    The HeaderTransformer:
    1. Resolves the page layout mapping of the legacy page
    2. Removes the header (mode None) or sets the default header (mode Default)
    3. In mode Custom, copies the header image to the target site and sets a
       custom header, falling back to the default header when no image can
       be produced
    4. In mode Custom, applies layout type, alignment, publish date, topic
       header, alternative text and authors

    Example:
        transformer = HeaderTransformer(
            legacy_page, source, target, mappings, MappingCache()
        )
        state = transformer.transform_header(modern_page)
    """

    def __init__(
        self,
        page: LegacyPage,
        source: SiteContext,
        target: SiteContext,
        configured_mappings: list[PageLayoutMapping],
        mapping_cache: DefaultMappingSource,
        function_processor: FieldFunctionProcessor | None = None,
        asset_transfer_factory: Callable[[SiteContext, SiteContext], AssetCopier] = AssetTransfer,
    ) -> None:
        """Initialize the header transformer.

        Args:
            page: Legacy page being migrated
            source: Context of the web holding the legacy page
            target: Context of the web receiving the modern page
            configured_mappings: Mappings loaded from the mapping file
            mapping_cache: Source of default mappings for unmapped layouts
            function_processor: Evaluator for field functions
                (default: a FunctionProcessor bound to page)
            asset_transfer_factory: Builds the asset copier for a
                (source, target) pair (default: AssetTransfer)
        """
        self.page = page
        self.mapping_resolver = MappingResolver(configured_mappings, mapping_cache)
        self.field_resolver = FieldResolver(
            page, function_processor or FunctionProcessor(page)
        )
        self.image_resolver = HeaderImageResolver(source, target, asset_transfer_factory)
        self.attribute_mapper = AttributeMapper(page, self.field_resolver)

    def transform(self, target_page: ModernPage) -> HeaderState:
        return self.transform_header(target_page)

    def transform_header(self, target_page: ModernPage) -> HeaderState:
        """Configure the header of target_page.

        Args:
            target_page: Modern page whose header is replaced

        Returns:
            The terminal HeaderState reached

        Raises:
            MappingNotFoundError: If no mapping applies to the page
        """
        mapping = self.mapping_resolver.resolve(self.page)
        mode = select_header_mode(mapping)

        if mode == HeaderMode.NONE:
            target_page.remove_page_header()
            logger.info(f"Removed page header of {target_page.name or 'page'} ({mapping.name})")
            return HeaderState.REMOVED

        if mode == HeaderMode.DEFAULT:
            target_page.set_default_page_header()
            logger.info(f"Set default page header on {target_page.name or 'page'} ({mapping.name})")
            return HeaderState.DEFAULT_HEADER

        logger.debug(f"Header state {HeaderState.CUSTOM_HEADER_PENDING.value} for {mapping.name}")
        resolution = self._resolve_image(mapping)

        if resolution.succeeded:
            target_page.set_custom_page_header(resolution.url)
            state = HeaderState.CUSTOM_HEADER_RESOLVED
        else:
            target_page.set_default_page_header()
            state = HeaderState.CUSTOM_HEADER_FALLBACK

        self.attribute_mapper.apply(target_page.page_header, mapping)
        logger.info(
            f"Configured page header of {target_page.name or 'page'} "
            f"({mapping.name}): {state.value}"
        )
        return state

    def _resolve_image(self, mapping: PageLayoutMapping) -> ImageResolution:
        field = mapping.header.get_field(HeaderProperty.IMAGE_SERVER_RELATIVE_URL)
        if field is None:
            logger.debug(f"Mapping {mapping.name} has no header image field")
            return ImageResolution.failed()

        # Evaluators may read remote data; their faults count as a failed transfer
        try:
            image_value = self.field_resolver.get_field_value(field)
        except Exception as e:
            logger.error(f"{LOG_HEADING}: Header image asset transfer failed: {e}")
            return ImageResolution.failed(e)

        if not image_value:
            logger.debug(f"Header image field {field.name} has no value")
            return ImageResolution.failed()

        file_name_hint = PurePosixPath(self.page.file_leaf_ref).stem
        return self.image_resolver.resolve(image_value, file_name_hint)
