"""Application of mapped header attributes to a modern page header."""

import logging

from page_header_migrator.functions import FieldType
from schemas.legacy_page import LegacyPage
from schemas.mapping import (
    HeaderAlignment,
    HeaderField,
    HeaderProperty,
    HeaderType,
    PageLayoutMapping,
)
from schemas.page_header import (
    PageHeader,
    PageHeaderLayoutType,
    PageHeaderTitleAlignment,
)

from .field_resolver import FieldResolver

logger = logging.getLogger(__name__)

LAYOUT_TYPES = {
    HeaderType.COLOR_BLOCK: PageHeaderLayoutType.COLOR_BLOCK,
    HeaderType.CUT_IN_SHAPE: PageHeaderLayoutType.CUT_IN_SHAPE,
    HeaderType.NO_IMAGE: PageHeaderLayoutType.NO_IMAGE,
    HeaderType.FULL_WIDTH_IMAGE: PageHeaderLayoutType.FULL_WIDTH_IMAGE,
}

TITLE_ALIGNMENTS = {
    HeaderAlignment.LEFT: PageHeaderTitleAlignment.LEFT,
    HeaderAlignment.CENTER: PageHeaderTitleAlignment.CENTER,
}


class AttributeMapper:
    """Copies layout, alignment, publish date, topic, alt text and authors onto a header.

    Each field-driven attribute is optional: without a field bound to the
    property, or without a value for it, the header keeps what it has. A
    field function that fails is logged and its attribute skipped.
    """

    def __init__(self, page: LegacyPage, field_resolver: FieldResolver):
        self.page = page
        self.field_resolver = field_resolver

    def apply(self, page_header: PageHeader, mapping: PageLayoutMapping) -> None:
        header = mapping.header

        # Values without a counterpart leave the current setting in place
        layout_type = LAYOUT_TYPES.get(header.type)
        if layout_type is not None:
            page_header.layout_type = layout_type

        alignment = TITLE_ALIGNMENTS.get(header.alignment)
        if alignment is not None:
            page_header.text_alignment = alignment

        page_header.show_publish_date = header.show_published_date

        self._apply_topic_header(page_header, mapping)
        self._apply_alternative_text(page_header, mapping)
        self._apply_authors(page_header, mapping)

    def _apply_topic_header(self, page_header: PageHeader, mapping: PageLayoutMapping) -> None:
        field = mapping.header.get_field(HeaderProperty.TOPIC_HEADER)
        if field is None:
            return

        if not self.page.field_exists_and_used(field.name):
            logger.debug(f"Topic header field {field.name} is not used by the page")
            return

        page_header.topic_header = str(self.page[field.name])
        page_header.show_topic_header = True

    def _apply_alternative_text(
        self, page_header: PageHeader, mapping: PageLayoutMapping
    ) -> None:
        field = mapping.header.get_field(HeaderProperty.ALTERNATIVE_TEXT)
        if field is None:
            return

        alternative_text = self._resolve(field)
        if alternative_text:
            page_header.alternative_text = alternative_text

    def _apply_authors(self, page_header: PageHeader, mapping: PageLayoutMapping) -> None:
        field = mapping.header.get_field(HeaderProperty.AUTHORS)
        if field is None:
            return

        authors = self._resolve(field, FieldType.USER)
        if authors:
            page_header.authors = authors

    def _resolve(self, field: HeaderField, field_type: FieldType = FieldType.STRING) -> str:
        """Resolve an attribute field, treating an evaluator fault as no value."""
        try:
            return self.field_resolver.get_field_value(field, field_type)
        except Exception as e:
            logger.warning(
                f"Skipping {field.header_property.value} from field {field.name}: {e}"
            )
            return ""
