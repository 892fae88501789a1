"""Tests for the AttributeMapper and FieldResolver."""

from unittest.mock import MagicMock

import pytest

from page_header_migrator.functions import FieldType, FunctionProcessor
from page_header_migrator.transformers import AttributeMapper, FieldResolver
from schemas.mapping import (
    HeaderAlignment,
    HeaderField,
    HeaderMapping,
    HeaderMode,
    HeaderProperty,
    HeaderType,
    PageLayoutMapping,
)
from schemas.page_header import (
    PageHeader,
    PageHeaderLayoutType,
    PageHeaderTitleAlignment,
)


def _mapping(*fields: HeaderField, **header) -> PageLayoutMapping:
    return PageLayoutMapping(
        name="ArticleLeft",
        page_header=HeaderMode.CUSTOM,
        header=HeaderMapping(fields=list(fields), **header),
    )


@pytest.fixture
def field_resolver(legacy_page):
    return FieldResolver(legacy_page, FunctionProcessor(legacy_page))


@pytest.fixture
def mapper(legacy_page, field_resolver):
    return AttributeMapper(legacy_page, field_resolver)


# ---------------------------------------------------------------------------
# Tests: FieldResolver
# ---------------------------------------------------------------------------

class TestFieldResolver:
    def test_raw_value_is_trimmed(self, field_resolver):
        field = HeaderField(name="Comments", header_property=HeaderProperty.ALTERNATIVE_TEXT)

        assert field_resolver.get_field_value(field) == "Hero image of the campus"

    def test_missing_field_is_empty(self, field_resolver):
        field = HeaderField(name="Missing", header_property=HeaderProperty.ALTERNATIVE_TEXT)

        assert field_resolver.get_field_value(field) == ""

    def test_function_value_is_returned(self, legacy_page):
        processor = MagicMock()
        processor.process.return_value = ("Comments", "computed")
        resolver = FieldResolver(legacy_page, processor)
        field = HeaderField(
            name="Comments",
            header_property=HeaderProperty.AUTHORS,
            functions="ToAuthors({Comments})",
        )

        assert resolver.get_field_value(field, FieldType.USER) == "computed"
        processor.process.assert_called_once_with(
            "ToAuthors({Comments})", "Comments", FieldType.USER
        )

    def test_empty_status_discards_value(self, legacy_page):
        processor = MagicMock()
        processor.process.return_value = ("", "ignored")
        resolver = FieldResolver(legacy_page, processor)
        field = HeaderField(
            name="Comments",
            header_property=HeaderProperty.ALTERNATIVE_TEXT,
            functions="Unknown({Comments})",
        )

        assert resolver.get_field_value(field) == ""


# ---------------------------------------------------------------------------
# Tests: AttributeMapper
# ---------------------------------------------------------------------------

class TestLayoutAndAlignment:
    @pytest.mark.parametrize(
        "header_type, layout_type",
        [
            (HeaderType.COLOR_BLOCK, PageHeaderLayoutType.COLOR_BLOCK),
            (HeaderType.CUT_IN_SHAPE, PageHeaderLayoutType.CUT_IN_SHAPE),
            (HeaderType.NO_IMAGE, PageHeaderLayoutType.NO_IMAGE),
            (HeaderType.FULL_WIDTH_IMAGE, PageHeaderLayoutType.FULL_WIDTH_IMAGE),
        ],
    )
    def test_layout_type(self, mapper, header_type, layout_type):
        header = PageHeader()

        mapper.apply(header, _mapping(type=header_type))

        assert header.layout_type == layout_type

    def test_center_alignment(self, mapper):
        header = PageHeader()

        mapper.apply(header, _mapping(alignment=HeaderAlignment.CENTER))

        assert header.text_alignment == PageHeaderTitleAlignment.CENTER

    def test_unmapped_values_leave_header_unchanged(self, mapper):
        """Values without a table entry keep the header's current settings."""
        mapping = MagicMock()
        mapping.header.type = "Banner"
        mapping.header.alignment = "Right"
        mapping.header.show_published_date = False
        mapping.header.get_field.return_value = None
        header = PageHeader(
            layout_type=PageHeaderLayoutType.COLOR_BLOCK,
            text_alignment=PageHeaderTitleAlignment.CENTER,
        )

        mapper.apply(header, mapping)

        assert header.layout_type == PageHeaderLayoutType.COLOR_BLOCK
        assert header.text_alignment == PageHeaderTitleAlignment.CENTER

    def test_show_published_date_is_copied(self, mapper):
        header = PageHeader(show_publish_date=True)

        mapper.apply(header, _mapping(show_published_date=False))

        assert header.show_publish_date is False


class TestTopicHeader:
    def test_topic_header_set_when_field_used(self, mapper):
        header = PageHeader()
        field = HeaderField(name="ArticleByLine", header_property=HeaderProperty.TOPIC_HEADER)

        mapper.apply(header, _mapping(field))

        assert header.topic_header == "Campus"
        assert header.show_topic_header is True

    def test_unused_topic_field_leaves_header_untouched(self, mapper):
        """A topic field the page does not use changes nothing."""
        header = PageHeader()
        field = HeaderField(name="Topic", header_property=HeaderProperty.TOPIC_HEADER)

        mapper.apply(header, _mapping(field))

        assert header.topic_header is None
        assert header.show_topic_header is False


class TestAlternativeTextAndAuthors:
    def test_alternative_text_from_function(self, mapper):
        header = PageHeader()
        field = HeaderField(
            name="PublishingPageImage",
            header_property=HeaderProperty.ALTERNATIVE_TEXT,
            functions="ToImageAltText({PublishingPageImage})",
        )

        mapper.apply(header, _mapping(field))

        assert header.alternative_text == "Hero shot"

    def test_empty_alternative_text_does_not_overwrite(self, mapper):
        header = PageHeader(alternative_text="Existing")
        field = HeaderField(name="Missing", header_property=HeaderProperty.ALTERNATIVE_TEXT)

        mapper.apply(header, _mapping(field))

        assert header.alternative_text == "Existing"

    def test_authors_resolved_as_user(self, legacy_page):
        processor = MagicMock()
        processor.process.return_value = ("PublishingContact", '[{"name": "Jane"}]')
        mapper = AttributeMapper(legacy_page, FieldResolver(legacy_page, processor))
        header = PageHeader()
        field = HeaderField(
            name="PublishingContact",
            header_property=HeaderProperty.AUTHORS,
            functions="ToAuthors({PublishingContact})",
        )

        mapper.apply(header, _mapping(field))

        assert header.authors == '[{"name": "Jane"}]'
        processor.process.assert_called_once_with(
            "ToAuthors({PublishingContact})", "PublishingContact", FieldType.USER
        )

    def test_failing_function_skips_only_its_attribute(self, mapper, caplog):
        header = PageHeader(alternative_text="Existing")
        alt_text = HeaderField(
            name="PublishingPageImage",
            header_property=HeaderProperty.ALTERNATIVE_TEXT,
            functions="ToImageAltText({PublishingPageImage}",
        )
        authors = HeaderField(
            name="PublishingContact",
            header_property=HeaderProperty.AUTHORS,
            functions="ToAuthors({PublishingContact})",
        )

        mapper.apply(header, _mapping(alt_text, authors))

        assert header.alternative_text == "Existing"
        assert "Jane Smith" in header.authors
        assert "Skipping AlternativeText" in caplog.text

    def test_mapping_without_fields_skips_attributes(self, mapper):
        header = PageHeader()

        mapper.apply(header, _mapping())

        assert header.topic_header is None
        assert header.alternative_text is None
        assert header.authors is None
