"""Pytest fixtures for Page Header Migrator tests."""

from unittest.mock import MagicMock

import pytest

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

NEW_IMAGE_URL = "/sites/modern/SiteAssets/SitePages/news/hero.jpg"


@pytest.fixture
def sample_page_record():
    """Sample legacy publishing page as read from the source site."""
    return {
        "site_url": "https://contoso.sharepoint.com",
        "web_url": "https://contoso.sharepoint.com/sites/a",
        "web_server_relative_url": "/sites/a",
        "field_values": {
            "Title": "Campus News",
            "FileLeafRef": "news.aspx",
            "PublishingPageLayout": (
                "https://contoso.sharepoint.com/_catalogs/masterpage/ArticleLeft.aspx, "
                "Article page with image on left"
            ),
            "PublishingPageImage": (
                '<img alt="Hero shot" src="/sites/a/Images/hero.jpg" '
                'style="BORDER: 0px solid" />'
            ),
            "ArticleByLine": "Campus",
            "PublishingContact": {
                "LookupId": 7,
                "LookupValue": "Jane Smith",
                "Email": "jane@contoso.com",
            },
            "Comments": "  Hero image of the campus  ",
        },
    }


@pytest.fixture
def legacy_page(sample_page_record):
    return LegacyPage.model_validate(sample_page_record)


@pytest.fixture
def article_left_mapping():
    """Custom header mapping for the ArticleLeft page layout."""
    return PageLayoutMapping(
        name="ArticleLeft",
        page_header=HeaderMode.CUSTOM,
        header=HeaderMapping(
            type=HeaderType.CUT_IN_SHAPE,
            alignment=HeaderAlignment.CENTER,
            show_published_date=True,
            fields=[
                HeaderField(
                    name="PublishingPageImage",
                    header_property=HeaderProperty.IMAGE_SERVER_RELATIVE_URL,
                    functions="ToImageUrl({PublishingPageImage})",
                ),
                HeaderField(
                    name="ArticleByLine",
                    header_property=HeaderProperty.TOPIC_HEADER,
                ),
                HeaderField(
                    name="PublishingPageImage",
                    header_property=HeaderProperty.ALTERNATIVE_TEXT,
                    functions="ToImageAltText({PublishingPageImage})",
                ),
                HeaderField(
                    name="PublishingContact",
                    header_property=HeaderProperty.AUTHORS,
                    functions="ToAuthors({PublishingContact})",
                ),
            ],
        ),
    )


@pytest.fixture
def mock_source():
    """Source site context for the /sites/a web."""
    source = MagicMock()
    source.server_relative_url = "/sites/a"
    source.site_url = "https://contoso.sharepoint.com"
    source.clone.return_value = MagicMock(name="root_web")
    return source


@pytest.fixture
def mock_target():
    target = MagicMock()
    target.server_relative_url = "/sites/modern"
    target.site_url = "https://contoso.sharepoint.com/sites/modern"
    return target


@pytest.fixture
def mock_asset_transfer():
    """Asset copier that always succeeds."""
    transfer = MagicMock()
    transfer.transfer_asset.return_value = NEW_IMAGE_URL
    return transfer


@pytest.fixture
def asset_transfer_factory(mock_asset_transfer):
    return MagicMock(return_value=mock_asset_transfer)
