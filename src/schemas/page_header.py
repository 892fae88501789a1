"""Modern page and page header schemas.

The modern page header has three presence states: removed (type None), the
site default header, or a custom header carrying its own image. Setting the
default or a custom header replaces the header object, so no attribute of a
previous header survives the switch.
"""

import json
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class PageHeaderType(str, Enum):
    """Presence state of a modern page header."""

    NONE = "None"
    DEFAULT = "Default"
    CUSTOM = "Custom"


class PageHeaderLayoutType(str, Enum):
    FULL_WIDTH_IMAGE = "FullWidthImage"
    NO_IMAGE = "NoImage"
    COLOR_BLOCK = "ColorBlock"
    CUT_IN_SHAPE = "CutInShape"


class PageHeaderTitleAlignment(str, Enum):
    LEFT = "Left"
    CENTER = "Center"


# imageSourceType values understood by the modern title region
IMAGE_SOURCE_TYPE_DEFAULT = 4
IMAGE_SOURCE_TYPE_CUSTOM = 2


class PageHeader(BaseModel):
    """Header of a modern page.

    Attributes:
        type: Presence state
        image_server_relative_url: Header image (custom headers only)
        layout_type: Title region layout
        text_alignment: Title alignment
        show_publish_date: Show the publish date under the title
        topic_header: Topic label shown above the title
        show_topic_header: Whether the topic label is shown
        alternative_text: Alternative text of the header image
        authors: Authors JSON (serialized list of principals)
    """

    type: PageHeaderType = PageHeaderType.DEFAULT
    image_server_relative_url: str | None = None
    layout_type: PageHeaderLayoutType = PageHeaderLayoutType.FULL_WIDTH_IMAGE
    text_alignment: PageHeaderTitleAlignment = PageHeaderTitleAlignment.LEFT
    show_publish_date: bool = False
    topic_header: str | None = None
    show_topic_header: bool = False
    alternative_text: str | None = None
    authors: str | None = None

    model_config = {"validate_assignment": True}

    def to_header_json(self, title: str = "") -> dict[str, Any]:
        """Build the title region properties persisted with the modern page."""
        if self.type == PageHeaderType.NONE:
            return {"type": self.type.value}

        properties: dict[str, Any] = {
            "title": title,
            "imageSourceType": (
                IMAGE_SOURCE_TYPE_CUSTOM
                if self.type == PageHeaderType.CUSTOM
                else IMAGE_SOURCE_TYPE_DEFAULT
            ),
            "layoutType": self.layout_type.value,
            "textAlignment": self.text_alignment.value,
            "showTopicHeader": self.show_topic_header,
            "showPublishDate": self.show_publish_date,
            "topicHeader": self.topic_header or "",
            "authors": self._authors_list(),
        }
        if self.alternative_text:
            properties["altText"] = self.alternative_text

        server_processed: dict[str, Any] = {
            "searchablePlainTexts": {"title": title},
        }
        if self.type == PageHeaderType.CUSTOM and self.image_server_relative_url:
            server_processed["imageSources"] = {
                "imageSource": self.image_server_relative_url
            }

        return {
            "type": self.type.value,
            "properties": properties,
            "serverProcessedContent": server_processed,
        }

    def _authors_list(self) -> list:
        if not self.authors:
            return []
        try:
            authors = json.loads(self.authors)
        except json.JSONDecodeError:
            # Plain text byline copied without a ToAuthors function
            return [{"id": "", "upn": "", "name": self.authors, "role": ""}]
        return authors if isinstance(authors, list) else [authors]


class ModernPage(BaseModel):
    """Target page whose header is configured by the header transformer.

    Attributes:
        name: Page file name (e.g. "news.aspx")
        title: Page title shown in the header
        page_header: Current header
    """

    name: str = ""
    title: str = ""
    page_header: PageHeader = Field(default_factory=PageHeader)

    def remove_page_header(self) -> None:
        self.page_header = PageHeader(type=PageHeaderType.NONE)

    def set_default_page_header(self) -> None:
        self.page_header = PageHeader(type=PageHeaderType.DEFAULT)

    def set_custom_page_header(self, image_server_relative_url: str) -> None:
        self.page_header = PageHeader(
            type=PageHeaderType.CUSTOM,
            image_server_relative_url=image_server_relative_url,
        )
