"""Page layout mapping schemas.

A mapping file describes, per legacy page layout, how the header of the
modern page has to be generated. Mapping files are authored as XML:

    <PublishingPageTransformation>
      <PageLayouts>
        <PageLayout Name="ArticleLeft" PageHeader="Custom">
          <Header Type="FullWidthImage" Alignment="Left" ShowPublishedDate="true">
            <Field Name="PublishingPageImage"
                   HeaderProperty="ImageServerRelativeUrl"
                   Functions="ToImageUrl({PublishingPageImage})" />
          </Header>
        </PageLayout>
      </PageLayouts>
    </PublishingPageTransformation>

or as the JSON dump of PublishingPageTransformation.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class HeaderMode(str, Enum):
    """How the modern page header is produced for a page layout."""

    NONE = "None"
    DEFAULT = "Default"
    CUSTOM = "Custom"


class HeaderType(str, Enum):
    """Layout of a custom header."""

    FULL_WIDTH_IMAGE = "FullWidthImage"
    NO_IMAGE = "NoImage"
    COLOR_BLOCK = "ColorBlock"
    CUT_IN_SHAPE = "CutInShape"


class HeaderAlignment(str, Enum):
    """Title alignment of a custom header."""

    LEFT = "Left"
    CENTER = "Center"


class HeaderProperty(str, Enum):
    """Header property a legacy field is bound to."""

    IMAGE_SERVER_RELATIVE_URL = "ImageServerRelativeUrl"
    TOPIC_HEADER = "TopicHeader"
    ALTERNATIVE_TEXT = "AlternativeText"
    AUTHORS = "Authors"


class HeaderField(BaseModel):
    """Binding of a legacy field to a header property.

    Attributes:
        name: Legacy field name
        header_property: Header property the field value feeds
        functions: Optional function expression, e.g. "ToImageUrl({PublishingPageImage})"
    """

    name: str
    header_property: HeaderProperty
    functions: str | None = None

    model_config = ConfigDict(frozen=True)


class HeaderMapping(BaseModel):
    """Header configuration of a page layout.

    Attributes:
        type: Header layout type
        alignment: Title alignment
        show_published_date: Whether the modern header shows the publish date
        fields: Ordered field bindings
    """

    type: HeaderType = HeaderType.FULL_WIDTH_IMAGE
    alignment: HeaderAlignment = HeaderAlignment.LEFT
    show_published_date: bool = False
    fields: list[HeaderField] = []

    model_config = ConfigDict(frozen=True)

    def get_field(self, header_property: HeaderProperty) -> HeaderField | None:
        """Return the first field bound to header_property, if any."""
        return next(
            (f for f in self.fields if f.header_property == header_property),
            None,
        )


class PageLayoutMapping(BaseModel):
    """Mapping of one legacy page layout.

    Attributes:
        name: Page layout name (file name without extension)
        page_header: Header mode to apply
        header: Header configuration used in custom mode
    """

    name: str
    page_header: HeaderMode = HeaderMode.NONE
    header: HeaderMapping = Field(default_factory=HeaderMapping)

    model_config = ConfigDict(frozen=True)

    def matches(self, page_layout: str) -> bool:
        """Case-insensitive comparison with a page layout name."""
        return self.name.casefold() == page_layout.casefold()


class PublishingPageTransformation(BaseModel):
    """Root of a mapping file."""

    page_layouts: list[PageLayoutMapping] = []
