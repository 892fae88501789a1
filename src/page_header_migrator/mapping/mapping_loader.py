"""Loading of page layout mapping files.

XML mapping files follow the PublishingPageTransformation layout; element
namespaces are ignored so files with or without the schema namespace load
the same way. Only the header-related parts of a PageLayout are read.
"""

import logging
from pathlib import Path

from lxml import etree
from pydantic import ValidationError as PydanticValidationError

from page_header_migrator.exceptions import MappingFileError
from schemas.mapping import PageLayoutMapping, PublishingPageTransformation

logger = logging.getLogger(__name__)


def _local_name(element: etree._Element) -> str:
    return etree.QName(element).localname


def _children(element: etree._Element, name: str) -> list[etree._Element]:
    return [
        child
        for child in element
        if isinstance(child.tag, str) and _local_name(child) == name
    ]


def _page_layout_data(element: etree._Element) -> dict:
    data: dict = {"name": element.get("Name", "")}
    if element.get("PageHeader"):
        data["page_header"] = element.get("PageHeader")

    headers = _children(element, "Header")
    if headers:
        header = headers[0]
        header_data: dict = {}
        if header.get("Type"):
            header_data["type"] = header.get("Type")
        if header.get("Alignment"):
            header_data["alignment"] = header.get("Alignment")
        if header.get("ShowPublishedDate"):
            header_data["show_published_date"] = header.get("ShowPublishedDate")
        header_data["fields"] = [
            {
                "name": field.get("Name", ""),
                "header_property": field.get("HeaderProperty"),
                "functions": field.get("Functions") or None,
            }
            for field in _children(header, "Field")
        ]
        data["header"] = header_data

    return data


def parse_mapping_xml(content: bytes) -> PublishingPageTransformation:
    """Parse an XML mapping document.

    Raises:
        MappingFileError: If the document is not well-formed or a page
            layout fails validation
    """
    try:
        root = etree.fromstring(content)
    except etree.XMLSyntaxError as e:
        raise MappingFileError(f"Mapping file is not well-formed XML: {e}") from e

    page_layouts: list[PageLayoutMapping] = []
    for element in root.iter():
        if not isinstance(element.tag, str) or _local_name(element) != "PageLayout":
            continue
        data = _page_layout_data(element)
        try:
            page_layouts.append(PageLayoutMapping.model_validate(data))
        except PydanticValidationError as e:
            raise MappingFileError(
                f"Page layout '{data['name']}' failed validation",
                errors=[str(err) for err in e.errors()],
            ) from e

    return PublishingPageTransformation(page_layouts=page_layouts)


def load_mappings(path: Path) -> list[PageLayoutMapping]:
    """Load the page layout mappings from an XML or JSON mapping file.

    Args:
        path: Path to a .xml or .json mapping file

    Returns:
        Page layout mappings in file order

    Raises:
        MappingFileError: If the file is missing, unsupported or invalid
    """
    if not path.exists():
        raise MappingFileError(f"Mapping file not found: {path}", path=path)

    suffix = path.suffix.lower()
    try:
        if suffix == ".xml":
            transformation = parse_mapping_xml(path.read_bytes())
        elif suffix == ".json":
            transformation = PublishingPageTransformation.model_validate_json(
                path.read_text()
            )
        else:
            raise MappingFileError(f"Unsupported mapping file type: {path}", path=path)
    except PydanticValidationError as e:
        raise MappingFileError(
            f"Mapping file {path} failed validation",
            path=path,
            errors=[str(err) for err in e.errors()],
        ) from e
    except MappingFileError as e:
        if e.path is None:
            e.path = path
        raise

    logger.info(f"Loaded {len(transformation.page_layouts)} page layout mappings from {path}")
    return transformation.page_layouts
