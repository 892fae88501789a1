"""Legacy publishing page schema."""

from pathlib import PurePosixPath
from typing import Any
from urllib.parse import unquote, urlparse

from pydantic import BaseModel

FILE_LEAF_REF_FIELD = "FileLeafRef"
PAGE_LAYOUT_FIELD = "PublishingPageLayout"


class LegacyPage(BaseModel):
    """A publishing page read from the source site.

    Attributes:
        site_url: Absolute URL of the site collection
        web_url: Absolute URL of the web the page lives in
        web_server_relative_url: Server-relative URL of that web (e.g. "/sites/a")
        field_values: List item field values keyed by internal field name
    """

    site_url: str | None = None
    web_url: str | None = None
    web_server_relative_url: str | None = None
    field_values: dict[str, Any] = {}

    def __getitem__(self, field_name: str) -> Any:
        return self.field_values.get(field_name)

    @property
    def file_leaf_ref(self) -> str:
        value = self.field_values.get(FILE_LEAF_REF_FIELD)
        return str(value) if value is not None else ""

    def page_layout_file(self) -> str:
        """Return the file name of the page layout the page uses.

        The PublishingPageLayout field holds "<url>, <description>", or a
        lookup dict with a "Url" key when read through the REST API.
        """
        value = self.field_values.get(PAGE_LAYOUT_FIELD)
        if value is None:
            return ""
        if isinstance(value, dict):
            value = value.get("Url") or ""

        url = str(value).split(",")[0].strip()
        return PurePosixPath(unquote(urlparse(url).path)).name

    def field_exists_and_used(self, field_name: str) -> bool:
        """True when the page has a non-empty value for field_name."""
        value = self.field_values.get(field_name)
        if value is None:
            return False
        if isinstance(value, str):
            return value.strip() != ""
        return True
