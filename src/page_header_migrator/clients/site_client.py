"""REST client for a SharePoint web, used as source or target context."""

import logging
from typing import Protocol

import httpx

from .client import Client
from .exceptions import NotFoundError

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Accept": "application/json;odata=nometadata"}


class SiteContext(Protocol):
    """What the header transformer needs from a remote site handle."""

    @property
    def site_url(self) -> str: ...

    @property
    def server_relative_url(self) -> str: ...

    def clone(self, url: str) -> "SiteContext": ...

    def close(self) -> None: ...


def _quote(value: str) -> str:
    """Escape a value for use inside an OData string literal."""
    return value.replace("'", "''")


class SiteClient(Client):
    """Client for one SharePoint web.

    Besides the base Client keys, the config accepts:
        site_url: Site collection URL (default: base_url)
        server_relative_url: Server-relative URL of the web; read from
            the REST API on first use when omitted

    Example:
        config = {
            "base_url": "https://contoso.sharepoint.com/sites/a",
            "site_url": "https://contoso.sharepoint.com",
            "headers": {"Authorization": "Bearer ..."},
        }
        with SiteClient(config) as source:
            data = source.fetch("/sites/a/Images/hero.jpg")
    """

    def __init__(self, config: dict, http_client: httpx.Client | None = None):
        super().__init__(config, http_client)
        self._server_relative_url: str | None = config.get("server_relative_url")

    @property
    def site_url(self) -> str:
        return str(self._config.get("site_url") or self.base_url).rstrip("/")

    @property
    def server_relative_url(self) -> str:
        """Server-relative URL of the web, e.g. "/sites/a"."""
        if self._server_relative_url is None:
            response = self.get(
                "/_api/web",
                params={"$select": "ServerRelativeUrl"},
                headers=JSON_HEADERS,
            )
            self._server_relative_url = response.json()["ServerRelativeUrl"]
            logger.debug(f"Resolved web {self.base_url} to {self._server_relative_url}")
        return self._server_relative_url

    def clone(self, url: str) -> "SiteClient":
        """Return a client with the same settings pointing at another web."""
        config = self.config
        config["base_url"] = url
        config.pop("server_relative_url", None)
        return SiteClient(config)

    def fetch(self, server_relative_path: str) -> bytes:
        """Download the content of a file.

        Args:
            server_relative_path: Server-relative URL of the file

        Returns:
            File content

        Raises:
            NotFoundError: If the file does not exist
        """
        response = self.get(
            f"/_api/web/GetFileByServerRelativePath(decodedurl='{_quote(server_relative_path)}')/$value"
        )
        return response.content

    def file_exists(self, server_relative_path: str) -> bool:
        return self._exists("GetFileByServerRelativePath", server_relative_path)

    def folder_exists(self, server_relative_path: str) -> bool:
        return self._exists("GetFolderByServerRelativePath", server_relative_path)

    def _exists(self, method: str, server_relative_path: str) -> bool:
        try:
            response = self.get(
                f"/_api/web/{method}(decodedurl='{_quote(server_relative_path)}')",
                params={"$select": "Exists"},
                headers=JSON_HEADERS,
            )
        except NotFoundError:
            return False
        return bool(response.json().get("Exists", False))

    def ensure_folder(self, server_relative_path: str) -> None:
        """Create a folder and any missing parents below the web."""
        web_url = self.server_relative_url.rstrip("/")
        if server_relative_path.casefold().startswith(web_url.casefold() + "/"):
            current, relative = web_url, server_relative_path[len(web_url):]
        else:
            current, relative = "", server_relative_path

        for segment in filter(None, relative.split("/")):
            current = f"{current}/{segment}"
            if self.folder_exists(current):
                continue
            self.post(
                f"/_api/web/Folders/AddUsingPath(decodedurl='{_quote(current)}')",
                headers=JSON_HEADERS,
            )
            logger.debug(f"Created folder {current}")

    def upload_file(self, folder: str, file_name: str, content: bytes) -> str:
        """Upload content into folder, overwriting an existing file.

        Returns:
            Server-relative URL of the uploaded file
        """
        response = self.post(
            f"/_api/web/GetFolderByServerRelativePath(decodedurl='{_quote(folder)}')"
            f"/Files/AddUsingPath(decodedurl='{_quote(file_name)}',overwrite=true)",
            content=content,
            headers=JSON_HEADERS,
        )
        return response.json()["ServerRelativeUrl"]
