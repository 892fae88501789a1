"""Transfer of the header image of a legacy page to the target site."""

import logging
from dataclasses import dataclass
from typing import Callable, Protocol

from page_header_migrator.clients import SiteContext

logger = logging.getLogger(__name__)

LOG_HEADING = "Publishing page header"


class AssetCopier(Protocol):
    def transfer_asset(self, source_path: str, target_file_name_hint: str) -> str: ...


@dataclass(frozen=True)
class ImageResolution:
    """Outcome of resolving a header image.

    Attributes:
        url: Server-relative URL of the image in the target site ("" on failure)
        error: Cause of the failure, if one was raised
    """

    url: str = ""
    error: Exception | None = None

    @property
    def succeeded(self) -> bool:
        return bool(self.url)

    @classmethod
    def resolved(cls, url: str) -> "ImageResolution":
        return cls(url=url)

    @classmethod
    def failed(cls, error: Exception | None = None) -> "ImageResolution":
        return cls(error=error)


class HeaderImageResolver:
    """Copies a header image from the source to the target site.

    Images that do not live below the source web are assumed to live in
    the root web of the site collection, so the copy is made from there.
    """

    def __init__(
        self,
        source: SiteContext,
        target: SiteContext,
        asset_transfer_factory: Callable[[SiteContext, SiteContext], AssetCopier],
    ):
        self.source = source
        self.target = target
        self.asset_transfer_factory = asset_transfer_factory

    def resolve(self, image_value: str, file_name_hint: str) -> ImageResolution:
        """Transfer the image and return where it landed.

        Args:
            image_value: Server-relative URL of the image in the source site
            file_name_hint: Legacy page name used to place the copied asset

        Returns:
            ImageResolution; failures are logged and returned, never raised
        """
        try:
            context = self.transfer_context(image_value)
            try:
                transfer = self.asset_transfer_factory(context, self.target)
                new_url = transfer.transfer_asset(image_value, file_name_hint)
            finally:
                if context is not self.source:
                    context.close()
        except Exception as e:
            logger.error(
                f"{LOG_HEADING}: Header image asset transfer failed for {image_value}: {e}"
            )
            return ImageResolution.failed(e)

        if not new_url:
            logger.warning(f"{LOG_HEADING}: No image produced for {image_value}")
            return ImageResolution.failed()

        return ImageResolution.resolved(new_url)

    def transfer_context(self, image_value: str) -> SiteContext:
        """Return the context the image has to be copied from."""
        asset_folder = image_value[: image_value.rfind("/")]
        web_url = self.source.server_relative_url

        if not asset_folder.casefold().startswith(web_url.casefold()):
            logger.debug(
                f"Image folder {asset_folder} is outside web {web_url}, "
                f"using site collection root {self.source.site_url}"
            )
            return self.source.clone(self.source.site_url)

        return self.source
