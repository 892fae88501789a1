"""Asset transfer between a source and a target site."""

import logging
from pathlib import PurePosixPath

from page_header_migrator.clients import ClientError, SiteClient
from page_header_migrator.exceptions import AssetTransferError

logger = logging.getLogger(__name__)

TARGET_ASSET_LIBRARY = "SiteAssets"
TARGET_ASSET_FOLDER = "SitePages"

SUPPORTED_EXTENSIONS = frozenset(
    {"jpg", "jpeg", "png", "gif", "bmp", "tif", "tiff", "svg", "webp"}
)


class AssetTransfer:
    """Copies an asset referenced by a legacy page into the target site.

    Assets land in SiteAssets/SitePages/<page name>/ of the target web,
    which is where the modern page editor stores uploaded page images.

    Example:
        with SiteClient(source_config) as source, SiteClient(target_config) as target:
            new_url = AssetTransfer(source, target).transfer_asset(
                "/sites/a/Images/hero.jpg", "news"
            )
    """

    def __init__(self, source: SiteClient, target: SiteClient):
        self.source = source
        self.target = target

    def transfer_asset(self, source_path: str, target_file_name_hint: str) -> str:
        """Copy the asset at source_path to the target site.

        Args:
            source_path: Server-relative URL of the asset in the source site
            target_file_name_hint: Page name used to group the page's assets

        Returns:
            Server-relative URL of the asset in the target site

        Raises:
            AssetTransferError: If the asset is not supported or the copy fails
        """
        self._validate(source_path)

        file_name = PurePosixPath(source_path).name
        target_folder = self._target_folder(target_file_name_hint)
        target_path = f"{target_folder}/{file_name}"

        try:
            if self.target.file_exists(target_path):
                logger.debug(f"Asset {source_path} already present at {target_path}")
                return target_path

            content = self.source.fetch(source_path)
            self.target.ensure_folder(target_folder)
            new_path = self.target.upload_file(target_folder, file_name, content)
        except ClientError as e:
            raise AssetTransferError(
                f"Copying {source_path} to {target_folder} failed: {e.message}",
                source_path=source_path,
            ) from e

        logger.info(f"Transferred asset {source_path} to {new_path}")
        return new_path

    def _target_folder(self, target_file_name_hint: str) -> str:
        web = self.target.server_relative_url.rstrip("/")
        folder = f"{web}/{TARGET_ASSET_LIBRARY}/{TARGET_ASSET_FOLDER}"
        if target_file_name_hint:
            folder = f"{folder}/{target_file_name_hint}"
        return folder

    def _validate(self, source_path: str) -> None:
        if not source_path or not source_path.startswith("/"):
            raise AssetTransferError(
                f"Asset path must be server relative: '{source_path}'",
                source_path=source_path,
            )

        extension = PurePosixPath(source_path).suffix.lstrip(".").lower()
        if extension not in SUPPORTED_EXTENSIONS:
            raise AssetTransferError(
                f"Unsupported asset type '{extension}' for {source_path}",
                source_path=source_path,
            )
