"""Asset handling for migrated pages."""

from .asset_transfer import AssetTransfer

__all__ = ["AssetTransfer"]
