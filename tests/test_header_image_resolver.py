"""Tests for the HeaderImageResolver."""

from unittest.mock import MagicMock, PropertyMock

from page_header_migrator.exceptions import AssetTransferError
from page_header_migrator.transformers import HeaderImageResolver, ImageResolution


class TestImageResolution:
    def test_resolved(self):
        resolution = ImageResolution.resolved("/sites/b/hero.jpg")

        assert resolution.succeeded is True
        assert resolution.url == "/sites/b/hero.jpg"
        assert resolution.error is None

    def test_failed_keeps_cause(self):
        error = RuntimeError("boom")
        resolution = ImageResolution.failed(error)

        assert resolution.succeeded is False
        assert resolution.url == ""
        assert resolution.error is error


class TestTransferContext:
    def test_image_in_current_web_uses_source(self, mock_source, mock_target, asset_transfer_factory):
        """An image below /sites/a is copied from the /sites/a web."""
        resolver = HeaderImageResolver(mock_source, mock_target, asset_transfer_factory)

        context = resolver.transfer_context("/sites/a/Images/hero.jpg")

        assert context is mock_source
        mock_source.clone.assert_not_called()

    def test_prefix_check_ignores_case(self, mock_source, mock_target, asset_transfer_factory):
        resolver = HeaderImageResolver(mock_source, mock_target, asset_transfer_factory)

        assert resolver.transfer_context("/SITES/A/images/hero.jpg") is mock_source

    def test_image_outside_web_uses_site_collection_root(
        self, mock_source, mock_target, asset_transfer_factory
    ):
        """An image in /Images/shared is copied from the site collection root."""
        resolver = HeaderImageResolver(mock_source, mock_target, asset_transfer_factory)

        context = resolver.transfer_context("/Images/shared/hero.jpg")

        mock_source.clone.assert_called_once_with("https://contoso.sharepoint.com")
        assert context is mock_source.clone.return_value


class TestResolve:
    def test_resolve_returns_new_url(
        self, mock_source, mock_target, asset_transfer_factory, mock_asset_transfer
    ):
        resolver = HeaderImageResolver(mock_source, mock_target, asset_transfer_factory)

        resolution = resolver.resolve("/sites/a/Images/hero.jpg", "news")

        assert resolution.succeeded
        assert resolution.url == mock_asset_transfer.transfer_asset.return_value
        mock_asset_transfer.transfer_asset.assert_called_once_with(
            "/sites/a/Images/hero.jpg", "news"
        )

    def test_resolve_redirects_transfer_to_root_web(
        self, mock_source, mock_target, asset_transfer_factory
    ):
        """The copier is built for the root web and the clone is closed afterwards."""
        root_web = mock_source.clone.return_value
        resolver = HeaderImageResolver(mock_source, mock_target, asset_transfer_factory)

        resolver.resolve("/Images/shared/hero.jpg", "news")

        asset_transfer_factory.assert_called_once_with(root_web, mock_target)
        root_web.close.assert_called_once()
        mock_source.close.assert_not_called()

    def test_transfer_error_is_absorbed(
        self, mock_source, mock_target, asset_transfer_factory, mock_asset_transfer, caplog
    ):
        error = AssetTransferError("copy failed", source_path="/sites/a/Images/hero.jpg")
        mock_asset_transfer.transfer_asset.side_effect = error
        resolver = HeaderImageResolver(mock_source, mock_target, asset_transfer_factory)

        resolution = resolver.resolve("/sites/a/Images/hero.jpg", "news")

        assert resolution.succeeded is False
        assert resolution.error is error
        assert "Publishing page header" in caplog.text
        assert "Header image asset transfer failed" in caplog.text

    def test_context_error_is_absorbed(self, mock_target, asset_transfer_factory):
        """Failing to read the source web path is handled like a transfer error."""
        source = MagicMock()
        type(source).server_relative_url = PropertyMock(side_effect=ConnectionError("offline"))
        resolver = HeaderImageResolver(source, mock_target, asset_transfer_factory)

        resolution = resolver.resolve("/sites/a/Images/hero.jpg", "news")

        assert resolution.succeeded is False
        assert isinstance(resolution.error, ConnectionError)
        asset_transfer_factory.assert_not_called()

    def test_empty_transfer_result_fails(
        self, mock_source, mock_target, asset_transfer_factory, mock_asset_transfer
    ):
        mock_asset_transfer.transfer_asset.return_value = ""
        resolver = HeaderImageResolver(mock_source, mock_target, asset_transfer_factory)

        resolution = resolver.resolve("/sites/a/Images/hero.jpg", "news")

        assert resolution.succeeded is False
        assert resolution.error is None
