"""Exceptions raised while transforming page headers."""


class TransformationError(Exception):
    """Base exception for header transformation errors."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class MappingNotFoundError(TransformationError):
    """Raised when no mapping can be resolved for a page layout."""

    def __init__(self, page_layout: str, message: str | None = None):
        self.page_layout = page_layout
        super().__init__(message or f"No header mapping found for page layout '{page_layout}'")


class MappingFileError(TransformationError):
    """Raised when a mapping file cannot be read or fails validation."""

    def __init__(self, message: str, path=None, errors: list | None = None):
        self.path = path
        self.errors = errors or []
        super().__init__(message)


class FunctionProcessorError(TransformationError):
    """Raised when a field function fails hard while being evaluated."""

    def __init__(self, message: str, function_name: str | None = None):
        self.function_name = function_name
        super().__init__(message)


class AssetTransferError(TransformationError):
    """Raised when an asset cannot be copied to the target site."""

    def __init__(self, message: str, source_path: str | None = None):
        self.source_path = source_path
        super().__init__(message)
