"""Transformers for migrating legacy page content onto modern pages."""

from .attribute_mapper import AttributeMapper
from .field_resolver import FieldResolver
from .header_image_resolver import HeaderImageResolver, ImageResolution
from .header_mode import HeaderState, select_header_mode
from .header_transformer import HeaderTransformer
from .transformer import PageTransformer

__all__ = [
    "PageTransformer",
    "HeaderTransformer",
    "HeaderState",
    "AttributeMapper",
    "FieldResolver",
    "HeaderImageResolver",
    "ImageResolution",
    "select_header_mode",
]
