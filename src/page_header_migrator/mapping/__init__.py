"""Page layout mapping loading and resolution."""

from .mapping_cache import MappingCache
from .mapping_loader import load_mappings, parse_mapping_xml
from .mapping_resolver import MappingResolver

__all__ = [
    "MappingCache",
    "MappingResolver",
    "load_mappings",
    "parse_mapping_xml",
]
