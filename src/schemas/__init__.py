"""Schema definitions for Page Header Migrator."""

from .legacy_page import FILE_LEAF_REF_FIELD, PAGE_LAYOUT_FIELD, LegacyPage
from .mapping import (
    HeaderAlignment,
    HeaderField,
    HeaderMapping,
    HeaderMode,
    HeaderProperty,
    HeaderType,
    PageLayoutMapping,
    PublishingPageTransformation,
)
from .page_header import (
    ModernPage,
    PageHeader,
    PageHeaderLayoutType,
    PageHeaderTitleAlignment,
    PageHeaderType,
)

__all__ = [
    "FILE_LEAF_REF_FIELD",
    "PAGE_LAYOUT_FIELD",
    "HeaderAlignment",
    "HeaderField",
    "HeaderMapping",
    "HeaderMode",
    "HeaderProperty",
    "HeaderType",
    "LegacyPage",
    "ModernPage",
    "PageHeader",
    "PageHeaderLayoutType",
    "PageHeaderTitleAlignment",
    "PageHeaderType",
    "PageLayoutMapping",
    "PublishingPageTransformation",
]
