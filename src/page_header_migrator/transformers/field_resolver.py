"""Resolution of header field values."""

from typing import Protocol

from page_header_migrator.functions import FieldType
from schemas.legacy_page import LegacyPage
from schemas.mapping import HeaderField


class FieldFunctionProcessor(Protocol):
    def process(
        self, functions: str, field_name: str, field_type: FieldType = ...
    ) -> tuple[str, str]: ...


class FieldResolver:
    """Returns the effective value of a header field for a legacy page.

    Fields with functions are evaluated by the function processor; plain
    fields are copied from the page's field values. An empty string means
    the field has no value.
    """

    def __init__(self, page: LegacyPage, function_processor: FieldFunctionProcessor):
        self.page = page
        self.function_processor = function_processor

    def get_field_value(
        self,
        field: HeaderField,
        field_type: FieldType = FieldType.STRING,
    ) -> str:
        if field.functions:
            status, value = self.function_processor.process(
                field.functions, field.name, field_type
            )
            return (value or "") if status else ""

        value = self.page.field_values.get(field.name)
        if value is None:
            return ""
        return str(value).strip()
