"""Evaluation of field functions declared in header mappings.

A header field may carry a function expression instead of being copied
verbatim, e.g.:

    ToImageUrl({PublishingPageImage})
    ToAuthors({PublishingContact})
    StaticString('Campus news')

Arguments are either field references ({FieldName}), resolved against the
legacy page, or quoted string literals. The processor returns a
(status, value) pair; an empty status means the function produced nothing.
"""

import json
import logging
import re
from enum import Enum
from typing import Any, Callable
from urllib.parse import unquote, urlparse

from lxml import etree, html

from page_header_migrator.exceptions import FunctionProcessorError
from schemas.legacy_page import LegacyPage

logger = logging.getLogger(__name__)

FUNCTION_PATTERN = re.compile(r"^\s*(?P<name>[A-Za-z_]\w*)\s*\((?P<args>.*)\)\s*$", re.DOTALL)
FIELD_REFERENCE_PATTERN = re.compile(r"^\{(?P<field>[^{}]+)\}$")
CLAIMS_PREFIX = "i:0#.f|membership|"


class FieldType(str, Enum):
    """How the value of a field function is to be interpreted."""

    STRING = "String"
    USER = "User"


def _split_arguments(args: str) -> list[str]:
    """Split an argument list on commas outside quoted literals."""
    arguments: list[str] = []
    current: list[str] = []
    quote: str | None = None

    for char in args:
        if quote:
            current.append(char)
            if char == quote:
                quote = None
        elif char in ("'", '"'):
            quote = char
            current.append(char)
        elif char == ",":
            arguments.append("".join(current).strip())
            current = []
        else:
            current.append(char)

    if quote:
        raise FunctionProcessorError(f"Unterminated string literal in '{args}'")

    tail = "".join(current).strip()
    if tail or arguments:
        arguments.append(tail)
    return arguments


def _parse_image(value: Any) -> etree._Element | None:
    """Return the first <img> element of an image field value."""
    if not value or not isinstance(value, str):
        return None
    fragment = html.fragment_fromstring(value, create_parent="div")
    images = fragment.xpath(".//img")
    return images[0] if images else None


def _to_server_relative(url: str) -> str:
    parsed = urlparse(url)
    return unquote(parsed.path) if parsed.scheme else unquote(url)


def _to_principal(value: Any) -> dict[str, str] | None:
    """Normalize a user field value into a header author entry."""
    if isinstance(value, dict):
        email = value.get("Email") or value.get("email") or ""
        name = value.get("LookupValue") or value.get("Title") or value.get("name") or email
        login = value.get("Name") or value.get("LoginName") or ""
    else:
        text = str(value).strip()
        if not text:
            return None
        email = text if "@" in text else ""
        name = text
        login = ""

    if not email and not login and not name:
        return None

    upn = email or login.split("|")[-1]
    principal_id = login or (f"{CLAIMS_PREFIX}{upn}" if upn else name)
    return {"id": principal_id, "upn": upn, "name": name, "role": ""}


class FunctionProcessor:
    """Evaluates field functions against a legacy page.

    Example:
        processor = FunctionProcessor(legacy_page)
        status, url = processor.process(
            "ToImageUrl({PublishingPageImage})", "PublishingPageImage"
        )
    """

    def __init__(self, page: LegacyPage):
        self.page = page
        self._functions: dict[str, Callable[..., str | None]] = {
            "toimageurl": self.to_image_url,
            "toimagealttext": self.to_image_alt_text,
            "toimageanchor": self.to_image_anchor,
            "toauthors": self.to_authors,
            "staticstring": self.static_string,
            "emptystring": self.empty_string,
        }

    def process(
        self,
        functions: str,
        field_name: str,
        field_type: FieldType = FieldType.STRING,
    ) -> tuple[str, str]:
        """Evaluate a function expression.

        Args:
            functions: Function expression, e.g. "ToImageUrl({PublishingPageImage})"
            field_name: Name of the field the expression is declared on
            field_type: STRING for plain text, USER to resolve arguments to principals

        Returns:
            (status, value); status is the field name on success and "" when
            the function is unknown or produced no value

        Raises:
            FunctionProcessorError: If the expression is malformed or the
                function fails while evaluating
        """
        match = FUNCTION_PATTERN.match(functions)
        if match is None:
            raise FunctionProcessorError(
                f"Malformed function expression '{functions}' on field {field_name}"
            )

        name = match.group("name")
        function = self._functions.get(name.lower())
        if function is None:
            logger.warning(f"Unknown function '{name}' on field {field_name}, skipping")
            return "", ""

        arguments = [
            self._resolve_argument(arg, field_type)
            for arg in _split_arguments(match.group("args"))
        ]

        try:
            value = function(*arguments)
        except FunctionProcessorError:
            raise
        except Exception as e:
            raise FunctionProcessorError(
                f"Function {name} failed on field {field_name}: {e}",
                function_name=name,
            ) from e

        if value is None:
            logger.debug(f"Function {name} produced no value for field {field_name}")
            return "", ""
        return field_name, value

    def _resolve_argument(self, argument: str, field_type: FieldType) -> Any:
        reference = FIELD_REFERENCE_PATTERN.match(argument)
        if reference is not None:
            value = self.page[reference.group("field").strip()]
            if field_type == FieldType.USER:
                return self._to_principals(value)
            return value

        if len(argument) >= 2 and argument[0] == argument[-1] and argument[0] in ("'", '"'):
            return argument[1:-1]

        raise FunctionProcessorError(f"Unsupported function argument '{argument}'")

    def _to_principals(self, value: Any) -> list[dict[str, str]]:
        if value is None:
            return []
        values = value if isinstance(value, list) else [value]
        principals = [_to_principal(v) for v in values]
        return [p for p in principals if p is not None]

    # Built-in functions

    def to_image_url(self, value: Any) -> str | None:
        if isinstance(value, dict):
            url = value.get("Url") or value.get("serverRelativeUrl")
            return _to_server_relative(url) if url else None
        if isinstance(value, str) and "<" not in value:
            return _to_server_relative(value.strip()) or None

        image = _parse_image(value)
        if image is None or not image.get("src"):
            return None
        return _to_server_relative(image.get("src"))

    def to_image_alt_text(self, value: Any) -> str | None:
        if isinstance(value, dict):
            return value.get("Description") or None

        image = _parse_image(value)
        if image is None:
            return None
        return image.get("alt") or None

    def to_image_anchor(self, value: Any) -> str | None:
        image = _parse_image(value)
        if image is None:
            return None
        anchor = next(image.iterancestors("a"), None)
        if anchor is None:
            return None
        return anchor.get("href") or None

    def to_authors(self, principals: Any) -> str | None:
        if not principals:
            return None
        if not isinstance(principals, list):
            principals = [p for p in [_to_principal(principals)] if p is not None]
        return json.dumps(principals) if principals else None

    def static_string(self, value: str = "") -> str:
        return value

    def empty_string(self) -> str:
        return ""
