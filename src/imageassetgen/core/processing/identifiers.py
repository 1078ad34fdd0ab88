from __future__ import annotations

"""
Swift Identifier Sanitization.

Pure string transforms turning asset and group names into Swift identifiers:
camelCase for enum cases, PascalCase-ish for nested enum types. Also provides
per-scope collision handling and string literal escaping for raw values.
"""

import logging
import re
from typing import Dict, Final, FrozenSet, Optional, Set

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PATTERNS
# -----------------------------------------------------------------------------

_VALUE_SEPARATORS: Final[re.Pattern] = re.compile(r"[-_ ]")
_TYPE_SEPARATORS: Final[re.Pattern] = re.compile(r"[- ]")
_NON_IDENTIFIER_CHARS: Final[re.Pattern] = re.compile(r"\W")

SWIFT_RESERVED_WORDS: Final[FrozenSet[str]] = frozenset({
    "associatedtype", "class", "deinit", "enum", "extension", "fileprivate",
    "func", "import", "init", "inout", "internal", "let", "open", "operator",
    "private", "protocol", "public", "rethrows", "static", "struct",
    "subscript", "typealias", "var", "break", "case", "continue", "default",
    "defer", "do", "else", "fallthrough", "for", "guard", "if", "in",
    "repeat", "return", "switch", "where", "while", "as", "catch", "false",
    "is", "nil", "super", "self", "Self", "throw", "throws", "true", "try",
    "Any", "Type",
})

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def to_value_identifier(name: str) -> str:
    """
    Convert an image name into a camelCase enum case identifier.

    Splits on '-', '_' and spaces, lowercases the first piece and upper-cases
    the first letter of every later piece. A result that does not start with
    a letter is prefixed with "image" and title-cased ("123icon" becomes
    "image123Icon").

    Args:
        name: Raw image name.

    Returns:
        str: The identifier, or "" if nothing survives the split.
    """
    parts = [p for p in _VALUE_SEPARATORS.split(name) if p]
    if not parts:
        return ""

    result = parts[0].lower() + "".join(p[0].upper() + p[1:] for p in parts[1:])

    if not result[0].isalpha():
        return "image" + result.title()
    return result


def to_type_identifier(name: str) -> str:
    """
    Convert a group name into a nested enum type identifier.

    Dashes and spaces become underscores (underscores are kept), the first
    character is upper-cased and a leading digit gets a "Group" prefix
    ("my-group" becomes "My_group", "123group" becomes "Group123group").
    """
    sanitized = _TYPE_SEPARATORS.sub("_", name)
    if not sanitized:
        return ""

    capitalized = sanitized[0].upper() + sanitized[1:]
    if capitalized[0].isdigit():
        return "Group" + capitalized
    return capitalized


def escape_reserved(identifier: str) -> str:
    """Wrap Swift keywords in backticks so they can be used as names."""
    if identifier in SWIFT_RESERVED_WORDS:
        return f"`{identifier}`"
    return identifier


def to_swift_identifier(identifier: str) -> str:
    """
    Force `identifier` into Swift identifier syntax.

    Every character that is not a letter, digit or underscore becomes "_",
    and a leading digit gets an "_" prefix ("icon.fill" becomes "icon_fill",
    "2x" becomes "_2x").
    """
    result = _NON_IDENTIFIER_CHARS.sub("_", identifier)
    if result and result[0].isdigit():
        return "_" + result
    return result


def swift_string_literal(value: str) -> str:
    """Render `value` as a double-quoted Swift string literal."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'

# -----------------------------------------------------------------------------
# SCOPED NAME REGISTRY
# -----------------------------------------------------------------------------

class IdentifierScope:
    """
    Issues unique identifiers within one Swift enum body.

    Characters Swift does not accept in identifiers become underscores and
    empty identifiers are replaced by a placeholder. Repeated identifiers get
    a numeric suffix starting at 2, in the order names are claimed.
    Callers must claim names in sorted source order for the output to be
    deterministic.
    """

    def __init__(self, placeholder: str, reserved: Optional[Set[str]] = None) -> None:
        self._placeholder = placeholder
        self._used: Set[str] = set(reserved or ())
        self._counters: Dict[str, int] = {}

    def claim(self, identifier: str, source: str) -> str:
        """
        Reserve an identifier derived from `source`.

        Args:
            identifier: Sanitized identifier (possibly empty).
            source: Original name, used for diagnostics.

        Returns:
            str: A unique identifier, backtick-escaped if it is a keyword.
        """
        base = to_swift_identifier(identifier)
        if base and base != identifier:
            logger.warning(f"Identifier '{identifier}' for '{source}' is not valid Swift. Using '{base}'.")

        if not base or base == "_":
            logger.warning(
                f"Name '{source}' has no representable identifier. "
                f"Using placeholder '{self._placeholder}'."
            )
            base = self._placeholder

        candidate = base
        if candidate in self._used:
            n = self._counters.get(base, 1)
            while candidate in self._used:
                n += 1
                candidate = f"{base}{n}"
            self._counters[base] = n
            logger.warning(f"Identifier '{base}' for '{source}' already used. Renamed to '{candidate}'.")

        self._used.add(candidate)
        return escape_reserved(candidate)
