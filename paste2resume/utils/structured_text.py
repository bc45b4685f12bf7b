"""
Decoder for the loosely structured text returned by the extraction prompt.

The model is asked for "field: value" lines with numbered lists for arrays,
but it improvises: Markdown bold, headings, bullets instead of numbers,
one-line "key: value, key: value" items or indented key/value blocks.
Everything here is best-effort and never raises on content.
"""

import re
from typing import Any, Dict, Iterable, List, Optional, Set

# A key is a short label: up to four words starting with a letter
KEY = r"[A-Za-z][\w\-/&]*(?: [\w\-/&]+){0,3}"

FIELD_PATTERN = re.compile(rf"^({KEY})\s*:\s*(.*)$")
ITEM_PATTERN = re.compile(r"^\s*(?:[-*•]|\d+[.)])\s+(.*)$|^\s*(?:[-*•]|\d+[.)])$")
FENCE_PATTERN = re.compile(r"^\s*```")
HEADING_PATTERN = re.compile(r"^\s*#+\s*(.*?)\s*:?\s*$")
BOLD_PATTERN = re.compile(r"\*\*(.+?)\*\*|__(.+?)__")

LIST_MARKERS = ("", "-")


def normalize_key(key: str) -> str:
    """Lower-case a key and turn spaces/hyphens into underscores."""
    return re.sub(r"[\s\-]+", "_", key.strip().lower()).strip("_")


def _strip_markup(line: str) -> str:
    return BOLD_PATTERN.sub(lambda m: m.group(1) or m.group(2), line).rstrip()


def _match_pair(text: str) -> Optional[re.Match]:
    """Match "key: value" unless the colon belongs to a URL scheme."""
    match = FIELD_PATTERN.match(text.strip())
    if match and match.group(2).startswith("//"):
        return None
    return match


def parse_item(text: str) -> Any:
    """
    Parse the text of a single list item.

    "company: Acme, position: Engineer" becomes a mapping; a comma separated
    part without a colon is glued back onto the previous value so that
    descriptions keep their commas. Anything without a key becomes a string.

    Args:
        text: Item text with the bullet/number already removed

    Returns:
        Dict of key/value pairs, or the stripped string
    """
    text = text.strip()
    if not _match_pair(text):
        return text

    pairs: Dict[str, str] = {}
    last_key = None
    for part in text.split(","):
        part = part.strip()
        if not part:
            continue
        match = _match_pair(part)
        if match and match.group(2).strip():
            last_key = match.group(1).strip()
            pairs[last_key] = match.group(2).strip()
        elif last_key is not None:
            pairs[last_key] = f"{pairs[last_key]}, {part}"

    return pairs or text


class StructuredTextDecoder:
    """
    Line-oriented decoder that turns model output into nested Python data.

    Args:
        known_fields: Optional top-level field names. When given, an
            unindented "key: value" line with an unknown key is read as a
            continuation of the open list item instead of a new field.
        entry_fields: Optional mapping of list field name to the keys its
            items may carry. An unindented line whose key belongs to the open
            list's items always continues the open item, even when the same
            name is also a top-level field ("Name", "Location").
    """

    def __init__(
        self,
        known_fields: Optional[Iterable[str]] = None,
        entry_fields: Optional[Dict[str, Iterable[str]]] = None
    ):
        self.known_fields: Optional[Set[str]] = (
            {normalize_key(field) for field in known_fields} if known_fields else None
        )
        self.entry_fields: Dict[str, Set[str]] = {
            normalize_key(field): {normalize_key(key) for key in keys}
            for field, keys in (entry_fields or {}).items()
        }
        self._result: Dict[str, Any] = {}
        self._key: Optional[str] = None

    def decode(self, text: str) -> Dict[str, Any]:
        """
        Decode structured text.

        Args:
            text: Raw model response

        Returns:
            Mapping of normalised field names to strings or lists
        """
        self._result = {}
        self._key = None

        for raw_line in (text or "").splitlines():
            if FENCE_PATTERN.match(raw_line):
                continue
            line = _strip_markup(raw_line)
            if not line.strip():
                continue
            self._handle_line(line)

        return self._result

    @property
    def _items(self) -> Optional[List[Any]]:
        value = self._result.get(self._key) if self._key else None
        return value if isinstance(value, list) else None

    def _handle_line(self, line: str) -> None:
        indented = line[:1].isspace()

        heading = HEADING_PATTERN.match(line)
        if heading:
            if heading.group(1):
                self._start_field(heading.group(1), "")
            return

        item = ITEM_PATTERN.match(line)
        if item:
            self._handle_item((item.group(1) or "").strip(), indented)
            return

        pair = _match_pair(line)
        if pair and not indented and not self._is_continuation(pair.group(1)):
            self._start_field(pair.group(1), pair.group(2).strip())
            return

        if pair and self._items is not None:
            self._merge_pair(pair.group(1).strip(), pair.group(2).strip())
            return

        self._extend(line.strip())

    def _is_continuation(self, key: str) -> bool:
        if self._items is None:
            return False
        key = normalize_key(key)
        if key in self.entry_fields.get(self._key, ()):
            return True
        if self.known_fields is None:
            return False
        return key not in self.known_fields

    def _start_field(self, key: str, value: str) -> None:
        key = normalize_key(key)
        self._key = key
        if value in LIST_MARKERS:
            if not isinstance(self._result.get(key), list):
                self._result[key] = []
        else:
            self._result[key] = value

    def _handle_item(self, text: str, indented: bool) -> None:
        if not text or self._key is None:
            return

        items = self._items
        if items is None:
            # Items after a scalar field turn it into a list
            scalar = self._result.get(self._key)
            items = self._result[self._key] = [scalar] if scalar else []

        parsed = parse_item(text)
        last = items[-1] if items else None

        if indented and isinstance(parsed, str) and isinstance(last, dict):
            self._append_description(last, parsed, separator="\n")
            return

        if (
            isinstance(parsed, dict)
            and len(parsed) == 1
            and isinstance(last, dict)
            and normalize_key(next(iter(parsed))) not in {normalize_key(k) for k in last}
        ):
            last.update(parsed)
            return

        items.append(parsed)

    def _merge_pair(self, key: str, value: str) -> None:
        items = self._items
        last = items[-1] if items else None
        if isinstance(last, dict) and normalize_key(key) not in {normalize_key(k) for k in last}:
            if value:
                last[key] = value
            return
        if value:
            items.append({key: value})

    def _extend(self, text: str) -> None:
        """Append a stray line to whatever was written last."""
        if self._key is None:
            return

        items = self._items
        if items is None:
            current = self._result.get(self._key)
            self._result[self._key] = f"{current} {text}" if current else text
            return
        if not items:
            return

        last = items[-1]
        if isinstance(last, dict):
            self._append_description(last, text, separator=" ")
        else:
            items[-1] = f"{last} {text}"

    @staticmethod
    def _append_description(item: Dict[str, str], text: str, separator: str) -> None:
        key = next((k for k in item if normalize_key(k) == "description"), "description")
        current = item.get(key)
        item[key] = f"{current}{separator}{text}" if current else text


def parse_structured_text(
    text: str,
    known_fields: Optional[Iterable[str]] = None,
    entry_fields: Optional[Dict[str, Iterable[str]]] = None
) -> Dict[str, Any]:
    """
    Parse structured model output into a dictionary.

    Args:
        text: Raw model response
        known_fields: Optional top-level field names (see StructuredTextDecoder)
        entry_fields: Optional item keys per list field (see StructuredTextDecoder)

    Returns:
        Decoded mapping
    """
    return StructuredTextDecoder(known_fields, entry_fields).decode(text)
