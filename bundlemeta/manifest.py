"""Parser for the flat ``MANIFEST.MF`` attribute-block grammar.

A manifest is a sequence of sections separated by blank lines. Each section
is a list of ``Key: Value`` headers; a line starting with a single space
continues the previous value. The first section holds the main attributes;
later sections describe individual entries and start with a ``Name`` header.

Text is always decoded as UTF-8. Keys are case-sensitive.
"""

import re
from typing import Optional

from pydantic import BaseModel, Field

from bundlemeta.errors import ManifestParseError
from bundlemeta.logging import setup_logging

logger = setup_logging()

MANIFEST_ENCODING = "utf-8"
MAX_NAME_LENGTH = 70
SECTION_NAME_KEY = "Name"

_NAME_RE = re.compile(r"[A-Za-z0-9][A-Za-z0-9_.\-]*")
_LINE_SPLIT_RE = re.compile(r"\r\n|\r|\n")


class Manifest(BaseModel):
    """A parsed manifest: main attributes plus per-entry sections."""

    main_attributes: dict[str, str] = Field(default_factory=dict, description="Attributes of the main section")
    sections: dict[str, dict[str, str]] = Field(
        default_factory=dict,
        description="Named sections keyed by their Name header",
    )

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Return a main-section attribute, or ``default`` if it is absent."""
        return self.main_attributes.get(key, default)


def _split_lines(text: str) -> list[str]:
    lines = _LINE_SPLIT_RE.split(text)
    # A trailing terminator leaves one empty string behind; it is not a blank line.
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def _parse_header(line: str, line_number: int) -> tuple[str, str]:
    """Split a header line into name and value.

    ``Key:`` with nothing after the colon is read as an empty value, a
    deliberate relaxation of the JAR rule that every header carries ``": "``.
    Any other character right after the colon is rejected.
    """
    colon = line.find(":")
    if colon < 0:
        raise ManifestParseError(f"invalid header {line!r}: missing ':'", line_number=line_number)
    name = line[:colon]
    if not _NAME_RE.fullmatch(name):
        raise ManifestParseError(f"invalid attribute name {name!r}", line_number=line_number)
    if len(name) > MAX_NAME_LENGTH:
        raise ManifestParseError(
            f"attribute name {name[:20]!r}... exceeds {MAX_NAME_LENGTH} characters",
            line_number=line_number,
        )
    rest = line[colon + 1 :]
    if rest and not rest.startswith(" "):
        raise ManifestParseError(f"invalid header {line!r}: expected ': ' after name", line_number=line_number)
    return name, rest[1:]


def _parse_section(lines: list[tuple[int, str]]) -> dict[str, str]:
    attributes: dict[str, str] = {}
    current: Optional[str] = None
    for line_number, line in lines:
        if line.startswith(" "):
            if current is None:
                raise ManifestParseError("continuation line without a preceding attribute", line_number=line_number)
            attributes[current] += line[1:]
            continue
        name, value = _parse_header(line, line_number)
        if name in attributes:
            logger.warning("Duplicate attribute %r at line %d, keeping the last value", name, line_number)
            # Re-insert so iteration order follows the value actually kept.
            del attributes[name]
        attributes[name] = value
        current = name
    return attributes


def parse_manifest(data: bytes) -> Manifest:
    """Parse raw manifest bytes.

    Raises:
        ManifestParseError: If the bytes are not UTF-8 or do not follow the
            manifest grammar.
    """
    try:
        text = data.decode(MANIFEST_ENCODING)
    except UnicodeDecodeError as e:
        raise ManifestParseError(f"manifest is not valid {MANIFEST_ENCODING}: {e}") from e
    if text.startswith("\ufeff"):
        text = text[1:]

    blocks: list[list[tuple[int, str]]] = [[]]
    for line_number, line in enumerate(_split_lines(text), start=1):
        if line == "":
            blocks.append([])
        else:
            blocks[-1].append((line_number, line))

    manifest = Manifest(main_attributes=_parse_section(blocks[0]))
    for block in blocks[1:]:
        if not block:
            continue
        attributes = _parse_section(block)
        name = attributes.pop(SECTION_NAME_KEY, None)
        if name is None:
            raise ManifestParseError(f"section has no {SECTION_NAME_KEY!r} attribute", line_number=block[0][0])
        if name in manifest.sections:
            manifest.sections[name].update(attributes)
        else:
            manifest.sections[name] = attributes
    return manifest
