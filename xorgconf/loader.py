"""Build documents from declarative descriptions and dump them back.

A description is a mapping with a ``sections`` list. Each item names its
type in ``section`` and sets the variant's fields by their Python names::

    sections:
      - section: Device
        identifier: card0
        driver: modesetting
      - section: Screen
        identifier: screen0
        device: card0
        monitor: monitor0
        options:
          DPMS: ""

References are given as identifiers and are linked to the registered
section of the matching type when one exists.
"""

from __future__ import annotations

try:
    import orjson  # type: ignore[import-not-found]
except ImportError:  # pragma: no cover - optional dependency
    orjson = None  # type: ignore[assignment]

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import attrs
import yaml  # type: ignore[import-untyped]

from .document import Xorgconf
from .errors import DescriptionError
from .section import Section, is_empty, reference_identifier
from .sections import SECTION_TYPES

logger = logging.getLogger(__name__)

JSONDict = dict[str, Any]

# Base fields written after the variant's own fields.
_TRAILING_FIELDS = ("options", "custom_lines")


def json_dumps(data: object) -> str:
    """Serialize ``data`` to indented JSON, preferring ``orjson``."""

    if orjson is not None:
        return orjson.dumps(data, option=orjson.OPT_INDENT_2).decode()
    return json.dumps(data, ensure_ascii=False, indent=2)


def json_loads(data: str | bytes) -> object:
    """Deserialize JSON from a string or bytes, preferring ``orjson``."""

    if orjson is not None:
        return orjson.loads(data)
    if isinstance(data, (bytes, bytearray)):
        return json.loads(data.decode())
    return json.loads(data)


def _identifier_text(value: Any) -> Any:
    """Stringify scalar identifiers, keeping lists and unset values."""

    if isinstance(value, list):
        return [_identifier_text(item) for item in value]
    if value is None or isinstance(value, (str, Mapping)):
        return value
    return str(value)


def _build_section(item: object, position: int) -> Section:
    """Create one section from its description.

    Args:
        item: Mapping describing the section.
        position: Index of the item, used in error messages.

    Returns:
        The constructed section, references still given as identifiers.
    """

    if not isinstance(item, Mapping):
        raise DescriptionError(f"Section #{position} is not a mapping")

    fields = dict(item)
    section_name = fields.pop("section", None)
    cls = (
        SECTION_TYPES.get(section_name)
        if isinstance(section_name, str)
        else None
    )
    if cls is None:
        raise DescriptionError(
            f"Section #{position} has unknown type {section_name!r}"
        )

    # Reject keys that are not fields of the section type.
    known = {a.name for a in attrs.fields(cls)}
    unknown = sorted(set(fields) - known)
    if unknown:
        raise DescriptionError(
            f"{section_name} section #{position} has unknown fields: "
            f"{', '.join(unknown)}"
        )

    if not isinstance(fields.get("options") or {}, Mapping):
        raise DescriptionError(
            f"{section_name} section #{position}: 'options' must be a mapping"
        )
    if not isinstance(fields.get("custom_lines") or [], (list, str)):
        raise DescriptionError(
            f"{section_name} section #{position}: 'custom_lines' must be a "
            "list"
        )

    # Identifiers such as ``0`` are loaded by YAML as numbers.
    for name in ("identifier", *cls.reference_fields):
        if name in fields:
            fields[name] = _identifier_text(fields[name])

    try:
        return cls(**fields)
    except TypeError as exc:
        raise DescriptionError(
            f"{section_name} section #{position} is invalid: {exc}"
        ) from exc


def _resolve(document: Xorgconf, section_name: str, reference: Any) -> Any:
    """Return the registered section named by ``reference`` if any."""

    if not isinstance(reference, str):
        return reference
    target = document.get_section(section_name, reference)
    if target is None:
        logger.debug("No %s section named %r", section_name, reference)
        return reference
    return target


def _link_references(document: Xorgconf) -> None:
    """Replace identifier references by the registered sections."""

    for section in document.sections:
        for name, section_name in section.reference_fields.items():
            value = getattr(section, name)
            if isinstance(value, list):
                linked: Any = [
                    _resolve(document, section_name, ref) for ref in value
                ]
            else:
                linked = _resolve(document, section_name, value)
            setattr(section, name, linked)


def build_document(data: object) -> Xorgconf:
    """Build a document from a description mapping.

    Args:
        data: Mapping with a ``sections`` list.

    Returns:
        Document holding the described sections in order.

    Throws:
        DescriptionError: If the description is malformed.
    """

    if not isinstance(data, Mapping):
        raise DescriptionError("Description must be a mapping")

    items = data.get("sections") or []
    if not isinstance(items, list):
        raise DescriptionError("'sections' must be a list")

    document = Xorgconf()
    for position, item in enumerate(items):
        document.add_section(_build_section(item, position))

    _link_references(document)
    logger.debug("Built document with %d sections", len(document.sections))
    return document


def load_document(path: Path) -> Xorgconf:
    """Read a JSON or YAML description file and build a document.

    Args:
        path: Location of the description; ``.json`` files are decoded as
            JSON and anything else as YAML.

    Returns:
        The described document.
    """

    text = path.read_text(encoding="utf-8")

    # Decode JSON or YAML depending on file extension.
    try:
        if path.suffix == ".json":
            data = json_loads(text)
        else:
            data = yaml.safe_load(text)
    except (ValueError, yaml.YAMLError) as exc:
        raise DescriptionError(f"Cannot decode {path}: {exc}") from exc
    return build_document(data)


def section_to_dict(section: Section) -> JSONDict:
    """Describe a section with the keys understood by ``build_document``.

    Unset fields are left out and references are reduced to identifiers.
    """

    data: JSONDict = {"section": section.section_name}
    names = [a.name for a in attrs.fields(type(section))]
    ordered = [n for n in names if n not in _TRAILING_FIELDS]
    ordered.extend(_TRAILING_FIELDS)

    for name in ordered:
        value = getattr(section, name)
        if name in section.reference_fields:
            if isinstance(value, list):
                value = [reference_identifier(ref) for ref in value]
            else:
                value = reference_identifier(value)
        if is_empty(value):
            continue
        if isinstance(value, (list, dict)):
            value = value.copy()
        data[name] = value
    return data


def dump_document(document: Xorgconf) -> JSONDict:
    """Return the description of ``document``."""

    return {"sections": [section_to_dict(s) for s in document.sections]}
