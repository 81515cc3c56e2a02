"""Base section implementing the option store and the rendering skeleton."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, ClassVar

from attrs import define, field

from .errors import IncompleteSectionError
from .types import EntryList, LineList, OptionMap, OptionValue, SectionRef

INDENT = "  "


def is_empty(value: object) -> bool:
    """Return ``True`` when ``value`` should produce no output line.

    ``None``, the empty string and empty collections are empty. ``False``
    and ``0`` are real values.
    """

    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (list, tuple, dict)):
        return len(value) == 0
    return False


def as_list(value: Any) -> list[Any]:
    """Normalize a single value or an iterable of values to a list."""

    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return list(value)


def _drop_unset(options: Mapping[str, Any] | None) -> OptionMap:
    # Unset values never enter the store.
    if not options:
        return {}
    return {key: value for key, value in options.items() if value is not None}


def _text(value: object) -> str:
    """Stringify a scalar the way the X server expects it."""

    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def reference_identifier(reference: SectionRef | None) -> str | None:
    """Return the identifier named by a section reference.

    Args:
        reference: A section object, an identifier string or ``None``.

    Returns:
        The identifier string, or ``None`` for an unset reference.
    """

    if isinstance(reference, Section):
        return getattr(reference, "identifier", None)
    return reference


def format_entry(name: str, value: object) -> LineList:
    """Render one structured entry.

    Args:
        name: Entry keyword such as ``Identifier`` or ``Driver``.
        value: Scalar, boolean or ordered sequence of scalars.

    Returns:
        Output lines for the entry, empty when ``value`` is unset.
    """

    if is_empty(value):
        return []
    if isinstance(value, (list, tuple)):
        return [f'{INDENT}{name} "{_text(item)}"' for item in value]
    return [f'{INDENT}{name} "{_text(value)}"']


def format_option(name: str, value: OptionValue) -> LineList:
    """Render one ``Option`` line (or several for sequences).

    Args:
        name: Option name.
        value: Option value. Integers are written unquoted and an empty
            string produces a valueless option.

    Returns:
        Output lines for the option.
    """

    if isinstance(value, (list, tuple)):
        return [f'{INDENT}Option "{name}" "{_text(item)}"' for item in value]
    if isinstance(value, bool):
        return [f'{INDENT}Option "{name}" "{_text(value)}"']
    if isinstance(value, int):
        return [f'{INDENT}Option "{name}" {value}']
    if value == "":
        return [f'{INDENT}Option "{name}"']
    return [f'{INDENT}Option "{name}" "{value}"']


def collect_missing(entries: EntryList) -> list[str]:
    """Return the names of required entries whose value is empty."""

    return [name for name, value in entries if is_empty(value)]


@define(slots=True)
class Section:
    """A named configuration block of an ``xorg.conf`` file.

    Variants declare their tag in ``section_name`` and provide their
    structured entries through ``entries()``. Options derived from variant
    fields come from ``field_options()`` and are merged over the stored
    options each time the section is rendered.

    Attributes:
        options: Generic options rendered with the ``Option`` keyword.
        custom_lines: Raw lines appended verbatim before ``EndSection``.
    """

    section_name: ClassVar[str] = "Section"
    # Field name to the tag of the section it refers to.
    reference_fields: ClassVar[dict[str, str]] = {}

    options: OptionMap = field(
        factory=dict, converter=_drop_unset, kw_only=True, repr=False
    )
    custom_lines: LineList = field(
        factory=list, converter=as_list, kw_only=True, repr=False
    )

    def add_option(self, name: str, value: OptionValue | None) -> Section:
        """Store an option, ignoring unset values.

        Args:
            name: Option name. Re-adding a name overwrites its value.
            value: Option value; ``None`` leaves the store untouched.

        Returns:
            The section itself.
        """

        if value is not None:
            self.options[name] = value
        return self

    def get_option(self, name: str) -> OptionValue | None:
        return self.options.get(name)

    def set_options(
        self, options: Mapping[str, OptionValue | None]
    ) -> Section:
        self.options = _drop_unset(options)
        return self

    def remove_option(self, name: str) -> Section:
        self.options.pop(name, None)
        return self

    def add_custom_line(self, line: str) -> Section:
        self.custom_lines.append(line)
        return self

    def set_custom_lines(self, lines: Iterable[str] | str) -> Section:
        self.custom_lines = as_list(lines)
        return self

    def entries(self) -> EntryList:
        """Return the ordered structured entries of the section."""

        raise NotImplementedError

    def field_options(self) -> EntryList:
        """Return options derived from the variant's own fields."""

        return []

    def missing_fields(self) -> list[str]:
        """Return the required entries that are currently unset."""

        return []

    def is_renderable(self) -> bool:
        return not self.missing_fields()

    def references(self) -> list[tuple[str, str]]:
        """Return ``(section_name, identifier)`` of each referenced section."""

        found: list[tuple[str, str]] = []
        for name, target in self.reference_fields.items():
            value = getattr(self, name)
            refs = value if isinstance(value, list) else [value]
            for ref in refs:
                identifier = reference_identifier(ref)
                if not is_empty(identifier):
                    found.append((target, str(identifier)))
        return found

    def merged_options(self) -> OptionMap:
        """Return stored options with field-derived options merged in.

        A field-derived option replaces a stored option of the same name at
        its original position; new names follow the stored ones. The store
        itself is left untouched.
        """

        merged = dict(self.options)
        for name, value in self.field_options():
            if value is not None:
                merged[name] = value  # type: ignore[assignment]
        return merged

    def render(self) -> str:
        """Render the section as ``xorg.conf`` text.

        Returns:
            The complete block from ``Section`` to ``EndSection``.

        Throws:
            IncompleteSectionError: If a required entry is unset.
        """

        missing = self.missing_fields()
        if missing:
            raise IncompleteSectionError(self, missing)

        lines = [f'Section "{self.section_name}"']

        # Structured entries in the order defined by the variant.
        for name, value in self.entries():
            lines.extend(format_entry(name, value))

        # Generic options, including those derived from fields.
        for name, value in self.merged_options().items():
            lines.extend(format_option(name, value))

        lines.extend(f"{INDENT}{line}" for line in self.custom_lines)
        lines.append("EndSection")
        return "\n".join(lines) + "\n"
