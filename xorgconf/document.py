"""Document owning the sections of one ``xorg.conf`` file."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from attrs import define, field

from .errors import IncompleteSectionError
from .section import Section
from .types import SectionList

logger = logging.getLogger(__name__)


def _matches(
    section: Section, section_name: str | None, identifier: str | None
) -> bool:
    """Return whether ``section`` satisfies every given filter."""

    if section_name is not None and section.section_name != section_name:
        return False
    if identifier is not None:
        # Sections without an identifier never match an identifier filter.
        return getattr(section, "identifier", None) == identifier
    return True


@define(slots=True)
class Xorgconf:
    """Ordered collection of sections forming one ``xorg.conf`` file.

    Registration order is render order. Duplicate identifiers are allowed;
    resolving them is up to the X server.

    Attributes:
        sections: Registered sections in render order.
    """

    sections: SectionList = field(factory=list, converter=list)

    def add_section(self, section: Section) -> Xorgconf:
        self.sections.append(section)
        return self

    def set_sections(self, sections: Iterable[Section]) -> Xorgconf:
        self.sections = list(sections)
        return self

    def get_sections(
        self, section_name: str | None = None, identifier: str | None = None
    ) -> SectionList:
        """Return registered sections matching all given filters.

        Args:
            section_name: Section tag such as ``Screen``.
            identifier: Identifier of the wanted section.

        Returns:
            Matching sections in registration order. Without filters every
            section is returned.
        """

        return [
            section
            for section in self.sections
            if _matches(section, section_name, identifier)
        ]

    def get_section(
        self, section_name: str | None = None, identifier: str | None = None
    ) -> Section | None:
        """Return the first section matching the filters or ``None``."""

        for section in self.sections:
            if _matches(section, section_name, identifier):
                return section
        return None

    def validate(self) -> list[IncompleteSectionError]:
        """Return an error for every section that cannot be rendered."""

        return [
            IncompleteSectionError(section, section.missing_fields())
            for section in self.sections
            if not section.is_renderable()
        ]

    def unresolved_references(self) -> list[tuple[Section, str, str]]:
        """Return references to sections that are not registered.

        Returns:
            ``(section, section_name, identifier)`` tuples naming the
            referring section and the missing target.
        """

        unresolved: list[tuple[Section, str, str]] = []
        for section in self.sections:
            for section_name, identifier in section.references():
                if self.get_section(section_name, identifier) is None:
                    unresolved.append((section, section_name, identifier))
        return unresolved

    def render(self) -> str | None:
        """Render every section in registration order.

        Returns:
            The complete file content, or ``None`` when no section is
            registered.

        Throws:
            IncompleteSectionError: If any section lacks required fields.
                Nothing is rendered in that case.
        """

        if not self.sections:
            return None

        for section, section_name, identifier in self.unresolved_references():
            logger.warning(
                "%s section %r refers to unknown %s %r",
                section.section_name,
                getattr(section, "identifier", None),
                section_name,
                identifier,
            )

        # Each block is followed by one blank line.
        blocks = [section.render() + "\n" for section in self.sections]
        logger.debug("Rendered %d sections", len(blocks))
        return "".join(blocks)

    def write(self, destination: str | Path) -> int | None:
        """Render the document and write it to ``destination``.

        Args:
            destination: Path of the file to create or replace.

        Returns:
            Number of characters written, or ``None`` when there was
            nothing to render and the destination was left untouched.

        Throws:
            IncompleteSectionError: If any section lacks required fields.
            OSError: If the file cannot be written.
        """

        content = self.render()
        if content is None:
            logger.debug("No sections registered; skipping %s", destination)
            return None

        path = Path(destination)
        written = path.write_text(content, encoding="utf-8")
        logger.debug("Wrote %d characters to %s", written, path)
        return written
