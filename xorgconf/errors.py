"""Exceptions raised while building or rendering configuration files."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .section import Section


class XorgconfError(Exception):
    """Base class for every error raised by the package."""


class IncompleteSectionError(XorgconfError):
    """A section lacks the fields required to render it.

    Attributes:
        section: The section that could not be rendered.
        missing: Names of the required entries that are unset.
    """

    def __init__(self, section: Section, missing: list[str]) -> None:
        self.section = section
        self.missing = list(missing)

        identifier = getattr(section, "identifier", None)
        label = f' "{identifier}"' if identifier else ""
        super().__init__(
            f"Cannot render {section.section_name} section{label}: "
            f"missing {', '.join(self.missing)}"
        )


class DescriptionError(XorgconfError):
    """A declarative description could not be turned into sections."""
