"""DRI section."""

from __future__ import annotations

from typing import ClassVar

from attrs import define

from ..section import Section
from ..types import EntryList


@define(slots=True)
class DriSection(Section):
    """Direct rendering infrastructure settings.

    Attributes:
        mode: Permission mode of the DRI device nodes, e.g. ``0666``.
    """

    section_name: ClassVar[str] = "DRI"

    mode: str | int | None = None

    def entries(self) -> EntryList:
        return [("Mode", self.mode)]
