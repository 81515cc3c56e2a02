"""Files section listing search paths."""

from __future__ import annotations

from typing import ClassVar

from attrs import define, field

from ..section import Section, as_list
from ..types import EntryList


@define(slots=True)
class FilesSection(Section):
    """Files section listing search paths.

    Attributes:
        font_path: Font directories, searched in order.
        module_path: Directories searched for loadable server modules.
        xkb_dir: Base directory of the keyboard layout files.
    """

    section_name: ClassVar[str] = "Files"

    font_path: list[str] = field(factory=list, converter=as_list)
    module_path: list[str] = field(factory=list, converter=as_list)
    xkb_dir: str | None = None

    def entries(self) -> EntryList:
        return [
            ("FontPath", self.font_path),
            ("ModulePath", self.module_path),
            ("XkbDir", self.xkb_dir),
        ]
