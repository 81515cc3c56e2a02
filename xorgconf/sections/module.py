"""Module section selecting server extensions to load."""

from __future__ import annotations

from typing import ClassVar

from attrs import define, field

from ..section import Section, as_list
from ..types import EntryList


@define(slots=True)
class ModuleSection(Section):
    """Module section selecting server extensions to load.

    Attributes:
        load: Modules loaded in addition to the defaults.
        disable: Default modules that must not be loaded.
    """

    section_name: ClassVar[str] = "Module"

    load: list[str] = field(factory=list, converter=as_list)
    disable: list[str] = field(factory=list, converter=as_list)

    def add_load(self, module: str) -> ModuleSection:
        self.load.append(module)
        return self

    def add_disable(self, module: str) -> ModuleSection:
        self.disable.append(module)
        return self

    def entries(self) -> EntryList:
        return [("Load", self.load), ("Disable", self.disable)]
