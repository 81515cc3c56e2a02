"""Graphics device section."""

from __future__ import annotations

from typing import ClassVar

from attrs import define

from ..section import Section, collect_missing
from ..types import EntryList


@define(slots=True)
class DeviceSection(Section):
    """Graphics device section.

    Attributes:
        identifier: Unique name of the device, referenced by screens.
        driver: Name of the video driver module to load.
        bus_id: Bus location of the graphics card such as ``PCI:1:0:0``.
        screen: Screen number on multi-head cards.
    """

    section_name: ClassVar[str] = "Device"

    identifier: str | None
    driver: str | None = None
    bus_id: str | None = None
    screen: int | None = None

    def missing_fields(self) -> list[str]:
        return collect_missing([("Identifier", self.identifier)])

    def entries(self) -> EntryList:
        return [
            ("Identifier", self.identifier),
            ("Driver", self.driver),
            ("BusID", self.bus_id),
            ("Screen", self.screen),
        ]
