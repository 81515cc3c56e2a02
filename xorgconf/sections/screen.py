"""Screen section binding a device to a monitor."""

from __future__ import annotations

from typing import ClassVar

from attrs import define

from ..section import Section, collect_missing, reference_identifier
from ..types import DeviceRef, EntryList, MonitorRef


@define(slots=True)
class ScreenSection(Section):
    """Screen section binding a device to a monitor.

    Attributes:
        identifier: Unique name of the screen, referenced by layouts.
        device: Device section (or its identifier) driving the screen.
        monitor: Monitor section (or its identifier) attached to it.
        default_depth: Colour depth used when none is requested.
        accel: Enable or disable hardware acceleration.
    """

    section_name: ClassVar[str] = "Screen"
    reference_fields: ClassVar[dict[str, str]] = {
        "device": "Device",
        "monitor": "Monitor",
    }

    identifier: str | None
    device: DeviceRef | None = None
    monitor: MonitorRef | None = None
    default_depth: int | None = None
    accel: bool | None = None

    def missing_fields(self) -> list[str]:
        return collect_missing(
            [
                ("Identifier", self.identifier),
                ("Device", reference_identifier(self.device)),
                ("Monitor", reference_identifier(self.monitor)),
            ]
        )

    def entries(self) -> EntryList:
        return [
            ("Identifier", self.identifier),
            ("Device", reference_identifier(self.device)),
            ("Monitor", reference_identifier(self.monitor)),
            ("DefaultDepth", self.default_depth),
        ]

    def field_options(self) -> EntryList:
        return [("Accel", self.accel)]
