"""Monitor section."""

from __future__ import annotations

from typing import ClassVar

from attrs import define

from ..section import Section, collect_missing
from ..types import EntryList


@define(slots=True)
class MonitorSection(Section):
    """Monitor section.

    With RandR 1.2 capable drivers a monitor section can be tied to an
    output of the card by adding ``Option "Monitor-<output>" "<identifier>"``
    to the device section. Most of the fields below are only honoured by
    such drivers.

    Attributes:
        identifier: Unique name of the monitor, referenced by screens.
        mode_line: One or more compact video mode descriptions.
        primary: Treat the monitor as the primary one.
        preferred_mode: Mode marked as preferred initial mode.
        position_x: X position of the monitor within the X screen.
        position_y: Y position of the monitor within the X screen.
        left_of: Output the monitor is placed left of.
        right_of: Output the monitor is placed right of.
        above: Output the monitor is placed above.
        below: Output the monitor is placed below.
        enable: Whether the monitor is turned on at startup.
        ignore: Ignore the monitor entirely and hide it from RandR.
        rotate: Initial rotation: ``normal``, ``left``, ``right`` or
            ``inverted``.
    """

    section_name: ClassVar[str] = "Monitor"

    identifier: str | None
    mode_line: str | list[str] | None = None
    primary: bool | None = None
    preferred_mode: str | None = None
    position_x: int | None = None
    position_y: int | None = None
    left_of: str | None = None
    right_of: str | None = None
    above: str | None = None
    below: str | None = None
    enable: bool | None = None
    ignore: bool | None = None
    rotate: str | None = None

    def missing_fields(self) -> list[str]:
        return collect_missing([("Identifier", self.identifier)])

    def entries(self) -> EntryList:
        return [
            ("Identifier", self.identifier),
            ("ModeLine", self.mode_line),
        ]

    def field_options(self) -> EntryList:
        options: EntryList = [
            ("Primary", self.primary),
            ("PreferredMode", self.preferred_mode),
            ("LeftOf", self.left_of),
            ("RightOf", self.right_of),
            ("Above", self.above),
            ("Below", self.below),
            ("Enable", self.enable),
            ("Ignore", self.ignore),
            ("Rotate", self.rotate),
        ]

        # Position is only meaningful with both coordinates.
        if self.position_x is not None and self.position_y is not None:
            position = f"{self.position_x} {self.position_y}"
            options.append(("Position", position))
        return options
