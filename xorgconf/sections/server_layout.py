"""Server layout section tying screens and input devices together."""

from __future__ import annotations

from typing import Any, ClassVar

from attrs import define, field

from ..section import Section, as_list, collect_missing, reference_identifier
from ..types import EntryList, InputDeviceRef, ScreenRef


@define(slots=True)
class ServerLayoutSection(Section):
    """Server layout section tying screens and input devices together.

    Attributes:
        identifier: Unique name of the layout.
        screens: Screens (or their identifiers) in the layout.
        input_devices: Input devices (or their identifiers) in the layout.
    """

    section_name: ClassVar[str] = "ServerLayout"
    reference_fields: ClassVar[dict[str, str]] = {
        "screens": "Screen",
        "input_devices": "InputDevice",
    }

    identifier: str | None
    screens: list[ScreenRef] = field(factory=list, converter=as_list)
    input_devices: list[InputDeviceRef] = field(
        factory=list, converter=as_list
    )

    def add_screen(self, screen: ScreenRef) -> ServerLayoutSection:
        self.screens.append(screen)
        return self

    def add_input_device(
        self, input_device: InputDeviceRef
    ) -> ServerLayoutSection:
        self.input_devices.append(input_device)
        return self

    def missing_fields(self) -> list[str]:
        return collect_missing(
            [
                ("Identifier", self.identifier),
                ("Screen", _identifiers(self.screens)),
            ]
        )

    def entries(self) -> EntryList:
        return [
            ("Identifier", self.identifier),
            ("Screen", _identifiers(self.screens)),
            ("InputDevice", _identifiers(self.input_devices)),
        ]


def _identifiers(references: list[Any]) -> list[str]:
    """Return the identifiers named by ``references``, skipping unset ones."""

    identifiers = [reference_identifier(ref) for ref in references]
    return [identifier for identifier in identifiers if identifier]
