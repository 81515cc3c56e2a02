"""Input class section matching automatically added devices."""

from __future__ import annotations

from typing import ClassVar

from attrs import define

from ..types import EntryList
from .input_base import InputSectionBase


@define(slots=True)
class InputClassSection(InputSectionBase):
    """Configuration applied to every hotplugged device that matches.

    Without match entries the class applies to every input device. When
    several match entries are set they must all match. Patterns may hold
    alternatives separated by ``|``.

    Attributes:
        match_product: Substring of the product name.
        match_vendor: Substring of the vendor name.
        match_device_path: Pattern for the device file path.
        match_os: Case-insensitive operating system name.
        match_pnp_id: Shell pattern for the PnP ID.
        match_usb_id: Shell pattern for the USB ID, e.g. ``046d:*``.
        match_driver: Driver currently configured for the device.
        match_tag: Pattern for tags assigned by the config backend.
        match_layout: Name of the active server layout.
        match_is_keyboard: Match keyboards.
        match_is_pointer: Match pointer devices.
        match_is_joystick: Match joysticks.
        match_is_tablet: Match tablets.
        match_is_touchpad: Match touchpads.
        match_is_touchscreen: Match touchscreens.
        ignore: Do not add matching devices to the server.
    """

    section_name: ClassVar[str] = "InputClass"

    match_product: str | None = None
    match_vendor: str | None = None
    match_device_path: str | None = None
    match_os: str | None = None
    match_pnp_id: str | None = None
    match_usb_id: str | None = None
    match_driver: str | None = None
    match_tag: str | None = None
    match_layout: str | None = None
    match_is_keyboard: bool | None = None
    match_is_pointer: bool | None = None
    match_is_joystick: bool | None = None
    match_is_tablet: bool | None = None
    match_is_touchpad: bool | None = None
    match_is_touchscreen: bool | None = None
    ignore: bool | None = None

    def entries(self) -> EntryList:
        return self.input_entries(
            [
                ("MatchProduct", self.match_product),
                ("MatchVendor", self.match_vendor),
                ("MatchDevicePath", self.match_device_path),
                ("MatchOS", self.match_os),
                ("MatchPnPID", self.match_pnp_id),
                ("MatchUSBID", self.match_usb_id),
                ("MatchDriver", self.match_driver),
                ("MatchTag", self.match_tag),
                ("MatchLayout", self.match_layout),
                ("MatchIsKeyboard", self.match_is_keyboard),
                ("MatchIsPointer", self.match_is_pointer),
                ("MatchIsJoystick", self.match_is_joystick),
                ("MatchIsTablet", self.match_is_tablet),
                ("MatchIsTouchpad", self.match_is_touchpad),
                ("MatchIsTouchscreen", self.match_is_touchscreen),
            ]
        )

    def field_options(self) -> EntryList:
        return [*super().field_options(), ("Ignore", self.ignore)]
