"""Common type aliases for sections and their rendered values."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Literal, Union

if TYPE_CHECKING:
    from .section import Section  # noqa: F401
    from .sections.device import DeviceSection  # noqa: F401
    from .sections.input_device import InputDeviceSection  # noqa: F401
    from .sections.monitor import MonitorSection  # noqa: F401
    from .sections.screen import ScreenSection  # noqa: F401


SectionName = Literal[
    "Device",
    "Monitor",
    "Screen",
    "ServerLayout",
    "InputDevice",
    "InputClass",
    "Files",
    "Module",
    "DRI",
    "ServerFlags",
]

Scalar = Union[str, int, float, bool]
EntryValue = Union[Scalar, Sequence[Scalar], None]
Entry = tuple[str, EntryValue]
EntryList = list[Entry]
OptionValue = Union[Scalar, Sequence[Scalar]]
OptionMap = dict[str, OptionValue]
LineList = list[str]

# References may hold the section itself or just its identifier.
DeviceRef = Union["DeviceSection", str]
MonitorRef = Union["MonitorSection", str]
ScreenRef = Union["ScreenSection", str]
InputDeviceRef = Union["InputDeviceSection", str]
SectionRef = Union["Section", str]
SectionList = list["Section"]
