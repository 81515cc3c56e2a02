"""Build ``xorg.conf`` files from an in-memory section model."""

from .document import Xorgconf
from .errors import DescriptionError, IncompleteSectionError, XorgconfError
from .section import Section
from .sections import (
    SECTION_TYPES,
    DeviceSection,
    DriSection,
    FilesSection,
    InputClassSection,
    InputDeviceSection,
    ModuleSection,
    MonitorSection,
    ScreenSection,
    ServerFlagsSection,
    ServerLayoutSection,
)

__all__ = [
    "SECTION_TYPES",
    "DescriptionError",
    "DeviceSection",
    "DriSection",
    "FilesSection",
    "IncompleteSectionError",
    "InputClassSection",
    "InputDeviceSection",
    "ModuleSection",
    "MonitorSection",
    "ScreenSection",
    "Section",
    "ServerFlagsSection",
    "ServerLayoutSection",
    "Xorgconf",
    "XorgconfError",
]
