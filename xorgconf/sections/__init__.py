"""Section types of an ``xorg.conf`` file."""

from ..section import Section
from .device import DeviceSection
from .dri import DriSection
from .files import FilesSection
from .input_class import InputClassSection
from .input_device import InputDeviceSection
from .module import ModuleSection
from .monitor import MonitorSection
from .screen import ScreenSection
from .server_flags import ServerFlagsSection
from .server_layout import ServerLayoutSection

# The closed set of supported section types keyed by their tag.
SECTION_TYPES: dict[str, type[Section]] = {
    cls.section_name: cls
    for cls in (
        DeviceSection,
        MonitorSection,
        ScreenSection,
        ServerLayoutSection,
        InputDeviceSection,
        InputClassSection,
        FilesSection,
        ModuleSection,
        DriSection,
        ServerFlagsSection,
    )
}

__all__ = [
    "SECTION_TYPES",
    "DeviceSection",
    "DriSection",
    "FilesSection",
    "InputClassSection",
    "InputDeviceSection",
    "ModuleSection",
    "MonitorSection",
    "ScreenSection",
    "ServerFlagsSection",
    "ServerLayoutSection",
]
