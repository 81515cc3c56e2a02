"""Input device section."""

from __future__ import annotations

from typing import ClassVar

from attrs import define

from ..types import EntryList
from .input_base import InputSectionBase


@define(slots=True)
class InputDeviceSection(InputSectionBase):
    """A statically configured input device.

    With hotplugging enabled these sections are usually unnecessary and
    sections using the ``mouse``, ``kbd`` and ``vmmouse`` drivers are
    ignored by the server.
    """

    section_name: ClassVar[str] = "InputDevice"

    def entries(self) -> EntryList:
        return self.input_entries([])
