"""Fields shared by input device and input class sections."""

from __future__ import annotations

from collections.abc import Sequence

from attrs import define, field

from ..section import Section, collect_missing
from ..types import EntryList


def _matrix_text(value: str | Sequence[float] | None) -> str | None:
    """Join a sequence of matrix cells into the space separated form."""

    if value is None or isinstance(value, str):
        return value
    return " ".join(str(cell) for cell in value)


@define(slots=True)
class InputSectionBase(Section):
    """Identification and pointer acceleration shared by input sections.

    Attributes:
        identifier: Unique name of the input section.
        driver: Input driver module, e.g. ``evdev`` or ``libinput``.
        auto_server_layout: Always add the device to the active layout.
        floating: Start the device floating, detached from master devices.
        transformation_matrix: 3x3 matrix for absolute devices, as a space
            separated string or a sequence of nine numbers.
        acceleration_profile: Profile number, ``-1`` to ``7``.
        constant_deceleration: Constant slow-down factor.
        adaptive_deceleration: Maximum slow-down when moving slowly.
        acceleration_scheme: ``predictable``, ``lightweight`` or ``none``.
        acceleration_numerator: Numerator of the acceleration factor.
        acceleration_denominator: Denominator of the acceleration factor.
        acceleration_threshold: Velocity above which acceleration applies.
    """

    identifier: str | None
    driver: str | None = None
    auto_server_layout: bool | None = None
    floating: bool | None = None
    transformation_matrix: str | None = field(
        default=None, converter=_matrix_text
    )
    acceleration_profile: int | None = None
    constant_deceleration: float | None = None
    adaptive_deceleration: float | None = None
    acceleration_scheme: str | None = None
    acceleration_numerator: int | None = None
    acceleration_denominator: int | None = None
    acceleration_threshold: int | None = None

    def missing_fields(self) -> list[str]:
        return collect_missing([("Identifier", self.identifier)])

    def input_entries(self, extra: EntryList) -> EntryList:
        """Return identification entries followed by ``extra``."""

        return [
            ("Identifier", self.identifier),
            ("Driver", self.driver),
            *extra,
        ]

    def field_options(self) -> EntryList:
        return [
            ("AutoServerLayout", self.auto_server_layout),
            ("Floating", self.floating),
            ("TransformationMatrix", self.transformation_matrix),
            ("AccelerationProfile", self.acceleration_profile),
            ("ConstantDeceleration", self.constant_deceleration),
            ("AdaptiveDeceleration", self.adaptive_deceleration),
            ("AccelerationScheme", self.acceleration_scheme),
            ("AccelerationNumerator", self.acceleration_numerator),
            ("AccelerationDenominator", self.acceleration_denominator),
            ("AccelerationThreshold", self.acceleration_threshold),
        ]
