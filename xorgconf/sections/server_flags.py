"""Server flags section holding global server options."""

from __future__ import annotations

from typing import ClassVar

from attrs import define

from ..section import Section
from ..types import EntryList


@define(slots=True)
class ServerFlagsSection(Section):
    """Global server options.

    Every field is rendered as an ``Option``. Apart from
    ``default_server_layout`` these may be overridden by options of the
    active server layout or by command line flags.

    Attributes:
        default_server_layout: Layout used when ``-layout`` is not given.
        no_trap_signals: Let the server dump core on fatal signals.
        use_sigio: Report input events from a SIGIO handler.
        dont_vt_switch: Disable Ctrl+Alt+Fn virtual terminal switching.
        dont_zap: Disable the Terminate_Server XKB action.
        dont_zoom: Disable Ctrl+Alt+Keypad-Plus/Minus mode switching.
        disable_vid_mode_extension: Disable mode changes through VidMode.
        allow_non_local_xvidtune: Allow remote VidMode clients.
        allow_mouse_open_fail: Do not fail when the mouse cannot be opened.
        blank_time: Minutes of inactivity before the screen blanks.
        standby_time: Minutes before DPMS standby.
        suspend_time: Minutes before DPMS suspend.
        off_time: Minutes before DPMS off.
        pixmap: Pixmap format for depth 24, ``24`` or ``32``.
        no_pm: Disable power management events.
        xinerama: Enable the XINERAMA extension.
        aiglx: Enable AIGLX.
        dri2: Enable DRI2.
        glx_visuals: ``typical``, ``minimal`` or ``all``.
        use_default_font_path: Always include the default font path.
        ignore_abi: Allow modules built for another server ABI.
        auto_add_devices: Add devices from the hotplug backends.
        auto_enable_devices: Enable devices once they are added.
        log: ``flush`` or ``sync`` the log after each message.
        dpms: Enable DPMS.
    """

    section_name: ClassVar[str] = "ServerFlags"

    default_server_layout: str | None = None
    no_trap_signals: bool | None = None
    use_sigio: bool | None = None
    dont_vt_switch: bool | None = None
    dont_zap: bool | None = None
    dont_zoom: bool | None = None
    disable_vid_mode_extension: bool | None = None
    allow_non_local_xvidtune: bool | None = None
    allow_mouse_open_fail: bool | None = None
    blank_time: int | None = None
    standby_time: int | None = None
    suspend_time: int | None = None
    off_time: int | None = None
    pixmap: int | None = None
    no_pm: bool | None = None
    xinerama: bool | None = None
    aiglx: bool | None = None
    dri2: bool | None = None
    glx_visuals: str | None = None
    use_default_font_path: bool | None = None
    ignore_abi: bool | None = None
    auto_add_devices: bool | None = None
    auto_enable_devices: bool | None = None
    log: str | None = None
    dpms: bool | None = None

    def entries(self) -> EntryList:
        return []

    def field_options(self) -> EntryList:
        return [
            ("DefaultServerLayout", self.default_server_layout),
            ("NoTrapSignals", self.no_trap_signals),
            ("UseSIGIO", self.use_sigio),
            ("DontVTSwitch", self.dont_vt_switch),
            ("DontZap", self.dont_zap),
            ("DontZoom", self.dont_zoom),
            ("DisableVidModeExtension", self.disable_vid_mode_extension),
            ("AllowNonLocalXvidtune", self.allow_non_local_xvidtune),
            ("AllowMouseOpenFail", self.allow_mouse_open_fail),
            ("BlankTime", self.blank_time),
            ("StandbyTime", self.standby_time),
            ("SuspendTime", self.suspend_time),
            ("OffTime", self.off_time),
            ("Pixmap", self.pixmap),
            ("NoPM", self.no_pm),
            ("Xinerama", self.xinerama),
            ("AIGLX", self.aiglx),
            ("DRI2", self.dri2),
            ("GlxVisuals", self.glx_visuals),
            ("UseDefaultFontPath", self.use_default_font_path),
            ("IgnoreABI", self.ignore_abi),
            ("AutoAddDevices", self.auto_add_devices),
            ("AutoEnableDevices", self.auto_enable_devices),
            ("Log", self.log),
            ("DPMS", self.dpms),
        ]
