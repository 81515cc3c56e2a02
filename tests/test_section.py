"""Tests for the shared section rendering skeleton."""

from __future__ import annotations

from xorgconf import DeviceSection, ModuleSection, ServerFlagsSection
from xorgconf.section import format_entry, format_option, is_empty


def test_format_entry_skips_unset_values() -> None:
    """Unset, empty and empty sequence values emit nothing."""

    assert format_entry("Driver", None) == []
    assert format_entry("Driver", "") == []
    assert format_entry("Load", []) == []


def test_format_entry_kinds() -> None:
    """Scalars are quoted, booleans spelled out and sequences repeated."""

    assert format_entry("Screen", 0) == ['  Screen "0"']
    assert format_entry("MatchIsPointer", False) == [
        '  MatchIsPointer "false"'
    ]
    assert format_entry("Load", ["glx", "dri"]) == [
        '  Load "glx"',
        '  Load "dri"',
    ]


def test_format_option_kinds() -> None:
    """Options distinguish booleans, integers and valueless flags."""

    assert format_option("DPMS", True) == ['  Option "DPMS" "true"']
    assert format_option("BlankTime", 5) == ['  Option "BlankTime" 5']
    assert format_option("Ignore", "") == ['  Option "Ignore"']
    assert format_option("Rate", 1.5) == ['  Option "Rate" "1.5"']
    assert format_option("XkbLayout", "de") == ['  Option "XkbLayout" "de"']
    assert format_option("Tag", ["a", "b"]) == [
        '  Option "Tag" "a"',
        '  Option "Tag" "b"',
    ]


def test_is_empty_keeps_false_and_zero() -> None:
    """False and zero are values rather than absence."""

    assert is_empty(None)
    assert is_empty("")
    assert is_empty(())
    assert not is_empty(False)
    assert not is_empty(0)


def test_add_option_ignores_unset_value() -> None:
    """Adding an unset value leaves the store untouched."""

    device = DeviceSection("card0")
    device.add_option("AccelMethod", None)

    assert device.options == {}


def test_add_option_overwrites_existing_key() -> None:
    """Re-adding a key replaces the value in place."""

    device = DeviceSection("card0")
    device.add_option("AccelMethod", "glamor").add_option("TearFree", True)
    device.add_option("AccelMethod", "none")

    assert list(device.options.items()) == [
        ("AccelMethod", "none"),
        ("TearFree", True),
    ]
    assert device.render().count('Option "AccelMethod"') == 1


def test_option_store_helpers() -> None:
    """Options can be read, replaced and removed."""

    device = DeviceSection("card0", options={"A": "1", "B": None})
    assert device.options == {"A": "1"}
    assert device.get_option("missing") is None

    device.set_options({"C": 3, "D": None})
    assert device.options == {"C": 3}

    device.remove_option("C").remove_option("C")
    assert device.options == {}


def test_valueless_option_renders_without_value() -> None:
    """An empty string option renders only the option name."""

    device = DeviceSection("card0").add_option("Ignore", "")

    assert '  Option "Ignore"\n' in device.render()


def test_render_order_entries_options_custom_lines() -> None:
    """Entries come first, then options, then custom lines."""

    device = DeviceSection("card0", "intel")
    device.add_option("TearFree", True)
    device.add_custom_line('Option "Monitor-HDMI1" "monitor0"')

    assert device.render() == (
        'Section "Device"\n'
        '  Identifier "card0"\n'
        '  Driver "intel"\n'
        '  Option "TearFree" "true"\n'
        '  Option "Monitor-HDMI1" "monitor0"\n'
        "EndSection\n"
    )


def test_field_options_do_not_mutate_store() -> None:
    """Field derived options merge at render time only."""

    flags = ServerFlagsSection(blank_time=5)
    flags.add_option("BlankTime", 10).add_option("Custom", "x")

    first = flags.render()
    assert flags.options == {"BlankTime": 10, "Custom": "x"}
    assert first == (
        'Section "ServerFlags"\n'
        '  Option "BlankTime" 5\n'
        '  Option "Custom" "x"\n'
        "EndSection\n"
    )
    assert flags.render() == first


def test_sections_without_required_fields_render_empty_block() -> None:
    """Sections without requirements always render."""

    assert ModuleSection().render() == 'Section "Module"\nEndSection\n'


def test_custom_lines_from_constructor_and_setter() -> None:
    """Custom lines render verbatim and can be replaced."""

    module = ModuleSection(custom_lines=["# generated"])
    assert module.render() == (
        'Section "Module"\n  # generated\nEndSection\n'
    )

    module.set_custom_lines(['Load "glx"'])
    assert module.custom_lines == ['Load "glx"']


def test_set_custom_lines_accepts_single_line() -> None:
    """A single string is stored as one line, as in the constructor."""

    module = ModuleSection().set_custom_lines('Load "glx"')

    assert module.custom_lines == ['Load "glx"']
    assert module.render() == 'Section "Module"\n  Load "glx"\nEndSection\n'
