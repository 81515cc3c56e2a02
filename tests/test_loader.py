"""Tests for building documents from descriptions."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
import yaml  # type: ignore[import-untyped]

from xorgconf import (
    DescriptionError,
    DeviceSection,
    InputClassSection,
    MonitorSection,
    ScreenSection,
    ServerFlagsSection,
    ServerLayoutSection,
    Xorgconf,
)
from xorgconf import loader

JSONDict = dict[str, Any]


def _sample_description() -> JSONDict:
    """Return a description covering references and options."""
    return {
        "sections": [
            {"section": "Device", "identifier": "device1", "driver": "a"},
            {"section": "Monitor", "identifier": "monitor1", "primary": True},
            {
                "section": "Screen",
                "identifier": "screen1",
                "device": "device1",
                "monitor": "monitor1",
                "options": {"DPMS": ""},
            },
            {
                "section": "ServerLayout",
                "identifier": "layout1",
                "screens": ["screen1"],
                "input_devices": ["ghost"],
            },
            {
                "section": "ServerFlags",
                "blank_time": 5,
                "custom_lines": ['Option "Foo" "bar"'],
            },
        ]
    }


def _sample_document() -> Xorgconf:
    """Return the document equivalent to ``_sample_description``."""
    device = DeviceSection("device1", "a")
    monitor = MonitorSection("monitor1", primary=True)
    screen = ScreenSection("screen1", device=device, monitor=monitor)
    screen.add_option("DPMS", "")
    layout = ServerLayoutSection("layout1", input_devices=["ghost"])
    layout.add_screen(screen)
    flags = ServerFlagsSection(blank_time=5)
    flags.add_custom_line('Option "Foo" "bar"')
    return Xorgconf([device, monitor, screen, layout, flags])


def test_build_document_matches_api() -> None:
    """A description renders exactly like the equivalent API calls."""

    doc = loader.build_document(_sample_description())

    assert doc.render() == _sample_document().render()


def test_build_document_links_references() -> None:
    """Identifier references are linked to registered sections."""

    doc = loader.build_document(_sample_description())

    screen = doc.get_section("Screen", "screen1")
    layout = doc.get_section("ServerLayout")
    assert isinstance(screen, ScreenSection)
    assert isinstance(layout, ServerLayoutSection)
    assert screen.device is doc.sections[0]
    assert screen.monitor is doc.sections[1]
    assert layout.screens == [screen]
    # Unknown targets stay identifiers.
    assert layout.input_devices == ["ghost"]


def test_build_document_empty() -> None:
    """Missing or empty section lists give an empty document."""

    assert loader.build_document({}).render() is None
    assert loader.build_document({"sections": None}).sections == []


@pytest.mark.parametrize(
    ("data", "message"),
    [
        ([], "must be a mapping"),
        ({"sections": {"section": "Device"}}, "must be a list"),
        ({"sections": ["Device"]}, "#0 is not a mapping"),
        ({"sections": [{"section": "Pointer"}]}, "unknown type 'Pointer'"),
        ({"sections": [{"identifier": "x"}]}, "unknown type None"),
        (
            {"sections": [{"section": "Device", "identifier": "x", "n": 1}]},
            "unknown fields: n",
        ),
        ({"sections": [{"section": "Device"}]}, "invalid"),
        (
            {
                "sections": [
                    {"section": "Device", "identifier": "c", "options": "DPMS"}
                ]
            },
            "'options' must be a mapping",
        ),
        (
            {
                "sections": [
                    {
                        "section": "Device",
                        "identifier": "c",
                        "options": ["DPMS"],
                    }
                ]
            },
            "'options' must be a mapping",
        ),
        (
            {
                "sections": [
                    {"section": "Device", "identifier": "c", "custom_lines": 3}
                ]
            },
            "'custom_lines' must be a list",
        ),
    ],
)
def test_build_document_rejects_malformed(data: object, message: str) -> None:
    """Malformed descriptions raise ``DescriptionError``."""

    with pytest.raises(DescriptionError, match=message):
        loader.build_document(data)


def test_dump_document_reduces_references() -> None:
    """Dumping omits unset fields and names references by identifier."""

    data = loader.dump_document(_sample_document())

    assert data["sections"][0] == {
        "section": "Device",
        "identifier": "device1",
        "driver": "a",
    }
    assert data["sections"][2] == {
        "section": "Screen",
        "identifier": "screen1",
        "device": "device1",
        "monitor": "monitor1",
        "options": {"DPMS": ""},
    }
    assert data["sections"][3]["screens"] == ["screen1"]
    assert list(data["sections"][4]) == [
        "section",
        "blank_time",
        "custom_lines",
    ]


def test_dump_then_build_renders_identically() -> None:
    """A dumped description rebuilds the same configuration."""

    doc = Xorgconf(
        [
            InputClassSection(
                "touch",
                transformation_matrix=[1, 0, 0, 0, 1, 0, 0, 0, 1],
                match_is_touchscreen=True,
            )
        ]
    )

    rebuilt = loader.build_document(loader.dump_document(doc))

    assert rebuilt.render() == doc.render()


def test_load_document_numeric_identifiers(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """Numeric YAML identifiers are linked as their string form."""

    path = tmp_path / "numeric.yaml"
    path.write_text(
        "sections:\n"
        "  - section: Device\n"
        "    identifier: 0\n"
        "  - section: Monitor\n"
        "    identifier: 1\n"
        "  - section: Screen\n"
        "    identifier: 2\n"
        "    device: 0\n"
        "    monitor: 1\n"
        "  - section: ServerLayout\n"
        "    identifier: layout\n"
        "    screens: [2]\n",
        encoding="utf-8",
    )

    doc = loader.load_document(path)
    screen = doc.get_section("Screen", "2")

    assert screen is not None
    assert screen.device is doc.get_section("Device", "0")
    assert screen.monitor is doc.get_section("Monitor", "1")
    assert doc.unresolved_references() == []
    with caplog.at_level("WARNING", logger="xorgconf.document"):
        content = doc.render()
    assert content is not None
    assert 'Identifier "0"' in content
    assert "refers to unknown" not in caplog.text


def test_load_document_yaml(tmp_path: Path) -> None:
    """YAML descriptions are loaded from disk."""

    path = tmp_path / "layout.yaml"
    path.write_text(
        yaml.safe_dump(_sample_description(), sort_keys=False),
        encoding="utf-8",
    )

    assert loader.load_document(path).render() == (
        _sample_document().render()
    )


def test_load_document_json(tmp_path: Path) -> None:
    """JSON descriptions are loaded from disk."""

    path = tmp_path / "layout.json"
    path.write_text(json.dumps(_sample_description()), encoding="utf-8")

    assert loader.load_document(path).render() == (
        _sample_document().render()
    )


def test_load_document_invalid_json(tmp_path: Path) -> None:
    """Undecodable files raise ``DescriptionError``."""

    path = tmp_path / "layout.json"
    path.write_text("{", encoding="utf-8")

    with pytest.raises(DescriptionError, match="Cannot decode"):
        loader.load_document(path)


def test_json_helpers_without_orjson(monkeypatch: pytest.MonkeyPatch) -> None:
    """The standard library is used when orjson is absent."""

    monkeypatch.setattr(loader, "orjson", None)
    data = {"sections": [{"section": "Module", "load": ["glx"]}]}

    assert loader.json_loads(loader.json_dumps(data)) == data
    assert loader.json_loads(json.dumps(data).encode()) == data
