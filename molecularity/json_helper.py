"""Loading and updating the game's JSON data files: objects, text and settings."""

from __future__ import annotations

import enum
import json
import struct
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterator, Union

from molecularity.errors import log_error

SettingValue = Union[int, str, bool, float]
Vector3 = tuple[float, float, float]

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1
_UINT32_MAX = 2**32 - 1

_SECTIONS = {
    "General": "GENERAL",
    "Controls": "CONTROL",
    "Sound": "SOUND",
    "Graphics": "GRAPHIC",
}


class SettingType(enum.Enum):
    """The settings section a value belongs to."""

    GENERAL = enum.auto()
    SOUND = enum.auto()
    CONTROL = enum.auto()
    GRAPHIC = enum.auto()
    INVALID = enum.auto()

    @classmethod
    def from_section(cls, section: str) -> "SettingType":
        """The type for a top-level section name of the settings file."""
        member = _SECTIONS.get(section)
        return cls[member] if member else cls.INVALID

    @property
    def section(self) -> str:
        """The section name this type is stored under in the settings file."""
        for name, member in _SECTIONS.items():
            if member == self.name:
                return name
        return "Invalid"


@dataclass
class ModelData:
    """Placement of one game object read from a level file."""

    object_name: str = ""
    file_name: str = ""
    position: Vector3 = (0.0, 0.0, 0.0)
    scale: Vector3 = (0.0, 0.0, 0.0)
    rotation: Vector3 = (0.0, 0.0, 0.0)


@dataclass
class SettingData:
    """One named setting, its value, section and display text."""

    name: str
    setting: SettingValue
    type: SettingType
    text: str = ""


@dataclass
class TextData:
    """A named piece of display text."""

    name: str = ""
    text: str = ""


def _to_float32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def value_to_string(value: Any) -> str:
    """Render a JSON value as the text the game shows for it."""
    if isinstance(value, bool):
        return "True" if value else "False"
    if isinstance(value, str):
        return value
    if isinstance(value, int) and _INT32_MIN <= value <= _UINT32_MAX:
        return str(value)
    if isinstance(value, (int, float)):
        return f"{_to_float32(float(value)):f}"
    return ""


def value_to_setting(value: Any) -> SettingValue:
    """Convert a JSON value to a setting; unsupported values become 0."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        return value if _INT32_MIN <= value <= _INT32_MAX else float(value)
    if isinstance(value, float):
        return value
    return 0


def _vector(obj: dict, whole: str, *parts: tuple[str, str, str]) -> Vector3:
    if whole in obj:
        x, y, z = obj[whole][:3]
        return (float(x), float(y), float(z))
    for names in parts:
        if all(name in obj for name in names):
            x, y, z = (float(obj[name][0]) for name in names)
            return (x, y, z)
    return (0.0, 0.0, 0.0)


def _members(document: Any) -> Iterator[tuple[str, Any]]:
    if isinstance(document, dict):
        yield from document.items()


class JsonStore:
    """Reads and writes JSON files kept under one resource directory."""

    def __init__(
        self,
        root: str | Path = Path("Resources") / "JSON",
        settings_file: str = "Settings.json",
        settings_text_file: str = "Text_Eng.json",
    ) -> None:
        self.root = Path(root)
        self.settings_file = settings_file
        self.settings_text_file = settings_text_file

    def parse_file(self, file_name: str) -> Any:
        """The parsed document, or None if the file is missing or invalid."""
        try:
            with open(self.root / file_name, encoding="utf-8") as stream:
                return json.load(stream)
        except (OSError, ValueError):
            return None

    def store_file(self, file_name: str, document: Any) -> bool:
        """Write ``document`` back to ``file_name`` in compact form."""
        path = self.root / file_name
        path.write_text(
            json.dumps(document, separators=(",", ":"), ensure_ascii=False),
            encoding="utf-8",
        )
        return True

    def load_game_objects(self, file_name: str) -> list[ModelData]:
        """Every entry of the ``GameObjects`` array in ``file_name``."""
        document = self.parse_file(file_name)
        data: list[ModelData] = []
        if isinstance(document, dict):
            for obj in document.get("GameObjects", []):
                data.append(ModelData(
                    object_name=obj.get("Name", ""),
                    file_name=obj.get("FileName", ""),
                    position=_vector(obj, "Position", ("PosX", "PosY", "PosZ"),
                                     ("PositionX", "PositionY", "PositionZ")),
                    scale=_vector(obj, "Scale", ("ScaleX", "ScaleY", "ScaleZ")),
                    rotation=_vector(obj, "Rotation", ("RotX", "RotY", "RotZ"),
                                     ("RotationX", "RotationY", "RotationZ")),
                ))
        if not data:
            log_error("Failed to parse JSON file data!")
        return data

    def load_text_items(self, file_name: str, node: str | None = None) -> list[TextData]:
        """Text entries of every array in the file, or only of ``node``."""
        data: list[TextData] = []
        for name, value in _members(self.parse_file(file_name)):
            if node is not None and name != node:
                continue
            if isinstance(value, list):
                data.extend(
                    TextData(item.get("Name", ""), item.get("Text", ""))
                    for item in value if isinstance(item, dict)
                )
        if not data:
            log_error("Error:: No data found when parsing text from JSON file!")
        return data

    def load_settings(self) -> list[SettingData]:
        """All settings, in file order, with their display names attached."""
        settings: list[SettingData] = []
        for name, value in _members(self.parse_file(self.settings_file)):
            kind = SettingType.from_section(name)
            if isinstance(value, list):
                for item in value:
                    for key, item_value in _members(item):
                        settings.append(SettingData(key, value_to_setting(item_value), kind))
            elif kind is not SettingType.INVALID:
                settings.append(SettingData(name, value_to_setting(value), kind))

        texts = self.load_text_items(self.settings_text_file, "Settings_Names")
        for setting, text in zip(settings, texts):
            setting.text = text.text
        return settings

    def load_file_data(self, file_name: str, node: str | None = None) -> list[str]:
        """Every leaf value as text, for the whole file or only ``node``."""
        document = self.parse_file(file_name)
        if node is None:
            return [text for _, text in self.load_file_data_and_name(file_name)]
        data: list[str] = []
        for name, value in _members(document):
            if name != node:
                continue
            if not isinstance(value, list):
                data.append(value_to_string(value))
                continue
            for item in value:
                for key, item_value in _members(item):
                    if isinstance(item_value, list):
                        # Nested arrays are looked up again at the top level.
                        nested = document.get(key, [])
                        for inner in nested if isinstance(nested, list) else []:
                            data.extend(value_to_string(v) for _, v in _members(inner))
                    else:
                        data.append(value_to_string(item_value))
        return data

    def load_file_data_and_name(self, file_name: str) -> list[tuple[str, str]]:
        """Every leaf value as a ``(name, text)`` pair."""
        data: list[tuple[str, str]] = []
        for name, value in _members(self.parse_file(file_name)):
            if isinstance(value, list):
                for item in value:
                    data.extend((key, value_to_string(v)) for key, v in _members(item))
            else:
                data.append((name, value_to_string(value)))
        return data

    def update_item(self, json_file: str, node: str, data_node: str,
                    data: SettingValue, data_name: str = "") -> None:
        """Set ``data_node`` inside array ``node`` (or ``node`` itself) and save."""
        document = self.parse_file(json_file)
        if not isinstance(document, dict):
            log_error(f"Cannot update {json_file}: no JSON document")
            return
        if node in document:
            section = document[node]
            if isinstance(section, list):
                for obj in section:
                    if not data_node or not isinstance(obj, dict) or data_node not in obj:
                        continue
                    if data_name and obj.get("Name") != data_name:
                        continue
                    obj[data_node] = data
            else:
                document[node] = data
        self.store_file(json_file, document)