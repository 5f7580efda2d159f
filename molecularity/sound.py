"""Music and sound-effect playback driven by the game's settings."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Iterable

from molecularity.events import Event, EventId, EventSystem, Listener, default_event_system
from molecularity.json_helper import SettingData, SettingType

Vec3 = tuple[float, float, float]

MUSIC_ROOT = "Resources\\Audio\\Music\\"
EFFECTS_ROOT = "Resources\\Audio\\Sounds\\"

SOUND_GROUPS: dict[str, tuple[str, ...]] = {
    "Player": ("ToolUse", "ToolNoEnergy", "ToolChange", "ToolSwitchMode"),
    "Cube": ("CubePickup", "CubeThrow", "CubeCollision", "CubeSplash"),
}

_ORIGIN: Vec3 = (0.0, 0.0, 0.0)
_UP: Vec3 = (0.0, 1.0, 0.0)


@dataclass(eq=False)
class MusicTrack:
    """A streamed music track held by the engine."""

    path: str
    looped: bool
    paused: bool
    volume: float = 1.0
    dropped: bool = False


@dataclass(eq=False)
class SoundSource:
    """A loaded sound effect that can be played many times."""

    path: str
    default_volume: float = 1.0
    default_min_distance: float = 1.0


@dataclass
class SilentEngine:
    """An audio engine that keeps track of requests without producing sound."""

    listener: tuple[Vec3, Vec3, Vec3, Vec3] | None = None
    sources: list[SoundSource] = field(default_factory=list)
    playing: set[SoundSource] = field(default_factory=set)
    played: list[tuple[str, SoundSource, Vec3 | None, bool]] = field(default_factory=list)
    dropped: bool = False

    def set_listener_position(self, position: Vec3, look_dir: Vec3,
                              velocity: Vec3 = _ORIGIN, up: Vec3 = _UP) -> None:
        self.listener = (position, look_dir, velocity, up)

    def play_file(self, path: str, looped: bool, start_paused: bool) -> MusicTrack:
        return MusicTrack(path, looped, start_paused)

    def add_sound_source(self, path: str) -> SoundSource:
        source = SoundSource(path)
        self.sources.append(source)
        return source

    def play2d(self, source: SoundSource) -> None:
        self.played.append(("2d", source, None, False))

    def play3d(self, source: SoundSource, position: Vec3, looped: bool) -> None:
        self.played.append(("3d", source, position, looped))

    def is_currently_playing(self, source: SoundSource) -> bool:
        return source in self.playing

    def remove_all_sound_sources(self) -> None:
        self.sources.clear()
        self.playing.clear()

    def drop(self) -> None:
        self.dropped = True


class Sound(Listener):
    """Owns the music tracks and sound effects and applies sound settings."""

    def __init__(self, engine: Any = None, events: EventSystem | None = None) -> None:
        self.engine = engine if engine is not None else SilentEngine()
        self.events = events if events is not None else default_event_system()
        self.cam_position: Vec3 = (0.0, 9.0, -15.0)
        self.cam_look_dir: Vec3 = (0.0, 0.0, 1.0)
        self.engine.set_listener_position(self.cam_position, self.cam_look_dir, _ORIGIN, _UP)

        self.music_tracks: dict[str, MusicTrack] = {}
        self.sound_effects: dict[str, SoundSource] = {}
        self.music_volume = 1.0
        self.sound_effects_volume = 1.0
        self.current_music_track = "MenuMusic"
        self.music_on = True
        self.sound_effects_on = True
        self.master_on = True
        self.events.add_client(EventId.UPDATE_SETTINGS, self)

    def close(self) -> None:
        """Release the engine and stop listening for settings changes."""
        self.events.remove_all(self)
        self.engine.drop()

    def init_music_track(self, file_name: str, file_type: str = ".mp3") -> None:
        """Load a paused, looping music track under ``file_name``."""
        if file_name not in self.music_tracks:
            self.music_tracks[file_name] = self.engine.play_file(
                MUSIC_ROOT + file_name + file_type, True, True)
        self.music_tracks[file_name].volume = self.music_volume

    def init_sound_effect(self, file_name: str, file_type: str = ".mp3") -> None:
        """Load a sound effect under ``file_name``."""
        if file_name not in self.sound_effects:
            self.sound_effects[file_name] = self.engine.add_sound_source(
                EFFECTS_ROOT + file_name + file_type)
        self.sound_effects[file_name].default_volume = self.sound_effects_volume

    def init_sound_group(self, group_name: str) -> None:
        """Load every effect of a named group; unknown groups load nothing."""
        for name in SOUND_GROUPS.get(group_name, ()):
            self.init_sound_effect(name)

    def clear_audio(self) -> None:
        """Stop and release all music and forget all effects."""
        for track in self.music_tracks.values():
            track.paused = True
            track.dropped = True
        self.music_tracks.clear()
        if self.sound_effects:
            self.engine.remove_all_sound_sources()
            self.sound_effects.clear()

    def update_position(self, position: Vec3, rotation: float) -> None:
        """Move the listener to the camera, facing along its yaw ``rotation``."""
        self.cam_position = tuple(position)  # type: ignore[assignment]
        self.cam_look_dir = (math.sin(rotation), 0.0, math.cos(rotation))
        self.engine.set_listener_position(self.cam_position, self.cam_look_dir, _ORIGIN, _UP)

    def play_music(self, music_name: str, loops: bool = True) -> None:
        """Pause every other track and play ``music_name``."""
        if not (self.master_on and self.music_on):
            return
        for track in self.music_tracks.values():
            track.paused = True
        self.current_music_track = music_name
        if self.music_tracks:
            track = self.music_tracks[music_name]
            track.looped = loops
            track.paused = False

    def play_sound_effect(self, sound_name: str, loops: bool = False,
                          position: Vec3 = _ORIGIN, min_distance: float = 1.0) -> None:
        """Play an effect, in 3D unless ``position`` is the origin."""
        if not self.master_on or not self.sound_effects_on:
            return
        source = self.sound_effects[sound_name]
        if self.engine.is_currently_playing(source):
            return
        if tuple(position) == _ORIGIN:
            self.engine.play2d(source)
        else:
            source.default_min_distance = min_distance
            self.engine.play3d(source, tuple(position), loops)

    def set_music_volume(self, volume: float) -> None:
        self.music_volume = volume
        for track in self.music_tracks.values():
            track.volume = volume

    def set_sound_effects_volume(self, volume: float) -> None:
        self.sound_effects_volume = volume
        for source in self.sound_effects.values():
            source.default_volume = volume

    def set_music_paused(self, paused: bool) -> None:
        for track in self.music_tracks.values():
            track.paused = paused

    def _apply_settings(self, settings: Iterable[SettingData]) -> None:
        master_volume = 1.0
        for setting in settings:
            if setting.type is not SettingType.SOUND:
                continue
            value = setting.setting
            if setting.name == "MasterSoundOn":
                self.master_on = bool(value)
            elif setting.name == "MasterSoundVolume":
                master_volume = float(value) / 100.0
            elif setting.name == "MusicOn":
                self.music_on = bool(value)
            elif setting.name == "MusicVolume":
                self.music_volume = float(value) / 100.0
            elif setting.name == "SoundEffectsEfOn":
                self.sound_effects_on = bool(value)
            elif setting.name == "SoundEffectVolume":
                self.sound_effects_volume = float(value) / 100.0

        self.set_music_volume(self.music_volume * master_volume)
        self.set_music_paused(True)
        self.set_sound_effects_volume(self.sound_effects_volume * master_volume)
        if self.master_on and self.music_on:
            self.play_music(self.current_music_track)

    def handle_event(self, event: Event) -> None:
        if event.event_id is EventId.UPDATE_SETTINGS:
            self._apply_settings(event.data)