# molecularity

The game-side logic behind a first-person physics puzzle game. It has no
graphics or audio back end, so it can be driven and tested on its own.

## What is in it

- **Events** (`molecularity.events`): a buffered publish/subscribe system.
  Listeners (subclasses of `Listener`) register for an `EventId` with
  `EventSystem.add_client`; events are queued with `EventSystem.add_event`
  and delivered in order by `EventSystem.process_events`, including events
  queued while delivering. `default_event_system()` returns the shared
  instance the other modules use when none is passed in.
- **Timing** (`molecularity.timer`): `Timer` reports elapsed milliseconds
  with `start`, `stop`, `restart` and `milliseconds_elapsed`; the clock can
  be replaced for testing.
- **Paths and errors** (`molecularity.paths`, `molecularity.errors`):
  `directory_from_path` and `file_extension` accept either `\` or `/`;
  `ComError` is an exception carrying a result code, file, function and line,
  and `log_error` logs a message (or a `ComError`) and returns the text.
- **JSON data** (`molecularity.json_helper`): `JsonStore` reads files under a
  root directory (`Resources/JSON` by default). It loads game objects
  (`ModelData`), text items (`TextData`), settings (`SettingData`, grouped by
  `SettingType`) and raw values as text, and `update_item` writes a changed
  value back. `value_to_string` and `value_to_setting` convert single JSON
  values.
- **Localised text** (`molecularity.text_loader`): `TextLoader` reads text
  sections from the active language file (`Text_Eng.json` by default);
  `change_language("Fr")` switches to `Text_Fr.json` and queues a
  `CHANGE_LANGUAGE` event. `to_map` turns text items into a name-to-text dict.
- **Sound state** (`molecularity.sound`): `Sound` keeps music tracks, sound
  effects, volumes, on/off switches and the current track, and applies
  `UPDATE_SETTINGS` events. It talks to an engine object; `SilentEngine`
  records what was asked of it without producing any sound.
- **Widgets** (`molecularity.widgets`): `Button`, `ColourBlock`,
  `ImageWidget`, `EnergyBar`, `DataSlider`, `PageSlider`, `InputBox` and
  `DropDown`, sharing the `Widget` base and `MouseData`. Each is updated once
  per frame with the current mouse state and reports what the user did.
- **Screens**: `Screen` (`molecularity.screen`) is the base for menus and
  tracks window size, mouse and key input. `MainMenu` lays out the play,
  level, settings and quit buttons plus a link button (which opens
  `link_url` in a browser when one is given). `SettingsMenu` shows the
  settings tab by tab and, on accept, saves them through `JsonStore` and
  queues an `UPDATE_SETTINGS` event.
- **Keys** (`molecularity.keys`): `key_name` gives a readable label for a
  virtual-key code from 0 to 255 and raises `ValueError` outside that range.

## What it does not do

There is no rendering, window, input capture or game loop: widgets and
screens only compute layout, state and events, and drawing them is left to
the caller. `SilentEngine` is the only audio engine included. Only the main
menu and settings screens exist; there is no in-game HUD, pause, tutorial,
end-of-level or credits screen, and the package installs no command.

## Installing

```
pip install .
```

Tests use pytest:

```
pip install ".[test]"
pytest
```

## A short example

```python
from molecularity.keys import key_name
from molecularity.paths import directory_from_path, file_extension

key_name(13)                                            # "Return"
directory_from_path("Resources\\Textures\\button.dds")  # "Resources\\Textures"
file_extension("Settings.json")                         # "json"
```

A frame of a game loop feeds input into the active screen, lets it queue
events, and then delivers them:

```python
from molecularity.events import Event, EventId, default_event_system
from molecularity.main_menu import MainMenu
from molecularity.widgets.base import MouseData

events = default_event_system()
menu = MainMenu(screen_size=(1600.0, 900.0))
menu.handle_event(Event(EventId.UI_MOUSE_INPUT, MouseData(pos=(800.0, 270.0), l_press=True)))
menu.update(1 / 60)
events.process_events()
```