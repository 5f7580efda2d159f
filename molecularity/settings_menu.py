"""The settings screen: tabbed lists of settings that are saved on accept."""

from __future__ import annotations

import dataclasses
import enum
from typing import Callable

from molecularity.events import Event, EventId, EventSystem
from molecularity.json_helper import JsonStore, SettingData, SettingType
from molecularity.screen import BLACK, WHITE, Screen, TextToDraw
from molecularity.text_loader import TextLoader, to_map
from molecularity.widgets.base import MouseData, Vec2
from molecularity.widgets.button import Button
from molecularity.widgets.display import ImageWidget
from molecularity.widgets.dropdown import DropDown
from molecularity.widgets.input_box import InputBox
from molecularity.widgets.sliders import DataSlider, PageSlider

DROP_TEXTURES = [
    "Resources\\Textures\\Settings\\DropArrow_Blue.dds",
    "Resources\\Textures\\Settings\\DropArrow_Blue.dds",
    "Resources\\Textures\\Settings\\DropArrow.dds",
]
DROP_BACKGROUNDS = [
    "Resources\\Textures\\Settings\\Input_Blue.dds",
    "Resources\\Textures\\Settings\\Input_Blue.dds",
    "Resources\\Textures\\Settings\\Input_Yellow.dds",
]
TAB_TEXTURES = [
    "Resources\\Textures\\Settings\\Button_SettingsBar_Hover.dds",
    "Resources\\Textures\\Settings\\Button_SettingsBar_Hover.dds",
    "Resources\\Textures\\Settings\\Button_SettingsBar_Up.dds",
]
ACCEPT_TEXTURES = [
    "Resources\\Textures\\UI_Buttons\\Button_1_Down.dds",
    "Resources\\Textures\\UI_Buttons\\Button_1_Hover.dds",
    "Resources\\Textures\\UI_Buttons\\Button_1_Up.dds",
]
SLIDER_BAR = "Resources\\Textures\\Settings\\Slider_Line_Yellow.dds"
SLIDER_KNOB = "Resources\\Textures\\Settings\\Slider_Yellow.dds"
INPUT_BACKGROUND = "Resources\\Textures\\Settings\\Input_Yellow.dds"
BACKGROUND = "Settings\\settingsBack.dds"

LANGUAGES = ["Eng", "Fr"]
WINDOW_SIZES: list[tuple[str, tuple[int, int]]] = [
    ("1024x576", (1024, 576)),
    ("1280x720", (1280, 720)),
    ("1600x900", (1600, 900)),
    ("1920x1080", (1920, 1080)),
    ("2560x1440", (2560, 1440)),
]


class Tab(enum.Enum):
    """The settings page currently shown."""

    GRAPHICS = enum.auto()
    GENERAL = enum.auto()
    SOUND = enum.auto()
    CONTROLS = enum.auto()


_TAB_BUTTONS = (Tab.GENERAL, Tab.GRAPHICS, Tab.SOUND, Tab.CONTROLS)
_TAB_TYPES = {
    Tab.GRAPHICS: SettingType.GRAPHIC,
    Tab.GENERAL: SettingType.GENERAL,
    Tab.SOUND: SettingType.SOUND,
    Tab.CONTROLS: SettingType.CONTROL,
}
_TAB_TITLES = {
    Tab.GENERAL: "Button_1",
    Tab.GRAPHICS: "Button_2",
    Tab.SOUND: "Button_3",
    Tab.CONTROLS: "Button_4",
}


class SettingsMenu(Screen):
    """Shows the settings by tab and writes them back when accepted."""

    subscriptions = (EventId.WINDOW_SIZE_CHANGE, EventId.UI_KEY_INPUT,
                     EventId.UI_MOUSE_INPUT, EventId.GAME_SETTINGS)

    def __init__(self, events: EventSystem | None = None,
                 text_loader: TextLoader | None = None,
                 screen_size: Vec2 = (0.0, 0.0),
                 store: JsonStore | None = None,
                 settings: list[SettingData] | None = None,
                 on_click: Callable[[], None] | None = None) -> None:
        super().__init__(events, text_loader, screen_size)
        self.store = store if store is not None else self.text_loader.store
        self.settings = settings if settings is not None else self.store.load_settings()
        self.is_settings = False

        self.background = ImageWidget()
        self.scroll_bar = PageSlider(page_size=self.size_of_screen[1])
        self.dropdowns = [DropDown(on_click) for _ in range(10)]
        self.sliders = [DataSlider() for _ in range(10)]
        self.buttons = [Button(on_click) for _ in range(10)]
        self.control_inputs = [InputBox() for _ in range(20)]
        self.title_texts: list[TextToDraw] = []
        self.body_texts: list[TextToDraw] = []

        self.drop_count = 0
        self.slider_count = 0
        self.button_count = 0
        self.input_count = 0

        self.current_tab = Tab.GENERAL
        self.load_flag = True
        self.mouse_load = True
        self.current_py = 0.0
        self.current_y = 0.0
        self.json_window_size: tuple[float, float] = (0.0, 0.0)
        self.box_pos: Vec2 = (0.0, 0.0)
        self.box_size: Vec2 = (0.0, 0.0)
        self.load_text()

    def load_text(self) -> None:
        self.text_map = to_map(self.text_loader.load_text("Settings_Buttons"))
        names = self.text_loader.load_text("Settings_Names")
        for setting, name in zip(self.settings, names):
            setting.text = name.text

    def handle_event(self, event: Event) -> None:
        if event.event_id is EventId.GAME_SETTINGS:
            self.is_settings = True
            return
        super().handle_event(event)
        if event.event_id is EventId.WINDOW_SIZE_CHANGE:
            self.scroll_bar.page_size = self.size_of_screen[1]
            self.mouse.l_press = False
            self.load_flag = True

    def update(self, dt: float) -> None:
        if not self.is_settings:
            return
        self.title_texts.clear()
        self.body_texts.clear()
        self.drop_count = 0
        self.slider_count = 0
        self.button_count = 0
        self.input_count = 0

        if self.mouse_load:
            self.mouse.l_press = False
            self.mouse_load = False

        width, height = self.size_of_screen
        self.background.update(BACKGROUND, (width, height + 10), (0.0, 0.0))

        self._page_slider()
        self._tab_buttons()
        self._tab_content()
        self._accept()

        self.title_texts.append(TextToDraw("Settings", (0.0, -height * 0.03), BLACK))

    def _in_box(self) -> bool:
        return self.box_pos[1] <= self.current_y <= self.box_pos[1] + self.box_size[1]

    def _label(self, setting: SettingData) -> None:
        self.body_texts.append(TextToDraw(
            setting.text, (self.size_of_screen[0] * 0.01, self.current_y), BLACK))

    def _page_slider(self) -> None:
        width, height = self.size_of_screen
        self.scroll_bar.update((30.0, height * 0.60), (width - 30, height * 0.30), 0,
                               (0, 0, 0), (0, 0, 0), self.mouse)
        self.current_y = height * 0.37 - self.scroll_bar.page_pos
        if self.current_py != self.scroll_bar.py:
            self.current_py = self.scroll_bar.py
            self.load_flag = True
        self.box_pos = (0.0, height * 0.30)
        self.box_size = (width, height * 0.60)

    def _tab_buttons(self) -> None:
        width, height = self.size_of_screen
        size = (width / 14, height / 14)
        x = 0.0
        for index, tab in enumerate(_TAB_BUTTONS):
            button = self.buttons[self.button_count]
            if button.update(self.text(f"Button_{index + 1}"), TAB_TEXTURES, size,
                             (x, height * 0.13), BLACK, self.mouse):
                self.current_tab = tab
                self.scroll_bar.py = 0.0
            x += width / 14
            self.button_count += 1

    def _tab_content(self) -> None:
        width, height = self.size_of_screen
        tab_text_pos = (width * 0.01, height * 0.22)
        tab = self.current_tab
        self.title_texts.append(TextToDraw(self.text(_TAB_TITLES[tab]), tab_text_pos, BLACK))
        kind = _TAB_TYPES[tab]

        for setting in self.settings:
            if setting.type is not kind:
                continue
            if tab is Tab.CONTROLS:
                if self._in_box():
                    self._create_control(setting)
                self.current_y += width * 0.05
            elif tab is Tab.GENERAL and setting.name in ("WindowWidth", "WindowHeight"):
                self._create_window_size(setting)
            else:
                self._create_setting(setting)

        if tab is Tab.CONTROLS:
            self.load_flag = False
            self.key = 0

    def _slider_mouse(self) -> MouseData:
        data = self.mouse
        for dropdown in self.dropdowns[:self.drop_count]:
            data = (dataclasses.replace(self.mouse, l_press=False)
                    if dropdown.is_down() else self.mouse)
        return data

    def _create_setting(self, setting: SettingData) -> None:
        width, height = self.size_of_screen
        if self._in_box():
            self._label(setting)
            value = setting.setting
            pos = (width * 0.39, self.current_y)
            if isinstance(value, bool):
                dropdown = self.dropdowns[self.drop_count]
                dropdown.update(["true", "false"], (width * 0.15625, height * 0.05), pos,
                                DROP_BACKGROUNDS, DROP_TEXTURES, WHITE,
                                "true" if value else "false", self.mouse)
                setting.setting = dropdown.data_selected != "false"
                self.drop_count += 1
            elif isinstance(value, int):
                slider = self.sliders[self.slider_count]
                slider.update((width * 0.15625, height * 0.07), pos, value,
                              SLIDER_BAR, SLIDER_KNOB, self._slider_mouse())
                setting.setting = int(slider.data)
                self.slider_count += 1
                self.body_texts.append(TextToDraw(
                    str(setting.setting), (width * 0.58, self.current_y), BLACK))
            elif isinstance(value, str):
                dropdown = self.dropdowns[self.drop_count]
                dropdown.update(LANGUAGES, (width * 0.15625, height * 0.05), pos,
                                DROP_BACKGROUNDS, DROP_TEXTURES, WHITE, value, self.mouse)
                setting.setting = dropdown.data_selected
                self.drop_count += 1
        self.current_y += height * 0.1

    def _create_control(self, setting: SettingData) -> None:
        width, height = self.size_of_screen
        self._label(setting)
        box = self.control_inputs[self.input_count]
        if self.load_flag:
            raw = str(setting.setting).encode("utf-8")
            box.set_key(raw[0] if raw else 0)
        box.update((width * 0.15625, height * 0.07), (width * 0.39, self.current_y),
                   INPUT_BACKGROUND, BLACK, self.key, self.mouse)
        setting.setting = chr(box.key)
        self.input_count += 1

    def _create_window_size(self, setting: SettingData) -> None:
        width, height = self.size_of_screen
        value = setting.setting
        is_int = isinstance(value, int) and not isinstance(value, bool)
        if setting.name == "WindowWidth":
            if is_int:
                self.json_window_size = (float(value), self.json_window_size[1])
            return
        if not self._in_box():
            return
        self._label(setting)
        if not is_int:
            return
        self.json_window_size = (self.json_window_size[0], float(value))
        current = next((index for index, (_, size) in enumerate(WINDOW_SIZES)
                        if (float(size[0]), float(size[1])) == self.json_window_size), 0)
        dropdown = self.dropdowns[self.drop_count]
        dropdown.update([label for label, _ in WINDOW_SIZES],
                        (width * 0.15625, height * 0.05), (width * 0.39, self.current_y),
                        DROP_BACKGROUNDS, DROP_TEXTURES, WHITE,
                        WINDOW_SIZES[current][0], self.mouse)
        chosen_w, chosen_h = WINDOW_SIZES[dropdown.selected][1]
        self.json_window_size = (float(chosen_w), float(chosen_h))
        setting.setting = chosen_h
        for other in self.settings:
            if other.name == "WindowWidth":
                other.setting = chosen_w
                break
        self.drop_count += 1
        self.current_y += height * 0.1

    def _accept(self) -> None:
        width, height = self.size_of_screen
        button = self.buttons[self.button_count]
        if not button.update(self.text("Button_Accept"), ACCEPT_TEXTURES,
                             (width / 9, height / 9), (width * 0.89, 0.0),
                             BLACK, self.mouse):
            self.button_count += 1
            return

        for setting in self.settings:
            self.store.update_item(self.store.settings_file, setting.type.section,
                                   setting.name, setting.setting, "")
            if setting.name == "Language":
                self.text_loader.change_language(str(setting.setting))

        self.events.add_event(EventId.UPDATE_SETTINGS, self.settings)
        self.is_settings = False
        self.current_tab = Tab.GENERAL
        self.scroll_bar.py = 0.0
        self.load_flag = True
        self.mouse_load = True