"""The title screen: play, level select, settings, quit and a project link."""

from __future__ import annotations

import webbrowser
from typing import Callable

from molecularity.events import Event, EventId, EventSystem
from molecularity.screen import BLACK, Screen
from molecularity.text_loader import TextLoader, to_map
from molecularity.widgets.base import Vec2
from molecularity.widgets.button import Button
from molecularity.widgets.display import ColourBlock, ImageWidget

BUTTON_TEXTURES = [
    "Resources\\Textures\\UI_Buttons\\Button_1_Down.dds",
    "Resources\\Textures\\UI_Buttons\\Button_1_Hover.dds",
    "Resources\\Textures\\UI_Buttons\\Button_1_Up.dds",
]
LINK_TEXTURES = ["Resources\\Textures\\UI_Buttons\\GitHubLogo.png"] * 3
BACKGROUND_COLOUR = (235, 209, 240)
TITLE_CARD = "Title_Card\\TitleCard.png"


class MainMenu(Screen):
    """The menu shown before a level is loaded."""

    subscriptions = (EventId.WINDOW_SIZE_CHANGE, EventId.UI_KEY_INPUT,
                     EventId.UI_MOUSE_INPUT, EventId.UPDATE_SETTINGS)

    def __init__(self, events: EventSystem | None = None,
                 text_loader: TextLoader | None = None,
                 screen_size: Vec2 = (0.0, 0.0),
                 link_url: str | None = None,
                 open_link: Callable[[str], object] = webbrowser.open,
                 on_click: Callable[[], None] | None = None) -> None:
        super().__init__(events, text_loader, screen_size)
        self.link_url = link_url
        self.open_link = open_link
        self.is_settings = False
        self.level_to = 0
        self.mouse_load = True
        self._link_requested = False
        self._link_armed = True
        self.background = ColourBlock()
        self.title_card = ImageWidget()
        self.buttons = [Button(on_click) for _ in range(5)]
        self.load_text()

    def load_text(self) -> None:
        self.text_map = to_map(self.text_loader.load_text("Main_Menu_Text"))

    def handle_event(self, event: Event) -> None:
        if event.event_id is EventId.UPDATE_SETTINGS:
            self.is_settings = False
        else:
            super().handle_event(event)

    def update(self, dt: float) -> None:
        if self.is_settings:
            return
        if self.mouse_load:
            self.mouse.l_press = False
            self.mouse_load = False
            self.events.add_event(EventId.GAME_PAUSE)

        width, height = self.size_of_screen
        self.background.update(BACKGROUND_COLOUR, (width, height), (0.0, 0.0), 0.7)
        self.title_card.update(TITLE_CARD, (width * 0.4, height * 0.12),
                               (width * 0.5 - width * 0.4 / 2, 0.0))
        self._menu_buttons()
        self._link_button()

    def _change_level(self, level: int) -> None:
        self.level_to = level
        self.events.add_event(EventId.GAME_LEVEL_CHANGE, level)
        self.mouse_load = True

    def _menu_buttons(self) -> None:
        width, height = self.size_of_screen
        size = (width * 0.15, height * 0.13)
        x = width * 0.5 - size[0] / 2

        def pressed(index: int, y_fraction: float) -> bool:
            return self.buttons[index].update(
                self.text(f"Button_{index + 1}"), BUTTON_TEXTURES, size,
                (x, height * y_fraction), BLACK, self.mouse)

        if pressed(0, 0.25):
            self.events.add_event(EventId.HIDE_CURSOR)
            self.events.add_event(EventId.GAME_UNPAUSE)
            self._change_level(1)
        if pressed(1, 0.40):
            self._change_level(4)
        if pressed(2, 0.55):
            self.is_settings = True
            self.events.add_event(EventId.GAME_SETTINGS)
            self.mouse_load = True
        if pressed(3, 0.70):
            self.events.add_event(EventId.QUIT_GAME)

    def _link_button(self) -> None:
        width, height = self.size_of_screen
        button = self.buttons[4]
        if button.update("", LINK_TEXTURES, (width * 0.055, height * 0.075),
                         (2.0, 2.0), BLACK, self.mouse):
            if not self._link_requested and self._link_armed:
                self._link_requested = True
        if not button.is_pressed:
            self._link_armed = True
        if self._link_requested:
            if self.link_url:
                self.open_link(self.link_url)
            self._link_armed = False
            self._link_requested = False