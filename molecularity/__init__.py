"""Game logic for a physics puzzle game: events, settings, text, sound state, widgets and menus."""

__version__ = "0.1.0"