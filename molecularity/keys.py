"""Human-readable names for virtual key codes."""

from __future__ import annotations

VK_BACK = 0x08
VK_TAB = 0x09
VK_CLEAR = 0x0C
VK_RETURN = 0x0D
VK_SHIFT = 0x10
VK_CONTROL = 0x11
VK_MENU = 0x12
VK_PAUSE = 0x13
VK_CAPITAL = 0x14
VK_ESCAPE = 0x1B
VK_SPACE = 0x20
VK_PRIOR = 0x21
VK_NEXT = 0x22
VK_END = 0x23
VK_HOME = 0x24
VK_LEFT = 0x25
VK_UP = 0x26
VK_RIGHT = 0x27
VK_DOWN = 0x28
VK_SELECT = 0x29
VK_INSERT = 0x2D
VK_DELETE = 0x2E
VK_HELP = 0x2F
VK_NUMPAD0 = 0x60
VK_MULTIPLY = 0x6A
VK_ADD = 0x6B
VK_SEPARATOR = 0x6C
VK_SUBTRACT = 0x6D
VK_DECIMAL = 0x6E
VK_DIVIDE = 0x6F
VK_F1 = 0x70
VK_NUMLOCK = 0x90
VK_SCROLL = 0x91
VK_LSHIFT = 0xA0
VK_RSHIFT = 0xA1

KEY_NAMES: dict[int, str] = {
    VK_RETURN: "Return",
    VK_SPACE: "Space",
    VK_SHIFT: "Shift",
    VK_LSHIFT: "Shift",
    VK_RSHIFT: "Shift",
    VK_CONTROL: "Ctrl",
    VK_MENU: "alt",
    VK_PAUSE: "Pause",
    VK_ESCAPE: "ESC",
    VK_CAPITAL: "CAPS LOCK",
    VK_BACK: "BACKSPACE",
    VK_TAB: "Tab",
    VK_PRIOR: "page Up",
    VK_NEXT: "page Down",
    VK_END: "End",
    VK_HOME: "Home",
    VK_SELECT: "Select",
    VK_INSERT: "Ins",
    VK_DELETE: "Del",
    VK_HELP: "Help",
    VK_SCROLL: "Scr Lock",
    VK_CLEAR: "Clear",
    VK_UP: "Up Arrow",
    VK_DOWN: "Down Arrow",
    VK_LEFT: "Left Arrow",
    VK_RIGHT: "Right Arrow",
    **{VK_F1 + n: f"F{n + 1}" for n in range(12)},
    VK_NUMLOCK: "Numlock",
    **{VK_NUMPAD0 + n: f"Numpad {n}" for n in range(10)},
    VK_MULTIPLY: "*",
    VK_ADD: "+",
    VK_SEPARATOR: "",
    VK_SUBTRACT: "-",
    VK_DECIMAL: ".",
    VK_DIVIDE: "/",
    219: "[",
    221: "]",
    222: "#",
    186: ";",
    192: ",",  # the apostrophe key reports as a comma
    188: ",",
    187: "=",
    223: "`",
    220: "\\",
    191: "/",
    190: ".",
}
"""Names used by the key-binding input box."""

# The on-screen labels show the End key as "Home".
_LABEL_OVERRIDES = {VK_END: "Home"}


def _check_code(code: int) -> int:
    if not 0 <= code <= 0xFF:
        raise ValueError(f"key code out of range: {code}")
    return code


def key_name(code: int) -> str:
    """The label shown for key ``code``; unnamed keys show as their character."""
    _check_code(code)
    if code in _LABEL_OVERRIDES:
        return _LABEL_OVERRIDES[code]
    return KEY_NAMES.get(code, chr(code))