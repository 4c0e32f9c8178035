from __future__ import annotations

from .reaction_core import SeededRng

MIN_LEVEL = 1
MAX_LEVEL = 5
LEVELS: tuple[int, ...] = tuple(range(MIN_LEVEL, MAX_LEVEL + 1))

# Numeric-pad keys join the draw from this level upwards.
NUMPAD_MIN_LEVEL = 4

BASE_KEYS: tuple[str, ...] = ("1", "2", "3", "4", "5", "6", "7", "8", "9", "0")
NUMPAD_KEYS: tuple[str, ...] = ("Num1", "Num2", "Num3", "Num4", "Num5", "Num6", "Num7", "Num8", "Num9", "Num0")

# Keypad names differ between platforms and with Num Lock on or off.
KEYPAD_NAME_ALIASES: dict[str, str] = {
    "KP_1": "Num1",
    "KP_2": "Num2",
    "KP_3": "Num3",
    "KP_4": "Num4",
    "KP_5": "Num5",
    "KP_6": "Num6",
    "KP_7": "Num7",
    "KP_8": "Num8",
    "KP_9": "Num9",
    "KP_0": "Num0",
    "KP_End": "Num1",
    "KP_Down": "Num2",
    "KP_Next": "Num3",
    "KP_Left": "Num4",
    "KP_Begin": "Num5",
    "KP_Right": "Num6",
    "KP_Home": "Num7",
    "KP_Up": "Num8",
    "KP_Prior": "Num9",
    "KP_Insert": "Num0",
    # pygame.key.name() spelling
    "[1]": "Num1",
    "[2]": "Num2",
    "[3]": "Num3",
    "[4]": "Num4",
    "[5]": "Num5",
    "[6]": "Num6",
    "[7]": "Num7",
    "[8]": "Num8",
    "[9]": "Num9",
    "[0]": "Num0",
}


def check_level(level: int) -> int:
    level = int(level)
    if not (MIN_LEVEL <= level <= MAX_LEVEL):
        raise ValueError(f"level must be in [{MIN_LEVEL}, {MAX_LEVEL}]")
    return level


def numpad_enabled(level: int) -> bool:
    return check_level(level) >= NUMPAD_MIN_LEVEL


def enabled_keys(level: int) -> tuple[str, ...]:
    """Keys that may be highlighted (and are drawn as enabled) at ``level``."""

    if numpad_enabled(level):
        return BASE_KEYS + NUMPAD_KEYS
    return BASE_KEYS


def is_numpad_key(key: str) -> bool:
    return key in NUMPAD_KEYS


def resolve_key_name(name: str) -> str | None:
    """Map a physical key name to a key identifier, or None if unknown.

    This is the toolkit-neutral name table (X11-style `KP_*` names, including
    the Num Lock off spellings, and pygame's `[n]`). The pygame shell's entry
    point is `app.key_from_event`, which resolves keypad key codes itself and
    only falls back to this table by key name. Top-row digits and keypad
    digits stay distinct identities.
    """

    name = str(name).strip()
    if name in BASE_KEYS or name in NUMPAD_KEYS:
        return name
    return KEYPAD_NAME_ALIASES.get(name)


class KeySequencer:
    """Seeded stream of target keys.

    Every level draws uniformly from its enabled key set.
    """

    def __init__(self, rng: SeededRng) -> None:
        self._rng = rng

    def next_key(self, level: int) -> str:
        return self._rng.choice(list(enabled_keys(level)))
