"""Key code vocabulary accepted by the compiler.

Names follow Karabiner-Elements' ``key_code`` identifiers.
"""

from .exceptions import UnknownKeyCodeError

# Modifiers applied when a sublayer key is tapped alone (the "Hyper" chord)
HYPER_MODIFIERS: tuple[str, ...] = (
    "left_shift",
    "left_command",
    "left_control",
    "left_option",
)

LETTER_KEYS = tuple("abcdefghijklmnopqrstuvwxyz")
NUMBER_KEYS = tuple("1234567890")
FUNCTION_KEYS = tuple(f"f{n}" for n in range(1, 25))
ARROW_KEYS = ("left_arrow", "up_arrow", "right_arrow", "down_arrow")
NAVIGATION_KEYS = ("home", "end", "page_up", "page_down")

CONTROL_KEYS = (
    "return_or_enter",
    "escape",
    "delete_or_backspace",
    "delete_forward",
    "tab",
    "spacebar",
)

PUNCTUATION_KEYS = (
    "hyphen",
    "equal_sign",
    "open_bracket",
    "close_bracket",
    "backslash",
    "non_us_pound",
    "semicolon",
    "quote",
    "grave_accent_and_tilde",
    "comma",
    "period",
    "slash",
    "non_us_backslash",
)

MODIFIER_KEYS = (
    "caps_lock",
    "left_control",
    "left_shift",
    "left_option",
    "left_command",
    "right_control",
    "right_shift",
    "right_option",
    "right_command",
    "fn",
)

KEYPAD_KEYS = tuple(f"keypad_{n}" for n in range(10)) + (
    "keypad_num_lock",
    "keypad_slash",
    "keypad_asterisk",
    "keypad_hyphen",
    "keypad_plus",
    "keypad_enter",
    "keypad_period",
    "keypad_equal_sign",
)

MEDIA_KEYS = (
    "volume_increment",
    "volume_decrement",
    "mute",
    "display_brightness_increment",
    "display_brightness_decrement",
    "play_or_pause",
    "fastforward",
    "rewind",
)

# Keys that get a Hyper-chord fallback binding (see commands.fallbacks)
FALLBACK_KEYS: tuple[str, ...] = (
    NUMBER_KEYS
    + LETTER_KEYS
    + FUNCTION_KEYS
    + ARROW_KEYS
    + NAVIGATION_KEYS
    + CONTROL_KEYS
    + PUNCTUATION_KEYS
)

KEY_CODES: frozenset[str] = frozenset(
    FALLBACK_KEYS + MODIFIER_KEYS + KEYPAD_KEYS + MEDIA_KEYS
)


def is_key_code(value: object) -> bool:
    """Return True if value names a recognized key."""
    return isinstance(value, str) and value in KEY_CODES


def validate_key_code(key_code: str, location: str | None = None) -> str:
    """Return key_code unchanged, or raise UnknownKeyCodeError.

    Args:
        key_code: Key identifier to check
        location: Optional human-readable position used in the error message

    Returns:
        The validated key code
    """
    if not is_key_code(key_code):
        raise UnknownKeyCodeError(str(key_code), location)
    return key_code
