"""Restricted-alphabet character packing.

String fields travel as dense character codes instead of bytes: 5 bits per
character for the letters-only alphabet and 6 bits for the extended one.
The all-ones code of each width is reserved as a fill code that pads a
fixed-width field and may only appear as a trailing run.
"""

from __future__ import annotations

from ..exceptions import UnsupportedCharacter

LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
EXTENDED = LETTERS + "0123456789" + " .,:;-_/+*!?#'\"()<>=%&@$"

LETTER_BITS = 5
EXTENDED_BITS = 6

_LETTER_CODES = {char: code for code, char in enumerate(LETTERS)}
_EXTENDED_CODES = {char: code for code, char in enumerate(EXTENDED)}


def bits_per_char(letters_only: bool) -> int:
    """Return the code width of the active alphabet."""
    return LETTER_BITS if letters_only else EXTENDED_BITS


def fill_code(letters_only: bool) -> int:
    """Return the padding code of the active alphabet."""
    return (1 << bits_per_char(letters_only)) - 1


def encode(value: str, letters_only: bool, width: int | None = None) -> bytes:
    """Pack ``value`` into character codes.

    The codes are concatenated most significant first and returned as a
    big-endian integer, so ``writer.write_bits(packed, n * bits_per_char())``
    emits exactly the ``n`` codes.

    Args:
        value: String to pack
        letters_only: Use the 5-bit letters-only alphabet
        width: Pad with fill codes up to this many characters

    Returns:
        Packed codes

    Raises:
        UnsupportedCharacter: If a character is outside the active alphabet
        ValueError: If value is longer than width
    """
    codes_by_char = _LETTER_CODES if letters_only else _EXTENDED_CODES
    bits = bits_per_char(letters_only)

    if width is not None and len(value) > width:
        raise ValueError(f"'{value}' is longer than {width} characters")

    packed = 0
    for position, char in enumerate(value):
        code = codes_by_char.get(char)
        if code is None:
            alphabet = "letters-only" if letters_only else "extended"
            raise UnsupportedCharacter(
                f"Character {char!r} at position {position} is not in the {alphabet} alphabet",
                char=char,
            )
        packed = (packed << bits) | code

    count = len(value)
    if width is not None:
        for _ in range(width - len(value)):
            packed = (packed << bits) | fill_code(letters_only)
        count = width

    return packed.to_bytes((count * bits + 7) // 8, "big")


def decode(codes: bytes, letters_only: bool) -> str:
    """Map character codes back to a string.

    Args:
        codes: One code per byte, as returned by ``BitReader.read_bytes``
        letters_only: Use the 5-bit letters-only alphabet

    Returns:
        Decoded string with trailing fill codes dropped

    Raises:
        UnsupportedCharacter: If a code is outside the active alphabet, or a
            fill code is followed by a character code
    """
    alphabet = LETTERS if letters_only else EXTENDED
    fill = fill_code(letters_only)

    chars: list[str] = []
    filled = False
    for position, code in enumerate(codes):
        if code == fill:
            filled = True
            continue
        if filled or code >= len(alphabet):
            raise UnsupportedCharacter(
                f"Invalid character code {code} at position {position}", code=code
            )
        chars.append(alphabet[code])

    return "".join(chars)
