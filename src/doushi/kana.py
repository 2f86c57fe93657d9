"""Hiragana column table (五十音図) used for vowel-column sound changes.

Each row lists its kana in あ段, い段, う段, え段, お段 order. Cells that do not
exist in modern kana (や行 い段, わ行 う段, ...) are ``None``.
"""

from typing import Literal

Column = Literal["a", "i", "u", "e", "o"]

COLUMNS: tuple[Column, ...] = ("a", "i", "u", "e", "o")


# Row -> [あ段, い段, う段, え段, お段]
KANA_ROWS: dict[str, tuple[str | None, ...]] = {
    "vowel": ("あ", "い", "う", "え", "お"),
    "k": ("か", "き", "く", "け", "こ"),
    "g": ("が", "ぎ", "ぐ", "げ", "ご"),
    "s": ("さ", "し", "す", "せ", "そ"),
    "z": ("ざ", "じ", "ず", "ぜ", "ぞ"),
    "t": ("た", "ち", "つ", "て", "と"),
    "d": ("だ", "ぢ", "づ", "で", "ど"),
    "n": ("な", "に", "ぬ", "ね", "の"),
    "h": ("は", "ひ", "ふ", "へ", "ほ"),
    "b": ("ば", "び", "ぶ", "べ", "ぼ"),
    "p": ("ぱ", "ぴ", "ぷ", "ぺ", "ぽ"),
    "m": ("ま", "み", "む", "め", "も"),
    "y": ("や", None, "ゆ", None, "よ"),
    "r": ("ら", "り", "る", "れ", "ろ"),
    "w": ("わ", "ゐ", None, "ゑ", "を"),
    "small-y": ("ゃ", None, "ゅ", None, "ょ"),
}


# (row, column) -> kana
_CELLS: dict[tuple[str, Column], str] = {
    (row, column): kana
    for row, cells in KANA_ROWS.items()
    for column, kana in zip(COLUMNS, cells)
    if kana is not None
}

# kana -> (row, column)
_POSITIONS: dict[str, tuple[str, Column]] = {kana: key for key, kana in _CELLS.items()}


def position(kana: str) -> tuple[str, Column] | None:
    """Return the (row, column) of a kana, or None if it is not in the table."""
    return _POSITIONS.get(kana)


def change(kana: str, from_column: Column, to_column: Column) -> str | None:
    """Move a kana to another vowel column within its row.

    Args:
        kana: A single hiragana character, e.g. く
        from_column: The column ``kana`` is expected to lie in
        to_column: The target column

    Returns:
        The kana in the same row and ``to_column``, or None when ``kana`` is
        not in ``from_column`` or the row has no cell for ``to_column``.

    Examples:
        >>> change("く", "u", "e")
        'け'
        >>> change("で", "e", "a")
        'だ'
        >>> change("ゆ", "u", "i") is None
        True
    """
    found = _POSITIONS.get(kana)
    if found is None:
        return None

    row, column = found
    if column != from_column:
        return None

    return _CELLS.get((row, to_column))
