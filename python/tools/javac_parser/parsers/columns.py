"""
Tab-aware column arithmetic.
"""


def column_number(text: str, caret_offset: int, tab_width: int) -> int:
    """
    Compute the 0-based display column of ``caret_offset`` within ``text``.

    Each tab advances the running column to the next multiple of
    ``tab_width``; every other character advances it by one. The offset is
    clamped to ``[0, len(text)]`` first.

    Args:
        text: The source excerpt the caret points into
        caret_offset: Character offset of the caret
        tab_width: Display width of a tab stop

    Returns:
        Display column of the offset, 0-based

    Raises:
        ValueError: If tab_width is smaller than 1
    """
    if tab_width < 1:
        raise ValueError(f"tab_width must be positive, got {tab_width}")

    end = max(0, min(len(text), caret_offset))
    column = 0
    for char in text[:end]:
        if char == "\t":
            column = (column // tab_width + 1) * tab_width
        else:
            column += 1
    return column
