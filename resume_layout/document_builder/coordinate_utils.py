"""Coordinate Conversion Utilities

Layout runs top-down: y is measured from the top edge of the page and grows
toward the bottom, the way a reader moves through the document. ReportLab
draws with the origin at the bottom-left. These pure helpers convert between
the two and compute horizontal alignment.
"""


def flip_y_coordinate(y: float, page_height: float) -> float:
    """
    Flip Y coordinate between top-left and bottom-left origin systems.

    Args:
        y: Y coordinate in source system
        page_height: Height of the page (in same units as y)

    Returns:
        Y coordinate in flipped system

    Examples:
        >>> flip_y_coordinate(0, 792)  # Top becomes bottom
        792.0
        >>> flip_y_coordinate(792, 792)  # Bottom becomes top
        0.0

    Notes:
        This function is its own inverse:
        flip_y_coordinate(flip_y_coordinate(y, h), h) == y
    """
    return float(page_height - y)


def baseline_for_line(top: float, line_index: int, font_size: float, leading: float,
                      page_height: float) -> float:
    """
    ReportLab baseline for one line of a text block.

    The block's top edge is given in layout (top-down) coordinates. Each line
    occupies ``leading`` points; the baseline sits ``font_size`` below the
    line's top, which leaves the descender inside the leading.

    Args:
        top: Top edge of the block, top-down
        line_index: Zero-based line number inside the block
        font_size: Font size in points
        leading: Line height in points
        page_height: Page height in points

    Returns:
        Baseline Y in ReportLab (bottom-up) coordinates

    Examples:
        >>> baseline_for_line(36, 0, 10, 12, 792)
        746.0
        >>> baseline_for_line(36, 1, 10, 12, 792)
        734.0
    """
    return flip_y_coordinate(top + line_index * leading + font_size, page_height)


def centered_x(x: float, width: float, text_width: float) -> float:
    """
    Left edge that centers text_width inside [x, x + width].

    Examples:
        >>> centered_x(36, 540, 100)
        256.0
    """
    return x + (width - text_width) / 2


def right_aligned_x(x: float, width: float, text_width: float) -> float:
    """
    Left edge that right-aligns text_width inside [x, x + width].

    Examples:
        >>> right_aligned_x(36, 540, 100)
        476
    """
    return x + width - text_width
