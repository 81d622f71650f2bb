"""Basic drawing primitives on numpy RGB buffers."""

from typing import Dict, Tuple
import numpy as np
from numpy.typing import NDArray

# Type aliases
Color = Tuple[int, int, int]
Buffer = NDArray[np.uint8]


def new_buffer(width: int, height: int, color: Color = (0, 0, 0)) -> Buffer:
    """Allocate a (height, width, 3) buffer filled with color."""
    buffer = np.zeros((height, width, 3), dtype=np.uint8)
    buffer[:, :] = color
    return buffer


def clear(buffer: Buffer, color: Color = (0, 0, 0)) -> None:
    """Clear buffer to a solid color."""
    buffer[:, :] = color


def draw_rect(
    buffer: Buffer,
    x: int,
    y: int,
    width: int,
    height: int,
    color: Color,
    filled: bool = True,
    thickness: int = 1,
) -> None:
    """Draw a rectangle on the buffer, clipped to its bounds.

    Args:
        buffer: Target numpy array (height, width, 3)
        x: Left edge x coordinate
        y: Top edge y coordinate
        width: Rectangle width
        height: Rectangle height
        color: RGB color tuple
        filled: If True, fill rectangle; if False, draw outline only
        thickness: Line thickness for outline (when filled=False)
    """
    h, w = buffer.shape[:2]

    x1 = max(0, min(x, w))
    y1 = max(0, min(y, h))
    x2 = max(0, min(x + width, w))
    y2 = max(0, min(y + height, h))

    if x2 <= x1 or y2 <= y1:
        return

    if filled:
        buffer[y1:y2, x1:x2] = color
        return

    t = max(1, thickness)
    buffer[y1:min(y1 + t, y2), x1:x2] = color
    buffer[max(y2 - t, y1):y2, x1:x2] = color
    buffer[y1:y2, x1:min(x1 + t, x2)] = color
    buffer[y1:y2, max(x2 - t, x1):x2] = color


def draw_hline(buffer: Buffer, x: int, y: int, length: int, color: Color, thickness: int = 1) -> None:
    draw_rect(buffer, x, y, length, thickness, color)


def draw_image(buffer: Buffer, image: Buffer, x: int, y: int) -> None:
    """Draw an RGB or RGBA image with its top-left corner at (x, y).

    RGBA images are blended with their per-pixel alpha.
    """
    buf_h, buf_w = buffer.shape[:2]
    img_h, img_w = image.shape[:2]

    # Visible region
    src_x1 = max(0, -x)
    src_y1 = max(0, -y)
    src_x2 = min(img_w, buf_w - x)
    src_y2 = min(img_h, buf_h - y)
    if src_x2 <= src_x1 or src_y2 <= src_y1:
        return

    dst_x1 = max(0, x)
    dst_y1 = max(0, y)
    dst_x2 = dst_x1 + (src_x2 - src_x1)
    dst_y2 = dst_y1 + (src_y2 - src_y1)

    src = image[src_y1:src_y2, src_x1:src_x2]
    if image.shape[2] == 3:
        buffer[dst_y1:dst_y2, dst_x1:dst_x2] = src
        return

    dst = buffer[dst_y1:dst_y2, dst_x1:dst_x2].astype(np.float32)
    alpha = src[:, :, 3:4].astype(np.float32) / 255.0
    blended = src[:, :, :3].astype(np.float32) * alpha + dst * (1.0 - alpha)
    buffer[dst_y1:dst_y2, dst_x1:dst_x2] = blended.astype(np.uint8)


# 3x5 glyphs, '#' = lit pixel
_GLYPHS: Dict[str, Tuple[str, ...]] = {
    "0": ("###", "#.#", "#.#", "#.#", "###"),
    "1": (".#.", "##.", ".#.", ".#.", "###"),
    "2": ("###", "..#", "###", "#..", "###"),
    "3": ("###", "..#", ".##", "..#", "###"),
    "4": ("#.#", "#.#", "###", "..#", "..#"),
    "5": ("###", "#..", "###", "..#", "###"),
    "6": ("###", "#..", "###", "#.#", "###"),
    "7": ("###", "..#", ".#.", ".#.", ".#."),
    "8": ("###", "#.#", "###", "#.#", "###"),
    "9": ("###", "#.#", "###", "..#", "###"),
    "A": (".#.", "#.#", "###", "#.#", "#.#"),
    "C": (".##", "#..", "#..", "#..", ".##"),
    "E": ("###", "#..", "##.", "#..", "###"),
    "G": (".##", "#..", "#.#", "#.#", ".##"),
    "H": ("#.#", "#.#", "###", "#.#", "#.#"),
    "I": ("###", ".#.", ".#.", ".#.", "###"),
    "M": ("#.#", "###", "#.#", "#.#", "#.#"),
    "N": ("##.", "#.#", "#.#", "#.#", "#.#"),
    "O": (".#.", "#.#", "#.#", "#.#", ".#."),
    "P": ("##.", "#.#", "##.", "#..", "#.."),
    "R": ("##.", "#.#", "##.", "#.#", "#.#"),
    "S": (".##", "#..", ".#.", "..#", "##."),
    "T": ("###", ".#.", ".#.", ".#.", ".#."),
    "U": ("#.#", "#.#", "#.#", "#.#", "###"),
    "V": ("#.#", "#.#", "#.#", ".#.", ".#."),
    "W": ("#.#", "#.#", "#.#", "###", "#.#"),
    "!": (".#.", ".#.", ".#.", "...", ".#."),
}

GLYPH_WIDTH = 3
GLYPH_HEIGHT = 5


def text_width(text: str, scale: int = 1) -> int:
    """Width in pixels of `text` drawn with draw_text."""
    if not text:
        return 0
    return (len(text) * (GLYPH_WIDTH + 1) - 1) * scale


def draw_text(buffer: Buffer, text: str, x: int, y: int, color: Color, scale: int = 1) -> int:
    """Draw text with the built-in 3x5 font. Unknown characters draw as blanks.

    Returns:
        Width of the rendered text in pixels
    """
    h, w = buffer.shape[:2]
    cursor_x = x

    for char in text.upper():
        glyph = _GLYPHS.get(char)
        if glyph is not None:
            for row_idx, row in enumerate(glyph):
                for col_idx, pixel in enumerate(row):
                    if pixel != "#":
                        continue
                    px = cursor_x + col_idx * scale
                    py = y + row_idx * scale
                    x1, y1 = max(0, px), max(0, py)
                    x2, y2 = min(w, px + scale), min(h, py + scale)
                    if x2 > x1 and y2 > y1:
                        buffer[y1:y2, x1:x2] = color
        cursor_x += (GLYPH_WIDTH + 1) * scale

    return cursor_x - x - scale if text else 0
