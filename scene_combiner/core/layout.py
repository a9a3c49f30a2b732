from enum import Enum
from typing import List, NamedTuple, Sequence, Tuple

Size = Tuple[int, int]


class Layout(str, Enum):
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"
    STRIP = "strip"


class Placement(NamedTuple):
    """Where one source image lands on the canvas, already scaled."""

    left: int
    top: int
    width: int
    height: int


class Slot(NamedTuple):
    """Region of the canvas allotted to one image."""

    left: int
    top: int
    width: int
    height: int


class CanvasLayout(NamedTuple):
    canvas: Size
    slots: List[Slot]
    placements: List[Placement]


def check_size(size: Size) -> None:
    width, height = size
    if width <= 0 or height <= 0:
        raise ValueError(f"Image has invalid dimensions {width}x{height}")


def fit_into(size: Size, slot: Slot) -> Placement:
    """
    Scale `size` to fit `slot` and center it there.

    Equivalent to flooring size * min(slot_w / w, slot_h / h), done in integers
    so an exact fit never comes out one pixel short.
    """
    check_size(size)
    width, height = size

    if slot.width * height <= slot.height * width:
        scaled = (slot.width, max(1, slot.width * height // width))
    else:
        scaled = (max(1, slot.height * width // height), slot.height)

    left = slot.left + (slot.width - scaled[0]) // 2
    top = slot.top + (slot.height - scaled[1]) // 2
    return Placement(left, top, scaled[0], scaled[1])


def split_span(total: int, count: int, padding: int) -> List[int]:
    """
    Divide `total` into `count` spans separated (and surrounded) by padding.

    The remainder of the integer division goes one pixel at a time to the
    leading spans, so sum(spans) + (count + 1) * padding == total.
    """
    available = total - (count + 1) * padding
    if available < count:
        raise ValueError(
            f"Padding {padding} leaves no room for {count} images in {total}px"
        )
    base, remainder = divmod(available, count)
    return [base + 1 if i < remainder else base for i in range(count)]


def stacked_slots(canvas: Size, count: int, padding: int, layout: Layout) -> List[Slot]:
    canvas_width, canvas_height = canvas

    if count == 1:
        return [Slot(0, 0, canvas_width, canvas_height)]

    horizontal = layout == Layout.HORIZONTAL
    main_total = canvas_width if horizontal else canvas_height
    cross = (canvas_height if horizontal else canvas_width) - 2 * padding
    if cross < 1:
        raise ValueError(f"Padding {padding} leaves no room on a {canvas_width}x{canvas_height} canvas")

    slots = []
    offset = padding
    for span in split_span(main_total, count, padding):
        if horizontal:
            slots.append(Slot(offset, padding, span, cross))
        else:
            slots.append(Slot(padding, offset, cross, span))
        offset += span + padding
    return slots


def compute_layout(
    sizes: Sequence[Size],
    canvas: Size = (1080, 1920),
    padding: int = 20,
    layout: Layout = Layout.VERTICAL,
) -> CanvasLayout:
    """Compute the canvas size and per-image placements for `sizes`."""
    layout = Layout(layout)

    if not sizes:
        return CanvasLayout(canvas, [], [])

    # A lone image is always centered on the fixed canvas, whatever the layout
    if layout == Layout.STRIP and len(sizes) > 1:
        return strip_layout(sizes)

    slots = stacked_slots(canvas, len(sizes), padding, layout)
    placements = [fit_into(size, slot) for size, slot in zip(sizes, slots)]
    return CanvasLayout(canvas, slots, placements)


def strip_layout(sizes: Sequence[Size]) -> CanvasLayout:
    """Side-by-side strip at natural widths, every image fit into the tallest height."""
    for size in sizes:
        check_size(size)

    max_height = max(height for _, height in sizes)
    slots = []
    x_offset = 0
    for width, _ in sizes:
        slots.append(Slot(x_offset, 0, width, max_height))
        x_offset += width

    placements = [fit_into(size, slot) for size, slot in zip(sizes, slots)]
    return CanvasLayout((x_offset, max_height), slots, placements)
