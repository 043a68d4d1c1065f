"""Tests for canvas partitions."""

from pixelart.canvas import PixelCanvas, CanvasPartition, Pen
from pixelart.pixels import WHITE, RED, GREEN, BLUE
from pixelart.pixels.position import LEFT_CENTER


def red_cells(canvas):
    return [p.expand() for p in canvas.iter_pixels().filter_color(RED).positions()]


def test_partition_copies_region():
    """Test a new partition starts with the source cells it covers."""
    canvas = PixelCanvas(5)
    canvas[(1, 1)] = BLUE
    part = CanvasPartition(canvas, (1, 1), 2, 2)
    assert part.color_at((0, 0)) == BLUE
    assert part.color_at((1, 1)) == WHITE
    assert [p.expand() for p in part.positions()] == [(1, 1), (1, 2), (2, 1), (2, 2)]


def test_update_color_writes_source():
    """Test coloring a partition colors the source region."""
    canvas = PixelCanvas(5)
    part = canvas.partition((0, 0), (1, 1))
    part.update_color(RED)
    assert red_cells(canvas) == [(0, 0), (0, 1), (1, 0), (1, 1)]


def test_crop_to_restores_previous_area():
    """Test crop_to moves the partition like a sprite."""
    canvas = PixelCanvas(5)
    part = CanvasPartition(canvas, (0, 0), 2, 2)
    part.update_color(RED)

    part.crop_to((0, 1))
    assert part.position.expand() == (0, 1)
    assert red_cells(canvas) == [(0, 1), (0, 2), (1, 1), (1, 2)]
    assert canvas.color_at((0, 0)) == WHITE


def test_copy_to_leaves_previous_area():
    """Test copy_to stamps the partition again elsewhere."""
    canvas = PixelCanvas(5)
    part = CanvasPartition(canvas, (0, 0), 2, 2)
    part.update_color(RED)

    part.copy_to((3, 3))
    assert len(red_cells(canvas)) == 8

    # Cropping away from the copy restores only the copied area
    part.crop_to((4, 4))
    assert canvas.color_at((3, 3)) == WHITE
    assert canvas.color_at((4, 4)) == RED
    assert canvas.color_at((0, 0)) == RED
    assert len(list(part.positions())) == 1


def test_pen_on_partition():
    """Test drawing on a partition with a pen and writing it back."""
    canvas = PixelCanvas(6, fill=BLUE)
    part = CanvasPartition(canvas, (2, 2), 3, 3)
    part.clear()
    (Pen(RED).attach(part, LEFT_CENTER)
        .start()
        .right(1)
        .branch(lambda pen: pen.up(1))
        .branch(lambda pen: pen.down(1))
        .branch(lambda pen: pen.right(1)))
    part.write_source()

    assert red_cells(canvas) == [(2, 3), (3, 2), (3, 3), (3, 4), (4, 3)]
    # Empty partition cells keep the source color
    assert canvas.color_at((2, 2)) == BLUE


def test_crop_to_keeps_later_source_changes():
    """Test crop_to restores what is under the partition now, not at the first paste."""
    canvas = PixelCanvas(3, fill=BLUE)
    part = CanvasPartition(canvas, (0, 0), 1, 1)
    part.update_color(RED)

    canvas.fill(GREEN)
    part.write_source()
    part.crop_to((0, 1))

    assert canvas.color_at((0, 0)) == GREEN
    assert canvas.color_at((0, 1)) == RED


def test_crop_to_leaves_cells_painted_over_the_partition():
    """Test cells changed after the last paste are not overwritten by crop_to."""
    canvas = PixelCanvas(4, fill=WHITE)
    part = CanvasPartition(canvas, (0, 0), 2, 2)
    part.update_color(RED)

    # Repaint the body over part of the partition
    canvas[(0, 0)] = BLUE
    part.crop_to((2, 2))

    assert canvas.color_at((0, 0)) == BLUE
    assert canvas.color_at((0, 1)) == WHITE
    assert canvas.color_at((1, 1)) == WHITE
    assert red_cells(canvas) == [(2, 2), (2, 3), (3, 2), (3, 3)]
