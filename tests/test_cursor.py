import pytest

from paint2d.canvas import Cursor, Direction


def test_cursor_starts_at_origin() -> None:
    cursor = Cursor(10, 5)

    assert cursor.position == (0, 0)
    assert cursor.extent == (10, 5)


def test_move_left_wraps_from_lower_bound() -> None:
    cursor = Cursor(10, 5, row=2)

    cursor.move(Direction.LEFT, 5)

    assert cursor.row == 7


def test_move_right_wraps_from_upper_bound() -> None:
    cursor = Cursor(10, 5, row=8)

    cursor.move(Direction.RIGHT, 5)

    assert cursor.row == 3


def test_vertical_moves_use_height() -> None:
    cursor = Cursor(10, 5)

    cursor.move(Direction.UP, 1)
    assert cursor.col == 4

    cursor.move(Direction.DOWN, 3)
    assert cursor.col == 2
    assert cursor.row == 0


@pytest.mark.parametrize("extent", [1, 2, 7, 10])
def test_left_then_right_is_identity(extent: int) -> None:
    for start in range(extent):
        for distance in range(1, extent + 1):
            cursor = Cursor(extent, 1, row=start)

            cursor.move(Direction.LEFT, distance)
            assert 0 <= cursor.row < extent
            cursor.move(Direction.RIGHT, distance)

            assert cursor.row == start


def test_distance_larger_than_extent_still_wraps() -> None:
    cursor = Cursor(4, 4, row=1)

    cursor.move(Direction.LEFT, 11)

    assert cursor.row == 2


def test_zero_distance_is_noop() -> None:
    cursor = Cursor(4, 4, row=3, col=2)

    cursor.move(Direction.RIGHT, 0)

    assert cursor.position == (3, 2)


def test_negative_distance_rejected() -> None:
    with pytest.raises(ValueError):
        Cursor(4, 4).move(Direction.LEFT, -1)


def test_direction_accepts_string_values() -> None:
    cursor = Cursor(4, 4)

    cursor.move("down", 1)  # type: ignore[arg-type]

    assert cursor.col == 1


def test_resize_does_not_move_until_normalized() -> None:
    cursor = Cursor(20, 10, row=9, col=7)

    cursor.resize(5, 10)
    assert cursor.position == (9, 7)

    cursor.normalize()
    assert cursor.position == (4, 7)


def test_zero_extent_rejected() -> None:
    with pytest.raises(ValueError):
        Cursor(0, 3)
    with pytest.raises(ValueError):
        Cursor(3, 3).resize(3, 0)
