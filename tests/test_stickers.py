import pytest

from algodrills.stickers import attach_stickers, rotate


def test_rotate_square():
    assert rotate([[1, 2], [3, 4]]) == [[3, 1], [4, 2]]


def test_rotate_swaps_dimensions():
    shape = [[1, 0, 1], [1, 1, 0]]
    rotated = rotate(shape)
    assert (len(rotated), len(rotated[0])) == (len(shape[0]), len(shape))


def test_four_rotations_are_identity():
    shape = [[1, 0, 1], [1, 1, 0]]
    result = shape
    for _ in range(4):
        result = rotate(result)
    assert result == shape


def test_full_sticker_covers_its_cells():
    sticker = [[1, 1], [1, 0]]
    assert attach_stickers(3, 3, [sticker]) == sum(map(sum, sticker))


def test_sticker_rotated_to_fit():
    sticker = [[1, 1, 1]]
    assert attach_stickers(3, 1, [sticker]) == sum(sticker[0])


def test_too_large_sticker_discarded():
    assert attach_stickers(2, 2, [[[1, 1, 1]]]) == 0


def test_second_full_sticker_has_no_room():
    full = [[1, 1], [1, 1]]
    assert attach_stickers(2, 2, [full, full]) == 2 * 2


def test_small_sticker_fills_hole():
    assert attach_stickers(2, 2, [[[1, 0], [1, 1]], [[1]]]) == 2 * 2


def test_covered_never_exceeds_area():
    stickers = [[[1, 1, 1], [0, 1, 0]], [[1, 1]], [[1], [1], [1]], [[1, 1], [1, 1]]]
    assert attach_stickers(3, 4, stickers) <= 3 * 4


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        attach_stickers(-1, 2, [])