import pytest

from samtris.position import Position
from samtris.rotation_index import RotationIndex
from samtris.tetromino_definition import TetrominoDefinition
from samtris.tetromino_type import TetrominoType


@pytest.mark.parametrize(
    "matrices, rotation, position, expected",
    [
        ([[[1]]], RotationIndex(0, 1), Position(0, 0), True),
        ([[[1]]], RotationIndex(0, 1), Position(-1, -1), False),
        ([[[0]]], RotationIndex(0, 1), Position(0, 0), False),
        ([[[1]]], RotationIndex(0, 1), Position(1, 0), False),
        ([[[1]]], RotationIndex(0, 1), Position(0, 1), False),
        ([[[1]]], RotationIndex(1, 1), Position(0, 0), False),
        ([[[0]], [[1]]], RotationIndex(1, 2), Position(0, 0), True),
    ],
)
def test_has_block_at_matches_matrix_content(matrices, rotation, position, expected):
    definition = TetrominoDefinition(TetrominoType.O, matrices)
    assert definition.has_block_at(position, rotation) is expected


def _check(definition, last_rotation, expected_diagonal):
    results = [
        definition.has_block_at(Position(i, i), last_rotation) for i in range(4)
    ]
    assert results == expected_diagonal


def test_create_o_creates_proper_tetromino_definition():
    definition = TetrominoDefinition.create_o()
    assert definition.nr_rotations == 1
    assert definition.tetromino_type is TetrominoType.O
    _check(definition, RotationIndex(0, 1), [False, True, True, False])


def test_create_i_creates_proper_tetromino_definition():
    definition = TetrominoDefinition.create_i()
    assert definition.nr_rotations == 2
    _check(definition, RotationIndex(1, 2), [False, True, False, False])


def test_create_z_creates_proper_tetromino_definition():
    definition = TetrominoDefinition.create_z()
    assert definition.nr_rotations == 2
    _check(definition, RotationIndex(1, 2), [False, True, False, False])


def test_create_s_creates_proper_tetromino_definition():
    definition = TetrominoDefinition.create_s()
    assert definition.nr_rotations == 2
    _check(definition, RotationIndex(1, 2), [True, True, False, False])


def test_create_t_creates_proper_tetromino_definition():
    definition = TetrominoDefinition.create_t()
    assert definition.nr_rotations == 4
    _check(definition, RotationIndex(3, 4), [False, True, False, False])


def test_create_j_creates_proper_tetromino_definition():
    definition = TetrominoDefinition.create_j()
    assert definition.nr_rotations == 4
    _check(definition, RotationIndex(3, 4), [False, False, True, False])


def test_create_l_creates_proper_tetromino_definition():
    definition = TetrominoDefinition.create_l()
    assert definition.nr_rotations == 4
    _check(definition, RotationIndex(3, 4), [False, False, True, False])


def test_block_positions_raises_with_invalid_rotation_index():
    definition = TetrominoDefinition.create_o()
    with pytest.raises(IndexError, match="Rotation index out of bounds"):
        definition.block_positions(RotationIndex(1, 2))


def test_block_positions_of_o_are_row_major():
    definition = TetrominoDefinition.create_o()
    assert definition.block_positions(RotationIndex(0, 1)) == [
        Position(1, 1),
        Position(2, 1),
        Position(1, 2),
        Position(2, 2),
    ]


@pytest.mark.parametrize(
    "factory",
    [
        TetrominoDefinition.create_i,
        TetrominoDefinition.create_o,
        TetrominoDefinition.create_t,
        TetrominoDefinition.create_z,
        TetrominoDefinition.create_s,
        TetrominoDefinition.create_j,
        TetrominoDefinition.create_l,
    ],
)
def test_every_rotation_has_four_blocks(factory):
    definition = factory()
    counts = [
        len(definition.block_positions(RotationIndex(i, definition.nr_rotations)))
        for i in range(definition.nr_rotations)
    ]
    assert counts == [4] * definition.nr_rotations