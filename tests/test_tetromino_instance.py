from samtris.position import Position
from samtris.rotation_index import RotationIndex
from samtris.tetromino_definitions import TetrominoDefinitions
from samtris.tetromino_instance import TetrominoInstance
from samtris.tetromino_type import TetrominoType


def make(tetromino_type, position):
    return TetrominoInstance(tetromino_type, position, TetrominoDefinitions())


def test_tetromino_instance_starts_with_given_position_and_rotation_zero():
    position = Position(5, 10)

    sut = make(TetrominoType.O, position)

    assert sut.tetromino_type == TetrominoType.O
    assert sut.position == position
    assert sut.rotation_index == RotationIndex(0, 1)


def test_tetromino_instance_returns_correct_world_blocks():
    sut = make(TetrominoType.O, Position(5, 5))

    result = sut.world_blocks()

    assert result == [
        Position(6, 6),
        Position(7, 6),
        Position(6, 7),
        Position(7, 7),
    ]


def test_move_down_increases_y_coordinate():
    sut = make(TetrominoType.T, Position(5, 5))

    sut.move_down()

    assert sut.position == Position(5, 6)
    assert sut.rotation_index == RotationIndex(0, 4)


def test_move_left_decreases_x_coordinate():
    sut = make(TetrominoType.T, Position(5, 5))

    sut.move_left()

    assert sut.position == Position(4, 5)
    assert sut.rotation_index == RotationIndex(0, 4)


def test_move_right_increases_x_coordinate():
    sut = make(TetrominoType.T, Position(5, 5))

    sut.move_right()

    assert sut.position == Position(6, 5)
    assert sut.rotation_index == RotationIndex(0, 4)


def test_rotate_clockwise_advances_rotation_index():
    sut = make(TetrominoType.T, Position(5, 5))

    sut.rotate_clockwise()

    assert sut.rotation_index == RotationIndex(1, 4)
    assert sut.position == Position(5, 5)


def test_rotate_counterclockwise_decreases_rotation_index():
    sut = make(TetrominoType.T, Position(5, 5))

    sut.rotate_counterclockwise()

    assert sut.rotation_index == RotationIndex(3, 4)
    assert sut.position == Position(5, 5)


def test_copy_is_independent_of_original():
    original = make(TetrominoType.T, Position(5, 5))

    clone = original.copy()
    clone.rotate_clockwise()
    clone.move_down()

    assert original.rotation_index == RotationIndex(0, 4)
    assert original.position == Position(5, 5)
    assert clone.rotation_index == RotationIndex(1, 4)
    assert clone.position == Position(5, 6)
    assert clone.tetromino_type == TetrominoType.T


def test_default_definitions_are_used_when_none_given():
    sut = TetrominoInstance(TetrominoType.O, Position(0, 0))

    assert sut.world_blocks() == [
        Position(1, 1),
        Position(2, 1),
        Position(1, 2),
        Position(2, 2),
    ]