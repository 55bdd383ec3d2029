import random

import pytest

from samtris.generators import (
    FixedTetrominoGenerator,
    RandomTetrominoGenerator,
    TetrominoGenerator,
)
from samtris.position import Position
from samtris.tetromino_type import TetrominoType


def test_generate_creates_tetromino_instance_at_given_position():
    sut = RandomTetrominoGenerator()
    position = Position(5, 10)

    result = sut.generate(position)

    assert result.position == position
    assert result.tetromino_type in list(TetrominoType)


def test_generate_produces_different_types_over_multiple_calls():
    sut = RandomTetrominoGenerator()
    position = Position(0, 0)

    generated_types = {sut.generate(position).tetromino_type for _ in range(100)}

    assert len(generated_types) > 1


def test_random_generator_with_same_seed_repeats_sequence():
    first = RandomTetrominoGenerator(random.Random(42))
    second = RandomTetrominoGenerator(random.Random(42))
    position = Position(0, 0)

    first_types = [first.generate(position).tetromino_type for _ in range(20)]
    second_types = [second.generate(position).tetromino_type for _ in range(20)]

    assert first_types == second_types


@pytest.mark.parametrize("tetromino_type", list(TetrominoType))
def test_fixed_generator_always_produces_its_type(tetromino_type):
    sut = FixedTetrominoGenerator(tetromino_type)
    position = Position(3, 0)

    results = [sut.generate(position) for _ in range(5)]

    assert all(r.tetromino_type == tetromino_type for r in results)
    assert all(r.position == position for r in results)


def test_fixed_generator_returns_independent_instances():
    sut = FixedTetrominoGenerator(TetrominoType.T)
    first = sut.generate(Position(0, 0))
    second = sut.generate(Position(0, 0))

    first.rotate_clockwise()

    assert second.rotation_index.index == 0
    assert first.rotation_index.index == 1


def test_generator_base_cannot_be_instantiated():
    with pytest.raises(TypeError):
        TetrominoGenerator()