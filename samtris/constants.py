"""Fixed dimensions and layout values for the game window and playfield."""

BLOCK_SIZE = 16  # Length of a block in pixels (also its height)
PLAYFIELD_WIDTH = 10  # In blocks
PLAYFIELD_HEIGHT = 20  # In blocks
TETRIS_SPAWN_X = 3  # In blocks within the playfield, x = 0 is left
TETRIS_SPAWN_Y = 0  # In blocks within the playfield, y = 0 is up
WINDOW_WIDTH_IN_BLOCKS = 40
WINDOW_HEIGHT_IN_BLOCKS = 25
PLAYFIELD_OFFSET_X = (WINDOW_WIDTH_IN_BLOCKS - PLAYFIELD_WIDTH) * BLOCK_SIZE // 2
PLAYFIELD_OFFSET_Y = (WINDOW_HEIGHT_IN_BLOCKS - PLAYFIELD_HEIGHT) * BLOCK_SIZE // 2
PLAYFIELD_BORDER_WIDTH = 1