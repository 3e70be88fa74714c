"""Generation and parsing failures.

All of these are raised before the grid is touched, so callers never see a
half-built maze. They subclass ValueError because every one of them means
"the arguments were wrong".
"""


class MazeError(ValueError):
    """Base class for everything faemaze raises on bad input."""


class InvalidDimension(MazeError):
    def __init__(self, width: int, height: int):
        super().__init__(f"width and height must be >= 3 (got {width}x{height})")
        self.width = width
        self.height = height


class InvalidEntranceCount(MazeError):
    def __init__(self, count: int):
        super().__init__(f"number_of_entrances must be >= 1 (got {count})")
        self.count = count


class UnsupportedGridSize(MazeError):
    def __init__(self, cell_width: int, cell_height: int):
        super().__init__(
            f"grid too small for cell lattice (cells {cell_width}x{cell_height})"
        )
        self.cell_width = cell_width
        self.cell_height = cell_height


class MazeFormatError(MazeError):
    pass
