class CubeError(Exception):
    """Base class for recoverable cube errors shown to the user"""


class ValidationError(CubeError):
    """Color-balance invariant violated"""

    def __init__(self, message: str = "cube configuration is not balanced: each color must appear exactly 9 times"):
        super().__init__(message)


class ScrambleError(CubeError):
    """The solving collaborator could not produce a usable scramble"""

    def __init__(self, message: str = "Failed to scramble cube."):
        super().__init__(message)


class SolveError(CubeError):
    """The solving collaborator failed or raised during solve"""

    def __init__(self, message: str = "unexpected error while solving"):
        super().__init__(message)
