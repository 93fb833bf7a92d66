import logging

from .colors import FACE_ORDER, Color, Face
from .errors import CubeError, ScrambleError, SolveError, ValidationError
from .facelet import SOLVED_FACELETS, from_facelet_string, to_facelet_string
from .orchestrator import SolveOrchestrator, SolveResult, SolveStatus
from .scramble import ScrambleGenerator
from .session import CubeSession
from .solver import CubeSolver, SolverConfig, validate_moves
from .state import CubeState, CubeStore
from .validator import color_counts, is_valid

logging.getLogger(__name__).addHandler(logging.NullHandler())
