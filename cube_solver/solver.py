import logging
import random
import re
from dataclasses import dataclass, fields
from typing import List, Optional

import kociemba
import magiccube

from .colors import COLOR_TO_FACELET, STICKERS_PER_FACE, Color
from .errors import SolveError
from .facelet import SOLVED_FACELETS

logger = logging.getLogger(__name__)

MOVE_PATTERN = re.compile(r"^[UDLRFB][2']?$")

# magiccube lays faces out as U,L,F,R,B,D with the solved colors below
MAGICCUBE_FACE_ORDER = ['U', 'L', 'F', 'R', 'B', 'D']
MAGICCUBE_SOLVED = ''.join(c * STICKERS_PER_FACE for c in 'WOGRBY')
KOCIEMBA_FACE_ORDER = ['U', 'R', 'F', 'D', 'L', 'B']

# Solved cube after a single U turn, used to warm up the solver tables
ONE_MOVE_FACELETS = 'UUUUUUUUUBBBRRRRRRRRRFFFFFFDDDDDDDDDFFFLLLLLLLLLBBBBBB'


def validate_moves(moves: List[str]) -> bool:
    """Check if all moves are valid Singmaster notation"""
    return all(MOVE_PATTERN.match(m) for m in moves)


@dataclass
class SolverConfig:
    """Settings for the solving collaborator"""
    scramble_moves: int = 25
    max_depth: int = 24
    log_level: str = 'INFO'

    @classmethod
    def from_dict(cls, cfg: dict) -> 'SolverConfig':
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in cfg.items() if k in known})


class CubeSolver:
    """Solving collaborator backed by kociemba for solving and magiccube for scrambling"""

    def __init__(self, config: Optional[SolverConfig] = None):
        self.config = config or SolverConfig()
        self._initialized = False

    def initialize(self):
        """Build the kociemba pruning tables once by solving a one-move cube"""
        if self._initialized:
            return
        kociemba.solve(ONE_MOVE_FACELETS)
        self._initialized = True
        logger.info("Cube solver initialized")

    def randomize(self) -> str:
        """Scramble a fresh cube and return it as a facelet string"""
        moves = _random_move_sequence(self.config.scramble_moves)
        cube = magiccube.Cube(3, MAGICCUBE_SOLVED)
        cube.rotate(' '.join(moves))
        logger.debug("Scramble: %s", ' '.join(moves))
        return _magiccube_to_facelets(cube.get())

    def solve(self, facelets: str) -> str:
        """Get the move string that solves the cube"""
        try:
            return kociemba.solve(facelets, max_depth=self.config.max_depth)
        except Exception as e:
            raise SolveError(str(e) or SolveError().args[0]) from e

    def is_solved(self, facelets: str) -> bool:
        return facelets == SOLVED_FACELETS


def _magiccube_to_facelets(colors: str) -> str:
    faces = {f: colors[i * STICKERS_PER_FACE:(i + 1) * STICKERS_PER_FACE]
             for i, f in enumerate(MAGICCUBE_FACE_ORDER)}
    return ''.join(COLOR_TO_FACELET[Color(c)] for f in KOCIEMBA_FACE_ORDER for c in faces[f])


def _random_move_sequence(length: int) -> List[str]:
    """Generate non-redundant random move sequence"""
    faces = ['U', 'D', 'L', 'R', 'F', 'B']
    modifiers = ['', '2', "'"]
    opposite = {'U': 'D', 'D': 'U', 'L': 'R', 'R': 'L', 'F': 'B', 'B': 'F'}

    moves = []
    prev_face = None
    prev_prev_face = None

    while len(moves) < length:
        face = random.choice(faces)

        # Avoid same face twice in a row
        if face == prev_face:
            continue

        # Avoid opposite faces three times (e.g., U D U is redundant)
        if prev_prev_face and face == prev_prev_face and opposite[face] == prev_face:
            continue

        moves.append(face + random.choice(modifiers))
        prev_prev_face = prev_face
        prev_face = face

    return moves
