import logging
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Sequence

from .colors import (
    CENTER, DEFAULT_COLOR, FACE_ORDER, SOLVED_COLORS, STICKERS_PER_FACE, Color, Face,
)

logger = logging.getLogger(__name__)


@dataclass
class CubeState:
    """Rubik's cube sticker colors, 9 per face in row-major order"""
    faces: Dict[Face, List[Color]] = None

    def __post_init__(self):
        if self.faces is None:
            self.faces = {f: [SOLVED_COLORS[f]] * STICKERS_PER_FACE for f in FACE_ORDER}

    @classmethod
    def solved(cls) -> 'CubeState':
        return cls()

    def copy(self) -> 'CubeState':
        return CubeState({f: list(colors) for f, colors in self.faces.items()})

    def __getitem__(self, face) -> List[Color]:
        return self.faces[Face(face)]

    def center(self, face) -> Color:
        return self[face][CENTER]

    def to_string(self) -> str:
        """Convert to unfolded net display format"""
        u, r, f, d, l, b = ([Color(c).value for c in self[face]] for face in FACE_ORDER)

        return f"""
        {u[0]} {u[1]} {u[2]}
        {u[3]} {u[4]} {u[5]}
        {u[6]} {u[7]} {u[8]}

{l[0]} {l[1]} {l[2]}   {f[0]} {f[1]} {f[2]}   {r[0]} {r[1]} {r[2]}   {b[0]} {b[1]} {b[2]}
{l[3]} {l[4]} {l[5]}   {f[3]} {f[4]} {f[5]}   {r[3]} {r[4]} {r[5]}   {b[3]} {b[4]} {b[5]}
{l[6]} {l[7]} {l[8]}   {f[6]} {f[7]} {f[8]}   {r[6]} {r[7]} {r[8]}   {b[6]} {b[7]} {b[8]}

        {d[0]} {d[1]} {d[2]}
        {d[3]} {d[4]} {d[5]}
        {d[6]} {d[7]} {d[8]}"""


class CubeStore:
    """Owner of the single mutable CubeState.

    Every mutation bumps ``generation`` so that work started against an older
    state can tell it has been superseded.
    """

    def __init__(self, state: Optional[CubeState] = None):
        self._state = CubeState()
        self.generation = 0
        if state is not None:
            self.replace_all(state)

    @property
    def state(self) -> CubeState:
        """Copy of the current state"""
        return self._state.copy()

    def set_sticker(self, face, index: int, color) -> None:
        """Replace the color at one position; the cube may be left unbalanced"""
        face, color = Face(face), Color(color)
        if not 0 <= index < STICKERS_PER_FACE:
            raise IndexError(f"Sticker index {index} out of range 0-{STICKERS_PER_FACE - 1}")
        self._state.faces[face][index] = color
        self._touch()

    def replace_all(self, new_state) -> None:
        """Swap the whole state, falling back to an all-default face for malformed faces"""
        faces = new_state.faces if isinstance(new_state, CubeState) else new_state
        self._state = CubeState(_normalize_faces(faces))
        self._touch()

    def reset(self) -> None:
        self.replace_all(CubeState.solved())

    def is_solved(self) -> bool:
        """Check if the state equals the canonical solved cube"""
        return self._state == CubeState.solved()

    def _touch(self):
        self.generation += 1
        logger.debug("Cube state changed (generation %d)", self.generation)


def _normalize_faces(faces: Mapping) -> Dict[Face, List[Color]]:
    result = {}
    for face in FACE_ORDER:
        colors: Optional[Sequence] = faces.get(face)
        if colors is None or len(colors) != STICKERS_PER_FACE:
            logger.warning("Face %s is malformed, replacing it with %s", face.value, DEFAULT_COLOR.name)
            result[face] = [DEFAULT_COLOR] * STICKERS_PER_FACE
        else:
            result[face] = [Color(c) for c in colors]
    return result
