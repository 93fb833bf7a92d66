"""Conversion between the color model and the solver's 54-character facelet string.

The facelet string lists the U, R, F, D, L and B faces in that order, nine
stickers each, using the face letters as facelet identifiers::

    UUUUUUUUURRRRRRRRRFFFFFFFFFDDDDDDDDDLLLLLLLLLBBBBBBBBB

Parsing is lenient because scrambles come from an external randomizer:
unrecognized letters become White and every face is padded or truncated to
exactly nine stickers. Each correction is logged.
"""
import logging

from .colors import (
    COLOR_TO_FACELET, DEFAULT_COLOR, FACE_ORDER, FACELET_TO_COLOR, STICKERS_PER_FACE,
)
from .state import CubeState

logger = logging.getLogger(__name__)

FACELET_COUNT = STICKERS_PER_FACE * len(FACE_ORDER)
SOLVED_FACELETS = ''.join(f.value * STICKERS_PER_FACE for f in FACE_ORDER)


def to_facelet_string(state: CubeState) -> str:
    """Convert for kociemba solver"""
    return ''.join(COLOR_TO_FACELET[c] for f in FACE_ORDER for c in state.faces[f])


def from_facelet_string(text: str) -> CubeState:
    """Parse a facelet string, defaulting unknown letters to White"""
    if len(text) != FACELET_COUNT:
        logger.debug("Facelet string has %d characters, expected %d", len(text), FACELET_COUNT)

    faces = {}
    for i, face in enumerate(FACE_ORDER):
        chunk = text[i * STICKERS_PER_FACE:(i + 1) * STICKERS_PER_FACE]
        colors = []
        for letter in chunk:
            color = FACELET_TO_COLOR.get(letter)
            if color is None:
                logger.debug("Unknown facelet %r on face %s, using %s", letter, face.value, DEFAULT_COLOR.name)
                color = DEFAULT_COLOR
            colors.append(color)
        colors += [DEFAULT_COLOR] * (STICKERS_PER_FACE - len(colors))
        faces[face] = colors
    return CubeState(faces)
