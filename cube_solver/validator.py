import logging
from collections import Counter

from .colors import FACE_ORDER, STICKERS_PER_FACE, Color
from .errors import ValidationError
from .state import CubeState

logger = logging.getLogger(__name__)


def color_counts(state: CubeState) -> Counter:
    """Count sticker colors over the whole cube"""
    return Counter(c for f in FACE_ORDER for c in state.faces[f])


def is_valid(state: CubeState) -> bool:
    """Check every color appears exactly 9 times"""
    try:
        counts = color_counts(state)
    except Exception as e:
        logger.error("Validation error: %s", e)
        return False

    valid = True
    for color in Color:
        if counts[color] != STICKERS_PER_FACE:
            logger.warning("Color %s appears %d times, expected %d", color.value, counts[color], STICKERS_PER_FACE)
            valid = False
    return valid


def check(state: CubeState) -> None:
    if not is_valid(state):
        raise ValidationError()
