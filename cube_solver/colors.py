from enum import Enum
from typing import Dict


class Face(str, Enum):
    """Cube faces, declared in canonical facelet order"""
    U = 'U'
    R = 'R'
    F = 'F'
    D = 'D'
    L = 'L'
    B = 'B'

    @property
    def label(self) -> str:
        return FACE_LABELS[self]


class Color(str, Enum):
    """Logical sticker colors"""
    WHITE = 'W'
    RED = 'R'
    GREEN = 'G'
    YELLOW = 'Y'
    ORANGE = 'O'
    BLUE = 'B'

    @property
    def display_name(self) -> str:
        return self.name.capitalize()

    @property
    def class_name(self) -> str:
        return f"color-{self.name.lower()}"

    @property
    def home_face(self) -> Face:
        return Face(COLOR_TO_FACELET[self])


FACE_ORDER = tuple(Face)
FACE_LABELS = {Face.U: 'TOP', Face.R: 'RIGHT', Face.F: 'FRONT',
               Face.D: 'DOWN', Face.L: 'LEFT', Face.B: 'BACK'}

# Face each color sits on when the cube is solved
SOLVED_COLORS: Dict[Face, Color] = {
    Face.U: Color.WHITE,
    Face.R: Color.RED,
    Face.F: Color.GREEN,
    Face.D: Color.YELLOW,
    Face.L: Color.ORANGE,
    Face.B: Color.BLUE,
}

COLOR_TO_FACELET: Dict[Color, str] = {c: f.value for f, c in SOLVED_COLORS.items()}
FACELET_TO_COLOR: Dict[str, Color] = {
    'U': Color.WHITE,
    'R': Color.RED,
    'F': Color.GREEN,
    'D': Color.YELLOW,
    'L': Color.ORANGE,
    'B': Color.BLUE,
}

DEFAULT_COLOR = Color.WHITE
STICKERS_PER_FACE = 9
CENTER = 4


def check_tables(color_to_letter: Dict[Color, str], letter_to_color: Dict[str, Color]):
    """Raise ValueError unless the two tables are exact inverses over all colors and faces"""
    letters = {f.value for f in Face}
    if set(color_to_letter) != set(Color):
        raise ValueError(f"Unmapped colors: {set(Color) - set(color_to_letter)}")
    if set(letter_to_color) != letters:
        raise ValueError(f"Unmapped facelet letters: {set(letter_to_color) ^ letters}")
    for color, letter in color_to_letter.items():
        if letter_to_color.get(letter) != color:
            raise ValueError(f"{color.name} maps to {letter!r} but {letter!r} maps back to {letter_to_color.get(letter)}")


check_tables(COLOR_TO_FACELET, FACELET_TO_COLOR)
