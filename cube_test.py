import itertools

import pytest

from cube_solver import CubeState, CubeStore, Color, Face, color_counts, is_valid
from cube_solver.colors import COLOR_TO_FACELET, FACELET_TO_COLOR, FACE_ORDER, check_tables
from cube_solver.errors import ValidationError
from cube_solver.facelet import SOLVED_FACELETS, from_facelet_string, to_facelet_string
from cube_solver.validator import check

SCRAMBLED = 'DRLUUBFBRBLURRLRUBLRDDFDLFUFUFFDBRDUBRUFLLFDDBFLUBLRBD'


def unbalanced_state():
    """10 White and 8 Yellow stickers"""
    state = CubeState()
    state.faces[Face.D][0] = Color.WHITE
    return state


# Color Model Tests
def test_color_tables():
    """Test color and facelet tables are exact inverses"""
    check_tables(COLOR_TO_FACELET, FACELET_TO_COLOR)
    assert COLOR_TO_FACELET[Color.WHITE] == 'U'
    assert COLOR_TO_FACELET[Color.GREEN] == 'F'
    assert FACELET_TO_COLOR['L'] == Color.ORANGE
    assert Color.BLUE.home_face == Face.B
    assert [f.value for f in FACE_ORDER] == ['U', 'R', 'F', 'D', 'L', 'B']


def test_color_tables_reject_gaps():
    """Test broken tables are reported"""
    missing = {c: l for c, l in COLOR_TO_FACELET.items() if c != Color.RED}
    with pytest.raises(ValueError):
        check_tables(missing, FACELET_TO_COLOR)

    swapped = dict(FACELET_TO_COLOR, U=Color.RED, R=Color.WHITE)
    with pytest.raises(ValueError):
        check_tables(COLOR_TO_FACELET, swapped)


def test_color_properties():
    """Test display properties"""
    assert Color.ORANGE.display_name == 'Orange'
    assert Color.WHITE.class_name == 'color-white'
    assert Face.D.label == 'DOWN'
    assert Face.U.label == 'TOP'


# State Tests
def test_cube_state_creation():
    """Test state initialization"""
    cube = CubeState()
    assert cube.faces[Face.U] == [Color.WHITE] * 9
    assert cube['R'] == [Color.RED] * 9
    assert cube.center(Face.B) == Color.BLUE
    assert cube == CubeState.solved()

    copy = cube.copy()
    copy.faces[Face.U][0] = Color.RED
    assert cube.faces[Face.U][0] == Color.WHITE


def test_net_display():
    """Test unfolded net rendering"""
    lines = [line.split() for line in CubeState().to_string().strip('\n').split('\n') if line.strip()]
    assert lines[0] == ['W', 'W', 'W']
    assert lines[3] == ['O'] * 3 + ['G'] * 3 + ['R'] * 3 + ['B'] * 3
    assert lines[-1] == ['Y', 'Y', 'Y']


def test_store_starts_solved():
    store = CubeStore()
    assert store.is_solved()
    assert store.state == CubeState.solved()


def test_set_sticker():
    """Test point mutation allows unbalanced cubes"""
    store = CubeStore()
    generation = store.generation
    store.set_sticker(Face.U, 0, Color.RED)
    assert store.state.faces[Face.U][0] == Color.RED
    assert store.generation == generation + 1
    assert not store.is_solved()
    assert not is_valid(store.state)

    # Centers can be painted like any other sticker
    store.set_sticker('F', 4, 'Y')
    assert store.state.center(Face.F) == Color.YELLOW


def test_set_sticker_rejects_bad_positions():
    store = CubeStore()
    with pytest.raises(IndexError):
        store.set_sticker(Face.U, 9, Color.RED)
    with pytest.raises(ValueError):
        store.set_sticker('X', 0, Color.RED)
    with pytest.raises(ValueError):
        store.set_sticker(Face.U, 0, 'P')
    assert store.is_solved()


def test_state_is_owned_by_store():
    """Test readers cannot mutate the store's cube"""
    store = CubeStore()
    state = store.state
    state.faces[Face.U][0] = Color.BLUE
    assert store.is_solved()


def test_replace_all_normalizes_malformed_faces():
    """Test faces without exactly 9 entries fall back to White"""
    store = CubeStore()
    faces = CubeState().faces
    faces[Face.R] = [Color.RED] * 8
    del faces[Face.B]
    store.replace_all(faces)

    state = store.state
    assert state.faces[Face.R] == [Color.WHITE] * 9
    assert state.faces[Face.B] == [Color.WHITE] * 9
    assert state.faces[Face.F] == [Color.GREEN] * 9


def test_reset():
    store = CubeStore(from_facelet_string(SCRAMBLED))
    assert not store.is_solved()
    store.reset()
    assert store.is_solved()


def test_is_solved_single_deviation():
    """Test any single-sticker change breaks the solved check"""
    for face, index in itertools.product(FACE_ORDER, range(9)):
        store = CubeStore()
        current = store.state.faces[face][index]
        other = next(c for c in Color if c != current)
        store.set_sticker(face, index, other)
        assert not store.is_solved(), (face, index)


# Facelet Mapper Tests
def test_solved_facelet_string():
    assert to_facelet_string(CubeState()) == 'UUUUUUUUURRRRRRRRRFFFFFFFFFDDDDDDDDDLLLLLLLLLBBBBBBBBB'
    assert SOLVED_FACELETS == to_facelet_string(CubeState())


def test_facelet_round_trip():
    state = from_facelet_string(SCRAMBLED)
    assert to_facelet_string(state) == SCRAMBLED
    assert from_facelet_string(to_facelet_string(state)) == state
    assert state.faces[Face.U][:3] == [Color.YELLOW, Color.RED, Color.ORANGE]


def test_unknown_facelets_default_to_white():
    """Unknown letters from the randomizer are read as White"""
    state = from_facelet_string('X' + SOLVED_FACELETS[1:9] + 'r' + SOLVED_FACELETS[10:])
    assert state.faces[Face.U][0] == Color.WHITE
    assert state.faces[Face.R][0] == Color.WHITE
    assert state.faces[Face.R][1] == Color.RED


def test_short_facelet_string_is_padded():
    """Every face gets exactly 9 stickers whatever the input length"""
    state = from_facelet_string(SOLVED_FACELETS[:13])
    assert all(len(state.faces[f]) == 9 for f in FACE_ORDER)
    assert state.faces[Face.U] == [Color.WHITE] * 9
    assert state.faces[Face.R] == [Color.RED] * 4 + [Color.WHITE] * 5
    assert state.faces[Face.B] == [Color.WHITE] * 9

    state = from_facelet_string('')
    assert color_counts(state)[Color.WHITE] == 54


def test_long_facelet_string_is_truncated():
    state = from_facelet_string(SOLVED_FACELETS + 'UUU')
    assert state == CubeState()


# Validator Tests
def test_validator_accepts_balanced_cubes():
    assert is_valid(CubeState())
    assert is_valid(from_facelet_string(SCRAMBLED))

    # Balanced but not reachable: only colors are counted
    state = CubeState()
    state.faces[Face.U][0], state.faces[Face.D][0] = Color.YELLOW, Color.WHITE
    assert is_valid(state)


def test_validator_rejects_unbalanced_cubes():
    state = unbalanced_state()
    counts = color_counts(state)
    assert counts[Color.WHITE] == 10
    assert counts[Color.YELLOW] == 8
    assert not is_valid(state)
    with pytest.raises(ValidationError, match='each color must appear exactly 9 times'):
        check(state)


def test_validator_never_raises():
    """Test malformed states are invalid rather than errors"""
    assert not is_valid(CubeState({Face.U: [Color.WHITE] * 9}))
    assert not is_valid(CubeState({f: None for f in FACE_ORDER}))


def main():
    """Run all tests and report results"""
    tests = [v for k, v in sorted(globals().items()) if k.startswith('test_') and callable(v)]

    passed = 0
    failed = []

    for test in tests:
        try:
            test()
            print(f"✓ {test.__name__}")
            passed += 1
        except AssertionError as e:
            print(f"✗ {test.__name__}: {e}")
            failed.append(test.__name__)
        except Exception as e:
            print(f"✗ {test.__name__}: {type(e).__name__}: {e}")
            failed.append(test.__name__)

    print(f"\n{'='*50}")
    print(f"Results: {passed}/{len(tests)} passed")
    if failed:
        print(f"Failed: {', '.join(failed)}")
    return len(failed) == 0


if __name__ == "__main__":
    import sys
    sys.exit(0 if main() else 1)
