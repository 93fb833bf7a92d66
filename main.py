import argparse
import json
import logging
import sys

from cube_solver import CubeSession, CubeState, SolverConfig, from_facelet_string
from cube_solver.colors import FACE_ORDER, STICKERS_PER_FACE


def load_config(path):
    if not path:
        return SolverConfig()
    with open(path) as f:
        return SolverConfig.from_dict(json.load(f))


def parse_colors(colors: str) -> CubeState:
    """Parse 54 color letters (W R G Y O B) listed face by face in U R F D L B order"""
    colors = colors.replace(' ', '').upper()
    return CubeState({f: list(colors[i * STICKERS_PER_FACE:(i + 1) * STICKERS_PER_FACE])
                      for i, f in enumerate(FACE_ORDER)})


parser = argparse.ArgumentParser(description="Validate a Rubik's cube and find a solution")
parser.add_argument('-c', '--config')
sub = parser.add_subparsers(dest='command', required=True)
solve_parser = sub.add_parser('solve', help='solve a cube given by its colors or facelets')
group = solve_parser.add_mutually_exclusive_group()
group.add_argument('--colors', help='54 color letters in U R F D L B face order')
group.add_argument('--facelets', help='54-character facelet string')
sub.add_parser('scramble', help='scramble a cube and solve it')


def main(argv=None):
    args = parser.parse_args(argv)
    cfg = load_config(args.config)
    logging.basicConfig(level=cfg.log_level, format='%(asctime)s %(levelname)s %(name)s: %(message)s')

    session = CubeSession(config=cfg)
    try:
        session.start()
        if args.command == 'scramble':
            if not session.scramble():
                print(f"Error: {session.error}")
                return 1
        elif args.colors:
            try:
                session.store.replace_all(parse_colors(args.colors))
            except ValueError as e:
                print(f"Error: {e}")
                return 2
        elif args.facelets:
            session.store.replace_all(from_facelet_string(args.facelets.strip()))

        print(session.state.to_string())
        print()
        result = session.solve_now()
        if result is None or session.error:
            print(f"Error: {session.error}")
            return 1
        print(result.message)
        if result.moves:
            print(result.move_string)
        return 0
    finally:
        session.close()


if __name__ == '__main__':
    sys.exit(main())
