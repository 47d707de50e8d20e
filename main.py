# main.py
import argparse
import logging

from core.game import Game
from core.settings import DEFAULT_PRESET, LOG_FORMAT
from entities.constants import PRESETS


def main(argv=None):
    parser = argparse.ArgumentParser(description="Sonic-style platformer movement core")
    parser.add_argument("--preset", default=DEFAULT_PRESET,
                        help=f"character preset ({', '.join(sorted(PRESETS))})")
    parser.add_argument("--debug", action="store_true", help="debug overlay and DEBUG logging")
    args = parser.parse_args(argv)

    if args.preset not in PRESETS:
        parser.error(f"unknown preset {args.preset!r}")

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO, format=LOG_FORMAT)

    Game(preset=args.preset, debug=args.debug).run()


if __name__ == "__main__":
    main()
