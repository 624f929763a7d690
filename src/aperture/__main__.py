"""CLI entrypoint."""

from __future__ import annotations

import argparse
import logging

from . import __version__

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="aperture")
    parser.add_argument("--viewer", action="store_true", help="open the cube demo window")
    parser.add_argument("--debug", action="store_true", help="log camera state changes")
    args = parser.parse_args(argv)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG)
    if not args.viewer:
        print(f"aperture v{__version__}")
        print("run with --viewer to open the demo window")
        return 0

    from .app.main import main as viewer_main

    logger.debug("starting viewer")
    return viewer_main([])


if __name__ == "__main__":
    raise SystemExit(main())
