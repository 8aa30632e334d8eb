import argparse
import logging
import sys
from pathlib import Path
import os
os.environ['PYGAME_HIDE_SUPPORT_PROMPT'] = "hide"

# Ensure repo root is on sys.path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from engine.api.config import EngineConfig, parse_screen_size
from engine.app.loop import run_game


def main():
    parser = argparse.ArgumentParser(description="Color Shooter Launcher")
    parser.add_argument("--game", default="color_shooter", help="Game folder name under games/")
    parser.add_argument("--screen", default="800x600", help="Screen size WxH, e.g. 800x600")
    parser.add_argument("--difficulty", choices=("easy", "hard"), help="Override the manifest difficulty")
    parser.add_argument("--seed", type=int, help="Seed the color generator for a reproducible session")
    parser.add_argument("--fps", type=int, default=60, help="Frames per second")
    parser.add_argument("--mirror", action="store_true", help="Mirror the game window horizontally")
    parser.add_argument("--debug", action="store_true", help="Verbose logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        screen_size = parse_screen_size(args.screen)
    except ValueError as e:
        parser.error(str(e))

    cfg = EngineConfig(
        screen_size=screen_size,
        fps=args.fps,
        mirror=args.mirror,
        debug=args.debug,
        difficulty=args.difficulty,
        seed=args.seed,
    )
    run_game(game_id=args.game, cfg=cfg)


if __name__ == "__main__":
    main()
