import argparse
import logging
import math

from mazerunner.config import FOV, NUM_RAYS, Settings


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Sphere-traced pseudo-3D maze")
    parser.add_argument(
        "--rays", type=int, default=NUM_RAYS, help="rays cast per frame"
    )
    parser.add_argument(
        "--fov",
        type=float,
        default=math.degrees(FOV),
        help="field of view in degrees",
    )
    parser.add_argument(
        "--sequential",
        action="store_true",
        help="march rays one at a time instead of in a numpy batch",
    )
    parser.add_argument("--log-level", default="INFO", help="logging level")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    settings = Settings(
        ray_count=args.rays,
        fov=math.radians(args.fov),
        batched_marching=not args.sequential,
    )
    # Imported here so --help works without a display
    from mazerunner.game import Game

    Game(settings).run()


if __name__ == "__main__":
    main()
