"""
Grow a random Aztec diamond tiling from the command line.

    python -m domino_shuffle --order 30 --seed 1 --show
"""
import argparse
import logging

from pydantic import ValidationError

from .config import DEFAULT_ORIENTATION_BIAS, ShuffleConfig
from .engine import ShuffleEngine
from .viz import display_tiling


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Domino shuffling on the Aztec diamond")
    parser.add_argument("--order", type=int, default=10, help="Diamond order to grow to")
    parser.add_argument("--bias", type=float, default=DEFAULT_ORIENTATION_BIAS,
                        help="Probability of a horizontal pair in each new block")
    parser.add_argument("--seed", type=int, default=None, help="Random seed (default: random)")
    parser.add_argument("--strict-bias", action="store_true", help="Fail on out-of-range bias")
    parser.add_argument("--show", action="store_true", help="Print the tiling grid")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log each phase")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        config = ShuffleConfig(order=args.order, bias=args.bias, seed=args.seed,
                               strict_bias=args.strict_bias)
    except ValidationError as e:
        parser.error(str(e))

    engine = ShuffleEngine.from_config(config)
    engine.run_to_order(config.order)
    engine.check_tiling()

    if args.show:
        display_tiling(engine)
    else:
        counts = engine.direction_counts()
        print(f"Order {engine.order}: {len(engine.dominoes)} dominoes, "
              + ", ".join(f"{d}={c}" for d, c in counts.items()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
