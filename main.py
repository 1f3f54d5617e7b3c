"""Future Regret Simulator — CLI entry point."""

import argparse
import logging
import random
import sys

from regretsim import InvalidInputError, generate_report, simulate_file


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Simulate a life-path profile.")
    parser.add_argument("profile", nargs="?", default="sample_profile.json",
                        help="JSON file with life_path and sliders")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for the micro-regret / shareable text")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        result = simulate_file(args.profile, rng=random.Random(args.seed))
    except (FileNotFoundError, InvalidInputError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(generate_report(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
