"""
SwipeType - Swipe-to-Type Word Decoder

Entry point for the command line decoder.
"""
import argparse
import json
import logging
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent / "src"))


def positive_int(value):
    """argparse type for counts that must be at least 1."""
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="SwipeType - decode a swipe path into a word",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--path",
        type=Path,
        help="JSON file with the swipe path as a list of [x, y] points",
    )
    source.add_argument(
        "--word",
        help="Synthesize a swipe trace over the keys of WORD and decode it",
    )

    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to config file (default: config.yaml)",
    )

    parser.add_argument(
        "--layout",
        choices=["qwerty", "dvorak", "colemak"],
        default=None,
        help="Keyboard layout (overrides config)",
    )

    parser.add_argument(
        "--dictionary",
        type=Path,
        default=None,
        help="Newline-delimited word list (overrides config)",
    )

    parser.add_argument(
        "--frequencies",
        type=Path,
        default=None,
        help="JSON word -> frequency file (overrides config)",
    )

    parser.add_argument(
        "--spacing",
        type=float,
        default=10.0,
        help="Point spacing of synthesized traces (default: 10)",
    )

    parser.add_argument(
        "--top",
        type=positive_int,
        default=3,
        help="Number of ranked candidates to show (default: 3)",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log decoder steps",
    )

    return parser.parse_args(argv)


def load_path(path_file):
    """Read a JSON list of [x, y] pairs."""
    from prediction import Point

    with open(path_file, 'r') as f:
        data = json.load(f)
    return [Point(float(p[0]), float(p[1])) for p in data]


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    from prediction import SwipeDecoder, build_dictionary_cache, ideal_path, load_config, sample_path
    from ui.layouts import get_key_rects, get_layout

    config = load_config(args.config)

    # Apply CLI overrides
    if args.layout:
        config.keyboard.layout = args.layout
    if args.dictionary:
        config.dictionary.word_list = str(args.dictionary)
    if args.frequencies:
        if not args.frequencies.exists():
            print(f"ERROR: frequency file not found: {args.frequencies}")
            return 1
        config.dictionary.frequency_file = str(args.frequencies)

    layout = get_key_rects(
        get_layout(config.keyboard.layout),
        config.keyboard.width,
        config.keyboard.height,
    )

    if args.word:
        keys = ideal_path(args.word, layout)
        if not keys:
            print(f"ERROR: no keys for '{args.word}' on {config.keyboard.layout}")
            return 1
        path = list(sample_path(keys, args.spacing))
    else:
        try:
            path = load_path(args.path)
        except (OSError, ValueError, TypeError, IndexError) as e:
            print(f"ERROR: could not read path file: {e}")
            return 1

    decoder = SwipeDecoder(build_dictionary_cache(config.dictionary), config.decoder)

    print(f"SwipeType decoding...")
    print(f"  Layout: {config.keyboard.layout}")
    print(f"  Points: {len(path)}")
    print()

    ranked = decoder.rank(path, layout)
    for candidate in ranked[:args.top]:
        print(f"  {candidate.word:<15} {candidate.score:9.2f}")

    word = decoder.decode(path, layout)
    if word is None:
        print("No prediction")
        return 2

    print(f"Prediction: {word}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
