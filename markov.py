import argparse
import logging
import sys

from pydantic import ValidationError

from markov_lib import MAXGEN, NPREF, MarkovConfig, build, generate, read_tokens

logger = logging.getLogger("markov")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Markov chain random text generation."
    )
    parser.add_argument("input", help="Corpus text file to learn from.")
    parser.add_argument("-n", "--max-words", type=int, default=MAXGEN,
                        help="Maximum number of words to generate.")
    parser.add_argument("-k", "--prefix-len", type=int, default=NPREF,
                        help="Number of prefix words.")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for a reproducible walk.")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    try:
        config = MarkovConfig(
            prefix_len=args.prefix_len, max_words=args.max_words, seed=args.seed
        )
    except ValidationError as e:
        logger.error("invalid options: %s", e)
        return 2

    try:
        table = build(read_tokens(args.input), prefix_len=config.prefix_len)
    except (OSError, UnicodeDecodeError) as e:
        logger.error("cannot read %s: %s", args.input, e)
        return 1

    words = generate(table, max_words=config.max_words, rng=config.seed)
    print(" ".join(words))
    return 0


if __name__ == "__main__":
    sys.exit(main())
