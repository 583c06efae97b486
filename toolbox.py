import argparse

from number_theory import is_palindrome, is_prime
from number_words import MAX_VALUE, letter_count, spell_number
from permutation import lexicographic_permutations, next_permutation

DEMO_VALUES = [0, 5, 12, 21, 55, 99, 101, 123, 576, 999, 1000]


def _format_items(items):
    return " ".join(str(item) for item in items)


def print_spelling(value):
    words = spell_number(value)
    print(f"Number: {value}")
    print(f"Words: {words}")
    print(f"Length: {len(words)}")
    print(f"Letters: {letter_count(value)}")


def print_permutations(items):
    count = 0
    for permutation in lexicographic_permutations(items):
        print(_format_items(permutation))
        count += 1
    print(f"Total permutations: {count}")


def print_successors(items, steps):
    current = list(items)
    print(_format_items(current))
    for _ in range(steps):
        if not next_permutation(current):
            print("No next permutation.")
            return
        print(_format_items(current))


def main(argv=None):
    parser = cmdline_parser()
    args = parser.parse_args(argv)

    if args.steps is not None and args.next is None:
        parser.error("--steps requires --next.")

    if args.spell is not None:
        try:
            print_spelling(args.spell)
        except ValueError as exc:
            parser.error(str(exc))
        return

    if args.spell_range:
        for value in DEMO_VALUES:
            print(f"{value}: {spell_number(value)}")
        return

    if args.letter_total:
        total = sum(letter_count(value) for value in range(1, MAX_VALUE + 1))
        print(f"Letters used for 1..{MAX_VALUE}: {total}")
        return

    if args.permute is not None:
        print_permutations(args.permute)
        return

    if args.next is not None:
        steps = 1 if args.steps is None else args.steps
        if steps < 0:
            parser.error("--steps must be non-negative.")
        print_successors(args.next, steps)
        return

    if args.is_prime is not None:
        print(f"{args.is_prime} is prime: {is_prime(args.is_prime)}")
        return

    if args.is_palindrome is not None:
        print(
            f"{args.is_palindrome} is palindrome: {is_palindrome(args.is_palindrome)}"
        )
        return

    parser.print_help()


def cmdline_parser():
    epilog = (
        "Examples:\n"
        "  toolbox --spell 342\n"
        "  toolbox --permute a b c\n"
        "  toolbox --next c a b e d --steps 3\n"
    )
    parser = argparse.ArgumentParser(
        description="Number spelling and permutation utilities.",
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--spell",
        type=int,
        help=f"Print the spelled-out form of an integer (0..{MAX_VALUE}) and its length.",
    )
    group.add_argument(
        "--spell-range",
        action="store_true",
        help="Print the spelled-out form of a handful of sample numbers.",
    )
    group.add_argument(
        "--letter-total",
        action="store_true",
        help=f"Print the number of letters used to spell 1..{MAX_VALUE}.",
    )
    group.add_argument(
        "--permute",
        nargs="+",
        metavar="ITEM",
        help="Print every permutation of the items in lexicographic order.",
    )
    group.add_argument(
        "--next",
        nargs="+",
        metavar="ITEM",
        help="Print the items followed by their lexicographic successors.",
    )
    group.add_argument(
        "--is-prime",
        type=int,
        help="Check whether an integer is prime.",
    )
    group.add_argument(
        "--is-palindrome",
        type=int,
        help="Check whether an integer reads the same backwards.",
    )
    parser.add_argument(
        "--steps",
        type=int,
        default=None,
        help="Number of successors to print with --next (default 1).",
    )

    return parser


if __name__ == "__main__":
    main()
