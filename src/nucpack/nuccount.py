__author__ = "nucpack contributors"
__all__ = []

import argparse
import logging
import sys
from nucpack import __version__
from nucpack.sequence import AlphabetError, PackedSequence


def count_nucleotides(dna):
    """
    Count the occurrences of each nucleotide in a DNA string.

    Parameters
    ----------
    dna : str
        The DNA sequence, case-insensitive.

    Returns
    -------
    counts : list of tuple(Nucleotide, int)
        One pair for each nucleotide, in the order
        ``A``, ``C``, ``G``, ``T``.

    Raises
    ------
    AlphabetError
        If `dna` contains a character that is not a nucleotide.
    """
    packed_dna = PackedSequence.from_string(dna)
    logging.debug(
        f"Packed {len(packed_dna)} nucleotides into "
        f"{len(packed_dna.storage)} bytes"
    )
    return packed_dna.get_counts()


def _create_parser():
    parser = argparse.ArgumentParser(
        prog="nuccount",
        description=(
            "Count the number of occurrences of each nucleotide in the provided DNA."
        ),
    )
    parser.add_argument(
        "--dna",
        "-d",
        required=True,
        help=(
            "The DNA sequence for which the nucleotides are counted. "
            "It is case insensitive but only nucleotides A, C, G and T are supported."
        ),
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Print debug messages."
    )
    parser.add_argument("--version", action="version", version=__version__)
    return parser


def main(argv=None):
    args = _create_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s:%(message)s",
    )

    print(f"Input: {args.dna}\n")
    try:
        counts = count_nucleotides(args.dna)
    except AlphabetError as e:
        logging.error(f"Invalid DNA sequence: {e}")
        return 1
    for nucleotide, count in counts:
        print(f"{nucleotide}: {count}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
