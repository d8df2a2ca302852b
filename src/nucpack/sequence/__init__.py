# This source code is part of the nucpack package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
A subpackage for compact storage of DNA sequences.

The unambiguous DNA alphabet consists of the four letters ``'A'``,
``'C'``, ``'G'`` and ``'T'``, represented by the :class:`Nucleotide`
enum.
The integer value of a :class:`Nucleotide` is its *symbol code*:
``'A'``, ``'C'``, ``'G'`` and ``'T'`` are encoded into 0, 1, 2 and 3,
respectively.
Letters are converted into nucleotides with :func:`parse_char()` and
:func:`parse_str()`, which raise an :class:`AlphabetError` for any other
letter.

As 4 symbol codes fit into 2 bits, a :class:`PackedSequence` stores four
nucleotides in each byte of its *storage*.
A :class:`PackedSequence` is built either from a string or from an
iterable object of :class:`Nucleotide` members.
It provides access to single nucleotides and the number of occurrences
of each nucleotide, which is tracked while the sequence is built.
Note that :meth:`PackedSequence.get()` takes 1-based positions, while
the indexing operator follows the 0-based Python convention.
"""

__name__ = "nucpack.sequence"
__author__ = "nucpack contributors"

from .alphabet import *
from .packed import *
