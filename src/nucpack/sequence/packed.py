# This source code is part of the nucpack package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
The space-efficient nucleotide container.
"""

__name__ = "nucpack.sequence"
__author__ = "nucpack contributors"
__all__ = ["PackedSequence"]

from numbers import Integral
import numpy as np
from nucpack.sequence.alphabet import AlphabetError, Nucleotide

# Number of 2-bit fields in one storage unit
FIELDS_PER_UNIT = 4
BITS_PER_FIELD = 2
_FIELD_MASK = 0b11
# The first field of a unit occupies the most significant bits
_FIELD_SHIFTS = np.array(
    [(FIELDS_PER_UNIT - 1 - i) * BITS_PER_FIELD for i in range(FIELDS_PER_UNIT)],
    dtype=np.uint8,
)

# Maps ASCII values to symbol codes, invalid letters are mapped to
# an out-of-alphabet value
_INVALID_CODE = np.iinfo(np.uint8).max
_ASCII_TO_CODE = np.full(128, _INVALID_CODE, dtype=np.uint8)
for _nucleotide in Nucleotide:
    _ASCII_TO_CODE[ord(_nucleotide.name)] = _nucleotide.value
    _ASCII_TO_CODE[ord(_nucleotide.name.lower())] = _nucleotide.value
_CODE_TO_ASCII = np.frombuffer(
    "".join(nucleotide.name for nucleotide in Nucleotide).encode("ASCII"),
    dtype=np.uint8,
)


class PackedSequence(object):
    """
    A DNA sequence that stores each :class:`Nucleotide` in 2 bits.

    Four nucleotides are packed into one byte (*storage unit*), the
    first nucleotide occupying the most significant bits.
    The symbol codes are ``A=00``, ``C=01``, ``G=10`` and ``T=11``.
    If the sequence length is not a multiple of 4, only the first
    :attr:`tail_count` fields of the last unit are valid, the remaining
    ones are zero.

    The occurrences of each nucleotide are counted while the sequence
    is built, so :meth:`get_counts()` does not rescan the sequence.

    Objects of this class are immutable.

    Parameters
    ----------
    sequence : str or iterable object of Nucleotide, optional
        The initial sequence.
        A :class:`str` may contain upper or lower case letters ``A``,
        ``C``, ``G`` and ``T``.
        Any other iterable object must yield :class:`Nucleotide`
        members.
        By default the sequence is empty.

    Raises
    ------
    AlphabetError
        If `sequence` is a string containing a character that is not a
        nucleotide.
    TypeError
        If `sequence` is an iterable yielding anything else than
        :class:`Nucleotide` members.

    Notes
    -----
    :meth:`get()` uses **1-based** positions, i.e. the first nucleotide
    is at position 1.
    This is deliberate and differs from the usual Python convention,
    which is followed by the indexing operator:
    ``sequence.get(i)`` is the same nucleotide as ``sequence[i-1]``.

    Examples
    --------

    >>> dna = PackedSequence("ACGTTGCACT")
    >>> print(dna)
    ACGTTGCACT
    >>> print(len(dna), dna.tail_count)
    10 2
    >>> print(dna.storage)
    [ 27 228 112]
    >>> print(dna.get(1), dna.get(3), dna.get(10))
    A G T
    >>> print(dna[0], dna[-1])
    A T
    >>> print(dna[2:6])
    GTTG
    >>> for nucleotide, count in dna.get_counts():
    ...     print(f"{nucleotide}: {count}")
    A: 2
    C: 3
    G: 2
    T: 3

    A sequence can also be built from :class:`Nucleotide` members:

    >>> N = Nucleotide
    >>> print(PackedSequence([N.G, N.A, N.T, N.T, N.A, N.C, N.A]))
    GATTACA
    """

    def __init__(self, sequence=""):
        if isinstance(sequence, str):
            code = _encode_letters(sequence)
        else:
            code = _encode_nucleotides(sequence)
        self._set_code(code)

    def _set_code(self, code):
        self._length = len(code)
        self._storage = _pack(code)
        self._storage.setflags(write=False)
        self._counts = np.bincount(code, minlength=len(Nucleotide))

    @staticmethod
    def from_string(string):
        """
        Create a packed sequence from a string of nucleotide letters.

        Parameters
        ----------
        string : str
            The sequence, case-insensitive.

        Returns
        -------
        sequence : PackedSequence
            The packed sequence.

        Raises
        ------
        AlphabetError
            If `string` contains any character, that is not a
            nucleotide.
            The exception carries the uppercased `string` and the
            position of the first invalid character.
        """
        if not isinstance(string, str):
            raise TypeError(f"Expected 'str', got '{type(string).__name__}'")
        return PackedSequence(string)

    @staticmethod
    def from_symbols(nucleotides):
        """
        Create a packed sequence from an iterable object of
        nucleotides.

        The iterable object is consumed exactly once.

        Parameters
        ----------
        nucleotides : iterable object of Nucleotide
            The nucleotides in sequence order.

        Returns
        -------
        sequence : PackedSequence
            The packed sequence.
        """
        if isinstance(nucleotides, str):
            raise TypeError("Use 'from_string()' to parse a string")
        return PackedSequence(nucleotides)

    @property
    def storage(self):
        """
        The packed storage units.

        Returns
        -------
        storage : ndarray, dtype=uint8
            A read-only array with one element per 4 nucleotides.
        """
        return self._storage

    @property
    def tail_count(self):
        """
        The number of valid fields in the last storage unit.

        0 means the last unit is completely filled (or the sequence
        is empty).

        Returns
        -------
        tail_count : int
            The length of the sequence modulo 4.
        """
        return self._length % FIELDS_PER_UNIT

    @property
    def code(self):
        """
        The unpacked sequence code, one symbol code per nucleotide.

        Returns
        -------
        code : ndarray, dtype=uint8
            The symbol codes.
        """
        return _unpack(self._storage, self._length)

    @property
    def symbols(self):
        """
        The nucleotides of this sequence.

        Returns
        -------
        symbols : list of Nucleotide
            The nucleotides.
        """
        return [Nucleotide.from_code(c) for c in self.code]

    def get(self, index):
        """
        Get the nucleotide at the given 1-based position.

        Parameters
        ----------
        index : int
            The position of the nucleotide.
            The first nucleotide is at position 1.

        Returns
        -------
        nucleotide : Nucleotide
            The nucleotide at position `index`.

        Raises
        ------
        IndexError
            If `index` is smaller than 1 or exceeds the sequence length.

        Examples
        --------

        >>> dna = PackedSequence("ACGTTGCACT")
        >>> print(dna.get(7))
        C
        >>> try:
        ...     dna.get(11)
        ... except IndexError as e:
        ...     print(e)
        Position 11 exceeds the sequence length of 10
        """
        if not isinstance(index, Integral) or isinstance(index, bool):
            raise TypeError(
                f"Position must be an integer, not '{type(index).__name__}'"
            )
        if index < 1:
            raise IndexError(f"Position {index} is invalid, the first position is 1")
        unit_index, field_index = divmod(index - 1, FIELDS_PER_UNIT)
        last_unit = len(self._storage) - 1
        if unit_index > last_unit or (
            unit_index == last_unit
            and self.tail_count != 0
            and field_index >= self.tail_count
        ):
            raise IndexError(
                f"Position {index} exceeds the sequence length of {self._length}"
            )
        return self._decode(unit_index, field_index)

    def get_counts(self):
        """
        Get the number of occurrences of each nucleotide.

        Returns
        -------
        counts : list of tuple(Nucleotide, int)
            One pair for each nucleotide, in the order
            ``A``, ``C``, ``G``, ``T``.
        """
        return [
            (nucleotide, int(self._counts[nucleotide])) for nucleotide in Nucleotide
        ]

    def _decode(self, unit_index, field_index):
        unit = int(self._storage[unit_index])
        shift = int(_FIELD_SHIFTS[field_index])
        return Nucleotide.from_code((unit >> shift) & _FIELD_MASK)

    def __getitem__(self, index):
        if isinstance(index, slice):
            sequence = PackedSequence()
            sequence._set_code(self.code[index])
            return sequence
        if not isinstance(index, Integral) or isinstance(index, bool):
            raise TypeError(
                f"Index must be an integer or slice, not '{type(index).__name__}'"
            )
        position = index + self._length if index < 0 else index
        if position < 0 or position >= self._length:
            raise IndexError(
                f"Index {index} is out of range for a sequence of length "
                f"{self._length}"
            )
        return self._decode(*divmod(position, FIELDS_PER_UNIT))

    def __len__(self):
        return self._length

    def __iter__(self):
        for c in self.code:
            yield Nucleotide.from_code(c)

    def __add__(self, sequence):
        if not isinstance(sequence, PackedSequence):
            return NotImplemented
        concatenation = PackedSequence()
        concatenation._set_code(np.concatenate([self.code, sequence.code]))
        return concatenation

    def __eq__(self, item):
        if item is self:
            return True
        if not isinstance(item, PackedSequence):
            return False
        return self._length == item._length and np.array_equal(
            self._storage, item._storage
        )

    def __hash__(self):
        return hash((self._length, self._storage.tobytes()))

    def __str__(self):
        return _CODE_TO_ASCII[self.code].tobytes().decode("ASCII")

    def __repr__(self):
        """Represent PackedSequence as a string for debugging."""
        return f'PackedSequence("{str(self)}")'


def _encode_letters(string):
    """
    Convert a string of nucleotide letters into a sequence code.
    """
    # Each non-ASCII character becomes a single '?', which is not a nucleotide
    ascii_values = np.frombuffer(
        string.encode("ASCII", errors="replace"), dtype=np.uint8
    )
    code = _ASCII_TO_CODE[ascii_values]
    invalid = np.flatnonzero(code == _INVALID_CODE)
    if len(invalid) > 0:
        raise AlphabetError(string.upper(), position=int(invalid[0]) + 1)
    return code


def _encode_nucleotides(nucleotides):
    """
    Convert an iterable object of :class:`Nucleotide` members into a
    sequence code, consuming it once.
    """
    code = []
    for nucleotide in nucleotides:
        if not isinstance(nucleotide, Nucleotide):
            raise TypeError(
                f"Expected 'Nucleotide', got '{type(nucleotide).__name__}'"
            )
        code.append(nucleotide.value)
    return np.array(code, dtype=np.uint8)


def _pack(code):
    """
    Pack a sequence code into storage units, 4 symbol codes per byte.
    An empty code gives an empty storage.
    """
    n_units = -(-len(code) // FIELDS_PER_UNIT)
    fields = np.zeros(n_units * FIELDS_PER_UNIT, dtype=np.uint8)
    fields[: len(code)] = code
    fields = fields.reshape(n_units, FIELDS_PER_UNIT)
    return np.bitwise_or.reduce(fields << _FIELD_SHIFTS, axis=1).astype(
        np.uint8, copy=False
    )


def _unpack(storage, length):
    """
    Unpack storage units into a sequence code of the given length.
    """
    fields = (storage[:, np.newaxis] >> _FIELD_SHIFTS) & _FIELD_MASK
    return fields.reshape(-1)[:length].astype(np.uint8, copy=False)
