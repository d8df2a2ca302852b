# This source code is part of the nucpack package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "nucpack.sequence"
__author__ = "nucpack contributors"
__all__ = ["Nucleotide", "AlphabetError", "parse_char", "parse_str"]

from enum import IntEnum


class Nucleotide(IntEnum):
    """
    The four unambiguous DNA nucleotides.

    The integer value of each member is its 2-bit *symbol code*, i.e.
    the value stored in a :class:`PackedSequence` field.

    Examples
    --------

    >>> print(Nucleotide.G)
    G
    >>> print(int(Nucleotide.G))
    2
    >>> print(Nucleotide.from_code(3))
    T
    """

    A = 0
    C = 1
    G = 2
    T = 3

    @staticmethod
    def from_code(code):
        """
        Get the nucleotide for the given 2-bit symbol code.

        Parameters
        ----------
        code : int
            The symbol code, between 0 and 3.

        Returns
        -------
        nucleotide : Nucleotide
            The nucleotide encoded by `code`.

        Raises
        ------
        AlphabetError
            If `code` is not a valid symbol code.
        """
        if code < 0 or code >= len(_NUCLEOTIDES):
            raise AlphabetError(code)
        return _NUCLEOTIDES[code]

    def __str__(self):
        return self.name

    def __format__(self, format_spec):
        return format(self.name, format_spec)


# Symbol code -> member lookup without going through the enum machinery
_NUCLEOTIDES = tuple(Nucleotide)
_LETTERS = {nucleotide.name: nucleotide for nucleotide in Nucleotide}


class AlphabetError(Exception):
    """
    This exception is raised, when a symbol cannot be parsed into a
    :class:`Nucleotide`.

    Parameters
    ----------
    symbol : object
        The input that could not be parsed.
    position : int, optional
        If `symbol` is a longer text, the 1-based position of the first
        character that is not a nucleotide.

    Attributes
    ----------
    symbol : object
        The input that could not be parsed.
    position : int or None
        The 1-based position of the first invalid character in
        `symbol`, if known.
    """

    def __init__(self, symbol, position=None):
        self.symbol = symbol
        self.position = position
        message = f"Failed to parse nucleotide from {repr(symbol)}"
        if position is not None:
            message += f" (invalid symbol at position {position})"
        super().__init__(message)


def parse_char(char):
    """
    Parse a single character into a :class:`Nucleotide`.

    The conversion is case-insensitive.

    Parameters
    ----------
    char : str
        A string of length 1.

    Returns
    -------
    nucleotide : Nucleotide
        The parsed nucleotide.

    Raises
    ------
    AlphabetError
        If `char` is not one of ``A``, ``C``, ``G`` or ``T`` in upper or
        lower case.
        The exception carries `char` as given.

    Examples
    --------

    >>> print(parse_char("g"))
    G
    >>> try:
    ...     parse_char("u")
    ... except AlphabetError as e:
    ...     print(e)
    Failed to parse nucleotide from 'u'
    """
    if not isinstance(char, str) or len(char) != 1:
        raise AlphabetError(char)
    try:
        return _LETTERS[char.upper()]
    except KeyError:
        raise AlphabetError(char)


def parse_str(string):
    """
    Parse a one-letter string into a :class:`Nucleotide`.

    In contrast to :func:`parse_char()`, the exception raised for an
    invalid input carries the uppercased input.

    Parameters
    ----------
    string : str
        The string to parse.

    Returns
    -------
    nucleotide : Nucleotide
        The parsed nucleotide.

    Raises
    ------
    AlphabetError
        If the uppercased `string` is not exactly ``A``, ``C``, ``G`` or
        ``T``.

    Examples
    --------

    >>> print(parse_str("t"))
    T
    >>> try:
    ...     parse_str("ac")
    ... except AlphabetError as e:
    ...     print(e)
    Failed to parse nucleotide from 'AC'
    """
    upper = string.upper()
    try:
        return _LETTERS[upper]
    except KeyError:
        raise AlphabetError(upper)
