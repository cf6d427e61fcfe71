"""
Error taxonomy shared by every numlab routine.

All errors derive from :class:`ValueError` so callers that already catch
``ValueError`` around argument checks keep working.
"""

from __future__ import annotations


class NumlabError(ValueError):
    """Base class for all numlab argument and precondition errors."""


class DimensionMismatch(NumlabError):
    """Parallel sequences do not have the same length."""


class InvalidArgument(NumlabError):
    """A scalar or sequence argument is outside its valid range."""


class PreconditionViolation(NumlabError):
    """A caller-supplied aggregate is inconsistent with the data.

    Not recoverable: it documents a breach of the caller contract.
    """


def check_same_length(**named) -> int:
    """Return the common length of the named sequences.

    Raises
    ------
    DimensionMismatch
        If any two sequences differ in length.

    >>> check_same_length(x=[1, 2], w=[3, 4])
    2
    """
    lengths = {name: len(seq) for name, seq in named.items()}
    distinct = set(lengths.values())
    if len(distinct) > 1:
        desc = ", ".join(f"len({k})={v}" for k, v in lengths.items())
        raise DimensionMismatch(f"sequences must have equal length ({desc})")
    return distinct.pop() if distinct else 0
