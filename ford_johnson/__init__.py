"""
Ford-Johnson Merge-Insertion Sort
=================================

The Ford-Johnson algorithm[1], also known as the merge-insertion sort[2,3], uses the minimum
number of possible comparisons for lists of 22 items or less, and at the time of writing has
the fewest comparisons known for lists of 46 items or less. It is therefore well suited for
cases where each comparison is expensive, such as asking a person or making a costly remote
call, which is why the comparator is an async function.

>>> import asyncio
>>> from ford_johnson import merge_insertion_sort, max_comparisons, Winner
>>> # A Comparator receives a tuple of two items and returns 0 (Winner.FIRST) if
>>> # the first item is ranked higher, or 1 (Winner.SECOND) if the second one is.
>>> async def by_length(ab :tuple[str,str]) -> Winner:
...     return Winner.FIRST if len(ab[0]) > len(ab[1]) else Winner.SECOND
...
>>> asyncio.run(merge_insertion_sort(['ccc', 'a', 'dddd', 'bb', 'eeeee'], by_length))
['a', 'bb', 'ccc', 'dddd', 'eeeee']
>>> max_comparisons(5)  # this is the most the above can take
7

A comparator may ask a user:

>>> async def ask(ab :tuple[str,str]) -> int:
...     choice = None
...     while choice not in ab:
...         choice = input(f"Please choose {ab[0]!r} or {ab[1]!r}: ")
...     return 0 if choice == ab[0] else 1
...
>>> asyncio.run(merge_insertion_sort('DABEC', ask))  # doctest: +SKIP
Please choose 'D' or 'A': D
...
['A', 'B', 'C', 'D', 'E']

Nothing is logged unless the standard :mod:`logging` module is configured to show ``DEBUG``
messages from the ``ford_johnson`` logger, which then traces every step of the algorithm.

**References**

1. Ford, L. R., & Johnson, S. M. (1959). A Tournament Problem.
   The American Mathematical Monthly, 66(5), 387-389. https://doi.org/10.1080/00029890.1959.11989306
2. Knuth, D. E. (1998). The Art of Computer Programming: Volume 3: Sorting and Searching (2nd ed.).
   Addison-Wesley. https://cs.stanford.edu/~knuth/taocp.html#vol3
3. https://en.wikipedia.org/wiki/Merge-insertion_sort

API
---

.. autofunction:: ford_johnson.merge_insertion_sort

.. autofunction:: ford_johnson.max_comparisons

.. autoclass:: ford_johnson.T

.. autodata:: ford_johnson.Comparator

.. autoclass:: ford_johnson.Winner
    :members:

.. autoclass:: ford_johnson.ComparisonCache
    :members:

.. automodule:: ford_johnson.errors
    :members:

Author, Copyright and License
-----------------------------

Copyright © 2025 Hauke Dämpfling (haukex@zero-g.net)

Permission to use, copy, modify, and/or distribute this software for any
purpose with or without fee is hereby granted, provided that the above
copyright notice and this permission notice appear in all copies.

THE SOFTWARE IS PROVIDED “AS IS” AND THE AUTHOR DISCLAIMS ALL WARRANTIES
WITH REGARD TO THIS SOFTWARE INCLUDING ALL IMPLIED WARRANTIES OF
MERCHANTABILITY AND FITNESS. IN NO EVENT SHALL THE AUTHOR BE LIABLE FOR
ANY SPECIAL, DIRECT, INDIRECT, OR CONSEQUENTIAL DAMAGES OR ANY DAMAGES
WHATSOEVER RESULTING FROM LOSS OF USE, DATA OR PROFITS, WHETHER IN AN
ACTION OF CONTRACT, NEGLIGENCE OR OTHER TORTIOUS ACTION, ARISING OUT OF
OR IN CONNECTION WITH THE USE OR PERFORMANCE OF THIS SOFTWARE.
"""
from .comparator import T, Winner, Comparator
from .errors import FordJohnsonError, DuplicateItemError, InvalidArgumentError, ComparatorFailure, InvariantViolation
from .cache import ComparisonCache
from .bounds import max_comparisons
from .sort import merge_insertion_sort

__all__ = ['T', 'Winner', 'Comparator', 'ComparisonCache', 'merge_insertion_sort', 'max_comparisons',
    'FordJohnsonError', 'DuplicateItemError', 'InvalidArgumentError', 'ComparatorFailure', 'InvariantViolation']
