"""
Worst-case comparison count of the Ford-Johnson algorithm.

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
from operator import index
from .errors import InvalidArgumentError

# ceil(log2(3*i/4)) in exact integer arithmetic: the smallest k with 2**(k+2) >= 3*i
def _ceil_log2_three_quarters(i :int) -> int:
    return (3*i - 1).bit_length() - 2

def _check(n :int) -> int:
    n = index(n)
    if n < 0:
        raise InvalidArgumentError(f"must specify zero or more items, not {n}")
    return n

def max_comparisons(n :int) -> int:
    """Returns the maximum number of comparisons that :func:`~ford_johnson.merge_insertion_sort`
    will perform depending on the input length.

    :param n: The number of items in the list to be sorted.
    :return: The expected maximum number of comparisons.
    :raises InvalidArgumentError: If ``n`` is negative.
    """
    n = _check(n)
    if not n:
        return 0
    # Formula from https://en.wikipedia.org/wiki/Merge-insertion_sort, with
    # floor(log2(6n)) computed as an exact integer so that large n don't suffer from rounding.
    f = (6*n).bit_length() - 1
    return n*_ceil_log2_three_quarters(n) - (2**f)//3 + f//2

def max_comparisons_sum(n :int) -> int:
    """The same as :func:`max_comparisons`, but calculated via the sum ``Σ ceil(log2(3i/4))`` for ``i = 1..n``."""
    n = _check(n)
    return sum( _ceil_log2_three_quarters(i) for i in range(1, n+1) )
