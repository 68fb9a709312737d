"""
Insertion order of the pending items.

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
from collections.abc import Iterator, Sequence
from .comparator import T

def group_sizes() -> Iterator[int]:
    """Generates the sizes of the insertion groups: 2, 2, 6, 10, 22, 42, 86, ...

    The sum of any two adjacent group sizes is a power of two, which means every item of a group
    can be inserted with the same number of comparisons as the others.
    """
    # <https://oeis.org/A014113>: a(0) = 0 and if n>=1, a(n) = 2^n - a(n-1).
    size :int = 0
    power :int = 1
    while True:
        power *= 2
        size = power - size
        yield size

def insertion_order(pending :Sequence[T]) -> list[T]:
    """Orders pending items for insertion into the main chain.

    The items are split into consecutive groups with the sizes from :func:`group_sizes`, the
    last group possibly being short. The groups are kept in order, but the items within each
    group are reversed. For example, ``y3 ... y12`` become ``y4 y3 y6 y5 y12 y11 y10 y9 y8 y7``.

    :param pending: The items to be inserted, in the order of their partners in the main chain,
        with the leftover item (if any) last.
    :return: A new list of the same items in the order in which they are to be inserted.
    """
    order :list[T] = []
    start = 0
    sizes = group_sizes()
    while start < len(pending):
        end = start + next(sizes)
        order.extend(reversed(pending[start:end]))
        start = end
    return order
