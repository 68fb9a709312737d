"""
Bounded binary search for the insertion point of one item.

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
import logging
from collections.abc import Sequence
from typing import Optional
from .comparator import T, Comparator
from .errors import InvariantViolation

logger = logging.getLogger(__name__)

async def insertion_index(chain :Sequence[T], item :T, comparator :Comparator, bound :Optional[int] = None) -> int:
    """Finds where to insert an item into an ascending sequence with as few comparisons as possible.

    Only ``chain[:bound]`` is searched, which takes at most ``ceil(log2(bound+1))`` comparisons.
    The item is always the first of the two items passed to the comparator.

    :param chain: Items in ascending order.
    :param item: The item to be placed; must not be in the searched range.
    :param comparator: Async comparison function.
    :param bound: Exclusive upper limit of the search, or ``None`` to search the whole sequence.
    :return: The index **before** which to insert the new item, e.g. ``chain.insert(index, item)``.
    :raises InvariantViolation: If the item is already in the searched range.
    """
    limit = len(chain) if bound is None else bound
    if not 0 <= limit <= len(chain):
        raise InvariantViolation(f"search bound {limit} outside of chain of length {len(chain)}")
    if any( chain[i] is item for i in range(limit) ):
        raise InvariantViolation(f"item {item!r} is already in the search range")
    left, right = 0, limit - 1
    while left <= right:
        mid = left + (right - left) // 2
        if await comparator((item, chain[mid])):
            right = mid - 1
        else:
            left = mid + 1
    logger.debug("insertion point for %r is %d (searched %d of %d items)", item, left, limit, len(chain))
    return left
