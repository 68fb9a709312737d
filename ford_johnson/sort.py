"""
The Ford-Johnson merge-insertion sort.

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
from collections.abc import Iterable, Sequence
from .comparator import T, Comparator
from .cache import ComparisonCache
from .chain import Pair, MainChain
from .errors import DuplicateItemError

logger = logging.getLogger(__name__)

def _has_duplicates(items :Sequence[T]) -> bool:
    try:
        return len(set(items)) != len(items)
    except TypeError:  # unhashable items, compare every pair instead
        return any( a is b or a == b for i, a in enumerate(items) for b in items[i+1:] )

def _by_larger(comparator :Comparator) -> Comparator:
    # Pairs are ranked by their larger item.
    async def compare(ab :tuple[Pair[T], Pair[T]]):
        return await comparator((ab[0].larger, ab[1].larger))
    return compare

async def _sort(items :Sequence[T], comparator :Comparator) -> list[T]:
    if len(items) < 2:
        return list(items)
    if len(items) == 2:
        return list(items) if await comparator((items[0], items[1])) else [items[1], items[0]]
    logger.debug("sorting %d items: %r", len(items), items)

    # Steps, following <https://en.wikipedia.org/wiki/Merge-insertion_sort>:
    # 1. Split the items into ⌊n/2⌋ adjacent pairs, an odd-length input leaves one item over.
    # 2. Compare the two items of each pair once to find out which is the larger one.
    pairs :list[Pair[T]] = []
    for a, b in zip(items[0::2], items[1::2]):
        pairs.append( Pair(larger=b, smaller=a) if await comparator((a, b)) else Pair(larger=a, smaller=b) )
    leftover = items[len(pairs)*2:]
    logger.debug("pairs: %r, leftover: %r", pairs, leftover)

    # 3. Recursively sort the pairs by their larger items. Most comparisons are spent here.
    pairs = await _sort(pairs, _by_larger(comparator))

    # 4. The larger items form the main chain. The smaller partner of the first pair is smaller than
    #    everything in the main chain, so it is placed at the very start without a comparison.
    chain = MainChain(pairs)

    # 5. Insert the remaining smaller items y₃, y₄, ... (and the leftover, as the last yᵢ) in the order
    #    given by the insertion groups. Each yᵢ is binary-searched only among the items in front of its
    #    partner xᵢ, and the group sizes are chosen so that this range never exceeds 2ᵏ-1 items for the
    #    k comparisons that group is allowed. The leftover has no partner and searches the whole chain.
    await chain.insert_pending(comparator, leftover)

    return list(chain)

async def merge_insertion_sort(items :Iterable[T], comparator :Comparator) -> list[T]:
    """Merge-Insertion Sort (Ford-Johnson algorithm) with async comparison.

    The comparator is wrapped in a fresh :class:`~ford_johnson.cache.ComparisonCache` for each call,
    so no pair of items is ever submitted to it twice. Comparisons are made strictly one at a time.

    :param items: Items to sort. **Duplicate items are not allowed.** This is not modified.
    :param comparator: Async comparison function as described in :data:`~ford_johnson.comparator.Comparator`.
    :return: A new list of the items sorted in ascending order.
    :raises DuplicateItemError: If two of the items are equal; this is checked before any comparison.
    :raises ComparatorFailure: If the comparator raises an exception or returns an invalid value.
    """
    work = list(items)
    if _has_duplicates(work):
        raise DuplicateItemError("items to be sorted may not contain duplicates")
    cache :ComparisonCache[T] = ComparisonCache(comparator)
    result = await _sort(work, cache)
    logger.debug("sorted %d items with %d comparisons", len(work), cache.calls)
    return result
