"""
Memoization of comparator results.

A :class:`ComparisonCache` wraps a :data:`~ford_johnson.comparator.Comparator` so that each
unordered pair of items is submitted to the wrapped comparator at most once. Asking for the
same pair again, in either order, is answered from the cache (inverted if necessary). This
protects the comparison count of the sort, and it means that comparators with visible side
effects, such as prompting a user, are never asked the same question twice.

Pairs are identified by object identity, not by equality or hashing, so items need not be
hashable. The cache keeps a reference to every item it has seen, so the identities remain
valid for the lifetime of the cache. A new cache is created for every call to
:func:`~ford_johnson.merge_insertion_sort`.

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
from typing import Generic, Optional
from .comparator import T, Winner, Comparator
from .errors import ComparatorFailure, InvariantViolation

logger = logging.getLogger(__name__)

class ComparisonCache(Generic[T]):
    """Wraps a comparator and remembers the result for every pair of items.

    Instances are themselves a valid :data:`~ford_johnson.comparator.Comparator`.

    :param comparator: The comparator to delegate to on the first query of each pair.
    """

    def __init__(self, comparator :Comparator):
        self._comparator = comparator
        # keys are the ids of the two items in the order they were first asked about
        self._results :dict[tuple[int, int], tuple[T, T, Winner]] = {}
        #: The number of times the wrapped comparator has been called.
        self.calls :int = 0
        #: The number of queries that were answered from the cache.
        self.hits :int = 0

    def __len__(self) -> int:
        return len(self._results)

    def _lookup(self, a :T, b :T) -> Optional[Winner]:
        known = self._results.get((id(a), id(b)))
        if known is not None:
            return known[2]
        known = self._results.get((id(b), id(a)))
        if known is not None:
            return known[2].inverted()
        return None

    async def __call__(self, ab :tuple[T, T]) -> Winner:
        a, b = ab
        if a is b:
            raise InvariantViolation(f"attempted to compare {a!r} with itself")
        winner = self._lookup(a, b)
        if winner is not None:
            self.hits += 1
            logger.debug("cached result for %r vs. %r: %s", a, b, winner.name)
            return winner
        try:
            result = await self._comparator((a, b))
        except Exception as ex:
            raise ComparatorFailure((a, b), f"raised {type(ex).__name__}") from ex
        if result not in (0, 1):
            raise ComparatorFailure((a, b), f"returned {result!r}, expected 0 or 1")
        winner = Winner(result)
        self.calls += 1
        self._results[(id(a), id(b))] = (a, b, winner)
        logger.debug("compared %r vs. %r: %s", a, b, winner.name)
        return winner
