"""
The "main chain" of one level of the Ford-Johnson algorithm.

The main chain is always kept in ascending order. Each slot of the chain holds one item whose
position is final with respect to the other items in the chain and, optionally, a "pending"
smaller item: an item known to be smaller than the slot's item, but not yet placed in the
chain. When a pending item is inserted, the binary search only needs to cover the chain up to
(not including) its partner slot.

Insertions shift the positions of all following slots, and because of the nonlinear insertion
order it is easy to lose track of where a partner slot currently is. Therefore each slot keeps
its own current position, which is updated whenever an insertion happens in front of it.

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
from dataclasses import dataclass
from typing import Any, Generic, Optional, overload
from .comparator import T, Comparator
from .errors import InvariantViolation
from .groups import insertion_order
from .search import insertion_index

logger = logging.getLogger(__name__)

@dataclass(frozen=True, eq=False)
class Pair(Generic[T]):
    """The result of comparing two adjacent input items."""
    larger :T
    smaller :T

# marks a slot without a pending item (None is a valid item)
_NOTHING :Any = object()

class _Slot(Generic[T]):
    __slots__ = ('item', 'pending', 'position')

    def __init__(self, item :T, position :int, pending :Any = _NOTHING):
        self.item = item
        self.pending = pending
        self.position = position

    @property
    def has_pending(self) -> bool:
        return self.pending is not _NOTHING

    def __repr__(self) -> str:
        if self.has_pending:
            return f"<{self.item!r} > {self.pending!r} @{self.position}>"
        return f"<{self.item!r} @{self.position}>"

class MainChain(Sequence[T]):
    """The main chain, seeded from the recursively sorted pairs.

    The smaller item of the first (smallest) pair is placed at the start of the chain right away,
    since it must be smaller than every other item in the chain. All other pairs start out
    with their smaller item pending.

    Indexing the chain and iterating over it yields the placed items only.

    :param pairs: At least one pair, sorted ascending by their larger item.
    """

    def __init__(self, pairs :Sequence[Pair[T]]):
        if not pairs:
            raise InvariantViolation("main chain needs at least one pair")
        self._slots :list[_Slot[T]] = [ _Slot(pairs[0].smaller, 0), _Slot(pairs[0].larger, 1) ]
        self._slots.extend( _Slot(p.larger, i, p.smaller) for i, p in enumerate(pairs[1:], start=2) )
        logger.debug("initial main chain: %r", self._slots)

    def __len__(self) -> int:
        return len(self._slots)

    @overload
    def __getitem__(self, index :int) -> T: ...
    @overload
    def __getitem__(self, index :slice) -> list[T]: ...
    def __getitem__(self, index):
        if isinstance(index, slice):
            return [ s.item for s in self._slots[index] ]
        return self._slots[index].item

    @property
    def resolved(self) -> bool:
        """Whether all pending items have been inserted."""
        return not any( s.has_pending for s in self._slots )

    async def insert(self, item :T, comparator :Comparator, partner :Optional[_Slot[T]] = None) -> int:
        """Inserts one item at its sorted position.

        :param item: The item to insert.
        :param comparator: Async comparison function.
        :param partner: The slot whose pending item is being inserted; the search is limited to the
            slots in front of it and its pending item is cleared. ``None`` searches the whole chain.
        :return: The index at which the item was inserted.
        """
        if partner is not None and not (partner.has_pending and partner.pending is item):
            raise InvariantViolation(f"{item!r} is not pending on {partner!r}")
        bound = None if partner is None else partner.position
        idx = await insertion_index(self, item, comparator, bound)
        if partner is not None:
            partner.pending = _NOTHING
        self._slots.insert(idx, _Slot(item, idx))
        for pos in range(idx+1, len(self._slots)):
            self._slots[pos].position = pos
        logger.debug("inserted %r at %d, main chain is now %r", item, idx, self._slots)
        return idx

    async def insert_pending(self, comparator :Comparator, leftover :Sequence[T] = ()) -> None:
        """Inserts all pending items, plus the leftover item of an odd-length input, in group order.

        The leftover item is treated as the last pending item, but its search covers the whole
        main chain as it is at the time of its insertion, which is not necessarily at the end.

        :param comparator: Async comparison function.
        :param leftover: Zero or one items that have no partner in the chain.
        """
        if len(leftover) > 1:
            raise InvariantViolation(f"expected at most one leftover item, got {len(leftover)}")
        todo :list[tuple[T, Optional[_Slot[T]]]] = [ (s.pending, s) for s in self._slots if s.has_pending ]
        todo.extend( (item, None) for item in leftover )
        for item, partner in insertion_order(todo):
            await self.insert(item, comparator, partner)
        if not self.resolved:
            raise InvariantViolation(f"main chain still has pending items: {self._slots!r}")
