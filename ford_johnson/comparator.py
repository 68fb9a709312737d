"""
Comparator types for the Ford-Johnson sort.

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
from collections.abc import Callable, Awaitable
from typing import TypeVar, Literal, Union
from enum import IntEnum

#: A type of object that can be compared by a :class:`Comparator` and therefore sorted by
#: :func:`~ford_johnson.merge_insertion_sort`. Must have sensible support for the equality operators.
T = TypeVar('T')

class Winner(IntEnum):
    """The outcome of one comparison: which of the two compared items is ranked higher.

    Since this is an :class:`~enum.IntEnum`, a :class:`Comparator` may return plain ``0`` or ``1`` instead.
    """
    #: The first item of the pair is ranked higher.
    FIRST = 0
    #: The second item of the pair is ranked higher.
    SECOND = 1

    def inverted(self) -> 'Winner':
        """The result of the same comparison with the two items swapped."""
        return Winner.SECOND if self is Winner.FIRST else Winner.FIRST

#: A user-supplied async function to compare two items.
#: The single argument is a tuple of the two items to be compared; they will never be equal.
#: Must return 0 (:attr:`Winner.FIRST`) if the first item is ranked higher,
#: or 1 (:attr:`Winner.SECOND`) if the second item is ranked higher.
Comparator = Callable[[tuple[T, T]], Awaitable[Union[Literal[0, 1], Winner]]]
