"""
Exceptions raised by the Ford-Johnson sort.

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
from typing import Any

class FordJohnsonError(Exception):
    """Base class for the recoverable errors raised by this package."""

class DuplicateItemError(FordJohnsonError, ValueError):
    """The items to be sorted contain two items that are equal to each other.

    Raised before the comparator is called even once."""

class InvalidArgumentError(FordJohnsonError, ValueError):
    """An argument is outside of its permitted range, such as a negative item count."""

class ComparatorFailure(FordJohnsonError):
    """The user-supplied comparator raised an exception or returned something other than 0 or 1.

    The original exception, if any, is available as ``__cause__``. The sort in progress is
    aborted and no partial result is returned. Comparator calls are never retried.
    """
    def __init__(self, pair :tuple[Any, Any], reason :str):
        super().__init__(f"comparator failed on {pair[0]!r} vs. {pair[1]!r}: {reason}")
        #: The two items that were being compared.
        self.pair = pair

class InvariantViolation(AssertionError):
    """An internal consistency check failed. This indicates a bug in this package, not bad input."""
