"""
Tests for ford_johnson.search

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
import unittest
from typing import Literal
import ford_johnson.search as uut
from ford_johnson.errors import InvariantViolation

class TestInsertionIndex(unittest.IsolatedAsyncioTestCase):

    #                   A B C D E F G H I J K L M N O P Q R S T U V W X Y Z
    chain :list[str] = ['B','D','F','H','J','L','N','P','R','T','V','X','Z']

    def setUp(self):
        self.log :list[tuple[str,str]] = []

    async def _comp(self, ab :tuple[str,str]) -> Literal[0,1]:
        self.log.append(ab)
        return 0 if ab[0] > ab[1] else 1

    async def _search(self, ln :int, item :str, bound=None) -> tuple[int, list[str]]:
        self.log.clear()
        idx = await uut.insertion_index(self.chain[:ln], item, self._comp, bound)
        for a,_ in self.log:
            self.assertIs(a, item)
        return idx, [ b for _,b in self.log ]

    async def test_trivial(self):
        self.assertEqual( await self._search(0, 'A'), (0, []) )
        self.assertEqual( await self._search(1, 'A'), (0, ['B']) )
        self.assertEqual( await self._search(1, 'C'), (1, ['B']) )

    async def test_even_lengths(self):
        # the midpoint of left..right (inclusive) rounds down, so the first probe of an even range is left of center
        self.assertEqual( await self._search(2, 'A'), (0, ['B']) )
        self.assertEqual( await self._search(2, 'C'), (1, ['B','D']) )
        self.assertEqual( await self._search(2, 'E'), (2, ['B','D']) )
        self.assertEqual( await self._search(6, 'A'), (0, ['F','B']) )
        self.assertEqual( await self._search(6, 'G'), (3, ['F','J','H']) )
        self.assertEqual( await self._search(6, 'M'), (6, ['F','J','L']) )

    async def test_odd_lengths(self):
        self.assertEqual( await self._search(5, 'A'), (0, ['F','B']) )
        self.assertEqual( await self._search(5, 'E'), (2, ['F','B','D']) )
        self.assertEqual( await self._search(5, 'G'), (3, ['F','H']) )
        self.assertEqual( await self._search(5, 'K'), (5, ['F','H','J']) )
        self.assertEqual( await self._search(7, 'A'), (0, ['H','D','B']) )
        self.assertEqual( await self._search(7, 'G'), (3, ['H','D','F']) )
        self.assertEqual( await self._search(7, 'O'), (7, ['H','L','N']) )

    async def test_bound(self):
        self.assertEqual( await self._search(13, 'G', 3), (3, ['D','F']) )
        self.assertEqual( await self._search(13, 'A', 1), (0, ['B']) )
        self.assertEqual( await self._search(13, 'Y', 0), (0, []) )
        # items beyond the bound are not considered
        self.assertEqual( await self._search(13, self.chain[5], 5), (5, ['F','H','J']) )

    async def test_worst_case(self):
        letters = [ chr(x) for x in range(ord('A'), ord('Z')+1) ]
        for ln in range(1, 14):
            for item in letters[0::2]:
                idx, compared = await self._search(ln, item)
                self.assertLessEqual( len(compared), ln.bit_length(), f"{item} into {ln}" )  # ceil(log2(ln+1))
                self.assertEqual( idx, sum( 1 for c in self.chain[:ln] if c < item ) )

    async def test_invariants(self):
        with self.assertRaisesRegex(InvariantViolation, 'already in the search range'):
            await uut.insertion_index(self.chain[:5], self.chain[4], self._comp)
        with self.assertRaisesRegex(InvariantViolation, 'outside of chain'):
            await uut.insertion_index(self.chain[:5], 'A', self._comp, 6)
        with self.assertRaisesRegex(InvariantViolation, 'outside of chain'):
            await uut.insertion_index(self.chain[:5], 'A', self._comp, -1)
        self.assertEqual( self.log, [] )
