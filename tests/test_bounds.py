"""
Tests for ford_johnson.bounds

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
import ford_johnson.bounds as uut
from ford_johnson.errors import InvalidArgumentError

class TestBounds(unittest.TestCase):

    def test_max_comparisons(self):
        # <https://oeis.org/A001768>: "Sorting numbers: number of comparisons for merge insertion sort of n elements." (plus 0=0)
        exp = [ 0, 0, 1, 3, 5, 7, 10, 13, 16, 19, 22, 26, 30, 34, 38, 42, 46, 50, 54, 58, 62, 66,
            71, 76, 81, 86, 91, 96, 101, 106, 111, 116, 121, 126, 131, 136, 141, 146, 151, 156, 161,
            166, 171, 177, 183, 189, 195, 201, 207, 213, 219, 225, 231, 237, 243, 249, 255 ]
        for i,e in enumerate(exp):
            self.assertEqual( uut.max_comparisons(i), e )
            self.assertEqual( uut.max_comparisons_sum(i), e )

    def test_formulas_agree(self):
        total = 0
        for n in range(1, 5000):
            total += uut._ceil_log2_three_quarters(n)  # pyright: ignore[reportPrivateUsage]  # pylint: disable=protected-access
            self.assertEqual( uut.max_comparisons(n), total, f"n={n}" )
        self.assertEqual( uut.max_comparisons(100_000), uut.max_comparisons_sum(100_000) )

    def test_large_n(self):
        # exact integer arithmetic, no floating-point rounding
        n = 3 * 2**80
        self.assertIsInstance( uut.max_comparisons(n), int )
        self.assertGreater( uut.max_comparisons(n), uut.max_comparisons(n-1) )

    def test_invalid(self):
        with self.assertRaises(InvalidArgumentError):
            uut.max_comparisons(-1)
        with self.assertRaises(ValueError):
            uut.max_comparisons_sum(-5)
        with self.assertRaises(TypeError):
            uut.max_comparisons(1.5)  # type: ignore[arg-type]
