import unittest

from chunking_tools.sources import SequenceSource
from chunking_tools.span import validate_span, group_count, outer_distance, offset_inner_index, straggler_length


class SpanTestCase(unittest.TestCase):
    def test_validate_span(self):
        self.assertEqual(3, validate_span(3))
        self.assertRaises(ValueError, validate_span, 0)
        self.assertRaises(ValueError, validate_span, -2)
        self.assertRaises(TypeError, validate_span, True)
        self.assertRaises(TypeError, validate_span, 2.0)

    def test_group_count(self):
        self.assertEqual(3, group_count(5, 2))
        self.assertEqual(2, group_count(6, 3))
        self.assertEqual(1, group_count(1, 4))
        self.assertEqual(0, group_count(0, 3))

    def test_straggler_length(self):
        self.assertEqual(1, straggler_length(5, 2))
        self.assertEqual(0, straggler_length(6, 3))

    def test_outer_distance_rounds_partial_chunks_away_from_zero(self):
        self.assertEqual(3, outer_distance(5, 2))
        self.assertEqual(-3, outer_distance(-5, 2))
        self.assertEqual(2, outer_distance(4, 2))
        self.assertEqual(-2, outer_distance(-4, 2))
        self.assertEqual(1, outer_distance(1, 2))
        self.assertEqual(-1, outer_distance(-1, 2))
        self.assertEqual(0, outer_distance(0, 2))


class OffsetInnerIndexTestCase(unittest.TestCase):
    def _offset(self, length: int, span: int, i: int, n: int) -> int:
        source = SequenceSource(list(range(length)))
        return offset_inner_index(i, n, span, 0, length, source.index, source.distance)

    def test_forward_steps_are_clamped_to_the_end(self):
        self.assertEqual(2, self._offset(5, 2, 0, 1))
        self.assertEqual(4, self._offset(5, 2, 0, 2))
        self.assertEqual(5, self._offset(5, 2, 0, 3))
        self.assertEqual(5, self._offset(5, 2, 4, 1))
        self.assertEqual(5, self._offset(5, 2, 0, 10))

    def test_backward_step_from_the_end_lands_on_the_straggler(self):
        self.assertEqual(4, self._offset(5, 2, 5, -1))
        self.assertEqual(2, self._offset(5, 2, 5, -2))
        self.assertEqual(0, self._offset(5, 2, 5, -3))
        self.assertEqual(0, self._offset(5, 2, 5, -4))

    def test_backward_step_from_the_end_without_straggler(self):
        self.assertEqual(3, self._offset(6, 3, 6, -1))
        self.assertEqual(0, self._offset(6, 3, 6, -2))

    def test_backward_steps_are_clamped_to_the_start(self):
        self.assertEqual(0, self._offset(5, 2, 2, -1))
        self.assertEqual(0, self._offset(5, 2, 2, -5))

    def test_zero_offset(self):
        self.assertEqual(2, self._offset(5, 2, 2, 0))
        self.assertEqual(5, self._offset(5, 2, 5, 0))

    def test_empty_range(self):
        self.assertEqual(0, self._offset(0, 3, 0, 1))
        self.assertEqual(0, self._offset(0, 3, 0, -1))


if __name__ == '__main__':
    unittest.main()
