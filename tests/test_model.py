import unittest

from icecream import ic

from chunking_tools.model import ChunkLayout, Batch


class ChunkLayoutTestCase(unittest.TestCase):
    def test_derived_fields(self):
        layout = ChunkLayout(span=2, element_count=5, group_lengths=[2, 2, 1])
        self.assertEqual(3, layout.group_count)
        self.assertEqual(1, layout.straggler_length)
        self.assertTrue(layout.has_straggler())

    def test_without_straggler(self):
        layout = ChunkLayout(span=3, element_count=6, group_lengths=[3, 3])
        self.assertEqual(0, layout.straggler_length)
        self.assertFalse(layout.has_straggler())

    def test_serialization(self):
        layout = ChunkLayout(span=2, element_count=5, group_lengths=[2, 2, 1])
        ic(layout.to_json())
        expected = {
            "span": 2,
            "element_count": 5,
            "group_lengths": [2, 2, 1],
            "group_count": 3,
            "straggler_length": 1
        }
        self.assertDictEqual(expected, layout.to_dict())
        self.assertEqual(layout, ChunkLayout.from_dict(layout.to_dict()))


class BatchTestCase(unittest.TestCase):
    def test_to_dict(self):
        batch = Batch(index=1, first_element=2, items=["c", "d"])
        self.assertDictEqual({"index": 1, "first_element": 2, "items": ["c", "d"]}, batch.to_dict())


if __name__ == '__main__':
    unittest.main()
