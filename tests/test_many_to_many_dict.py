import unittest

from tagindex.utility.logging.utility import setup_logger
from tagindex.utility.many_to_many_dict import ManyToManyDict
from tests.utility import logging_test_name


class TestManyToManyDict(unittest.TestCase):
    def setUp(self) -> None:
        setup_logger()
        logging_test_name(self)

    def test_add(self):
        relation: ManyToManyDict[str, int] = ManyToManyDict()
        relation.add("a", 1)
        relation.add("a", 2)
        relation.add("b", 2)
        relation.add("a", 1)

        self.assertListEqual(list(relation.left_keys()), ["a", "b"])
        self.assertListEqual(list(relation.right_keys()), [1, 2])
        self.assertListEqual(list(relation.get_right_items("a")), [1, 2])
        self.assertListEqual(list(relation.get_left_items(2)), ["a", "b"])
        self.assertEqual(relation.n_pairs(), 3)

        self.assertTrue(relation.has_key_pair("b", 2))
        self.assertFalse(relation.has_key_pair("b", 1))
        self.assertFalse(relation.has_key_pair("c", 1))

    def test_remove(self):
        relation: ManyToManyDict[str, int] = ManyToManyDict()
        relation.add("a", 1)
        relation.add("b", 1)
        relation.add("b", 2)

        relation.remove("a", 1)
        self.assertFalse(relation.has_left_key("a"))
        self.assertListEqual(list(relation.get_left_items(1)), ["b"])

        relation.remove("b", 1)
        self.assertFalse(relation.has_right_key(1))
        self.assertTrue(relation.has_left_key("b"))

        # unknown pairs are ignored
        relation.remove("b", 1)
        relation.remove("z", 2)
        self.assertListEqual(list(relation.left_keys()), ["b"])
        self.assertListEqual(list(relation.get_right_items("b")), [2])
        self.assertEqual(relation.n_pairs(), 1)

    def test_remove_key(self):
        relation: ManyToManyDict[str, int] = ManyToManyDict()
        relation.add("a", 1)
        relation.add("a", 2)
        relation.add("b", 2)

        self.assertSetEqual(set(relation.remove_left_key("a")), {1, 2})
        self.assertListEqual(list(relation.right_keys()), [2])
        self.assertListEqual(list(relation.get_left_items(2)), ["b"])

        self.assertSetEqual(set(relation.remove_right_key(2)), {"b"})
        self.assertListEqual(list(relation.left_keys()), [])
        self.assertListEqual(list(relation.right_keys()), [])

        self.assertListEqual(list(relation.remove_left_key("a")), [])
        self.assertListEqual(list(relation.remove_right_key(3)), [])

    def test_unknown_keys(self):
        relation: ManyToManyDict[str, int] = ManyToManyDict()

        self.assertListEqual(list(relation.get_left_items(1)), [])
        self.assertListEqual(list(relation.get_right_items("a")), [])
        self.assertFalse(relation.has_left_key("a"))
        self.assertFalse(relation.has_right_key(1))
        self.assertEqual(relation.n_pairs(), 0)

    def test_items_are_symmetric(self):
        relation: ManyToManyDict[str, int] = ManyToManyDict()
        for left_key, right_key in [("a", 1), ("a", 2), ("b", 2), ("c", 3)]:
            relation.add(left_key, right_key)

        left_pairs = {(left, right) for left, rights in relation.left_key_items() for right in rights}
        right_pairs = {(left, right) for right, lefts in relation.right_key_items() for left in lefts}
        self.assertSetEqual(left_pairs, right_pairs)

        relation.clear()
        self.assertListEqual(list(relation.left_key_items()), [])
        self.assertListEqual(list(relation.right_key_items()), [])
