import unittest

from json_rules import utils


class NumberTests(unittest.TestCase):
    def test_is_number_excludes_bool(self):
        self.assertTrue(utils._is_number(1))
        self.assertTrue(utils._is_number(1.5))
        self.assertFalse(utils._is_number(True))
        self.assertFalse(utils._is_number("1"))

    def test_to_number(self):
        self.assertEqual(utils._to_number("42"), 42)
        self.assertEqual(utils._to_number("-1.5"), -1.5)
        self.assertEqual(utils._to_number(7), 7)
        for bad in ("", " 1", "abc", "nan", "inf", "1_000", None, True, [1]):
            self.assertIsNone(utils._to_number(bad), repr(bad))


class EqualityTests(unittest.TestCase):
    def test_numeric_string_equals_number(self):
        self.assertTrue(utils._loosely_equal("42", 42))
        self.assertTrue(utils._loosely_equal(42, "42"))
        self.assertTrue(utils._loosely_equal("1.5", 1.5))
        self.assertFalse(utils._loosely_equal("43", 42))

    def test_bool_never_equals_number(self):
        self.assertFalse(utils._loosely_equal(True, 1))
        self.assertFalse(utils._loosely_equal(0, False))
        self.assertTrue(utils._loosely_equal(False, False))

    def test_containers_compare_structurally_without_coercion(self):
        self.assertTrue(utils._loosely_equal({"a": [1, 2]}, {"a": [1, 2]}))
        self.assertFalse(utils._loosely_equal(["1"], [1]))

    def test_strict_equality(self):
        self.assertTrue(utils._strictly_equal("a", "a"))
        self.assertFalse(utils._strictly_equal(1, True))
        self.assertFalse(utils._strictly_equal(1, 1.0))
        self.assertFalse(utils._strictly_equal("1", 1))


class RenderingTests(unittest.TestCase):
    def test_value_to_string(self):
        self.assertEqual(utils._value_to_string(None), "null")
        self.assertEqual(utils._value_to_string(True), "true")
        self.assertEqual(utils._value_to_string(False), "false")
        self.assertEqual(utils._value_to_string([1]), "[array]")
        self.assertEqual(utils._value_to_string({"a": 1}), "[object]")
        self.assertEqual(utils._value_to_string(3), "3")
