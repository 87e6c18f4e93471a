import json
import unittest

from json_rules.errors import ErrorBag, InvalidJSONError, ValidationError


class ErrorBagTests(unittest.TestCase):
    def test_empty_bag_is_falsey(self):
        bag = ErrorBag()
        self.assertFalse(bag)
        self.assertEqual(len(bag), 0)
        self.assertEqual(bag.as_dict(), {})

    def test_multiple_messages_per_path_keep_order(self):
        bag = ErrorBag()
        bag.add("a", "first")
        bag.add("b", "other")
        bag.add("a", "second")
        bag.add("a", "second")  # duplicates are kept
        self.assertEqual(bag.messages("a"), ["first", "second", "second"])
        self.assertEqual(bag.paths(), ["a", "b"])
        self.assertIn("b", bag)

    def test_merge_bag_and_mapping(self):
        left, right = ErrorBag(), ErrorBag()
        left.add("a", "x")
        right.add("a", "y")
        right.add("c", "z")
        left.merge(right)
        left.merge({"d": ["w"]})
        self.assertEqual(left.as_dict(), {"a": ["x", "y"], "c": ["z"], "d": ["w"]})

    def test_as_dict_is_a_copy(self):
        bag = ErrorBag()
        bag.add("a", "x")
        snapshot = bag.as_dict()
        snapshot["a"].append("tampered")
        snapshot["new"] = []
        self.assertEqual(bag.as_dict(), {"a": ["x"]})


class ExceptionTests(unittest.TestCase):
    def test_validation_error_carries_map(self):
        errors = {"id": ["The 'id' is required"]}
        exc = ValidationError(errors)
        self.assertEqual(exc.errors, errors)
        self.assertEqual(str(exc), "Validation failed: " + json.dumps(errors))
        self.assertIsInstance(exc, ValueError)

    def test_invalid_json_error_message(self):
        exc = InvalidJSONError("Expecting value", lineno=1, colno=2)
        self.assertIn("Invalid JSON string: Expecting value", str(exc))
        self.assertEqual((exc.lineno, exc.colno), (1, 2))
