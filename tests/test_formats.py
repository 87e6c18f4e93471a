import unittest

from json_rules import formats


class FormatTests(unittest.TestCase):
    def test_email(self):
        self.assertIs(formats.is_email("ada.lovelace@gmail.com", "email"), True)
        for bad in ("ada", "ada@", "@example.com", "a..b@example.com", "ada@example"):
            self.assertEqual(formats.is_email(bad, "email"), "email must be a valid email address", bad)
        self.assertEqual(formats.is_email(5, "email"), "email must be a string")

    def test_url(self):
        self.assertIs(formats.is_url("https://example.com/x?y=1", "url"), True)
        self.assertEqual(formats.is_url("example.com", "url"), "url must be a valid URL")
        self.assertEqual(formats.is_url("http://exa mple.com", "url"), "url must be a valid URL")

    def test_ip(self):
        self.assertIs(formats.is_ip("192.168.0.1", "ip"), True)
        self.assertIs(formats.is_ip("::1", "ip"), True)
        self.assertIs(formats.is_ip("::1", "ip", 6), True)
        self.assertEqual(formats.is_ip("::1", "ip", 4), "ip must be a valid IP address")
        self.assertEqual(formats.is_ip("999.1.1.1", "ip"), "ip must be a valid IP address")

    def test_strict_date_round_trip(self):
        self.assertTrue(formats.is_strict_date("2024-02-29", "%Y-%m-%d"))
        self.assertFalse(formats.is_strict_date("2023-02-29", "%Y-%m-%d"))
        self.assertFalse(formats.is_strict_date("2024-2-9", "%Y-%m-%d"))
        self.assertFalse(formats.is_strict_date("02/09/2024", "%Y-%m-%d"))
        self.assertTrue(formats.is_strict_date("09/02/2024", "%d/%m/%Y"))
