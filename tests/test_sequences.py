import unittest

from sequences import is_palindrome, is_sorted, str_rev


class TestSequences(unittest.TestCase):
    def test_is_sorted(self):
        for seq in ([], [1], [1, 1], [1, 2, 3, 3], ["aa", "bb", "cc"], "abc"):
            with self.subTest(seq=seq):
                self.assertTrue(is_sorted(seq))
        for seq in ([2, 1], [1, 2, 3, 2, 5], ["aa", "cc", "bb"]):
            with self.subTest(seq=seq):
                self.assertFalse(is_sorted(seq))

    def test_is_palindrome(self):
        self.assertTrue(is_palindrome(""))
        self.assertTrue(is_palindrome("racecar"))
        self.assertTrue(is_palindrome([1, 2, 1]))
        self.assertFalse(is_palindrome("python"))
        self.assertFalse(is_palindrome([1, 2]))

    def test_str_rev(self):
        self.assertEqual(str_rev("hello"), "olleh")
        self.assertEqual(str_rev(""), "")


if __name__ == "__main__":
    unittest.main()
