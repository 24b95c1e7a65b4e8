"""Human-readable size and permission-string formatting tests."""

from __future__ import annotations

import unittest

from iconls.humanize import human_size, permissions


class HumanSizeTests(unittest.TestCase):
    def test_sizes(self) -> None:
        tables = (
            (0, "0 B"),
            (1, "1 B"),
            (9, "9 B"),
            (10, "10B"),
            (512, "512B"),
            (999, "999B"),
            (1000, "1.0K"),
            (2048, "2.0K"),
            (1_000_000, "1.0M"),
            (9874321, "9.9M"),
            (82854982, "83M"),
            (10000000000, "10G"),
            (712893712304234, "713T"),
            (6212893712323224, "6.2P"),
            (3 * 10**18, "3.0E"),
            (5 * 10**21, "5000E"),
        )
        for actual, expected in tables:
            with self.subTest(actual=actual):
                self.assertEqual(human_size(actual), expected)


class PermissionsTests(unittest.TestCase):
    def test_permissions(self) -> None:
        tables = (
            (0o644, "rw-r--r--"),
            (0o464, "r--rw-r--"),
            (0o566, "r-xrw-rw-"),
            (0o600, "rw-------"),
            (0o700, "rwx------"),
            (0o706, "rwx---rw-"),
            (0o622, "rw--w--w-"),
            (0o000, "---------"),
            (0o777, "rwxrwxrwx"),
        )
        for actual, expected in tables:
            with self.subTest(mode=oct(actual)):
                self.assertEqual(permissions(actual), expected)

    def test_bits_above_permission_range_are_ignored(self) -> None:
        self.assertEqual(permissions(0o40755), "rwxr-xr-x")
        self.assertEqual(permissions(0o4755), "rwxr-xr-x")


if __name__ == "__main__":
    unittest.main()
