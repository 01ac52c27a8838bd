#!/usr/bin/env python3

from __future__ import annotations

import unittest

from packages.sigil_core.identicon import (
    CellGrid,
    InvalidDigestError,
    ThemeConfigError,
    digest_for_key,
    digest_hex,
    md5_digest,
)


class CellGridTests(unittest.TestCase):
    def test_bits_are_read_msb_first_column_major(self) -> None:
        # 0b10000000: only bit 0 -> cell (0, 0) and its mirror (2, 0).
        grid = CellGrid.build(3, bytes([0x80]) + bytes(14))
        self.assertEqual(grid.render(), "X-X\n---\n---\n")

        # 0b01000000: bit 1 -> x = 1 // 3 = 0, y = 1 % 3 = 1.
        grid = CellGrid.build(3, bytes([0x40]) + bytes(14))
        self.assertEqual(grid.render(), "---\nX-X\n---\n")

        # bit 3 -> x = 1, y = 0 (middle column mirrors onto itself).
        grid = CellGrid.build(3, bytes([0x10]) + bytes(14))
        self.assertEqual(grid.render(), "-X-\n---\n---\n")

    def test_right_half_bits_are_never_read(self) -> None:
        # rows=2 only consumes bits 0 and 1.
        grid = CellGrid.build(2, bytes([0x3F]) + bytes([0xFF] * 14))
        self.assertEqual(grid.filled_count(), 0)

    def test_single_row(self) -> None:
        self.assertEqual(CellGrid.build(1, bytes([0x80]) + bytes(14)).render(), "X\n")
        self.assertEqual(CellGrid.build(1, bytes([0x7F]) + bytes(14)).render(), "-\n")

    def test_row_major_storage(self) -> None:
        grid = CellGrid.build(5, bytes([0x40]) + bytes(14))
        # bit 1 -> (0, 1) and mirror (4, 1)
        self.assertTrue(grid.is_filled(1 * 5 + 0))
        self.assertTrue(grid.is_filled(1 * 5 + 4))
        self.assertTrue(grid.filled_at(4, 1))
        self.assertFalse(grid.filled_at(1, 0))
        self.assertEqual(list(grid.filled_cells()), [(0, 1), (4, 1)])

    def test_custom_render_symbols(self) -> None:
        grid = CellGrid.build(3, bytes([0x80]) + bytes(14))
        self.assertEqual(grid.render(filled="#", empty="."), "#.#\n...\n...\n")
        self.assertEqual(grid.rows_as_bools()[0], [True, False, True])

    def test_out_of_range_queries(self) -> None:
        grid = CellGrid.build(3, bytes(15))
        with self.assertRaises(IndexError):
            grid.filled_at(3, 0)
        with self.assertRaises(IndexError):
            grid.is_filled(256)

    def test_rows_outside_range_are_rejected(self) -> None:
        for rows in (0, 16, -1):
            with self.assertRaises(ThemeConfigError) as raised:
                CellGrid.build(rows, bytes(15))
            self.assertEqual(raised.exception.error_code, "invalid_rows")

    def test_source_must_be_fifteen_bytes(self) -> None:
        with self.assertRaises(InvalidDigestError):
            CellGrid.build(5, bytes(14))
        with self.assertRaises(InvalidDigestError):
            CellGrid.build(5, bytes(16))

    def test_source_must_be_a_bytes_object(self) -> None:
        for source in (15, [0] * 15, "a" * 15):
            with self.assertRaises(InvalidDigestError) as raised:
                CellGrid.build(5, source)
            self.assertEqual(raised.exception.error_code, "invalid_digest")
        self.assertEqual(CellGrid.build(3, bytearray([0x80]) + bytes(14)).render(), "X-X\n---\n---\n")
        self.assertEqual(CellGrid.build(3, memoryview(bytes([0x80]) + bytes(14))).render(), "X-X\n---\n---\n")


class HashingTests(unittest.TestCase):
    def test_md5_digest(self) -> None:
        self.assertEqual(md5_digest("test").hex(), "098f6bcd4621d373cade4e832627b4f6")
        self.assertEqual(md5_digest(b""), md5_digest(""))
        self.assertEqual(len(md5_digest(b"\x00\xff")), 16)

    def test_md5_digest_rejects_non_bytes(self) -> None:
        for value in (5, None, [1, 2]):
            with self.assertRaises(TypeError):
                md5_digest(value)
        self.assertEqual(md5_digest(bytearray(b"test")), md5_digest("test"))

    def test_digest_for_key_accepts_hex_digest(self) -> None:
        self.assertEqual(digest_for_key("098f6bcd4621d373cade4e832627b4f6"), md5_digest("test"))
        self.assertEqual(digest_for_key("098F6BCD4621D373CADE4E832627B4F6"), md5_digest("test"))

    def test_digest_for_key_hashes_other_keys(self) -> None:
        self.assertEqual(digest_for_key("test"), md5_digest("test"))
        self.assertEqual(digest_for_key(""), md5_digest(b""))
        # 32 characters but not hex
        not_hex = "z" * 32
        self.assertEqual(digest_for_key(not_hex), md5_digest(not_hex))

    def test_digest_hex(self) -> None:
        self.assertEqual(digest_hex(md5_digest("test")), "098f6bcd4621d373cade4e832627b4f6")
        with self.assertRaises(InvalidDigestError) as raised:
            digest_hex(b"short")
        self.assertEqual(raised.exception.error_code, "invalid_digest")
        with self.assertRaises(InvalidDigestError):
            digest_hex(16)


if __name__ == "__main__":
    unittest.main()
