"""Field encoder and DOS timestamp tests."""

from __future__ import annotations

import struct
import unittest
from datetime import datetime

from vdfpack.errors import VolumeBuildError
from vdfpack.volume import (
    ENTRY_SIZE,
    HEADER_SIZE,
    SIGNATURE,
    CatalogEntry,
    EntryType,
    dos_timestamp,
    encode_comment,
    encode_name,
    new_header,
    pack_entry,
    pack_header,
)


class EncodeNameTests(unittest.TestCase):
    def test_name_is_upper_cased_and_space_padded(self) -> None:
        encoded = encode_name("Readme.txt")

        self.assertEqual(len(encoded), 64)
        self.assertEqual(encoded, b"README.TXT" + b" " * 54)

    def test_non_ascii_bytes_are_left_untouched(self) -> None:
        self.assertTrue(encode_name("café.txt").startswith("CAFé.TXT".encode("utf-8")))

    def test_name_of_exactly_field_width_fits(self) -> None:
        self.assertEqual(encode_name("a" * 64), b"A" * 64)

    def test_overlong_name_is_rejected(self) -> None:
        with self.assertRaises(VolumeBuildError):
            encode_name("a" * 65)


class EncodeCommentTests(unittest.TestCase):
    def test_empty_comment_is_all_fill_bytes(self) -> None:
        self.assertEqual(encode_comment(""), b"\x1a" * 256)

    def test_comment_overwrites_prefix(self) -> None:
        encoded = encode_comment("My mod")

        self.assertEqual(encoded[:6], b"My mod")
        self.assertEqual(encoded[6:], b"\x1a" * 250)

    def test_overlong_comment_is_truncated_with_warning(self) -> None:
        with self.assertLogs("vdfpack.volume.encoding", level="WARNING"):
            encoded = encode_comment("x" * 300)

        self.assertEqual(encoded, b"x" * 256)


class PackTests(unittest.TestCase):
    def test_header_layout(self) -> None:
        header = new_header("hi", datetime(2024, 5, 17, 13, 45, 31))
        packed = pack_header(header)

        self.assertEqual(len(packed), HEADER_SIZE)
        self.assertEqual(packed[:2], b"hi")
        self.assertEqual(packed[256:272], SIGNATURE)
        fields = struct.unpack_from("<6I", packed, 272)
        self.assertEqual(fields, (0, 0, header.timestamp, 0, 296, 0x50))

    def test_entry_layout(self) -> None:
        entry = CatalogEntry("dir", next_index=7, size=0, entry_type=EntryType.DIRECTORY | EntryType.LAST)
        packed = pack_entry(entry)

        self.assertEqual(len(packed), ENTRY_SIZE)
        self.assertEqual(packed[:3], b"DIR")
        self.assertEqual(struct.unpack_from("<4I", packed, 64), (7, 0, 0xC0000000, 0))


class DosTimestampTests(unittest.TestCase):
    def test_packs_fields_into_dos_bit_layout(self) -> None:
        stamp = dos_timestamp(datetime(2024, 5, 17, 13, 45, 31))

        self.assertEqual(stamp, 1488022959)
        self.assertEqual(stamp >> 25, 44)
        self.assertEqual((stamp >> 21) & 0x0F, 5)
        self.assertEqual((stamp >> 16) & 0x1F, 17)
        self.assertEqual((stamp >> 11) & 0x1F, 13)
        self.assertEqual((stamp >> 5) & 0x3F, 45)
        self.assertEqual(stamp & 0x1F, 15)

    def test_defaults_to_current_time(self) -> None:
        self.assertGreaterEqual(dos_timestamp() >> 25, 2024 - 1980)


if __name__ == "__main__":
    unittest.main()
