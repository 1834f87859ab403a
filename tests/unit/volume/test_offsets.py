from __future__ import annotations

import unittest

from vdfpack.errors import VolumeBuildError
from vdfpack.volume import (
    ENTRY_SIZE,
    HEADER_SIZE,
    CatalogEntry,
    EntryType,
    VolumeHeader,
    assign_file_offsets,
    data_segment_start,
    header_totals,
)


def sample_catalog() -> list[CatalogEntry]:
    return [
        CatalogEntry("dir", next_index=2, entry_type=EntryType.DIRECTORY | EntryType.LAST),
        CatalogEntry("x.txt", size=0, entry_type=EntryType.LAST),
        CatalogEntry("a.bin", size=3, parent_index=0),
        CatalogEntry("b.bin", size=5, entry_type=EntryType.LAST, parent_index=0),
    ]


class OffsetTests(unittest.TestCase):
    def test_constants_match_fixed_layout(self) -> None:
        self.assertEqual(HEADER_SIZE, 296)
        self.assertEqual(ENTRY_SIZE, 80)
        self.assertEqual(data_segment_start(4), 296 + 4 * 80)

    def test_file_offsets_follow_catalog_order(self) -> None:
        assigned = assign_file_offsets(sample_catalog())
        start = data_segment_start(4)

        self.assertEqual(assigned[0].next_index, 2)
        self.assertEqual([entry.next_index for entry in assigned[1:]], [start, start, start + 3])

    def test_consecutive_files_are_contiguous(self) -> None:
        assigned = [entry for entry in assign_file_offsets(sample_catalog()) if not entry.is_dir]

        for current, following in zip(assigned, assigned[1:]):
            self.assertEqual(following.next_index, current.next_index + current.size)

    def test_header_totals_count_plain_files_and_sum_sizes(self) -> None:
        header = header_totals(VolumeHeader(), sample_catalog())

        self.assertEqual(header.num_files, 4)
        self.assertEqual(header.num_entries, 3)
        self.assertEqual(header.size, 8)
        self.assertEqual(header.catalog_offset, HEADER_SIZE)

    def test_total_size_overflow_is_rejected(self) -> None:
        catalog = [CatalogEntry("huge.bin", size=0xFFFFFFFF), CatalogEntry("more.bin", size=1)]

        with self.assertRaises(VolumeBuildError):
            header_totals(VolumeHeader(), catalog)

    def test_file_offset_past_32_bits_is_rejected_even_when_total_fits(self) -> None:
        catalog = [CatalogEntry("big.bin", size=0xFFFFFFFF - 400), CatalogEntry("tail.bin", size=1, entry_type=EntryType.LAST)]

        header = header_totals(VolumeHeader(), catalog)
        self.assertEqual(header.size, 0xFFFFFFFF - 399)
        with self.assertRaises(VolumeBuildError):
            assign_file_offsets(catalog, header.catalog_offset)


if __name__ == "__main__":
    unittest.main()
