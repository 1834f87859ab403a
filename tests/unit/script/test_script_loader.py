from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from vdfpack.errors import ScriptError
from vdfpack.script import VolumeScript, load_script, parse_script


class ScriptLoaderTests(unittest.TestCase):
    def test_parses_all_fields(self) -> None:
        script = parse_script(
            "comment: My textures\n"
            "base_dir: ./_work/data\n"
            "file_path: out/Textures.vdf\n"
            "file_include_globs:\n"
            "  - textures/**\n"
            "  - 'Anims/*.MAN'\n"
        )

        self.assertEqual(
            script,
            VolumeScript(
                comment="My textures",
                base_dir=Path("./_work/data"),
                file_path=Path("out/Textures.vdf"),
                file_include_globs=("textures/**", "Anims/*.MAN"),
            ),
        )

    def test_missing_fields_default_to_empty(self) -> None:
        self.assertEqual(parse_script(""), VolumeScript())
        self.assertEqual(parse_script("comment: only\n"), VolumeScript(comment="only"))

    def test_rejects_non_mapping_document(self) -> None:
        with self.assertRaises(ScriptError):
            parse_script("- a\n- b\n")

    def test_rejects_invalid_yaml(self) -> None:
        with self.assertRaises(ScriptError):
            parse_script("comment: [unclosed\n")

    def test_rejects_scalar_glob_list(self) -> None:
        with self.assertRaises(ScriptError):
            parse_script("file_include_globs: '*.txt'\n")

    def test_rejects_mapping_comment(self) -> None:
        with self.assertRaises(ScriptError):
            parse_script("comment:\n  nested: true\n")

    def test_load_script_reads_file_and_reports_missing(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "build.yml"
            path.write_text("base_dir: data\nfile_path: out.vdf\n", encoding="utf-8")

            script = load_script(path)
            self.assertEqual(script.base_dir, Path("data"))
            self.assertEqual(script.file_path, Path("out.vdf"))

            with self.assertRaises(ScriptError) as ctx:
                load_script(Path(tmp) / "missing.yml")
            self.assertIn("missing.yml", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
