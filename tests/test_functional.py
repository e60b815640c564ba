# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""Functional tests for the hex puzzle generator command line."""

import io
import json
import logging
import os
import shutil
import sys
import tempfile
import unittest
from contextlib import redirect_stdout
from unittest.mock import patch

import yaml

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from config import HexaWordConfig
from hexaword_generator import (
    HexaWordGenerator, format_summary, main,
    EXIT_ERROR, EXIT_OK, EXIT_PARTIAL,
)
from levels import LevelNotFoundError


class CLITestCase(unittest.TestCase):
    """Runs the CLI against a scratch output directory."""

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()

    def tearDown(self):
        root = logging.getLogger()
        for handler in list(root.handlers):
            root.removeHandler(handler)
            handler.close()
        shutil.rmtree(self.temp_dir)

    def run_main(self, *argv):
        out = io.StringIO()
        with redirect_stdout(out):
            code = main(list(argv) + ["--output", self.temp_dir])
        return code, out.getvalue()


class TestCommandLine(CLITestCase):
    """End to end runs of main()."""

    def test_complete_puzzle(self):
        code, output = self.run_main(
            "--words", "CAT,ART,TEA", "--seed", "s1", "--format", "yaml,text,json"
        )

        self.assertEqual(code, EXIT_OK)
        self.assertIn("Result: complete (3/3 words)", output)
        for ext in ("yaml", "txt", "json"):
            self.assertTrue(os.path.exists(os.path.join(self.temp_dir, f"s1.{ext}")))

        with open(os.path.join(self.temp_dir, "s1.json")) as f:
            self.assertTrue(json.load(f)["success"])

    def test_log_file_written(self):
        self.run_main("--words", "CAT,ART,TEA", "--seed", "s1")
        logs = [n for n in os.listdir(self.temp_dir) if n.endswith(".log")]
        self.assertEqual(len(logs), 1)

    def test_partial_puzzle_exit_code(self):
        code, output = self.run_main("--words", "ZEBRA,QUILT", "--seed", "s1")

        self.assertEqual(code, EXIT_PARTIAL)
        self.assertIn("QUILT", output)
        self.assertIn("not placed", output)

    def test_invalid_word(self):
        code, output = self.run_main("--words", "C4T,ART,TEA")
        self.assertEqual(code, EXIT_ERROR)
        self.assertIn("Error:", output)

    def test_invalid_radius(self):
        code, output = self.run_main("--words", "CAT,ART", "--radius", "99")
        self.assertEqual(code, EXIT_ERROR)
        self.assertIn("Configuration error", output)

    def test_malformed_config_value(self):
        config_path = os.path.join(self.temp_dir, "bad.yaml")
        with open(config_path, 'w') as f:
            f.write("puzzle:\n  level: abc\n")

        code, output = self.run_main("--config", config_path, "--dry-run")

        self.assertEqual(code, EXIT_ERROR)
        self.assertIn("Configuration error", output)

    def test_unexpected_failure_reported(self):
        with patch.object(HexaWordGenerator, 'run', side_effect=RuntimeError("disk full")):
            code, output = self.run_main("--words", "CAT,ART,TEA")

        self.assertEqual(code, EXIT_ERROR)
        self.assertIn("Error: disk full", output)

    def test_no_word_source(self):
        code, output = self.run_main()
        self.assertEqual(code, EXIT_ERROR)

    def test_dry_run(self):
        code, output = self.run_main("--words", "CAT,ART,TEA", "--dry-run")
        self.assertEqual(code, EXIT_OK)
        self.assertIn("Configuration valid", output)
        self.assertEqual(os.listdir(self.temp_dir), [])

    def test_curated_level_with_content_id(self):
        code, _ = self.run_main("--level", "1", "--content-id", "post123", "--format", "yaml")

        self.assertIn(code, (EXIT_OK, EXIT_PARTIAL))
        path = os.path.join(self.temp_dir, "level_1.yaml")
        with open(path) as f:
            data = yaml.safe_load(f.read())
        self.assertEqual(data['metadata']['seed'], "post123:1")
        self.assertEqual(data['metadata']['clue'], "BEACH DAY")

    def test_unknown_level(self):
        code, _ = self.run_main("--level", "99")
        self.assertEqual(code, EXIT_ERROR)

    def test_level_file(self):
        level_path = os.path.join(self.temp_dir, "beach.yaml")
        with open(level_path, 'w') as f:
            f.write("level:\n  words: [SUN, SAND, WAVE]\n  seed: beach-1\n  name: Beach\n")

        code, output = self.run_main("--level-file", level_path, "--format", "json")

        self.assertIn(code, (EXIT_OK, EXIT_PARTIAL))
        self.assertIn("Seed: beach-1", output)
        self.assertTrue(os.path.exists(os.path.join(self.temp_dir, "beach.json")))

    def test_random_level(self):
        code, output = self.run_main("--random", "4", "--seed", "daily-1", "--format", "text")
        self.assertIn(code, (EXIT_OK, EXIT_PARTIAL))
        self.assertTrue(os.path.exists(os.path.join(self.temp_dir, "daily_1.txt")))


class TestWorkflow(CLITestCase):
    """Tests for HexaWordGenerator level resolution."""

    def _config(self, **kwargs):
        config = HexaWordConfig(**kwargs)
        config.output.directory = self.temp_dir
        config.output.enable_console_logging = False
        return config

    def test_explicit_words_win_over_level(self):
        workflow = HexaWordGenerator(self._config(words=["CAT", "ART"], level=3))
        level = workflow.resolve_level()
        self.assertEqual(level.words, ["CAT", "ART"])

    def test_content_id_seed(self):
        workflow = HexaWordGenerator(self._config(level=7, content_id="post9"))
        level = workflow.resolve_level()
        self.assertEqual(level.seed, "post9:7")
        self.assertEqual(level.clue, "COFFEE RUN")

    def test_explicit_seed_wins_over_content_id(self):
        workflow = HexaWordGenerator(self._config(level=7, content_id="post9", seed="mine"))
        self.assertEqual(workflow.resolve_level().seed, "mine")

    def test_no_source_raises(self):
        workflow = HexaWordGenerator(self._config())
        with self.assertRaises(LevelNotFoundError):
            workflow.resolve_level()

    def test_summary_lists_directions(self):
        workflow = HexaWordGenerator(self._config(words=["CAT", "ART", "TEA"], seed="s1"))
        result, level, files = workflow.run()

        summary = format_summary(result, level)
        self.assertIn("Seed: s1", summary)
        self.assertEqual(set(files), {"yaml", "text"})
        for entry in result.placed_words:
            self.assertIn(entry.word, summary)


if __name__ == '__main__':
    unittest.main()
