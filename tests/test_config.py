# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""Unit tests for config module."""

import os
import sys
import tempfile
import unittest

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from config import (
    HexaWordConfig, GenerationConfig, OutputConfig,
    ConfigValidationError, create_argument_parser, load_config,
    DEFAULT_GRID_RADIUS, DEFAULT_SEED, VALID_OUTPUT_FORMATS
)


class TestHexaWordConfig(unittest.TestCase):
    """Tests for HexaWordConfig class."""

    def test_default_config(self):
        """Test default configuration values."""
        config = HexaWordConfig()

        self.assertEqual(config.words, [])
        self.assertEqual(config.seed, DEFAULT_SEED)
        self.assertEqual(config.grid_radius, DEFAULT_GRID_RADIUS)
        self.assertIsNone(config.level)
        self.assertIsNone(config.content_id)
        self.assertEqual(config.clue, "")

    def test_nested_config_from_dict(self):
        """Test creating config with nested dict values."""
        config = HexaWordConfig(
            seed="nested",
            generation={'deferred_pass': True},
            output={'directory': './test_output'}
        )

        self.assertTrue(config.generation.deferred_pass)
        self.assertEqual(config.output.directory, './test_output')

    def test_validation_valid_config(self):
        """Test validation of valid configuration."""
        config = HexaWordConfig(words=["CAT", "ART", "TEA"], seed="s1", grid_radius=8)
        self.assertEqual(config.validate(), [])

    def test_validation_invalid_radius(self):
        """Test validation catches out of range and non-integer radii."""
        for radius in (0, 51, "ten", 2.5):
            config = HexaWordConfig(grid_radius=radius)
            errors = config.validate()
            self.assertTrue(any("grid_radius" in e for e in errors), radius)

    def test_validation_empty_seed(self):
        config = HexaWordConfig(seed="")
        self.assertTrue(any("seed" in e.lower() for e in config.validate()))

    def test_validation_invalid_level(self):
        config = HexaWordConfig(level=0)
        self.assertTrue(any("level" in e for e in config.validate()))

    def test_validation_invalid_format(self):
        config = HexaWordConfig(output={'formats': ['yaml', 'svg']})
        errors = config.validate()
        self.assertTrue(any("svg" in e for e in errors))

    def test_validation_invalid_log_level(self):
        config = HexaWordConfig(output={'log_level': 'LOUD'})
        self.assertTrue(any("log level" in e for e in config.validate()))

    def test_to_dict(self):
        """Test conversion to dictionary."""
        config = HexaWordConfig(words=["CAT"], seed="s1")

        result = config.to_dict()

        self.assertIn('puzzle', result)
        self.assertEqual(result['puzzle']['words'], ["CAT"])
        self.assertEqual(result['puzzle']['seed'], "s1")
        self.assertFalse(result['generation']['strict_spacing'])
        self.assertEqual(result['output']['directory'], "./output")


class TestSubConfigs(unittest.TestCase):
    """Tests for GenerationConfig and OutputConfig."""

    def test_generation_defaults(self):
        config = GenerationConfig()

        self.assertFalse(config.strict_spacing)
        self.assertFalse(config.deferred_pass)
        self.assertEqual(config.min_words, 3)
        self.assertEqual(config.random_word_count, 0)
        self.assertIsNone(config.word_pool)

    def test_output_defaults(self):
        config = OutputConfig()

        self.assertEqual(config.directory, "./output")
        self.assertEqual(config.formats, ["yaml", "text"])
        for fmt in config.formats:
            self.assertIn(fmt, VALID_OUTPUT_FORMATS)


class TestYAMLLoading(unittest.TestCase):
    """Tests for YAML configuration loading."""

    def setUp(self):
        """Create a temporary YAML file for testing."""
        self.temp_file = tempfile.NamedTemporaryFile(
            mode='w', suffix='.yaml', delete=False
        )
        self.temp_file.write('''
puzzle:
  words: [cat, art, tea]
  seed: "post123:4"
  grid_radius: 7
  clue: "KITCHEN"

generation:
  deferred_pass: true

output:
  directory: "./test_output"
  formats: [yaml, json]
''')
        self.temp_file.close()

    def tearDown(self):
        """Clean up temporary file."""
        os.unlink(self.temp_file.name)

    def test_load_from_yaml(self):
        """Test loading configuration from YAML file."""
        config = HexaWordConfig.from_yaml(self.temp_file.name)

        self.assertEqual(config.words, ["CAT", "ART", "TEA"])
        self.assertEqual(config.seed, "post123:4")
        self.assertEqual(config.grid_radius, 7)
        self.assertEqual(config.clue, "KITCHEN")
        self.assertTrue(config.generation.deferred_pass)
        self.assertFalse(config.generation.strict_spacing)
        self.assertEqual(config.output.directory, "./test_output")
        self.assertEqual(config.output.formats, ["yaml", "json"])

    def test_load_nonexistent_file(self):
        """Test error when loading non-existent file."""
        with self.assertRaises(ConfigValidationError):
            HexaWordConfig.from_yaml("/nonexistent/path.yaml")

    def test_load_non_mapping(self):
        with open(self.temp_file.name, 'w') as f:
            f.write("- just\n- a list\n")
        with self.assertRaises(ConfigValidationError):
            HexaWordConfig.from_yaml(self.temp_file.name)

    def test_load_config_applies_cli_overrides(self):
        parser = create_argument_parser()
        args = parser.parse_args(["--config", self.temp_file.name, "--radius", "9"])

        config = load_config(args)

        self.assertEqual(config.grid_radius, 9)
        self.assertEqual(config.seed, "post123:4")

    def test_load_config_rejects_invalid(self):
        parser = create_argument_parser()
        args = parser.parse_args(["--config", self.temp_file.name, "--radius", "99"])

        with self.assertRaises(ConfigValidationError):
            load_config(args)

    def test_non_integer_fields_rejected(self):
        """Wrongly typed YAML values are reported, not raised as TypeError."""
        with open(self.temp_file.name, 'w') as f:
            f.write('''
puzzle:
  words: [CAT, ART, TEA]
  level: abc

generation:
  random_word_count: many
  min_words: "3"

output:
  formats: yaml
''')
        args = create_argument_parser().parse_args(["--config", self.temp_file.name])

        with self.assertRaises(ConfigValidationError) as ctx:
            load_config(args)

        message = str(ctx.exception)
        self.assertIn("level", message)
        self.assertIn("random_word_count", message)
        self.assertIn("min_words", message)
        self.assertIn("formats", message)


class TestArgumentParsing(unittest.TestCase):
    """Tests for command-line parsing."""

    def test_from_args(self):
        parser = create_argument_parser()
        args = parser.parse_args([
            "--words", "cat, art ,tea", "--seed", "s1", "--level", "3",
            "--content-id", "post9", "--strict-spacing", "--format", "json",
            "--verbose",
        ])

        config = HexaWordConfig.from_args(args)

        self.assertEqual(config.words, ["CAT", "ART", "TEA"])
        self.assertEqual(config.seed, "s1")
        self.assertEqual(config.level, 3)
        self.assertEqual(config.content_id, "post9")
        self.assertTrue(config.generation.strict_spacing)
        self.assertFalse(config.generation.deferred_pass)
        self.assertEqual(config.output.formats, ["json"])
        self.assertEqual(config.output.log_level, "DEBUG")

    def test_zero_values_are_not_dropped(self):
        """Explicit zero or negative numbers reach validation."""
        parser = create_argument_parser()

        args = parser.parse_args(["--words", "CAT,ART", "--radius", "0"])
        self.assertEqual(HexaWordConfig.from_args(args).grid_radius, 0)
        with self.assertRaises(ConfigValidationError):
            load_config(args)

        with self.assertRaises(ConfigValidationError):
            load_config(parser.parse_args(["--level", "0"]))

        with self.assertRaises(ConfigValidationError):
            load_config(parser.parse_args(["--random", "-1"]))

        config = load_config(parser.parse_args(["--random", "0"]))
        self.assertEqual(config.generation.random_word_count, 0)

    def test_from_args_defaults(self):
        args = create_argument_parser().parse_args([])
        config = HexaWordConfig.from_args(args)
        self.assertEqual(config.to_dict(), HexaWordConfig().to_dict())


class TestConfigMerge(unittest.TestCase):
    """Tests for configuration merging."""

    def test_merge_prefers_cli(self):
        """Test that CLI config takes precedence over YAML."""
        yaml_config = HexaWordConfig(words=["SUN"], seed="yaml-seed")
        cli_config = HexaWordConfig(words=["MOON"], seed="cli-seed")

        merged = HexaWordConfig.merge(yaml_config, cli_config)

        self.assertEqual(merged.words, ["MOON"])
        self.assertEqual(merged.seed, "cli-seed")

    def test_merge_keeps_yaml_when_cli_default(self):
        """Test that YAML values are kept when CLI uses defaults."""
        yaml_config = HexaWordConfig(
            words=["SUN", "SAND"],
            seed="yaml-seed",
            grid_radius=6,
            clue="BEACH DAY",
            generation={'deferred_pass': True},
        )
        cli_config = HexaWordConfig()  # All defaults

        merged = HexaWordConfig.merge(yaml_config, cli_config)

        self.assertEqual(merged.words, ["SUN", "SAND"])
        self.assertEqual(merged.seed, "yaml-seed")
        self.assertEqual(merged.grid_radius, 6)
        self.assertEqual(merged.clue, "BEACH DAY")
        self.assertTrue(merged.generation.deferred_pass)

    def test_merge_does_not_alias_yaml_config(self):
        yaml_config = HexaWordConfig(words=["SUN"])
        merged = HexaWordConfig.merge(yaml_config, HexaWordConfig())
        merged.words.append("SAND")
        merged.output.formats.append("json")

        self.assertEqual(yaml_config.words, ["SUN"])
        self.assertEqual(yaml_config.output.formats, ["yaml", "text"])


if __name__ == '__main__':
    unittest.main()
