# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Configuration module for the hex puzzle generator.

Handles loading configuration from YAML files and command-line arguments,
with proper merging and validation.
"""

import argparse
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Optional, List, Dict, Any

import yaml


DEFAULT_GRID_RADIUS = 10
DEFAULT_SEED = "default"
MAX_GRID_RADIUS = 50

VALID_OUTPUT_FORMATS = ["yaml", "text", "json"]
VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""
    pass


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass
class GenerationConfig:
    """Configuration for word placement."""
    strict_spacing: bool = False
    deferred_pass: bool = False
    min_words: int = 3
    random_word_count: int = 0  # Pick this many words from the pool when > 0
    word_pool: Optional[str] = None


@dataclass
class OutputConfig:
    """Configuration for output."""
    directory: str = "./output"
    formats: List[str] = field(default_factory=lambda: ["yaml", "text"])
    log_level: str = "INFO"
    log_file_prefix: str = "hexaword_generator"
    enable_console_logging: bool = True


@dataclass
class HexaWordConfig:
    """Complete configuration for puzzle generation."""
    # Puzzle settings
    words: List[str] = field(default_factory=list)
    seed: str = DEFAULT_SEED
    grid_radius: int = DEFAULT_GRID_RADIUS
    level: Optional[int] = None
    content_id: Optional[str] = None
    clue: str = ""
    name: Optional[str] = None

    # Sub-configurations
    generation: GenerationConfig = field(default_factory=GenerationConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    def __post_init__(self):
        """Convert dicts to dataclass instances if needed."""
        if isinstance(self.generation, dict):
            self.generation = GenerationConfig(**self.generation)
        if isinstance(self.output, dict):
            self.output = OutputConfig(**self.output)

    @classmethod
    def from_yaml(cls, path: str) -> 'HexaWordConfig':
        """
        Load configuration from a YAML file.

        Args:
            path: Path to YAML configuration file

        Returns:
            HexaWordConfig instance

        Raises:
            ConfigValidationError: If file doesn't exist or is invalid
        """
        path = Path(path)
        if not path.exists():
            raise ConfigValidationError(f"Configuration file not found: {path}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigValidationError(f"Invalid YAML in {path}: {e}")

        if not isinstance(data, dict):
            raise ConfigValidationError(
                f"Configuration file must contain a YAML mapping, got {type(data)}"
            )

        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: Dict[str, Any]) -> 'HexaWordConfig':
        """Create HexaWordConfig from dictionary."""
        # Handle nested 'puzzle' key
        puzzle_data = data.get('puzzle', {}) or {}

        config = cls(
            words=[str(w).upper() for w in puzzle_data.get('words', [])],
            seed=str(puzzle_data.get('seed', DEFAULT_SEED)),
            grid_radius=puzzle_data.get('grid_radius', DEFAULT_GRID_RADIUS),
            level=puzzle_data.get('level'),
            content_id=puzzle_data.get('content_id'),
            clue=puzzle_data.get('clue', ''),
            name=puzzle_data.get('name'),
        )

        # Load sub-configurations
        if 'generation' in data:
            gen_data = data['generation'] or {}
            config.generation = GenerationConfig(
                strict_spacing=gen_data.get(
                    'strict_spacing', config.generation.strict_spacing
                ),
                deferred_pass=gen_data.get(
                    'deferred_pass', config.generation.deferred_pass
                ),
                min_words=gen_data.get('min_words', config.generation.min_words),
                random_word_count=gen_data.get(
                    'random_word_count', config.generation.random_word_count
                ),
                word_pool=gen_data.get('word_pool', config.generation.word_pool),
            )

        if 'output' in data:
            out_data = data['output'] or {}
            config.output = OutputConfig(
                directory=out_data.get('directory', config.output.directory),
                formats=out_data.get('formats', config.output.formats),
                log_level=out_data.get('log_level', config.output.log_level),
                log_file_prefix=out_data.get(
                    'log_file_prefix', config.output.log_file_prefix
                ),
                enable_console_logging=out_data.get(
                    'enable_console_logging',
                    config.output.enable_console_logging
                ),
            )

        return config

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> 'HexaWordConfig':
        """
        Create configuration from command-line arguments.

        Args:
            args: Parsed command-line arguments

        Returns:
            HexaWordConfig instance
        """
        config = cls()

        # Map CLI arguments to config
        if getattr(args, 'words', None):
            config.words = [
                w.strip().upper() for w in args.words.split(',') if w.strip()
            ]
        if getattr(args, 'seed', None):
            config.seed = args.seed
        if getattr(args, 'radius', None) is not None:
            config.grid_radius = args.radius
        if getattr(args, 'level', None) is not None:
            config.level = args.level
        if getattr(args, 'content_id', None):
            config.content_id = args.content_id
        if getattr(args, 'random', None) is not None:
            config.generation.random_word_count = args.random
        if getattr(args, 'word_pool', None):
            config.generation.word_pool = args.word_pool
        if getattr(args, 'strict_spacing', False):
            config.generation.strict_spacing = True
        if getattr(args, 'deferred_pass', False):
            config.generation.deferred_pass = True
        if getattr(args, 'output', None):
            config.output.directory = args.output
        if getattr(args, 'format', None):
            config.output.formats = [f.strip() for f in args.format.split(',')]
        if getattr(args, 'verbose', False):
            config.output.log_level = "DEBUG"

        return config

    @classmethod
    def merge(
        cls,
        yaml_config: 'HexaWordConfig',
        cli_config: 'HexaWordConfig'
    ) -> 'HexaWordConfig':
        """
        Merge configurations with CLI taking precedence over YAML.

        Args:
            yaml_config: Configuration loaded from YAML file
            cli_config: Configuration from command-line arguments

        Returns:
            Merged HexaWordConfig instance
        """
        # Start with YAML config as base
        merged = HexaWordConfig(
            words=list(yaml_config.words),
            seed=yaml_config.seed,
            grid_radius=yaml_config.grid_radius,
            level=yaml_config.level,
            content_id=yaml_config.content_id,
            clue=yaml_config.clue,
            name=yaml_config.name,
            generation=GenerationConfig(**asdict(yaml_config.generation)),
            output=OutputConfig(**asdict(yaml_config.output)),
        )

        # Override with CLI values (non-default values)
        default = cls()

        if cli_config.words:
            merged.words = list(cli_config.words)
        if cli_config.seed != default.seed:
            merged.seed = cli_config.seed
        if cli_config.grid_radius != default.grid_radius:
            merged.grid_radius = cli_config.grid_radius
        if cli_config.level is not None:
            merged.level = cli_config.level
        if cli_config.content_id is not None:
            merged.content_id = cli_config.content_id
        if cli_config.generation.strict_spacing:
            merged.generation.strict_spacing = True
        if cli_config.generation.deferred_pass:
            merged.generation.deferred_pass = True
        if (cli_config.generation.random_word_count !=
                default.generation.random_word_count):
            merged.generation.random_word_count = (
                cli_config.generation.random_word_count
            )
        if cli_config.generation.word_pool:
            merged.generation.word_pool = cli_config.generation.word_pool
        if cli_config.output.directory != default.output.directory:
            merged.output.directory = cli_config.output.directory
        if cli_config.output.formats != default.output.formats:
            merged.output.formats = cli_config.output.formats
        if cli_config.output.log_level != default.output.log_level:
            merged.output.log_level = cli_config.output.log_level

        return merged

    def validate(self) -> List[str]:
        """
        Validate configuration values.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        # Validate radius
        if not _is_int(self.grid_radius):
            errors.append(f"grid_radius must be an integer, got {self.grid_radius!r}")
        elif not 1 <= self.grid_radius <= MAX_GRID_RADIUS:
            errors.append(
                f"Invalid grid_radius {self.grid_radius}. "
                f"Must be between 1 and {MAX_GRID_RADIUS}"
            )

        # Validate seed
        if not isinstance(self.seed, str) or not self.seed:
            errors.append("Seed cannot be empty")

        # Validate level
        if self.level is not None and (not _is_int(self.level) or self.level < 1):
            errors.append(f"level must be a positive integer, got {self.level!r}")

        count = self.generation.random_word_count
        if not _is_int(count) or count < 0:
            errors.append(f"random_word_count must be a non-negative integer, got {count!r}")

        if not _is_int(self.generation.min_words) or self.generation.min_words < 1:
            errors.append(
                f"min_words must be an integer of at least 1, "
                f"got {self.generation.min_words!r}"
            )

        # Validate output formats
        formats = self.output.formats
        if not isinstance(formats, list):
            errors.append(f"output formats must be a list, got {formats!r}")
            formats = []
        for fmt in formats:
            if fmt not in VALID_OUTPUT_FORMATS:
                errors.append(
                    f"Invalid output format '{fmt}'. "
                    f"Must be one of: {VALID_OUTPUT_FORMATS}"
                )

        log_level = self.output.log_level
        if not isinstance(log_level, str) or log_level.upper() not in VALID_LOG_LEVELS:
            errors.append(
                f"Invalid log level '{self.output.log_level}'. "
                f"Must be one of: {VALID_LOG_LEVELS}"
            )

        return errors

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            'puzzle': {
                'words': list(self.words),
                'seed': self.seed,
                'grid_radius': self.grid_radius,
                'level': self.level,
                'content_id': self.content_id,
                'clue': self.clue,
                'name': self.name,
            },
            'generation': asdict(self.generation),
            'output': asdict(self.output),
        }


def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Generate hex word puzzles from a word list and a seed",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Explicit word list
  python hexaword_generator.py --words CAT,ART,TEA --seed s1

  # Curated level, seeded the way the game client seeds it
  python hexaword_generator.py --level 7 --content-id post123

  # Random level from the bundled word pool
  python hexaword_generator.py --random 5 --seed daily-42

  # YAML configuration, CLI arguments override it
  python hexaword_generator.py --config puzzle.yaml --radius 8
"""
    )

    # Configuration file
    parser.add_argument(
        "--config", "-c",
        metavar="PATH",
        help="YAML configuration file"
    )

    # Puzzle settings
    parser.add_argument(
        "--words", "-w",
        metavar="LIST",
        help="Comma-separated words to place"
    )
    parser.add_argument(
        "--seed", "-s",
        metavar="TEXT",
        help="Seed string (default: derived from --content-id/--level, else 'default')"
    )
    parser.add_argument(
        "--radius", "-r",
        type=int,
        metavar="INT",
        help=f"Grid radius (default: {DEFAULT_GRID_RADIUS})"
    )
    parser.add_argument(
        "--level", "-l",
        type=int,
        metavar="INT",
        help="Curated level number"
    )
    parser.add_argument(
        "--content-id",
        metavar="TEXT",
        help="Content id used to derive the seed '{content-id}:{level}'"
    )
    parser.add_argument(
        "--random",
        type=int,
        metavar="INT",
        help="Pick this many words from the word pool"
    )
    parser.add_argument(
        "--word-pool",
        metavar="PATH",
        help="YAML word pool for --random"
    )
    parser.add_argument(
        "--level-file",
        metavar="PATH",
        help="YAML level definition (words, seed, grid_radius, clue)"
    )

    # Placement settings
    parser.add_argument(
        "--strict-spacing",
        action="store_true",
        help="Keep words from touching except where they cross"
    )
    parser.add_argument(
        "--deferred-pass",
        action="store_true",
        help="Retry unplaced words after the main pass"
    )

    # Output settings
    parser.add_argument(
        "--output", "-o",
        metavar="PATH",
        help="Output directory"
    )
    parser.add_argument(
        "--format",
        metavar="FORMATS",
        help=f"Comma-separated output formats ({', '.join(VALID_OUTPUT_FORMATS)})"
    )

    # Other options
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Validate config without generating"
    )

    return parser


def load_config(args: Optional[argparse.Namespace] = None) -> HexaWordConfig:
    """
    Load configuration from command-line and/or YAML file.

    Args:
        args: Parsed command-line arguments (if None, parses sys.argv)

    Returns:
        Fully resolved HexaWordConfig

    Raises:
        ConfigValidationError: If configuration is invalid
    """
    if args is None:
        parser = create_argument_parser()
        args = parser.parse_args()

    # Load from YAML if specified
    yaml_config = None
    if getattr(args, 'config', None):
        yaml_config = HexaWordConfig.from_yaml(args.config)

    # Load from CLI
    cli_config = HexaWordConfig.from_args(args)

    # Merge configurations
    if yaml_config:
        config = HexaWordConfig.merge(yaml_config, cli_config)
    else:
        config = cli_config

    # Validate
    errors = config.validate()
    if errors:
        raise ConfigValidationError(
            "Configuration validation failed:\n" +
            "\n".join(f"  - {e}" for e in errors)
        )

    return config
