#!/usr/bin/env python3
# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Hex Word Puzzle Generator

Builds a hex word board from:
1. An explicit word list, a curated level, a level file, or a seeded
   random pick from the word pool
2. Compatibility scoring to order the words
3. Seeded placement on the axial hex grid
4. YAML / text / JSON output

Usage:
    # Explicit words:
    python hexaword_generator.py --words CAT,ART,TEA --seed s1

    # Curated level with the client's seed convention:
    python hexaword_generator.py --level 7 --content-id post123

    # With YAML configuration:
    python hexaword_generator.py --config puzzle.yaml
"""

import json
import os
import sys
from typing import Dict, Optional, Sequence, Tuple

# Add src to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from config import (
    HexaWordConfig, create_argument_parser, load_config,
    ConfigValidationError, DEFAULT_SEED
)
from levels import (
    LevelNotFoundError, LevelSelector, WordRepository,
    get_predefined_level, make_level_seed,
)
from logging_config import get_logger, setup_logging
from models import GenerationResult, DIRECTION_NAMES, ConsistencyViolationError
from puzzle_generator import HexPuzzleGenerator, InputError
from validator import validate_words
from yaml_exporter import YAMLExporter, YAMLExportError
from yaml_importer import YAMLImporter, YAMLImportError
from yaml_schema import LevelDefinition

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_PARTIAL = 2


class HexaWordGenerator:
    """
    Command-line puzzle generation workflow.

    Workflow:
    1. Resolve the level (words, seed, radius, clue)
    2. Pre-flight check the word list
    3. Generate the board
    4. Write the requested output formats
    """

    def __init__(self, config: HexaWordConfig, level_file: Optional[str] = None):
        """
        Initialize the workflow.

        Args:
            config: HexaWordConfig with all settings
            level_file: Optional YAML level definition overriding the word source
        """
        self.config = config
        self.level_file = level_file

        self.log_file_path = setup_logging(
            output_dir=config.output.directory,
            log_level=config.output.log_level,
            log_file_prefix=config.output.log_file_prefix,
            enable_console=config.output.enable_console_logging,
        )
        self.logger = get_logger(__name__)

    def resolve_level(self) -> LevelDefinition:
        """
        Work out which words and seed to generate from.

        Priority: level file, explicit words, curated level, random pool.

        Raises:
            LevelNotFoundError: If no word source is configured or resolvable
        """
        if self.level_file:
            level = YAMLImporter().load_level(self.level_file)
            self.logger.info(f"Loaded level definition from {self.level_file}")
            return level

        seed = self._resolve_seed()

        if self.config.words:
            return LevelDefinition(
                words=list(self.config.words),
                seed=seed,
                grid_radius=self.config.grid_radius,
                clue=self.config.clue,
                name=self.config.name,
            )

        if self.config.level is not None:
            predefined = get_predefined_level(self.config.level)
            if predefined is None:
                raise LevelNotFoundError(f"No curated level {self.config.level}")
            return LevelDefinition(
                words=list(predefined.words),
                seed=seed,
                grid_radius=self.config.grid_radius,
                clue=self.config.clue or predefined.clue,
                name=self.config.name or f"Level {predefined.level}",
            )

        if self.config.generation.random_word_count > 0:
            selector = LevelSelector(WordRepository(self.config.generation.word_pool))
            selection = selector.pick_words(seed, self.config.generation.random_word_count)
            return LevelDefinition(
                words=selection.words,
                seed=seed,
                grid_radius=self.config.grid_radius,
                clue=self.config.clue or selection.clue,
                name=self.config.name,
            )

        raise LevelNotFoundError(
            "No words given: use --words, --level, --random or --level-file"
        )

    def _resolve_seed(self) -> str:
        if self.config.seed != DEFAULT_SEED:
            return self.config.seed
        if self.config.content_id:
            return make_level_seed(self.config.content_id, self.config.level or 1)
        return self.config.seed

    def run(self) -> Tuple[GenerationResult, LevelDefinition, Dict[str, str]]:
        """
        Generate the puzzle and write outputs.

        Returns:
            (result, level, output files by format)
        """
        self.logger.info("=" * 60)
        self.logger.info("HEX WORD PUZZLE GENERATOR")
        self.logger.info("=" * 60)

        self.logger.info("Step 1: Resolving level...")
        level = self.resolve_level()
        self.logger.info(f"   Words: {', '.join(level.words)}")
        self.logger.info(f"   Seed: {level.seed}, radius: {level.grid_radius}")

        self.logger.info("Step 2: Checking word list...")
        preflight = validate_words(level.words, min_words=self.config.generation.min_words)
        for error in preflight.errors:
            self.logger.warning(f"   ! {error}")

        self.logger.info("Step 3: Placing words...")
        generator = HexPuzzleGenerator(
            grid_radius=level.grid_radius,
            seed=level.seed,
            strict_spacing=self.config.generation.strict_spacing,
            deferred_pass=self.config.generation.deferred_pass,
        )
        result = generator.generate(level.words)
        self.logger.info(
            f"   Placed {len(result.placed_words)}/{len(result.words)} words "
            f"on {len(result.board)} cells"
        )

        self.logger.info("Step 4: Writing output...")
        files = self.write_outputs(result, level)
        for fmt, path in files.items():
            self.logger.info(f"   - {fmt}: {path}")

        return result, level, files

    def write_outputs(
        self,
        result: GenerationResult,
        level: LevelDefinition,
    ) -> Dict[str, str]:
        """Write each configured format; returns paths by format."""
        out_dir = self.config.output.directory
        base_name = _safe_name(level.name or level.seed)
        files: Dict[str, str] = {}

        for fmt in self.config.output.formats:
            if fmt == "yaml":
                path = os.path.join(out_dir, f"{base_name}.yaml")
                files[fmt] = YAMLExporter().save(
                    result, path, seed=level.seed,
                    grid_radius=level.grid_radius, clue=level.clue, name=level.name,
                )
            elif fmt == "text":
                path = os.path.join(out_dir, f"{base_name}.txt")
                os.makedirs(out_dir, exist_ok=True)
                with open(path, 'w', encoding='utf-8') as f:
                    f.write(format_summary(result, level) + "\n")
                files[fmt] = path
            elif fmt == "json":
                path = os.path.join(out_dir, f"{base_name}.json")
                os.makedirs(out_dir, exist_ok=True)
                with open(path, 'w', encoding='utf-8') as f:
                    json.dump(result.to_dict(), f, indent=2)
                files[fmt] = path

        return files


def _safe_name(text: str) -> str:
    cleaned = "".join(ch if ch.isalnum() else "_" for ch in text.lower())
    return cleaned.strip("_")[:40] or "puzzle"


def format_summary(result: GenerationResult, level: LevelDefinition) -> str:
    """Board drawing followed by the placement list."""
    lines = []
    if level.clue:
        lines.append(f"Clue: {level.clue}")
    lines.append(f"Seed: {level.seed}  Radius: {level.grid_radius}")
    lines.append("")
    lines.append(result.board.to_string())
    lines.append("")
    for word_id, entry in enumerate(result.placed_words):
        anchor = entry.anchor
        lines.append(
            f"{word_id:>2}. {entry.word:<12} ({anchor.q:>3}, {anchor.r:>3}) "
            f"{DIRECTION_NAMES[anchor.direction]}"
        )
    for entry in result.unplaced_words:
        lines.append(f"    {entry.word:<12} not placed")
    lines.append("")
    status = "complete" if result.success else "partial"
    lines.append(f"Result: {status} ({len(result.placed_words)}/{len(result.words)} words)")
    return "\n".join(lines)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    try:
        # Load configuration
        config = load_config(args)

        # Handle dry-run
        if args.dry_run:
            print("Configuration valid:")
            print(f"  Words: {', '.join(config.words) or '-'}")
            print(f"  Seed: {config.seed}")
            print(f"  Grid Radius: {config.grid_radius}")
            print(f"  Level: {config.level if config.level is not None else '-'}")
            print(f"  Strict Spacing: {config.generation.strict_spacing}")
            print(f"  Deferred Pass: {config.generation.deferred_pass}")
            print(f"  Output Directory: {config.output.directory}")
            return EXIT_OK

        workflow = HexaWordGenerator(config, level_file=args.level_file)
        result, level, _files = workflow.run()
        print(format_summary(result, level))
        return EXIT_OK if result.success else EXIT_PARTIAL

    except ConfigValidationError as e:
        print(f"Configuration error: {e}")
        return EXIT_ERROR
    except (InputError, LevelNotFoundError, YAMLImportError, YAMLExportError) as e:
        print(f"Error: {e}")
        return EXIT_ERROR
    except ConsistencyViolationError as e:
        print(f"Internal error: {e}")
        return EXIT_ERROR
    except KeyboardInterrupt:
        print("\nGeneration cancelled.")
        return EXIT_OK
    except Exception as e:
        print(f"Error: {e}")
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
