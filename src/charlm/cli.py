#!/usr/bin/env python3
"""
Command-line entry point for the character n-gram language model.

Usage:
    charlm corpus.txt -s "The " -w 4 -n 300
    charlm corpus.txt -s "The " --random-seed 7     # reproducible output
    charlm corpus.txt -s "The " --config model.json --show-model
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import ModelConfig
from .corpus import CleanCorpusConfig, clean_corpus, read_corpus
from .language_model import LanguageModel

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Train a character n-gram model on a corpus and generate text"
    )

    parser.add_argument("corpus", type=str, help="Path to a plain-text corpus file")

    parser.add_argument(
        "--seed-text", "-s",
        type=str,
        required=True,
        help="Text to start generation from"
    )

    parser.add_argument(
        "--window", "-w",
        type=int,
        help="Context window length (overrides config)"
    )

    parser.add_argument(
        "--length", "-n",
        type=int,
        help="Number of characters to generate (overrides config)"
    )

    parser.add_argument(
        "--random-seed",
        type=int,
        help="Seed for reproducible generation"
    )

    parser.add_argument(
        "--clean",
        action="store_true",
        help="Normalize whitespace and strip control characters before training"
    )

    parser.add_argument(
        "--config", "-c",
        type=str,
        help="Path to configuration JSON file"
    )

    parser.add_argument(
        "--show-model",
        action="store_true",
        help="Print the trained context map before the generated text"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging"
    )

    return parser


def load_config(args: argparse.Namespace) -> ModelConfig:
    """Merge the JSON config (if any) with command-line overrides."""
    if args.config and Path(args.config).exists():
        config = ModelConfig.from_json(args.config)
    else:
        if args.config:
            logger.warning(f"Config file not found: {args.config}; using defaults")
        config = ModelConfig()

    if args.window is not None:
        config.window_length = args.window
    if args.length is not None:
        config.generate_length = args.length
    if args.random_seed is not None:
        config.seed = args.random_seed
    if args.clean:
        config.clean_corpus = True
    return config


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        config = load_config(args)
    except (OSError, json.JSONDecodeError, TypeError) as e:
        logger.error(f"Could not load config: {e}")
        return 1

    try:
        text = read_corpus(args.corpus, encoding=config.encoding)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Could not read corpus: {e}")
        return 1

    if config.clean_corpus:
        text = clean_corpus(
            text,
            CleanCorpusConfig(remove_control_chars=True, normalize_whitespace=True),
        )

    try:
        model = LanguageModel.from_config(config)
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    model.train(text)

    if args.show_model:
        print(model, end="")

    print(model.generate(args.seed_text, config.generate_length))
    return 0


if __name__ == "__main__":
    sys.exit(main())
