from __future__ import annotations

import logging
import re
import unicodedata
from dataclasses import dataclass
from pathlib import Path

import regex  # type: ignore

logger = logging.getLogger(__name__)

_WHITESPACE_RE = re.compile(r"\s+")
_CONTROL_RE = re.compile(r"[\x00-\x08\x0B-\x1F\x7F]")


def read_corpus(path: str | Path, encoding: str = "utf-8") -> str:
    """Read a whole corpus file into one string."""

    try:
        with open(path, "r", encoding=encoding) as f:
            text = f.read()
    except UnicodeDecodeError as e:
        logger.error(f"Encoding error in {path}: {e}")
        raise

    logger.info(f"Read {len(text)} chars from {path}")
    return text


@dataclass(frozen=True)
class CleanCorpusConfig:
    lowercase: bool = False
    strip_accents: bool = False
    remove_control_chars: bool = False
    normalize_whitespace: bool = False


def clean_corpus(text: str, config: CleanCorpusConfig | None = None) -> str:
    """Optional normalization applied before training.

    Everything is off by default: contexts are matched exactly, so case and
    whitespace are part of what the model learns.
    """

    cfg = config or CleanCorpusConfig()
    s = text

    if cfg.lowercase:
        s = s.lower()

    if cfg.strip_accents:
        s = regex.sub(r"\p{Mn}+", "", unicodedata.normalize("NFKD", s))

    # Keeps \t and \n.
    if cfg.remove_control_chars:
        s = _CONTROL_RE.sub(" ", s)

    if cfg.normalize_whitespace:
        s = _WHITESPACE_RE.sub(" ", s).strip()

    return s
