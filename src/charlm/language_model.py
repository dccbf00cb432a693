"""
Character-level n-gram language model.

The model maps every fixed-length context ("window") seen in a corpus to a
FrequencyTable of the characters that followed it. Generation starts from a
seed text and repeatedly samples the next character from the table of the
current window, then slides the window forward by one character.

Usage:
    lm = LanguageModel(2, seed=42)
    lm.train("abcabc")
    lm.generate("ab", 4)  # -> "abcabc"
"""

from __future__ import annotations

import logging
import random
from typing import Dict, Iterator, List, Optional

from .config import ModelConfig
from .frequency import FrequencyTable

logger = logging.getLogger(__name__)


class LanguageModel:
    """
    Character n-gram model with weighted random sampling.

    Attributes:
        window_length: Length of each context key
        rng: Random source owned by this model
    """

    def __init__(
        self,
        window_length: int,
        seed: Optional[int] = None,
        *,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize an empty (untrained) model.

        Args:
            window_length: Number of characters per context, must be >= 1
            seed: Seed for reproducible generation; None draws from system entropy
            rng: Explicit random source, overrides ``seed`` when given
        """
        if window_length < 1:
            raise ValueError("window_length must be >= 1")
        self.window_length = window_length
        self.rng = rng if rng is not None else random.Random(seed)
        self._tables: Dict[str, FrequencyTable] = {}
        self._trained = False

    @classmethod
    def from_config(cls, config: ModelConfig) -> "LanguageModel":
        """Create an untrained model from window length and seed in ``config``."""
        return cls(config.window_length, config.seed)

    def train(self, text: str) -> None:
        """
        Build the context map from a corpus in a single pass.

        Each context of ``window_length`` characters records the character
        that follows it; afterwards every table is finalized. Calling this
        twice on one model double-counts observations.

        Args:
            text: Complete corpus as one string
        """
        if len(text) <= self.window_length:
            logger.warning(
                f"Corpus of {len(text)} chars is too short for window {self.window_length}; "
                "model stays empty"
            )

        for i in range(len(text) - self.window_length):
            window = text[i : i + self.window_length]
            table = self._tables.get(window)
            if table is None:
                table = self._tables[window] = FrequencyTable()
            table.record(text[i + self.window_length])

        for table in self._tables.values():
            table.finalize()

        self._trained = True
        logger.info(f"Trained on {len(text)} chars: {len(self._tables)} contexts")

    def generate(self, seed_text: str, count: int) -> str:
        """
        Extend ``seed_text`` by up to ``count`` sampled characters.

        Generation stops early when the current window was never seen in
        training. A seed shorter than the window is returned unchanged.

        Args:
            seed_text: Text to start from; its last ``window_length`` chars
                form the first context
            count: Maximum number of characters to append

        Returns:
            The seed followed by the generated characters
        """
        if len(seed_text) < self.window_length:
            return seed_text

        out = [seed_text]
        window = seed_text[len(seed_text) - self.window_length :]
        for i in range(count):
            table = self._tables.get(window)
            if table is None:
                logger.debug(f"Unseen context {window!r} after {i} chars; stopping")
                break
            nxt = table.sample(self.rng.random())
            out.append(nxt)
            window = window[1:] + nxt

        return "".join(out)

    def frequency_table(self, context: str) -> Optional[FrequencyTable]:
        """
        Look up the table for one context.

        Args:
            context: A string of exactly ``window_length`` characters

        Returns:
            The FrequencyTable, or None if the context never occurred
        """
        return self._tables.get(context)

    @property
    def contexts(self) -> List[str]:
        return list(self._tables)

    @property
    def is_trained(self) -> bool:
        return self._trained

    def __len__(self) -> int:
        return len(self._tables)

    def __contains__(self, context: object) -> bool:
        return context in self._tables

    def __iter__(self) -> Iterator[str]:
        return iter(self._tables)

    def __str__(self) -> str:
        return "".join(f"{key} : {table}\n" for key, table in self._tables.items())
