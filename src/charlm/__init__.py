"""Character-level n-gram language model.

Train on a raw text corpus, then generate new text by weighted random
sampling of the next character. See `scripts/` for a runnable demo.
"""

from .config import ModelConfig
from .corpus import clean_corpus, read_corpus
from .frequency import CharRecord, FrequencyTable
from .language_model import LanguageModel

__version__ = "0.1.0"

__all__ = [
    "CharRecord",
    "FrequencyTable",
    "LanguageModel",
    "ModelConfig",
    "clean_corpus",
    "read_corpus",
]
