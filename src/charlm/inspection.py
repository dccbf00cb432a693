from __future__ import annotations

import math

import pandas as pd

from .language_model import LanguageModel

COLUMNS = ["context", "char", "count", "probability", "cumulative_probability"]


def model_to_frame(model: LanguageModel) -> pd.DataFrame:
    """One row per (context, next char) record; records keep insertion order."""

    rows = [
        (context, rec.char, rec.count, rec.probability, rec.cumulative_probability)
        for context in model
        for rec in model.frequency_table(context)
    ]
    return pd.DataFrame(rows, columns=COLUMNS)


def check_distributions(model: LanguageModel, tol: float = 1e-9) -> list[str]:
    """Return contexts whose table is not a valid finalized distribution."""

    df = model_to_frame(model)
    bad: list[str] = []
    for context, group in df.groupby("context", sort=False):
        cp = group["cumulative_probability"]
        if (
            not math.isclose(group["probability"].sum(), 1.0, abs_tol=tol)
            or not cp.is_monotonic_increasing
            or not math.isclose(cp.iloc[-1], 1.0, abs_tol=tol)
        ):
            bad.append(context)
    return bad
