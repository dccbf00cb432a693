from __future__ import annotations

from charlm import LanguageModel
from charlm.inspection import model_to_frame


def main() -> None:
    text = (
        "natural language processing (nlp) is fun. "
        "start small, iterate, and learn by coding. "
    )

    lm = LanguageModel(4, seed=42)
    lm.train(text)

    print(model_to_frame(lm).head(10).to_string(index=False))
    print()
    print(lm.generate("nlp ", 120))


if __name__ == "__main__":
    main()
