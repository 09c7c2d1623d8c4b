#!/usr/bin/env python3
"""
autoseg Demo - Segments the built-in Pali, Myanmar and Thai samples.
Shows sentence grouping (list markers, abbreviations, brackets) and token kinds.
"""

import sys
from pathlib import Path

# Add src to path so we can import autoseg
sys.path.insert(0, str(Path(__file__).parent / "src"))

from autoseg.examples.utils import SAMPLES, SimpleConsoleLogger
from autoseg.runtime.engine import Segmenter


def show(segmenter, name, document):
    print(f"\n📜 {name}")
    print("-" * 50)
    result = segmenter.segment(document)
    for index, sentence in enumerate(result.sentences, start=1):
        print(f"[{index}] {sentence.text.strip()}")
        summary = " | ".join(f"{t.text}:{t.kind.label}" for t in sentence.tokens)
        print(f"     {summary}")


def main():
    print("🧪 autoseg demo")
    print("=" * 50)

    segmenter = Segmenter(logger=SimpleConsoleLogger())
    for name, document in SAMPLES.items():
        show(segmenter, name, document)

    return 0


if __name__ == "__main__":
    sys.exit(main())
