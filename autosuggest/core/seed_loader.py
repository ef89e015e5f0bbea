# seed_loader.py
# Reads extra vocabulary from a plain CSV/text file.
# One entry per line:  word            (frequency 1)
#                      word,frequency
# Blank lines and lines starting with '#' are skipped.

import csv
from typing import List, Tuple

from autosuggest.utils.logger_utils import Log


class SeedFormatError(ValueError):
    """A seed file line could not be parsed."""

    def __init__(self, path: str, lineno: int, reason: str):
        super().__init__(f"{path}:{lineno}: {reason}")
        self.path = path
        self.lineno = lineno


def load_seed_file(path: str) -> List[Tuple[str, int]]:
    """Parse a seed file into (word, frequency) pairs. Missing files raise FileNotFoundError."""
    pairs: List[Tuple[str, int]] = []
    with open(path, "r", encoding="utf-8-sig", newline="") as fh:
        for lineno, row in enumerate(csv.reader(fh), 1):
            if not row or not row[0].strip() or row[0].lstrip().startswith("#"):
                continue
            if len(row) > 2:
                raise SeedFormatError(path, lineno, f"expected 'word[,frequency]', got {len(row)} fields")

            word = row[0].strip()
            freq = 1
            if len(row) == 2 and row[1].strip():
                try:
                    freq = int(row[1])
                except ValueError:
                    raise SeedFormatError(path, lineno, f"bad frequency {row[1].strip()!r}") from None
                if freq < 0:
                    raise SeedFormatError(path, lineno, f"negative frequency {freq}")
            pairs.append((word, freq))

    Log.info(f"[Seed] read {len(pairs)} entries from {path}")
    return pairs
