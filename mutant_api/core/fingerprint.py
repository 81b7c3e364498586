"""DNA Fingerprint — deterministic SHA-256 cache key for a grid.

Invariants:
    - Same rows in the same order always give the same 64-char hex digest
    - Rows joined with a delimiter outside the alphabet: ["AB","CD"] != ["ABC","D"]
"""

import hashlib
from collections.abc import Sequence

from mutant_api.core.domain_types import DnaFingerprint, ROW_DELIMITER


def fingerprint_dna(grid: Sequence[str]) -> DnaFingerprint:
    joined = ROW_DELIMITER.join(grid)
    return DnaFingerprint(hashlib.sha256(joined.encode("utf-8")).hexdigest())
