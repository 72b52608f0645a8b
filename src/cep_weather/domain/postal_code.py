"""
cep_weather.domain.postal_code

Postal code (CEP) syntax validation.

Responsibilities:
- Accept exactly 8 ASCII decimal digits, anchored at both ends.
- Never normalize input (no stripping of hyphens or spaces).
"""

from __future__ import annotations

import re

# ASCII digits only; `\d` would also accept other Unicode decimal digits.
_CEP_RE = re.compile(r"[0-9]{8}")


def is_valid_postal_code(code: str) -> bool:
    """True when `code` is exactly 8 ASCII digits, with nothing around them."""
    return _CEP_RE.fullmatch(code) is not None


# --- Module Notes -----------------------------------------------------------
# Pure function: called before any upstream request is issued.
