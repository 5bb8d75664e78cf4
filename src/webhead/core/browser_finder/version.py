import re
from typing import List, Tuple

_SEGMENT_RE = re.compile(r'(\d+)')


def version_key(version: str) -> List[Tuple[int, int, str]]:
    """Split *version* into comparable runs, digits compare by numeric value.

    "14.2" becomes [(1, 14, ''), (0, 0, '.'), (1, 2, '')].
    """
    key = []
    for part in _SEGMENT_RE.split(version):
        if not part:
            continue
        if part.isdigit():
            key.append((1, int(part), ''))
        else:
            key.append((0, 0, part))
    return key


def compare_versions(a: str, b: str) -> int:
    """Three-way comparison of two version strings, numeric runs compare numerically."""
    ka, kb = version_key(a), version_key(b)
    if ka == kb:
        # "01" and "1" have equal keys, fall back to plain text for a total order
        return (a > b) - (a < b)
    return (ka > kb) - (ka < kb)
