"""
Rebuild text lines from positioned PDF fragments.

Fragments are grouped by baseline Y. PDF space has Y growing upward, so lines
are emitted by descending Y to get top-to-bottom reading order.
"""

import math
import logging
from typing import Dict, List, Optional, Sequence

from app.core.config import get_config
from app.core.schemas import ReconstructedLine, TextFragment
from app.core.vocabulary import HINT_SECTION_WORDS

logger = logging.getLogger(__name__)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _snap_to_cluster(y: int, keys: List[int], tolerance: float) -> Optional[int]:
    """Return the nearest established key within tolerance (earliest key on ties)."""
    best = None
    for key in keys:
        distance = abs(key - y)
        if distance <= tolerance and (best is None or distance < abs(best - y)):
            best = key
    return best


def reconstruct(fragments: Sequence[TextFragment], y_tolerance: Optional[float] = None) -> List[ReconstructedLine]:
    """
    Group one page's fragments into lines.

    Strategy:
    1) Drop whitespace-only fragments
    2) Round each baseline to an integer
    3) Snap to the nearest existing cluster within tolerance, else start a new
       cluster keyed by this fragment's Y (the first key of a cluster never moves)
    4) Join texts in encounter order, tracking the largest font size
    5) Emit clusters top to bottom
    """
    if y_tolerance is None:
        y_tolerance = get_config().line_y_tolerance

    keys: List[int] = []
    texts: Dict[int, List[str]] = {}
    fonts: Dict[int, float] = {}

    for frag in fragments:
        text = (frag.text or "").strip()
        if not text:
            continue
        y = _round_half_up(frag.baseline_y)
        key = _snap_to_cluster(y, keys, y_tolerance)
        if key is None:
            key = y
            keys.append(key)
            texts[key] = []
            fonts[key] = 0.0
        texts[key].append(text)
        fonts[key] = max(fonts[key], abs(frag.font_size))

    return [
        ReconstructedLine(text=" ".join(texts[key]), max_font_size=fonts[key])
        for key in sorted(keys, reverse=True)
    ]


def assemble_text(pages: Sequence[Sequence[TextFragment]]) -> str:
    """Full document text: each page's lines newline-joined, each page newline-terminated."""
    out = []
    for page in pages:
        lines = reconstruct(page)
        out.append("\n".join(line.text for line in lines) + "\n")
    return "".join(out)


def _is_hint_candidate(text: str) -> bool:
    if len(text) > 60 or "@" in text:
        return False
    lower = text.lower()
    if any(word in lower for word in HINT_SECTION_WORDS):
        return False
    return 1 <= len(text.split()) <= 5


def extract_name_hint(pages: Sequence[Sequence[TextFragment]]) -> Optional[str]:
    """
    Largest-font line on page 1 that could plausibly be a name banner.

    This is only a hint: the name extractor still validates it and ranks it
    below lines found near the job title or contact details.
    """
    if not pages:
        return None

    lines = sorted(reconstruct(pages[0]), key=lambda line: line.max_font_size, reverse=True)
    for line in lines:
        text = line.text.strip()
        if _is_hint_candidate(text):
            logger.debug(f"Name hint from font size {line.max_font_size}: {text!r}")
            return text
    return None
