from __future__ import annotations

import logging
from typing import List, Sequence

from polyline_tools.core.errors import InvalidInput
from polyline_tools.core.polyline import IntCoord, _check_polyline, decode_ints, encode_ints

logger = logging.getLogger(__name__)


def _stitch(first: List[IntCoord], second: List[IntCoord]) -> List[IntCoord]:
    """
    Join two fixed-point point lists.

    The last point of ``first`` is the junction. If ``second`` starts on it
    the duplicate is dropped; otherwise both lists are kept whole.
    """
    if not first:
        return list(second)
    if second and second[0] == first[-1]:
        return first + second[1:]
    return first + second


def merge_two_polylines(first: str, second: str) -> str:
    """
    Merge two polylines into one continuous polyline.

    Works on the encoded integers directly so the result does not depend on
    the precision the inputs were written with.
    """
    _check_polyline(first, "first")
    _check_polyline(second, "second")

    pts = _stitch(decode_ints(first), decode_ints(second))
    return encode_ints(pts)


def merge_polylines(polylines: Sequence[str]) -> str:
    """Left fold of merge_two_polylines over ``polylines``."""
    if not isinstance(polylines, (list, tuple)):
        raise InvalidInput(f"polylines is not a list of strings, got {polylines!r}")
    if not polylines:
        raise InvalidInput("polylines is empty, at least one polyline is required")
    for i, p in enumerate(polylines):
        _check_polyline(p, f"polylines[{i}]")

    if len(polylines) == 1:
        return polylines[0]

    # Decode each input once instead of re-decoding the growing result
    pts = decode_ints(polylines[0])
    for p in polylines[1:]:
        pts = _stitch(pts, decode_ints(p))

    logger.debug(f"[merge] {len(polylines)} polylines -> {len(pts)} points")
    return encode_ints(pts)
