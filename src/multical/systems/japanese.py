from __future__ import annotations

from .civil import CivilSystem


class JapaneseSystem(CivilSystem):
    """
    Japanese calendar without era arithmetic.

    Years, months and days are Gregorian; eras only affect display names, so
    the bridge is the identity, exactly as for the civil calendar.
    """
