"""Symbol normalization shared by every instrument lookup."""

import re

_NON_ALNUM = re.compile(r"[^A-Z0-9]")


def normalize_symbol(raw_symbol: str) -> str:
    """
    Normalize a free-text symbol into its lookup key.

    Uppercases the input and strips every character that is not an ASCII
    letter or digit, so "eur/usd" and "EUR USD" both become "EURUSD".

    Args:
        raw_symbol: Symbol as typed or selected by the user

    Returns:
        Normalized symbol, possibly empty
    """
    return _NON_ALNUM.sub("", raw_symbol.upper())
