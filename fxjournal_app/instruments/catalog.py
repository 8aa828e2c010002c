"""Selectable pair list and the search filter behind the pair picker."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PairOption:
    """One entry of the pair picker."""
    value: str
    label: str
    category: str

    @property
    def description(self) -> str:
        """Label text after the symbol, e.g. "Euro vs US Dollar"."""
        parts = self.label.split(" - ", 1)
        return parts[1] if len(parts) > 1 else self.label


FOREX_PAIRS: tuple[PairOption, ...] = (
    # Major
    PairOption("EURUSD", "EUR/USD - Euro vs US Dollar", "Major"),
    PairOption("GBPUSD", "GBP/USD - British Pound vs US Dollar", "Major"),
    PairOption("USDJPY", "USD/JPY - US Dollar vs Japanese Yen", "Major"),
    PairOption("USDCHF", "USD/CHF - US Dollar vs Swiss Franc", "Major"),
    PairOption("AUDUSD", "AUD/USD - Australian Dollar vs US Dollar", "Major"),
    PairOption("USDCAD", "USD/CAD - US Dollar vs Canadian Dollar", "Major"),
    PairOption("NZDUSD", "NZD/USD - New Zealand Dollar vs US Dollar", "Major"),
    # Cross
    PairOption("EURGBP", "EUR/GBP - Euro vs British Pound", "Cross"),
    PairOption("EURJPY", "EUR/JPY - Euro vs Japanese Yen", "Cross"),
    PairOption("GBPJPY", "GBP/JPY - British Pound vs Japanese Yen", "Cross"),
    PairOption("EURCHF", "EUR/CHF - Euro vs Swiss Franc", "Cross"),
    PairOption("AUDJPY", "AUD/JPY - Australian Dollar vs Japanese Yen", "Cross"),
    PairOption("CADJPY", "CAD/JPY - Canadian Dollar vs Japanese Yen", "Cross"),
    # Metal
    PairOption("XAUUSD", "XAU/USD - Gold vs US Dollar", "Metal"),
    PairOption("XAGUSD", "XAG/USD - Silver vs US Dollar", "Metal"),
    # Index
    PairOption("US30", "US30 - Dow Jones Industrial Average", "Index"),
    PairOption("NAS100", "NAS100 - Nasdaq 100", "Index"),
    PairOption("SPX500", "SPX500 - S&P 500", "Index"),
    PairOption("GER40", "GER40 - DAX 40", "Index"),
    # Crypto
    PairOption("BTCUSD", "BTC/USD - Bitcoin vs US Dollar", "Crypto"),
    PairOption("ETHUSD", "ETH/USD - Ethereum vs US Dollar", "Crypto"),
)


def search_pairs(term: str, selected: str = "") -> list[PairOption]:
    """
    Filter the pair list for the searchable dropdown.

    An empty term, or a term equal to the currently selected symbol, shows
    every pair. Otherwise matches are case-insensitive substrings of the
    symbol or its label.

    Args:
        term: Text typed into the search box
        selected: Symbol currently chosen in the form

    Returns:
        Matching pair options in catalog order
    """
    pairs = list(FOREX_PAIRS)

    if not term or term == selected:
        return pairs

    needle = term.lower()
    return [
        pair for pair in pairs
        if needle in pair.value.lower() or needle in pair.label.lower()
    ]


def pairs_by_category() -> dict[str, list[PairOption]]:
    """Group the catalog by category, preserving catalog order."""
    grouped: dict[str, list[PairOption]] = {}
    for pair in FOREX_PAIRS:
        grouped.setdefault(pair.category, []).append(pair)
    return grouped
