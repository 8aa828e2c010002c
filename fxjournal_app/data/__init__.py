"""
Journal data models and form parsing.

Immutable trade and strategy records, plus the parser that turns raw trade
form fields into priced trades.
"""
