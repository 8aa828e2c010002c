"""
FX Journal - Forex/CFD Trading Journal

A personal trading journal that logs forex and CFD trades per strategy,
prices each trade with an instrument-aware profit/loss calculator, and
aggregates win rate, profit factor, streaks and a calendar heat-map.
"""

__version__ = "0.1.0"
__author__ = "FX Journal Team"
