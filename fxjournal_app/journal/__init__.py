"""
Journal module.

Strategy and trade management, dashboard statistics and the calendar
heat-map built on top of the calculator.
"""
