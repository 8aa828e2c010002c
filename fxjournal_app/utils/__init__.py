"""
Utility functions module.

Date handling shared by the journal, statistics and calendar.

Date Semantics:
- Trade dates are calendar dates (YYYY-MM-DD) with no time zone
- Record timestamps (createdAt) are ISO8601 UTC
- Weeks start on Sunday, matching the calendar grid
"""
