"""
Configuration module.

Frozen defaults, YAML settings loading and validation for the journal.
"""
