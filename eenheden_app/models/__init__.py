"""
Data models module.

Immutable data structures for clients, contracts, tier results and derived
portfolio statistics. Updates produce new values rather than mutating.
"""
