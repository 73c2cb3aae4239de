"""Document storage layer.

This package persists values as JSON documents under a private root.
It powers save, load, seeding, and deletion for the SDK facade.
"""
