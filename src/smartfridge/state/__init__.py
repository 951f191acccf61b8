"""State/store layer.

The single owner of stocked items and the per-type aggregation built on
top of them.
"""
