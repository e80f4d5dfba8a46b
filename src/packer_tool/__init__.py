"""
Packer Tool Package

Reads package lines (a weight limit plus candidate items) and picks the
items to ship for each, using a price-first greedy selection.
"""

__version__ = "1.0.0"
