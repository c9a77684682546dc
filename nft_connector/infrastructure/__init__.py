"""
Infrastructure layer package.

Contains adapters that implement the domain port interfaces.
"""
