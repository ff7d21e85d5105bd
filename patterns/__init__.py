"""Reusable patterns for building domain verticals.

Each module demonstrates a self-contained pattern that can be adapted
to any domain: ordered rules engines and frozen domain configuration.
"""
