"""
Core numeric engine: extended-range currency values and growth economics.

This package is independent of rendering, game loops and storage backends;
callers only hold DecimalFloat values, ask the growth layer for prices and
persist values through JSON-safe records.
"""
