"""
Engines Package

Pure algorithms operating on parsed records:
- engines.intersection – record splitting and common-item intersection
- engines.rules – match outcome and outcome-forcing choice resolution
- engines.aggregate – max-by-key, top-K sum and per-side point totals

Import the modules directly, e.g. ``from puzzle_toolkit.engines.rules
import outcome_of``.
"""
