"""
econdash - Economic indicators dashboard core.

Transforms raw macroeconomic time series into the derived series and summary
statistics shown on the dashboard, and decides which views each subscription
tier may see.
"""

__version__ = "0.1.0"
