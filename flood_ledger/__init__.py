"""
Flood Monitoring Ledger.
"""

__version__ = "1.0.0"
