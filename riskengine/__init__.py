"""
Risk Engine

Identifier allocation, risk lifecycle, assignment coordination, audit trail
and role checks for the risk register.
"""

__version__ = "0.1.0"
