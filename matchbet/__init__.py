"""
Match betting services.

Two cooperating services: a championship service that owns teams and
matches, and a betting service that owns bets and settles them once the
referenced match has been played.
"""

__version__ = "0.1.0"
