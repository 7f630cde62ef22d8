"""Age of Wars arrangement solver.

Given two armies of platoons, searches every ordering of the attacking army
for one that wins a majority of the position-by-position pairings against
the defender's fixed order.
"""

__version__ = "0.1.0"
