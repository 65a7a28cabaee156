"""Solutions to classic algorithmic problems on sequences, grids, trees and graphs."""

__version__ = "0.1.0"