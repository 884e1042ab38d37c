"""Personal diary tools kept in a .pdi file, exact fractions and a growable vector."""

__version__ = "0.1.0"