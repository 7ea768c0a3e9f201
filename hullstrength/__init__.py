"""Shear forces and bending moments of a ship hull in still water."""

__version__ = "0.1.0"