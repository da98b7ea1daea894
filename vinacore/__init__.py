"""Core numerics, atom typing, scoring tables and PDBQT splitting for molecular docking."""

__version__ = "1.1.2"