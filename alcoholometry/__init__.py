"""
Alcoholometry — precision ethanol-water calculator core.

OIML R 22 density model for ethanol-water mixtures and the conversions
built on it (ABV ↔ mass fraction, mass ↔ volume, gravimetric dilution,
hydrometer temperature correction).
"""

__version__ = "0.1.0"
