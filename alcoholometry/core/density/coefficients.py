"""
OIML R 22 Coefficient Tables — Ethanol-Water Density Model

OIML R 22 (1975), International Alcoholometric Tables, tables 2-4.

    ρ(p, t) = Σ_k A_k·p^k  +  Σ_k B_k·Δt^k  +  Σ_{i,j} C_ij·p^i·Δt^j
    p  = mass fraction of ethanol, 0..1
    Δt = t - 20 °C
    ρ  in kg/m³

The tables are published values and must match the recommendation digit for
digit; a single wrong digit shifts results at the 4th-6th decimal place.
Tables are immutable tuples.
"""

from typing import Final

# =============================================================================
# REFERENCE CONSTANTS
# =============================================================================

# Reference temperature of the model and of the ABV definition (°C)
REFERENCE_TEMP_C: Final[float] = 20.0

# Density of pure ethanol at 20°C (kg/m³), used in the ABV definition
RHO_ETHANOL_20_KG_M3: Final[float] = 789.24

# kg/m³ → g/mL
KG_M3_PER_G_ML: Final[float] = 1000.0


# =============================================================================
# TABLE 2: A_k (density at 20°C), k = 0..11
# =============================================================================

A: Final[tuple[float, ...]] = (
    998.20123,
    -192.9769495,
    389.1238958,
    -1668.103923,
    13522.15441,
    -88292.78388,
    306287.4042,
    -613838.1234,
    747017.2998,
    -547846.1354,
    223446.0334,
    -39032.85426,
)

# =============================================================================
# TABLE 3: B_k (pure-water temperature correction), k = 1..6, B_0 unused
# =============================================================================

B: Final[tuple[float, ...]] = (
    0.0,
    -0.20618513,
    -0.0052682542,
    0.000036130013,
    -0.00000038957702,
    0.000000007169354,
    -0.000000000099739231,
)

# =============================================================================
# TABLE 4: C_ij cross terms as (i, j, C_ij), i = 1..6, j = 1..5
# =============================================================================

C: Final[tuple[tuple[int, int, float], ...]] = (
    (1, 1, -1.161156), (2, 1, 1.35032), (3, 1, -2.16274),
    (4, 1, 3.65593), (5, 1, -4.13781), (6, 1, 1.7611),
    (1, 2, 0.01017), (2, 2, -0.038437), (3, 2, 0.089056),
    (4, 2, -0.147321), (5, 2, 0.146237), (6, 2, -0.060122),
    (1, 3, 0.00018844), (2, 3, 0.00052018), (3, 3, -0.0035042),
    (4, 3, 0.0076163), (5, 3, -0.0083697), (6, 3, 0.0035687),
    (1, 4, -0.000020673), (2, 4, 0.000085273), (3, 4, -0.00019806),
    (4, 4, 0.00039634), (5, 4, -0.00043168), (6, 4, 0.00020002),
    (1, 5, 0.000000134), (2, 5, -0.00000134), (3, 5, 0.00000522),
    (4, 5, -0.00000939), (5, 5, 0.00000796), (6, 5, -0.00000258),
)
