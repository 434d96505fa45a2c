"""
Polynomial Density Model — OIML R 22

Density of ethanol-water mixtures as a function of mass fraction p and
temperature t, plus the contraction factor derived from it.

The model is a smooth polynomial: it is defined for any p and t and never
raises. Outside p ∈ [0, 1] and t ∈ [-10, 50] °C it loses physical meaning,
not numeric validity.

CRITICAL INVARIANTS:
1. density_kg_m3(0, t) is the pure-water density at t
2. density_kg_m3(1, t) is the pure-ethanol density at t
3. Contraction factor is exactly 1 at p = 0 and p = 1
"""

from alcoholometry.core.density.coefficients import (
    A,
    B,
    C,
    KG_M3_PER_G_ML,
    REFERENCE_TEMP_C,
)


def density_kg_m3(p: float, temp_c: float) -> float:
    """
    Evaluate ρ(p, t) in kg/m³ (unrounded).

    ρ(p, t) = Σ A_k·p^k + Σ B_k·Δt^k + Σ C_ij·p^i·Δt^j,  Δt = t - 20

    Args:
        p: Ethanol mass fraction (0..1)
        temp_c: Temperature (°C)

    Returns:
        Density (kg/m³)

    Examples:
        >>> round(density_kg_m3(0.0, 20.0), 5)
        998.20123
    """
    dt = temp_c - REFERENCE_TEMP_C

    rho = 0.0
    for k, a_k in enumerate(A):
        rho += a_k * p**k
    for k in range(1, len(B)):
        rho += B[k] * dt**k
    for i, j, c_ij in C:
        rho += c_ij * p**i * dt**j

    return rho


def density_g_ml(p: float, temp_c: float) -> float:
    """ρ(p, t) in g/mL (unrounded)."""
    return density_kg_m3(p, temp_c) / KG_M3_PER_G_ML


def contraction_factor(p: float, temp_c: float) -> float:
    """
    Volume contraction on mixing, per gram of mixture (unrounded).

    For 1 g of mixture:
        V_mixture = 1 / ρ(p, t)
        V_ethanol = p / ρ(1, t)
        V_water   = (1 - p) / ρ(0, t)
        factor    = (V_ethanol + V_water) / V_mixture

    Args:
        p: Ethanol mass fraction (0..1)
        temp_c: Temperature (°C)

    Returns:
        Dimensionless factor (1 for pure components, > 1 in between)
    """
    rho_mix = density_kg_m3(p, temp_c)
    rho_ethanol = density_kg_m3(1.0, temp_c)
    rho_water = density_kg_m3(0.0, temp_c)

    v_ethanol = p / rho_ethanol
    v_water = (1.0 - p) / rho_water
    v_mix = 1.0 / rho_mix

    return (v_ethanol + v_water) / v_mix
