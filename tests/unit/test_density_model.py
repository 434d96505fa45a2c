"""
Tests for the OIML R 22 polynomial density model

Checks:
1. Coefficient table shape
2. Reference densities of water, ethanol and mixtures
3. Monotonicity in temperature and in strength
4. Contraction factor
5. Determinism
"""

import pytest

from alcoholometry.core.density import (
    A,
    B,
    C,
    abv_to_mass_fraction,
    calculate_density,
    contraction_factor,
    density_g_ml,
    density_kg_m3,
    ethanol_density,
    water_density,
)

# =============================================================================
# COEFFICIENT TABLES
# =============================================================================


class TestCoefficientTables:
    """Tests for the transcribed coefficient tables"""

    def test_table_sizes(self) -> None:
        """12 A terms, B_0..B_6, 30 cross terms"""
        assert len(A) == 12
        assert len(B) == 7
        assert len(C) == 30

    def test_cross_term_indices(self) -> None:
        """Cross terms cover i = 1..6, j = 1..5 exactly once"""
        pairs = {(i, j) for i, j, _ in C}
        assert pairs == {(i, j) for i in range(1, 7) for j in range(1, 6)}

    def test_water_constant_term(self) -> None:
        """A_0 is the density of water at 20°C (kg/m³)"""
        assert A[0] == 998.20123
        assert B[0] == 0.0

    def test_tables_immutable(self) -> None:
        with pytest.raises(TypeError):
            A[0] = 0.0  # type: ignore[index]


# =============================================================================
# POLYNOMIAL
# =============================================================================


class TestDensityPolynomial:
    """Tests for density_kg_m3 / density_g_ml"""

    def test_water_at_reference(self) -> None:
        """p = 0, t = 20: only A_0 remains"""
        assert density_kg_m3(0.0, 20.0) == pytest.approx(998.20123, abs=1e-9)

    def test_g_ml_is_kg_m3_over_1000(self) -> None:
        assert density_g_ml(0.4, 17.0) == pytest.approx(density_kg_m3(0.4, 17.0) / 1000)

    def test_pure_components_match_endpoints(self) -> None:
        """calculate_density at 0/100 % is the polynomial at p = 0/1"""
        for t in (-10.0, 0.0, 15.0, 20.0, 35.0, 50.0):
            assert calculate_density(0, t).density == pytest.approx(
                density_kg_m3(0.0, t) / 1000, abs=5e-7
            )
            assert calculate_density(100, t).density == pytest.approx(
                density_kg_m3(1.0, t) / 1000, abs=5e-7
            )

    def test_defined_outside_calibration_range(self) -> None:
        """Smooth polynomial: evaluable far outside [-10, 50] °C"""
        assert density_kg_m3(0.5, -40.0) > 0
        assert density_kg_m3(0.5, 90.0) > 0

    @pytest.mark.parametrize("abv,temp_c", [(50, 200), (0, 300), (96, -120), (50, 150)])
    def test_calculate_density_never_raises_at_extreme_temperature(
        self, abv: float, temp_c: float
    ) -> None:
        """Extrapolation may be non-physical but a result is always returned"""
        result = calculate_density(abv, temp_c)
        assert result.density == pytest.approx(
            density_g_ml(abv_to_mass_fraction(abv), temp_c), abs=5e-7
        )


# =============================================================================
# REFERENCE VALUES
# =============================================================================


class TestReferenceDensities:
    """Reference values of the model (vacuum densities, g/mL)"""

    def test_pure_water_20c(self) -> None:
        assert calculate_density(0, 20).density == 0.998201
        assert water_density(20) == 0.998201

    def test_pure_ethanol_20c(self) -> None:
        assert calculate_density(100, 20).density == pytest.approx(0.789239, abs=1e-6)
        assert ethanol_density(20) == pytest.approx(0.789239, abs=1e-6)

    def test_50_abv_20c(self) -> None:
        assert calculate_density(50, 20).density == pytest.approx(0.930142, abs=1e-6)

    def test_96_abv_20c(self) -> None:
        assert calculate_density(96, 20).density == pytest.approx(0.807419, abs=1e-6)

    def test_96_abv_thermal_expansion(self) -> None:
        """96% ABV is less dense at 25°C than at 20°C"""
        d20 = calculate_density(96, 20).density
        d25 = calculate_density(96, 25).density
        assert d25 < d20
        assert d25 == pytest.approx(0.806779, abs=1e-4)

    def test_96_abv_cold_and_hot(self) -> None:
        d20 = calculate_density(96, 20).density
        assert calculate_density(96, 10).density > d20
        assert calculate_density(96, 30).density < d20


# =============================================================================
# MONOTONICITY
# =============================================================================


class TestMonotonicity:
    """Density falls with temperature and with strength"""

    @pytest.mark.parametrize("abv", [0, 10, 40, 60, 96, 100])
    def test_non_increasing_in_temperature(self, abv: float) -> None:
        """Above water's 4°C maximum, heating never increases density"""
        temps = [10, 15, 20, 25, 30, 35, 40, 45, 50]
        densities = [calculate_density(abv, t).density for t in temps]
        assert all(a >= b for a, b in zip(densities, densities[1:]))

    @pytest.mark.parametrize("temp_c", [10, 20, 30])
    def test_non_increasing_in_abv(self, temp_c: float) -> None:
        abvs = range(0, 101, 5)
        densities = [calculate_density(abv, temp_c).density for abv in abvs]
        assert all(a >= b for a, b in zip(densities, densities[1:]))

    def test_strictly_decreasing_in_mass_fraction(self) -> None:
        ps = [i / 20 for i in range(21)]
        densities = [density_kg_m3(p, 20.0) for p in ps]
        assert all(a > b for a, b in zip(densities, densities[1:]))


# =============================================================================
# CONTRACTION FACTOR
# =============================================================================


class TestContractionFactor:
    """Tests for contraction_factor"""

    def test_pure_components_ideal(self) -> None:
        """No contraction without mixing"""
        for t in (10.0, 20.0, 30.0):
            assert contraction_factor(0.0, t) == pytest.approx(1.0, abs=1e-12)
            assert contraction_factor(1.0, t) == pytest.approx(1.0, abs=1e-12)
        assert calculate_density(0, 20).contraction_factor == 1.0
        assert calculate_density(100, 20).contraction_factor == 1.0

    @pytest.mark.parametrize("abv", [10, 40, 50, 70, 96])
    def test_mixtures_contract(self, abv: float) -> None:
        assert calculate_density(abv, 20).contraction_factor > 1.0

    def test_contraction_magnitude(self) -> None:
        """Mixing contraction of ethanol-water stays within a few percent"""
        assert calculate_density(50, 20).contraction_factor < 1.05


# =============================================================================
# DETERMINISM
# =============================================================================


class TestDeterminism:
    def test_identical_inputs_identical_outputs(self) -> None:
        first = calculate_density(43.7, 18.3)
        second = calculate_density(43.7, 18.3)
        assert first == second
        assert first.density == second.density
