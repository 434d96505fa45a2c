"""
Tests for the hydrometer corrector

Checks:
1. Identity at the 20°C reference
2. Reference corrections at 25°C and 15°C
3. true_abv = reading + correction
4. Advisory out-of-table flag (never an error)
5. Glass expansion option and display metadata
"""

import pytest

from alcoholometry.core.density import (
    SODA_LIME_GLASS_EXPANSION,
    correct_hydrometer_reading,
)
from alcoholometry.core.domain import HydrometerCorrection


class TestReferenceTemperature:
    """No correction at 20°C"""

    @pytest.mark.parametrize("reading", [0, 10, 25, 40, 50, 75, 96, 100])
    def test_identity_at_20c(self, reading: float) -> None:
        result = correct_hydrometer_reading(reading, 20)
        assert result.correction == 0.0
        assert result.true_abv == pytest.approx(reading, abs=0.05)


class TestReferenceCorrections:
    """Reference corrections from the polynomial model"""

    def test_40_at_25c_reads_high(self) -> None:
        """Warm spirit is lighter: the float sinks deeper and over-reads"""
        result = correct_hydrometer_reading(40, 25)
        assert result.true_abv < 40
        assert result.correction < 0
        assert result.true_abv == pytest.approx(38.3, abs=0.05)
        assert result.correction == pytest.approx(-1.7, abs=0.05)

    def test_40_at_15c_reads_low(self) -> None:
        result = correct_hydrometer_reading(40, 15)
        assert result.true_abv > 40
        assert result.correction > 0
        assert result.true_abv == pytest.approx(41.5, abs=0.05)

    @pytest.mark.parametrize("reading,temp_c", [(40, 25), (40, 15), (65.5, 12), (96, 28)])
    def test_true_abv_is_reading_plus_correction(self, reading: float, temp_c: float) -> None:
        result = correct_hydrometer_reading(reading, temp_c)
        assert result.true_abv == pytest.approx(reading + result.correction, abs=0.1)

    def test_correction_grows_with_temperature_offset(self) -> None:
        small = correct_hydrometer_reading(40, 22).correction
        large = correct_hydrometer_reading(40, 28).correction
        assert large < small < 0.1


class TestTableRange:
    """outside_table_range is advisory: results are always returned"""

    @pytest.mark.parametrize("temp_c,expected", [(9.9, True), (10, False), (30, False), (30.1, True)])
    def test_flag_boundaries(self, temp_c: float, expected: bool) -> None:
        assert correct_hydrometer_reading(40, temp_c).outside_table_range is expected

    def test_out_of_band_still_computed(self) -> None:
        cold = correct_hydrometer_reading(40, 5)
        hot = correct_hydrometer_reading(40, 45)
        assert isinstance(cold, HydrometerCorrection)
        assert cold.outside_table_range and hot.outside_table_range
        assert cold.true_abv > 40 > hot.true_abv

    def test_unreachable_density_clamps_to_bracket(self) -> None:
        """Water read at 25°C: no strength is that dense, result stays at 0"""
        result = correct_hydrometer_reading(0, 25)
        assert result.true_abv == 0.0
        assert 0.0 <= correct_hydrometer_reading(100, 10).true_abv <= 100.0


class TestGlassExpansion:
    """OIML R 22 §14 glass float correction"""

    def test_soda_lime_by_default(self) -> None:
        assert correct_hydrometer_reading(40, 25) == correct_hydrometer_reading(
            40, 25, glass_expansion_coefficient=SODA_LIME_GLASS_EXPANSION
        )

    def test_disabled_drifts_from_reference(self) -> None:
        """Without the glass term 40% at 25°C lands one display digit higher"""
        plain = correct_hydrometer_reading(40, 25, glass_expansion_coefficient=0.0)
        assert plain.true_abv == pytest.approx(38.4, abs=0.05)

    def test_no_effect_at_20c(self) -> None:
        assert correct_hydrometer_reading(
            40, 20, glass_expansion_coefficient=SODA_LIME_GLASS_EXPANSION
        ) == correct_hydrometer_reading(40, 20, glass_expansion_coefficient=0.0)

    def test_small_effect_when_warm(self) -> None:
        """Expanded glass float: the sensed density is slightly higher"""
        plain = correct_hydrometer_reading(40, 28, glass_expansion_coefficient=0.0)
        glass = correct_hydrometer_reading(40, 28)
        assert glass.true_abv <= plain.true_abv
        assert glass.true_abv == pytest.approx(plain.true_abv, abs=0.2)


class TestDisplayMetadata:
    @pytest.mark.parametrize(
        "reading,band", [(0, "0-10"), (43.5, "40-50"), (50, "50-60"), (100, "100-110")]
    )
    def test_abv_range(self, reading: float, band: str) -> None:
        assert correct_hydrometer_reading(reading, 20).abv_range == band

    @pytest.mark.parametrize("temp_c,used", [(20.4, 20), (24.5, 25), (17.5, 18), (-0.4, 0)])
    def test_temp_used_rounds_half_up(self, temp_c: float, used: int) -> None:
        assert correct_hydrometer_reading(40, temp_c).temp_used == used

    def test_deterministic(self) -> None:
        assert correct_hydrometer_reading(57.3, 23.1) == correct_hydrometer_reading(57.3, 23.1)
