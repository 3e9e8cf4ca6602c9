"""Tests for the material catalog."""

import pytest

from spindlecalc.core.material import Material, Range, cut_speed_range, feed_table


class TestCatalogTotality:
    @pytest.mark.parametrize("material", list(Material))
    def test_cut_speed_range_ordered(self, material):
        vc = cut_speed_range(material)
        assert 0 < vc.start < vc.end

    @pytest.mark.parametrize("material", list(Material))
    def test_feed_table_non_empty(self, material):
        assert len(feed_table(material)) > 0

    @pytest.mark.parametrize("material", list(Material))
    def test_feed_table_diameters_strictly_increasing(self, material):
        diameters = [d for d, _ in feed_table(material)]
        assert all(a < b for a, b in zip(diameters, diameters[1:]))

    @pytest.mark.parametrize("material", list(Material))
    def test_feed_ranges_ordered_and_non_negative(self, material):
        for _, fz in feed_table(material):
            assert 0 <= fz.start <= fz.end

    @pytest.mark.parametrize("material", list(Material))
    def test_every_material_has_label(self, material):
        assert material.label()


class TestMaterial:
    def test_labels(self):
        assert Material.ALUMINIUM.label() == "Aluminium"
        assert Material.PLASTIC.label() == "Kunststoff"
        assert Material.COPPER.label() == "Kupfer / Messing"
        assert Material.WOOD_SOFT.label() == "Holz weich"
        assert Material.WOOD_HARD.label() == "Holz hart"
        assert Material.WOOD_MDF.label() == "Holz MDF"

    def test_wood_soft_cut_speed(self):
        assert Material.WOOD_SOFT.cut_speed_range() == (300.0, 600.0)

    def test_from_name_accepts_variants(self):
        assert Material.from_name("wood_soft") is Material.WOOD_SOFT
        assert Material.from_name("WOOD_SOFT") is Material.WOOD_SOFT
        assert Material.from_name(" wood-hard ") is Material.WOOD_HARD

    def test_from_name_unknown(self):
        with pytest.raises(ValueError, match="Unknown material"):
            Material.from_name("steel")


class TestRange:
    def test_compares_as_tuple(self):
        assert Range(0.005, 0.015) == (0.005, 0.015)

    def test_is_empty(self):
        assert Range(5.0, 5.0).is_empty
        assert Range(6.0, 5.0).is_empty
        assert not Range(4.0, 5.0).is_empty

    def test_scaled(self):
        r = Range(0.01, 0.02).scaled(1000.0)
        assert r.start == pytest.approx(10.0)
        assert r.end == pytest.approx(20.0)
