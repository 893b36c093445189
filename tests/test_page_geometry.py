import dataclasses

import pytest

from pageflow.exceptions import InvalidConfigurationError
from pageflow.page_geometry import PageGeometry


def test_default_geometry_is_a4_with_derived_values():
    g = PageGeometry()
    assert (g.page_width, g.page_height, g.margin) == (210.0, 297.0, 10.0)
    assert (g.line_height, g.paragraph_spacing, g.font_size) == (6.0, 8.0, 11.0)
    assert g.usable_width == 190.0
    assert g.top == 287.0
    assert g.fresh_page_height == 277.0
    assert g.low_water_line == 30.0


def test_geometry_is_immutable():
    g = PageGeometry()
    with pytest.raises(dataclasses.FrozenInstanceError):
        g.margin = 5


@pytest.mark.parametrize("kwargs", [
    {"page_width": 0},
    {"page_height": -1},
    {"line_height": 0},
    {"font_size": 0},
    {"margin": -1},
    {"paragraph_spacing": -2},
    {"margin": 105},
    {"page_height": 20, "margin": 10},
])
def test_invalid_geometry_is_rejected(kwargs):
    with pytest.raises(InvalidConfigurationError):
        PageGeometry(**kwargs)
