from pageflow.layout_engine.metrics import MonospaceMetrics, estimate_width


def test_estimate_width_counts_characters():
    assert estimate_width("abcd", 10) == 10.0
    assert estimate_width("", 11) == 0.0


def test_estimate_width_ignores_glyph_identity():
    assert estimate_width("iiii", 11) == estimate_width("WWWW", 11)
    # One unit per character, not per UTF-8 byte
    assert estimate_width("ää", 11) == 2 * 11 * 0.25


def test_monospace_metrics_factor_is_pluggable():
    assert MonospaceMetrics().estimate_width("ab", 10) == 5.0
    assert MonospaceMetrics(char_width_factor=0.5).estimate_width("ab", 10) == 10.0
