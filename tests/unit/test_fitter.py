"""Tests for placekit.core.fitter — font size fitting."""

from __future__ import annotations

import random
import string

import pytest

from placekit.core.errors import GenerateError, RenderError
from placekit.core.fitter import BASE_SIZE, FILL_RATIO, fit, measure, text_box


class TestMeasure:
    """Text measurement."""

    def test_measure_returns_positive_extent(self, font_source):
        width, height = measure(font_source.face(BASE_SIZE), "300x150")
        assert width > 0
        assert height > 0

    def test_longer_text_is_wider(self, font_source):
        face = font_source.face(BASE_SIZE)
        assert measure(face, "hello world")[0] > measure(face, "hello")[0]

    def test_larger_size_is_larger(self, font_source):
        small = measure(font_source.face(20), "Placekit")
        large = measure(font_source.face(80), "Placekit")
        assert large[0] > small[0]
        assert large[1] > small[1]

    def test_multiline_text(self, font_source):
        face = font_source.face(BASE_SIZE)
        single = measure(face, "line")
        double = measure(face, "line\nline")
        assert double[1] > single[1]

    def test_ink_box_not_line_box(self, font_source):
        """Low glyphs are measured by their ink, not by the full line height."""
        face = font_source.face(BASE_SIZE)
        _, underscore_top, _, _ = text_box(face, "_")
        _, letter_top, _, _ = text_box(face, "H")
        assert underscore_top > letter_top
        assert measure(face, ".")[1] < measure(face, "H")[1]


class TestFit:
    """Point size computation."""

    @pytest.mark.parametrize(
        "width, height, text",
        [
            (300, 150, "300x150"),
            (100, 50, "100x50"),
            (1000, 100, "wide banner"),
            (100, 1000, "tall"),
            (640, 480, "Hello, World!"),
            (50, 50, "a"),
            (800, 200, "1704067200123"),
            (2506, 2990, "lHEJx"),
            (3000, 300, "2024-01-01 12:00:00 +0000"),
            (2000, 2000, "_"),
            (2000, 2000, "."),
            (2000, 2000, "..."),
        ],
    )
    def test_fitted_text_stays_inside_margin(self, font_source, width, height, text):
        """Text at the fitted size fits within 80% of the canvas on both axes."""
        size = fit(width, height, text, font_source)
        text_width, text_height = measure(font_source.face(size), text)

        assert text_width <= FILL_RATIO * width
        assert text_height <= FILL_RATIO * height

    @pytest.mark.parametrize("seed", range(5))
    def test_random_labels_stay_inside_margin(self, font_source, seed):
        rng = random.Random(seed)
        alphabet = string.ascii_letters + string.digits + string.punctuation + " "
        for _ in range(10):
            width, height = rng.randint(20, 3000), rng.randint(20, 3000)
            text = "".join(rng.choice(alphabet) for _ in range(rng.randint(1, 12)))
            if not text.strip():
                continue

            try:
                size = fit(width, height, text, font_source)
            except RenderError:
                continue
            text_width, text_height = measure(font_source.face(size), text)

            assert text_width <= FILL_RATIO * width, (width, height, text)
            assert text_height <= FILL_RATIO * height, (width, height, text)

    def test_returns_integer(self, font_source):
        size = fit(300, 150, "300x150", font_source)
        assert isinstance(size, int)
        assert size >= 1

    def test_deterministic(self, font_source):
        assert fit(320, 240, "same", font_source) == fit(320, 240, "same", font_source)

    def test_scales_with_canvas(self, font_source):
        """Doubling the canvas roughly doubles the size."""
        small = fit(150, 75, "label", font_source)
        large = fit(300, 150, "label", font_source)
        assert abs(large - 2 * small) <= max(2, small // 10)

    def test_limited_by_narrow_axis(self, font_source):
        """A very wide canvas is limited by its height and vice versa."""
        by_height = fit(5000, 100, "abc", font_source)
        assert by_height == fit(6000, 100, "abc", font_source)

        by_width = fit(100, 5000, "abc", font_source)
        assert by_width == fit(100, 6000, "abc", font_source)

    def test_custom_base_size(self, font_source):
        """The reference size only affects rounding, not the result's scale."""
        default = fit(400, 200, "base", font_source)
        other = fit(400, 200, "base", font_source, base_size=144)
        assert abs(default - other) <= max(2, default // 10)

    def test_canvas_too_small_raises(self, font_source):
        """No clamping: a canvas too small for any size is an error."""
        with pytest.raises(RenderError, match="too small"):
            fit(1, 1, "this label cannot possibly fit", font_source)

    def test_empty_text_raises(self, font_source):
        with pytest.raises(RenderError):
            fit(100, 100, "", font_source)

    def test_render_error_is_generate_error(self):
        assert issubclass(RenderError, GenerateError)
