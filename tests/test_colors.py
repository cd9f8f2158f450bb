import pytest

from apishooter.colors import BLUE, GREEN, RED, WHITE, Color


def test_white_to_rgba_is_full_intensity():
    assert WHITE.to_rgba() == (255, 255, 255, 255)


def test_black_to_rgba():
    assert Color(0.0, 0.0, 0.0, 1.0).to_rgba() == (0, 0, 0, 255)


def test_default_alpha_is_opaque():
    assert Color(0.2, 0.4, 0.6).a == 1.0


def test_with_alpha_keeps_rgb():
    faded = RED.with_alpha(0.3)
    assert (faded.r, faded.g, faded.b) == (RED.r, RED.g, RED.b)
    assert faded.a == 0.3


def test_with_alpha_does_not_modify_original():
    faded = BLUE.with_alpha(0.0)
    assert faded.a == 0.0
    assert faded.to_rgba()[3] == 0
    assert BLUE.a == 1.0
    assert BLUE.to_rgba()[3] == 255


def test_with_alpha_round_trip():
    assert GREEN.with_alpha(0.5).with_alpha(GREEN.a) == GREEN


def test_to_rgba_components_in_byte_range():
    for colour in (RED, GREEN, BLUE, WHITE, Color(0.5, 0.25, 0.75, 0.1)):
        assert all(0 <= part <= 255 for part in colour.to_rgba())


def test_to_rgba_alpha_tracks_with_alpha():
    assert RED.with_alpha(0.0).to_rgba()[3] == 0
    assert RED.with_alpha(1.0).to_rgba()[3] == 255


@pytest.mark.parametrize(
    "components",
    [(1.5, 0.0, 0.0, 1.0), (0.0, -0.1, 0.0, 1.0), (0.0, 0.0, 2.0, 1.0), (0.0, 0.0, 0.0, 1.1)],
)
def test_out_of_range_component_rejected(components):
    with pytest.raises(ValueError):
        Color(*components)


def test_with_alpha_out_of_range_rejected():
    with pytest.raises(ValueError):
        WHITE.with_alpha(-0.2)