import pytest

from gw2dat.channels import Channel, ChannelState, apply_channels

RGB = bytes([10, 20, 30, 40, 50, 60])
ALPHA = bytes([7, 9])


def test_all_channels_unchanged():
    assert apply_channels(RGB, ALPHA, Channel.ALL) == (RGB, ALPHA)
    assert apply_channels(RGB, None, Channel.ALL) == (RGB, None)


def test_red_off_zeroes_red_and_keeps_alpha():
    channels = Channel.ALL & ~Channel.RED
    rgb, alpha = apply_channels(RGB, ALPHA, channels)
    assert rgb[0::3] == bytes(2)
    assert rgb[1::3] == RGB[1::3]
    assert rgb[2::3] == RGB[2::3]
    assert alpha == ALPHA


def test_only_green_visible_without_alpha():
    rgb, alpha = apply_channels(RGB, None, Channel.GREEN)
    assert rgb[0::3] == bytes(2)
    assert rgb[2::3] == bytes(2)
    assert rgb[1::3] == RGB[1::3]
    assert alpha is None


def test_alpha_off_makes_opaque():
    rgb, alpha = apply_channels(RGB, ALPHA, Channel.RED | Channel.GREEN | Channel.BLUE)
    assert rgb == RGB
    assert alpha == b"\xff\xff"


def test_alpha_off_without_alpha_data():
    rgb, alpha = apply_channels(RGB, None, Channel.RED | Channel.GREEN | Channel.BLUE)
    assert (rgb, alpha) == (RGB, None)


def test_only_alpha_shows_alpha_as_grey():
    rgb, alpha = apply_channels(RGB, ALPHA, Channel.ALPHA)
    assert rgb == bytes([7, 7, 7, 9, 9, 9])
    assert alpha is None


def test_only_alpha_without_alpha_data_is_white():
    rgb, alpha = apply_channels(RGB, None, Channel.ALPHA)
    assert rgb == b"\xff" * len(RGB)
    assert alpha is None


def test_nothing_visible():
    rgb, alpha = apply_channels(RGB, ALPHA, Channel.NONE)
    assert rgb == bytes(len(RGB))
    assert alpha == b"\xff\xff"


def test_bad_rgb_length():
    with pytest.raises(ValueError):
        apply_channels(b"\x00\x01", None, Channel.RED)


def test_bad_alpha_length():
    with pytest.raises(ValueError):
        apply_channels(RGB, b"\x00", Channel.RED)


def test_toggle_reports_changes():
    state = ChannelState()
    assert state.channels == Channel.ALL
    assert state.toggle(Channel.RED, False) is True
    assert state.channels == Channel.GREEN | Channel.BLUE | Channel.ALPHA
    assert state.toggle(Channel.RED, False) is False
    assert state.toggle(Channel.RED, True) is True
    assert state.channels == Channel.ALL


def test_toggle_ignores_combined_channels():
    state = ChannelState()
    assert state.toggle(Channel.ALL, False) is False
    assert state.toggle(Channel.NONE, True) is False
    assert state.channels == Channel.ALL


def test_state_apply_matches_function():
    state = ChannelState()
    state.toggle(Channel.BLUE, False)
    state.toggle(Channel.ALPHA, False)
    assert state.apply(RGB, ALPHA) == apply_channels(
        RGB, ALPHA, Channel.RED | Channel.GREEN
    )
    rgb, alpha = state.apply(RGB, ALPHA)
    assert rgb[2::3] == bytes(2)
    assert alpha == b"\xff\xff"