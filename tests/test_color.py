from minitrace.color import Color


def test_add_componentwise():
    assert Color(1, 2, 3, 4) + Color(10, 20, 30, 40) == Color(11, 22, 33, 44)


def test_limited_clamps_only_high_channels():
    assert Color(300, 12, 256, 1000).limited() == Color(255, 12, 255, 255)


def test_limited_keeps_valid_color():
    color = Color(0, 128, 255, 0)
    assert color.limited() == color


def test_scaled_by_one_is_identity():
    color = Color(17, 99, 201, 3)
    assert color.scaled(1) == color


def test_scaled_by_zero_is_black():
    assert Color(17, 99, 201, 3).scaled(0) == Color(0, 0, 0, 0)


def test_scaled_truncates():
    assert Color(10, 21, 31).scaled(0.5) == Color(5, 10, 15)


def test_mult_with_white_keeps_color():
    color = Color(17, 99, 201, 0)
    white = Color(255, 255, 255, 255)
    assert color.mult(white) == Color(17, 99, 201, 0)


def test_mult_with_black_gives_black():
    assert Color(17, 99, 201, 40).mult(Color()) == Color()


def test_mult_is_symmetric():
    a = Color(17, 99, 201, 0)
    b = Color(200, 30, 128, 0)
    assert a.mult(b) == b.mult(a)


def test_to_trgb_packs_channels():
    assert Color(0x12, 0x34, 0x56).to_trgb(1) == 0x123456


def test_to_trgb_includes_transparency():
    assert Color(0x12, 0x34, 0x56, 0x7F).to_trgb() == 0x7F123456


def test_to_trgb_zero_ratio_is_black():
    assert Color(255, 255, 255).to_trgb(0) == 0