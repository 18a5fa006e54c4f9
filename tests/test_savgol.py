import pytest

from sigkit.savgol import savgol_coeffs, savgol_filter

INPUT = [2.0, 2.0, 5.0, 2.0, 1.0, 0.0, 1.0, 4.0, 9.0]

LINE_EXPECTED = [
    2.45650177, 4.06008889, 5.86936071, 7.87987343, 10.08430349,
    12.47257185, 15.03201779, 17.74762253, 20.6022825, 23.57713222,
    26.65191695, 29.805415, 33.01590968, 36.26171099, 39.52172696,
    42.77608466, 46.00680095, 49.19850285, 52.33919758, 55.4210924,
    58.44146398, 61.40357756, 64.31765571, 67.20189688, 70.08354354,
    73.0, 76.0, 79.0, 82.0, 85.0, 88.0, 91.0, 94.0, 97.0, 100.0,
    103.0, 106.0, 109.0, 112.0, 115.0, 118.0, 121.0, 124.0, 127.0, 130.0,
    133.0, 136.0, 139.0, 142.0, 145.0, 148.0, 151.0, 154.0, 157.0, 160.0,
    163.0, 166.0, 169.0, 172.0, 175.0, 178.0, 181.0, 184.0, 187.0, 190.0,
    193.0, 196.0, 199.0, 202.0, 205.0, 208.0, 211.0, 214.0, 217.0, 220.0,
    222.91645647, 225.79810312, 228.6823443, 231.59642245, 234.55853602,
    237.5789076, 240.66080242, 243.80149716, 246.99319905, 250.22391534,
    253.47827305, 256.73828901, 259.98409032, 263.194585, 266.34808305,
    269.42286778, 272.3977175, 275.25237747, 277.96798222, 280.52742816,
    282.91569651, 285.12012658, 287.13063929, 288.93991111, 290.54349823,
]

COEFFS_51_5 = [
    0.02784785, 0.01160327, -0.00086484, -0.00994566, -0.01601181,
    -0.01941934, -0.02050775, -0.01959997, -0.01700239, -0.0130048,
    -0.00788047, -0.00188609, 0.00473822, 0.01176888, 0.01899888,
    0.02623777, 0.03331167, 0.04006325, 0.04635174, 0.05205294,
    0.05705919, 0.06127943, 0.06463912, 0.0670803, 0.06856157,
    0.06905808, 0.06856157, 0.0670803, 0.06463912, 0.06127943,
    0.05705919, 0.05205294, 0.04635174, 0.04006325, 0.03331167,
    0.02623777, 0.01899888, 0.01176888, 0.00473822, -0.00188609,
    -0.00788047, -0.0130048, -0.01700239, -0.01959997, -0.02050775,
    -0.01941934, -0.01601181, -0.00994566, -0.00086484, 0.01160327,
    0.02784785,
]

COEFFS_21_8 = [
    0.0125937, -0.04897551, 0.03811252, 0.04592441, -0.01514104,
    -0.06782274, -0.05517056, 0.03024958, 0.15283999, 0.25791748,
    0.29894434, 0.25791748, 0.15283999, 0.03024958, -0.05517056,
    -0.06782274, -0.01514104, 0.04592441, 0.03811252, -0.04897551,
    0.0125937,
]


def test_filter_ramp_keeps_length():
    out = savgol_filter((float(i) for i in range(100)), 11, 2)
    assert len(out) == 100


def test_filter_empty_input():
    assert savgol_filter([], 11, 2) == []


def test_filter_smoothing():
    actual = savgol_filter(INPUT, 5, 2)
    expected = [
        1.74285714, 3.02857143, 3.54285714, 2.85714286, 0.65714286,
        0.17142857, 1.0, 4.6, 7.97142857,
    ]
    assert actual == pytest.approx(expected, rel=1e-5)


def test_filter_first_derivative():
    actual = savgol_filter(iter(INPUT), 5, 2, 1)
    expected = [0.6, 0.3, -0.2, -0.8, -1.0, 0.4, 2.0, 2.6, 2.1]
    assert actual == pytest.approx(expected, rel=1e-5)


def test_filter_line_with_large_window():
    actual = savgol_filter((3 * i - 2 for i in range(100)), 51, 5)
    assert actual == pytest.approx(LINE_EXPECTED, rel=1e-5)


def test_filter_even_window_raises():
    with pytest.raises(ValueError):
        savgol_filter(INPUT, 4, 2)


def test_filter_window_too_small_raises():
    with pytest.raises(ValueError):
        savgol_filter(INPUT, 3, 2)


def test_coeffs_defaults():
    expected = [-0.08571429, 0.34285714, 0.48571429, 0.34285714, -0.08571429]
    assert savgol_coeffs(5, 2) == pytest.approx(expected, rel=1e-5)
    assert savgol_coeffs(5, 2, 0, 1.0) == pytest.approx(expected, rel=1e-7)


def test_coeffs_even_window():
    assert savgol_coeffs(4, 2) == pytest.approx([-0.0625, 0.5625, 0.5625, -0.0625], rel=1e-7)


def test_coeffs_large_window():
    assert savgol_coeffs(51, 5) == pytest.approx(COEFFS_51_5, rel=5e-6)


def test_coeffs_high_order():
    assert savgol_coeffs(21, 8) == pytest.approx(COEFFS_21_8, rel=1e-6)


def test_coeffs_first_derivative():
    expected = [2.0e-1, 1.0e-1, 2.07548111e-16, -1.0e-1, -2.0e-1]
    assert savgol_coeffs(5, 2, 1, 1.0) == pytest.approx(expected, rel=1e-7, abs=1e-12)


def test_coeffs_even_window_first_derivative():
    expected = [-0.09093915, 0.4130291, 0.21560847, -0.21560847, -0.4130291, 0.09093915]
    assert savgol_coeffs(6, 3, 1) == pytest.approx(expected, rel=1e-7)


def test_coeffs_even_window_second_derivative():
    expected = [0.17857143, -0.03571429, -0.14285714, -0.14285714, -0.03571429, 0.17857143]
    assert savgol_coeffs(6, 3, 2, 1.0) == pytest.approx(expected, rel=5e-6)


def test_coeffs_derivative_above_order_is_zero():
    assert savgol_coeffs(7, 2, 3) == [0.0] * 7


def test_coeffs_polyorder_too_large_raises():
    with pytest.raises(ValueError):
        savgol_coeffs(5, 5)


def test_smoothing_coeffs_sum_to_one():
    assert sum(savgol_coeffs(9, 3)) == pytest.approx(1.0, rel=1e-9)