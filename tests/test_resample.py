import math
import random

import numpy as np
import pytest

from sigkit.resample import resample


def test_resample_to_exact_number_small():
    rng = random.Random(1234)
    for _ in range(100):
        length = rng.randrange(10, 50)
        x = [rng.uniform(-100.0, 100.0) for _ in range(length)]
        assert len(resample(x, 100)) == 100


def test_resample_to_exact_number_large():
    rng = random.Random(4321)
    for _ in range(10):
        length = rng.randrange(200, 2000)
        target = rng.randrange(50, 5000)
        x = [rng.uniform(-100.0, 100.0) for _ in range(length)]
        assert len(resample(x, target)) == target


def test_constant_upsampled_stays_constant():
    y = resample([2.0] * 8, 16)
    assert np.allclose(y, 2.0)


def test_constant_downsampled_stays_constant():
    y = resample([2.0] * 16, 8)
    assert np.allclose(y, 2.0)


def test_even_length_same_size_is_identity():
    x = [1.0, -3.0, 2.5, 7.0, 0.0, 4.0]
    assert np.allclose(resample(x, len(x)), x)


def test_upsampled_samples_every_other_match_original_for_sinusoid():
    points = 16
    x = [math.sin(2 * math.pi * i / points) for i in range(points)]
    y = resample(x, 2 * points)
    assert np.allclose(y[::2], x)


def test_zero_target_length():
    assert resample([1.0, 2.0, 3.0], 0).size == 0


def test_empty_input_gives_nan():
    y = resample([], 4)
    assert y.shape == (4,)
    assert np.isnan(y).all()


def test_negative_target_length():
    with pytest.raises(ValueError):
        resample([1.0, 2.0], -1)