import math

import pytest

from compfin.randoms import (
    MODULUS,
    bivariate_normal_x,
    bivariate_normal_y,
    box_muller,
    box_muller_halton,
    halton_sequence,
    lgm_next,
    polar_marsaglia,
    rbinom,
    rexp,
    runif,
    wiener_process,
)

SEED = 1234567890


def test_lgm_next_first_step():
    assert lgm_next(MODULUS, 1) == 7**5


def test_lgm_next_stays_below_modulus():
    for num in (1, 12345, SEED, MODULUS - 1):
        assert 0 <= lgm_next(MODULUS, num) < MODULUS


def test_lgm_next_uses_unsigned_32_bit_input():
    assert lgm_next(MODULUS, 99) == lgm_next(MODULUS, 99 + 2**32)


def test_runif_starts_with_seed_over_modulus():
    values = runif(10, SEED)
    assert len(values) == 10
    assert values[0] == SEED / MODULUS
    assert all(0.0 <= v < 1.0 for v in values)


def test_runif_continues_from_next_state():
    assert runif(5, SEED)[1:] == runif(4, lgm_next(MODULUS, SEED))


def test_runif_pinned_values_from_seed_one():
    assert runif(3, 1) == [1 / MODULUS, 16807 / MODULUS, 282475249 / MODULUS]


def test_runif_negative_seed_raises():
    with pytest.raises(ValueError):
        runif(3, -1)


def test_rbinom_range_and_extremes():
    draws = rbinom(50, 10, 0.3, SEED)
    assert len(draws) == 50
    assert all(0 <= d <= 10 for d in draws)
    assert rbinom(20, 5, 1.0, SEED) == [5] * 20
    assert rbinom(20, 5, 0.0, SEED) == [0] * 20


def test_rexp_inverts_exponential():
    assert rexp([1.0], 2.0) == [0.0]
    assert rexp([math.exp(-1)], 2.0) == pytest.approx([2.0])
    assert all(v >= 0 for v in rexp(runif(20, SEED)[1:], 1.5))


def test_box_muller_radius_invariant():
    uniforms = [0.3, 0.8, 0.6, 0.15]
    normals = box_muller(uniforms)
    assert len(normals) == 4
    assert normals[0] ** 2 + normals[1] ** 2 == pytest.approx(-2 * math.log(0.3))
    assert normals[2] ** 2 + normals[3] ** 2 == pytest.approx(-2 * math.log(0.6))


def test_box_muller_odd_length_raises():
    with pytest.raises(ValueError):
        box_muller([0.2, 0.4, 0.6])


def test_box_muller_halton_length_and_mismatch():
    b1 = halton_sequence(2, 8)
    b2 = halton_sequence(3, 8)
    assert len(box_muller_halton(b1, b2)) == 8
    with pytest.raises(ValueError):
        box_muller_halton(b1, b2[:5])


def test_box_muller_halton_matches_box_muller_on_shared_inputs():
    # With base1 constant within each pair, both transforms agree.
    base1 = [0.4, 0.4]
    base2 = [0.7, 0.7]
    assert box_muller_halton(base1, base2) == pytest.approx(box_muller([0.4, 0.7]))


def test_polar_marsaglia_accepts_inside_disc():
    normals = polar_marsaglia([0.75, 0.75])
    assert len(normals) == 2
    assert normals[0] == normals[1]
    assert normals[0] > 0


def test_polar_marsaglia_rejects_outside_disc():
    assert polar_marsaglia([1.0, 1.0, 1.0, 1.0]) == []


def test_polar_marsaglia_output_pairs():
    normals = polar_marsaglia(runif(200, SEED)[1:])
    assert len(normals) % 2 == 0
    assert len(normals) > 0


def test_bivariate_normal_components():
    z1 = [0.5, -1.2, 2.0]
    z2 = [1.1, 0.3, -0.7]
    assert bivariate_normal_x(z1) == z1
    assert bivariate_normal_y(z1, z2, 0.0) == pytest.approx(z2)
    assert bivariate_normal_y(z1, z2, 1.0) == pytest.approx(z1)


def test_bivariate_normal_y_length_mismatch_raises():
    with pytest.raises(ValueError):
        bivariate_normal_y([1.0, 2.0], [1.0], 0.5)


def test_wiener_process_odd_size_is_prefix():
    assert wiener_process(0.5, 5, SEED) == wiener_process(0.5, 6, SEED)[:5]


def test_wiener_process_scales_with_sqrt_time():
    unit = wiener_process(1.0, 10, SEED)
    four = wiener_process(4.0, 10, SEED)
    assert four == pytest.approx([2 * w for w in unit])


def test_halton_base_two():
    assert halton_sequence(2, 7) == [0.5, 0.25, 0.75, 0.125, 0.625, 0.375, 0.875]


def test_halton_base_three():
    assert halton_sequence(3, 3) == pytest.approx([1 / 3, 2 / 3, 1 / 9])


def test_halton_points_distinct_and_in_unit_interval():
    seq = halton_sequence(5, 100)
    assert len(seq) == 100
    assert len(set(seq)) == 100
    assert all(0.0 < v < 1.0 for v in seq)


def test_halton_edge_cases():
    assert halton_sequence(2, 0) == []
    with pytest.raises(ValueError):
        halton_sequence(1, 5)