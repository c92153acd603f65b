import io

import numpy as np
import pytest
from loguru import logger

from heatrod import (
    BackendKind,
    BoundaryKind,
    BoundaryPolicy,
    ConfigurationError,
    HeatFlow,
    Rod1D,
    RodConfig,
    TemperatureField,
)


def _reference():
    return HeatFlow(10.0, 6, 0.1, {0: 100.0})


def test_rod1d_basic():
    rod = Rod1D(sections=6)
    assert rod.n == 6
    assert rod.last == 5
    assert rod.contains(0)
    assert rod.contains(5)
    assert not rod.contains(6)
    assert not rod.contains(-1)


@pytest.mark.parametrize("sections", [0, -3])
def test_rod1d_rejects_non_positive(sections):
    with pytest.raises(ConfigurationError):
        Rod1D(sections)


def test_field_sources_out_of_range_are_ignored():
    f = TemperatureField(Rod1D(4), 5.0)
    f.apply_sources({-1: 1.0, 2: 50.0, 4: 99.0, 100: 7.0})
    assert np.allclose(f.values, [5.0, 5.0, 50.0, 5.0])


def test_construction_seeds_grid():
    sim = _reference()
    assert np.allclose(sim.temperatures, [100.0, 10.0, 10.0, 10.0, 10.0, 10.0])
    assert sim.step_count == 0


def test_reference_scenario_two_steps():
    sim = _reference()

    sim.tick()
    assert np.allclose(sim.temperatures, [100.0, 19.0, 10.0, 10.0, 10.0, 9.0])

    sim.tick()
    assert np.allclose(sim.temperatures, [100.0, 26.2, 10.9, 10.0, 9.9, 8.2])
    assert sim.step_count == 2


def test_length_and_left_boundary_never_change():
    sim = HeatFlow(3.0, 9, 0.25, {0: -40.0, 4: 80.0})
    for _ in range(50):
        sim.tick()
        assert sim.temperatures.shape == (9,)
        assert sim.temperatures[0] == -40.0


def test_source_away_from_left_edge_still_diffuses():
    sim = HeatFlow(0.0, 5, 0.1, {2: 100.0})
    sim.tick()
    assert sim.temperatures[2] < 100.0
    assert sim.temperatures[1] > 0.0


def test_zero_k_is_a_no_op():
    sim = HeatFlow(10.0, 6, 0.0, {0: 100.0, 3: -5.0})
    before = sim.temperatures
    sim.run(5)
    assert np.array_equal(sim.temperatures, before)


def test_right_edge_sees_zero_neighbour():
    sim = HeatFlow(0.0, 4, 0.2, {0: 1.0, 1: 2.0, 2: 3.0, 3: 4.0})
    t = sim.temperatures
    sim.tick()
    expected = t[3] + 0.2 * (t[2] - 2.0 * t[3])
    assert sim.temperatures[3] == pytest.approx(expected)


def test_single_section_is_static():
    sim = HeatFlow(42.0, 1, 0.3)
    sim.run(10)
    assert np.array_equal(sim.temperatures, [42.0])


def test_two_sections_use_open_edge_immediately():
    sim = HeatFlow(10.0, 2, 0.1, {0: 100.0})
    sim.tick()
    # 10 + 0.1 * (100 - 20 + 0)
    assert np.allclose(sim.temperatures, [100.0, 18.0])


def test_temperatures_is_a_copy():
    sim = _reference()
    t = sim.temperatures
    t[:] = 0.0
    assert sim.temperatures[0] == 100.0


@pytest.mark.parametrize("sections", [0, -1])
def test_simulator_rejects_non_positive_sections(sections):
    with pytest.raises(ConfigurationError):
        HeatFlow(10.0, sections, 0.1)


def test_configuration_error_is_value_error():
    with pytest.raises(ValueError):
        HeatFlow(10.0, 0, 0.1)


@pytest.mark.parametrize("k", [float("nan"), float("inf")])
def test_non_finite_k_rejected(k):
    with pytest.raises(ConfigurationError):
        HeatFlow(10.0, 4, k)


@pytest.mark.parametrize("initial", [float("nan"), float("-inf")])
def test_non_finite_initial_temp_rejected(initial):
    with pytest.raises(ConfigurationError):
        HeatFlow(initial, 4, 0.1)


@pytest.mark.parametrize("k, warned", [(0.9, True), (-0.1, True), (0.5, False), (0.0, False)])
def test_unstable_k_logs_warning(k, warned):
    messages = []
    handler_id = logger.add(messages.append, level="WARNING")
    try:
        HeatFlow(10.0, 4, k)
    finally:
        logger.remove(handler_id)
    assert any("may diverge" in m for m in messages) == warned


def test_unstable_k_is_allowed_unless_strict():
    sim = HeatFlow(10.0, 4, 0.9)
    sim.tick()
    with pytest.raises(ConfigurationError):
        HeatFlow(10.0, 4, 0.9, strict_stability=True)
    with pytest.raises(ConfigurationError):
        HeatFlow(10.0, 4, -0.1, strict_stability=True)


def test_run_rejects_negative_steps():
    with pytest.raises(ValueError):
        _reference().run(-1)


def test_run_calls_back_after_each_step():
    seen = []
    _reference().run(3, callback=lambda s: seen.append(s.step_count))
    assert seen == [1, 2, 3]


def test_backends_agree_exactly():
    sources = {0: 100.0, 3: -20.0, 7: 55.5}
    a = HeatFlow(12.5, 10, 0.37, sources, backend=BackendKind.PYTHON)
    b = HeatFlow(12.5, 10, 0.37, sources, backend=BackendKind.NUMPY)
    for _ in range(25):
        a.tick()
        b.tick()
        assert np.array_equal(a.temperatures, b.temperatures)


@pytest.mark.parametrize("backend", list(BackendKind))
def test_both_fixed_edges(backend):
    policy = BoundaryPolicy(left=BoundaryKind.FIXED, right=BoundaryKind.FIXED)
    sim = HeatFlow(0.0, 5, 0.25, {0: 100.0, 4: 50.0}, boundaries=policy, backend=backend)
    sim.run(20)
    t = sim.temperatures
    assert t[0] == 100.0
    assert t[4] == 50.0
    assert np.all(t[1:4] > 0.0)


@pytest.mark.parametrize("backend", list(BackendKind))
def test_open_left_edge_loses_heat(backend):
    policy = BoundaryPolicy(left=BoundaryKind.OPEN, right=BoundaryKind.OPEN)
    sim = HeatFlow(10.0, 3, 0.1, boundaries=policy, backend=backend)
    sim.tick()
    # 10 + 0.1 * (0 - 20 + 10)
    assert sim.temperatures[0] == pytest.approx(9.0)
    assert sim.temperatures[2] == pytest.approx(9.0)


def test_ghost_value_is_used_for_open_edges():
    policy = BoundaryPolicy(right=BoundaryKind.OPEN, ghost_value=10.0)
    sim = HeatFlow(10.0, 3, 0.1, boundaries=policy)
    sim.tick()
    assert np.allclose(sim.temperatures, [10.0, 10.0, 10.0])


def test_frozen_indices():
    assert BoundaryPolicy().frozen_indices(6) == [0]
    both = BoundaryPolicy(BoundaryKind.FIXED, BoundaryKind.FIXED)
    assert both.frozen_indices(6) == [0, 5]
    assert both.frozen_indices(1) == [0]
    assert BoundaryPolicy(BoundaryKind.OPEN, BoundaryKind.OPEN).frozen_indices(3) == []


def test_from_config_defaults_match_reference():
    sim = HeatFlow.from_config(RodConfig())
    assert sim.render() == _reference().render()


def test_pretty_print_writes_to_stream_and_stdout(capsys):
    sim = _reference()
    buf = io.StringIO()
    sim.pretty_print(buf)
    sim.pretty_print()
    assert buf.getvalue() == sim.render()
    assert capsys.readouterr().out == sim.render()


def test_render_is_deterministic():
    a, b = _reference(), _reference()
    a.run(7)
    b.run(7)
    assert a.render() == b.render()


def test_sources_keep_double_precision():
    # 0.15 在 float32 下会变成 0.15000000596...，显示成 0.2
    sim = HeatFlow(0.0, 2, 0.0, {1: 0.15})
    assert sim.temperatures[1] == 0.15
    assert "|   0.0 |   0.1 |" in sim.render()
