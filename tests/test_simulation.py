"""Integration tests for Simulation."""

import dataclasses
import logging
import tempfile
from pathlib import Path

import numpy as np
import pytest
import yaml
from sickle_sim import Simulation, run_simulation
from sickle_sim.exceptions import InvariantError, SimulationError
from sickle_sim.simulation import SimulationState


def test_simulation_zero_generations(config):
    """Test that no generations leaves the founding composition."""
    results = Simulation(config).run(0)
    assert results.as_tuple() == (75, 25)
    assert results.generations_completed == 0


def test_simulation_run(config):
    """Test running a complete simulation."""
    results = Simulation(config).run()
    
    assert results.generations_completed == 50
    assert results.percent_a + results.percent_s == 100
    assert results.as_tuple() == (results.final_summary.percent_a, results.final_summary.percent_s)
    assert results.seed == 42
    assert results.duration_seconds >= 0


def test_simulation_reproducibility(config):
    """Test that same seed produces same results."""
    first = Simulation(config).run()
    second = Simulation(config).run()
    assert first.final_summary == second.final_summary


def test_simulation_explicit_rng(config):
    """Test that an injected generator drives the run."""
    first = Simulation(config, np.random.default_rng(5)).run()
    second = Simulation(config, np.random.default_rng(5)).run()
    assert first.final_summary == second.final_summary


def test_simulation_states(config):
    """Test the initializing, stepping, done lifecycle."""
    sim = Simulation(config)
    assert sim.state is SimulationState.INITIALIZING
    
    stats = sim.step()
    assert sim.state is SimulationState.STEPPING
    assert stats.generation == 0
    assert sim.step().generation == 1
    assert len(sim.pool) == 100
    
    sim.run(3)
    assert sim.state is SimulationState.DONE
    
    with pytest.raises(SimulationError):
        sim.step()


def test_pool_renormalized_every_generation(config):
    """Test that the pool returns to the canonical size after selection."""
    sim = Simulation(config)
    for _ in range(20):
        stats = sim.step()
        assert stats.survivors <= 50
        assert len(sim.pool) == config.total_alleles


def test_fixed_normal_population_stays_fixed(config):
    """Test that S can never appear in a pure A population."""
    config = dataclasses.replace(config, initial_a=100, initial_s=0)
    assert Simulation(config).run(200).as_tuple() == (100, 0)


def test_fixed_sickle_population_stays_fixed(config):
    """Test that a pure S population dies out and keeps its composition."""
    config = dataclasses.replace(config, initial_a=0, initial_s=100)
    sim = Simulation(config)
    
    stats = sim.step()
    assert stats.survivors == 0
    assert stats.summary.is_extinct
    
    assert sim.run(10).as_tuple() == (0, 100)


def test_no_malaria_pressure_one_generation(config):
    """Test that without malaria deaths S can only be lost through (S,S) deaths."""
    config = dataclasses.replace(config, malaria_survival=1.0)
    for seed in range(20):
        percent_a, percent_s = Simulation(config, np.random.default_rng(seed)).run(1).as_tuple()
        assert percent_a + percent_s == 100
        assert percent_s <= 25


def test_inconsistent_composition_fails_fast(config):
    """Test that a founding composition off the pool size aborts the run."""
    config = dataclasses.replace(config, initial_a=70, initial_s=25)
    with pytest.raises(InvariantError):
        Simulation(config).run()


def test_negative_generations(config):
    """Test that a negative generation count is rejected."""
    with pytest.raises(SimulationError):
        Simulation(config).run(-1)


def test_smaller_pool(config):
    """Test a non-default canonical pool size."""
    config = dataclasses.replace(config, total_alleles=20, initial_a=15, initial_s=5)
    sim = Simulation(config)
    stats = sim.step()
    assert stats.individuals == 10
    assert len(sim.pool) == 20
    
    percent_a, percent_s = sim.run(30).as_tuple()
    assert percent_a + percent_s == 20


def test_run_simulation(config):
    """Test the single-population entry point."""
    percent_a, percent_s = run_simulation(10, config, np.random.default_rng(1))
    assert percent_a + percent_s == 100
    assert isinstance(percent_a, int)


def test_simulation_from_config():
    """Test creating simulation from config."""
    with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False) as f:
        yaml.dump({'seed': 3, 'generations': 5}, f)
        config_path = f.name
    
    try:
        sim = Simulation.from_config(config_path)
        assert sim.config.seed == 3
        assert sim.run().generations_completed == 5
    finally:
        Path(config_path).unlink()


def test_diagnostic_logging(config, caplog):
    """Test per-generation and per-run log lines."""
    config = dataclasses.replace(config, debug=True)
    with caplog.at_level(logging.DEBUG, logger="sickle_sim"):
        Simulation(config).run(2)
    
    messages = [record.getMessage() for record in caplog.records]
    assert any(m.startswith("gen 0 | A: ") for m in messages)
    assert any(m.startswith("gen 1 | A: ") for m in messages)
    assert any(m.startswith("> A: 75 (75%), S: 25 (25%)") for m in messages)
    assert any(m.startswith("total | A: ") for m in messages)


def test_no_generation_logging_without_debug(config, caplog):
    """Test that per-generation lines are gated by the debug flag."""
    with caplog.at_level(logging.DEBUG, logger="sickle_sim"):
        Simulation(config).run(2)
    
    messages = [record.getMessage() for record in caplog.records]
    assert not any(m.startswith("gen ") for m in messages)
    assert any(m.startswith("total | ") for m in messages)
