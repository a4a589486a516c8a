"""
Sickle-cell allele frequency simulation

Main API:
    Simulation - Single population simulation class
    SimulationResults - Simulation results dataclass
    run_simulation - Run one population and return its final shares
    PopulationRunner - Runs many independent populations
    load_config - Configuration loading helper
"""

from .simulation import Simulation, SimulationResults, run_simulation
from .runner import PopulationRunner, PopulationResults
from .config import load_config, default_config, SimulationConfig

__all__ = [
    'Simulation', 'SimulationResults', 'run_simulation',
    'PopulationRunner', 'PopulationResults',
    'load_config', 'default_config', 'SimulationConfig',
]
__version__ = '0.1.0'
