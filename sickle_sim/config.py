"""Configuration loading and validation for sickle_sim."""

import copy
import json
import yaml
from pathlib import Path
from typing import Dict, Any, Optional
from dataclasses import dataclass, field

from .exceptions import ConfigurationError


DEFAULTS: Dict[str, Any] = {
    'seed': None,
    'populations': 20,
    'generations': 100_000,
    'total_alleles': 100,
    'malaria_survival': 0.5,
    'initial_composition': {'A': 75, 'S': 25},
    'workers': None,
    'debug': False,
}


@dataclass
class SimulationConfig:
    """Complete simulation configuration."""
    seed: Optional[int] = None
    populations: int = 20
    generations: int = 100_000
    total_alleles: int = 100
    malaria_survival: float = 0.5  # Probability (0.0-1.0) that an (A,A) individual survives
    initial_a: int = 75
    initial_s: int = 25
    workers: Optional[int] = None  # None = one per CPU, 1 = serial in-process
    debug: bool = False
    raw_config: Dict[str, Any] = field(default_factory=dict)


def default_config() -> SimulationConfig:
    """Return a configuration holding the reference constants."""
    raw_config = copy.deepcopy(DEFAULTS)
    return build_config(raw_config)


def load_config(config_path: str) -> SimulationConfig:
    """
    Load and validate configuration from YAML or JSON file.
    
    Args:
        config_path: Path to configuration file
        
    Returns:
        Validated SimulationConfig object
        
    Raises:
        ConfigurationError: If file doesn't exist or configuration is invalid
    """
    path = Path(config_path)
    
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {config_path}")
    
    try:
        with open(path, 'r') as f:
            if path.suffix.lower() == '.json':
                raw_config = json.load(f)
            else:
                raw_config = yaml.safe_load(f)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Failed to parse configuration file: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Failed to read configuration file: {e}") from e
    
    if raw_config is None:
        raw_config = {}
    if not isinstance(raw_config, dict):
        raise ConfigurationError("Configuration file must contain a mapping")
    
    normalize_config(raw_config)
    validate_config(raw_config)
    
    return build_config(raw_config)


def normalize_config(config: Dict[str, Any]) -> None:
    """
    Fill in defaults for omitted fields.
    
    Args:
        config: Configuration dictionary (modified in place)
    """
    for key, value in DEFAULTS.items():
        if key not in config:
            config[key] = copy.deepcopy(value)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_config(config: Dict[str, Any]) -> None:
    """
    Validate configuration structure and values.
    
    Args:
        config: Raw configuration dictionary
        
    Raises:
        ConfigurationError: If validation fails
    """
    unknown = sorted(set(config) - set(DEFAULTS))
    if unknown:
        raise ConfigurationError(f"Unknown configuration fields: {', '.join(unknown)}")
    
    if config['seed'] is not None and not _is_int(config['seed']):
        raise ConfigurationError("seed must be an integer or null")
    if _is_int(config['seed']) and config['seed'] < 0:
        raise ConfigurationError("seed must be non-negative")
    
    if not _is_int(config['populations']) or config['populations'] < 1:
        raise ConfigurationError("populations must be a positive integer")
    
    if not _is_int(config['generations']) or config['generations'] < 0:
        raise ConfigurationError("generations must be a non-negative integer")
    
    total = config['total_alleles']
    if not _is_int(total) or total < 2:
        raise ConfigurationError("total_alleles must be a positive integer")
    if total % 2 != 0:
        raise ConfigurationError(f"total_alleles must be even, got {total}")
    
    survival = config['malaria_survival']
    if isinstance(survival, bool) or not isinstance(survival, (int, float)) or not (0.0 <= survival <= 1.0):
        raise ConfigurationError("malaria_survival must be a number between 0.0 and 1.0")
    
    composition = config['initial_composition']
    if not isinstance(composition, dict) or 'A' not in composition or 'S' not in composition:
        raise ConfigurationError("initial_composition must contain 'A' and 'S' keys")
    for allele in ('A', 'S'):
        if not _is_int(composition[allele]) or composition[allele] < 0:
            raise ConfigurationError(f"initial_composition.{allele} must be a non-negative integer")
    if composition['A'] + composition['S'] != total:
        raise ConfigurationError(
            f"initial_composition must sum to total_alleles ({total}), "
            f"got {composition['A'] + composition['S']}"
        )
    
    if config['workers'] is not None:
        if not _is_int(config['workers']) or config['workers'] < 1:
            raise ConfigurationError("workers must be a positive integer or null")
    
    if not isinstance(config['debug'], bool):
        raise ConfigurationError("debug must be a boolean")


def build_config(raw_config: Dict[str, Any]) -> SimulationConfig:
    """
    Build SimulationConfig object from validated raw config.
    
    Args:
        raw_config: Validated and normalized configuration dictionary
        
    Returns:
        SimulationConfig object
    """
    composition = raw_config['initial_composition']
    return SimulationConfig(
        seed=raw_config['seed'],
        populations=raw_config['populations'],
        generations=raw_config['generations'],
        total_alleles=raw_config['total_alleles'],
        malaria_survival=float(raw_config['malaria_survival']),
        initial_a=composition['A'],
        initial_s=composition['S'],
        workers=raw_config['workers'],
        debug=raw_config['debug'],
        raw_config=raw_config
    )
