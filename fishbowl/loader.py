"""
YAML tank loader with schema validation.

Loads tank definitions (bounds, fish, starting food, loop settings)
from YAML files and validates them against a JSON schema.
"""

import yaml
import json
from pathlib import Path
from typing import Dict, Optional
import jsonschema

from .data_types import TankConfig, CreatureSpec, FoodSpec, SimulationSettings


class ConfigLoadError(Exception):
    """Raised when tank loading or validation fails"""
    pass


def load_yaml(file_path: Path) -> dict:
    """Load YAML file and return parsed dict"""
    file_path = Path(file_path)
    if not file_path.exists():
        raise ConfigLoadError(f"File not found: {file_path}")

    try:
        with open(file_path, 'r') as f:
            return yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"YAML parse error in {file_path}: {e}")


def validate_against_schema(data: dict, schema_path: Path, data_path: Path):
    """Validate data dict against JSON schema"""
    if not schema_path.exists():
        # Schema validation optional (schema_dir may point at a partial pack)
        return

    try:
        with open(schema_path, 'r') as f:
            schema = json.load(f)
        jsonschema.validate(instance=data, schema=schema)
    except jsonschema.ValidationError as e:
        raise ConfigLoadError(f"Validation error in {data_path}: {e.message}")
    except json.JSONDecodeError as e:
        raise ConfigLoadError(f"Invalid JSON schema {schema_path}: {e}")


def parse_tank(data: dict) -> TankConfig:
    """Build a TankConfig from an already-validated dict"""
    bounds = data.get('bounds')
    if not isinstance(bounds, dict) or 'width' not in bounds or 'height' not in bounds:
        raise ConfigLoadError(f"Malformed tank definition: bounds needs width and height, got {bounds!r}")

    try:
        creatures = [CreatureSpec(**c) for c in data.get('creatures', [])]
        food = [FoodSpec(**f) for f in data.get('food', [])]
        simulation = SimulationSettings(**data.get('simulation', {}))

        return TankConfig(
            tank_id=data['tank_id'],
            name=data['name'],
            bounds=bounds,
            creatures=creatures,
            food=food,
            simulation=simulation,
            seed=data.get('seed'),
            description=data.get('description')
        )
    except (KeyError, TypeError) as e:
        raise ConfigLoadError(f"Malformed tank definition: {e}")


def load_tank(file_path: Path, schema_dir: Optional[Path] = None) -> TankConfig:
    """Load tank definition from YAML"""
    file_path = Path(file_path)
    data = load_yaml(file_path)

    if not isinstance(data, dict):
        raise ConfigLoadError(f"Tank file {file_path} must contain a mapping")

    # Validate if schema available
    if schema_dir:
        schema_path = Path(schema_dir) / "tank.schema.json"
        validate_against_schema(data, schema_path, file_path)

    return parse_tank(data)


def load_tank_registry(tank_dir: Path, schema_dir: Optional[Path] = None) -> Dict[str, TankConfig]:
    """Load all tanks from directory"""
    tank_dir = Path(tank_dir)
    if not tank_dir.exists():
        raise ConfigLoadError(f"Tank directory not found: {tank_dir}")

    registry = {}
    for yaml_file in sorted(tank_dir.glob("*.yaml")):
        tank = load_tank(yaml_file, schema_dir)
        registry[tank.tank_id] = tank

    if not registry:
        raise ConfigLoadError(f"No tank files found in {tank_dir}")

    return registry
