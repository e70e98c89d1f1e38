#!/usr/bin/env python3
"""
Validate fleet YAML files against schema.yaml.

Usage: validate_yaml.py [FILE ...]   (default: every YAML file in data/)

Maintenance dates must be quoted ('2025-06-15'); unquoted, YAML loads
them as dates and they fail the schema's string check.
"""
import sys
from datetime import date
from pathlib import Path
from typing import Any, Optional, Sequence

import yaml
from jsonschema import validate, ValidationError

# Key that names an entry in each top-level list
ENTRY_KEYS = {"vehicles": "licensePlate", "drivers": "licenseNumber"}


def load_schema() -> dict:
    """Load the JSON schema from schema.yaml."""
    schema_path = Path(__file__).parent / "schema.yaml"
    with open(schema_path) as f:
        return yaml.safe_load(f)


def describe_entry(data: Any, path: Sequence) -> Optional[str]:
    """Name the vehicle or driver an error path points into, e.g. 'vehicle TRK-0001'."""
    if len(path) < 2 or path[0] not in ENTRY_KEYS or not isinstance(data, dict):
        return None
    section, index = path[0], path[1]
    try:
        entry = data[section][index]
    except (KeyError, IndexError, TypeError):
        return None
    name = entry.get(ENTRY_KEYS[section]) if isinstance(entry, dict) else None
    if name is None:
        return None
    return f"{section[:-1]} {name}"


def validate_fleet_file(filepath: Path, schema: dict) -> list[str]:
    """Validate a single fleet YAML file. Returns list of errors."""
    errors = []
    data = None
    try:
        with open(filepath) as f:
            data = yaml.safe_load(f)
        validate(instance=data, schema=schema)
    except yaml.YAMLError as e:
        errors.append(f"YAML parse error: {e}")
    except ValidationError as e:
        errors.append(f"Schema validation error: {e.message}")
        if e.path:
            errors.append(f"  at path: {'.'.join(str(p) for p in e.path)}")
        entry = describe_entry(data, list(e.path))
        if entry:
            errors.append(f"  in {entry}")
        if isinstance(e.instance, date):
            errors.append("  hint: quote dates, e.g. date: '2025-06-15'")
    except OSError as e:
        errors.append(f"Error: {e}")
    return errors


def main(argv=None):
    """Validate the given fleet files, or every YAML file in data/."""
    schema = load_schema()
    paths = [Path(p) for p in (argv if argv is not None else sys.argv[1:])]

    if not paths:
        data_dir = Path(__file__).parent / "data"
        if not data_dir.exists():
            print(f"Error: data directory not found: {data_dir}")
            return 1
        paths = sorted(list(data_dir.glob("*.yaml")) + list(data_dir.glob("*.yml")))
        if not paths:
            print(f"Warning: No YAML files found in {data_dir}")
            return 0

    failed = 0
    for filepath in paths:
        errors = validate_fleet_file(filepath, schema)
        if errors:
            print(f"FAIL: {filepath.name}")
            for error in errors:
                print(f"  {error}")
            failed += 1
        else:
            print(f"OK: {filepath.name}")

    if len(paths) > 1:
        print(f"{len(paths) - failed}/{len(paths)} fleet files valid")
    return 0 if failed == 0 else 1


if __name__ == "__main__":
    sys.exit(main())
