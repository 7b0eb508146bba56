"""
Core Component: Parameter Registry

Frozen constants for deterministic solver operation.
All global parameters (thresholds, ring sizes, step counts, tie-break
policies) are defined here once and imported by the solvers.

No randomness, no environment leakage, no optionals.
"""

# Octopus energy above this value flashes
FLASH_THRESHOLD = 9

# Heights equal to this value never belong to a basin
BASIN_DELIMITER = 9

# Lanternfish: an adult reproduces every 7 days; a newborn needs 2 extra days
PARENT_REPRODUCTION_DAYS = 7
NEWBORN_EXTRA_DAYS = 2

# Bingo boards are 5x5
BINGO_BOARD_SIZE = 5

# Step counts per puzzle part
POPULATION_DAYS = (80, 256)
POLYMER_STEPS = (10, 40)
FLASH_STEPS = 100
# Day 11 part 2 gives up (unsolvable) after this many steps without synchronizing
SYNC_STEP_LIMIT = 10000
BASIN_TOP_COUNT = 3
SONAR_WINDOW = 3

REGISTRY_VERSION = "1.0"


def param_registry() -> dict:
    """
    Returns a frozen mapping of all global constants used by the solvers.

    Keys and values are JSON-serializable primitives or lists.
    This registry is hashed into every section receipt to prove parametric
    consistency between runs.

    Returns:
        dict: Frozen parameter mapping with exact keys and values.

    Raises:
        RegistryError: If any required key is missing (internal consistency check).
    """
    registry = {
        "registry_version": REGISTRY_VERSION,

        # Grid neighbourhoods: (left, up, right, down) for basins,
        # all eight surrounding cells for flashing
        "neighbourhood": {"basin": "4", "flash": "8"},
        "grid_order": "row-major",

        "flash_threshold": FLASH_THRESHOLD,
        "basin_delimiter": BASIN_DELIMITER,
        "basin_top_count": BASIN_TOP_COUNT,

        "parent_reproduction_days": PARENT_REPRODUCTION_DAYS,
        "newborn_extra_days": NEWBORN_EXTRA_DAYS,

        "bingo_board_size": BINGO_BOARD_SIZE,

        "steps": {
            "population": list(POPULATION_DAYS),
            "polymer": list(POLYMER_STEPS),
            "flash": FLASH_STEPS,
            "flash_sync_limit": SYNC_STEP_LIMIT,
        },
        "sonar_window": SONAR_WINDOW,

        # Diagnostic report: gamma keeps 0 on a tie, oxygen keeps 1, CO2 keeps 0
        "bit_tie_break": {"gamma": 0, "oxygen": 1, "co2": 0},

        "hash_algo": "BLAKE3",

        # Byte frame tags for serialization (ASCII 4-byte tags)
        "byte_frame_tags": {
            "GRID": "GRD1",
            "DOTS": "DOT1",
        },
    }

    required_keys = {
        "registry_version", "neighbourhood", "grid_order", "flash_threshold",
        "basin_delimiter", "basin_top_count", "parent_reproduction_days",
        "newborn_extra_days", "bingo_board_size", "steps", "sonar_window",
        "bit_tie_break", "hash_algo", "byte_frame_tags"
    }

    actual_keys = set(registry.keys())
    if actual_keys != required_keys:
        missing = required_keys - actual_keys
        extra = actual_keys - required_keys
        raise RegistryError(
            f"param_registry() key mismatch. Missing: {missing}, Extra: {extra}"
        )

    return registry


class RegistryError(Exception):
    """Raised when param_registry() has missing or unexpected keys."""
    pass
