"""Defaults and parameter-file loading."""

import json
import os
from pathlib import Path
from typing import Any

from mcprimer.errors import InvalidArgument

DEFAULT_SAMPLE_COUNT = 10_000
DEFAULT_CONFIDENCE_Z = 1.96  # two-sided 95%
DEFAULT_WORKERS = os.cpu_count() or 1
CONVERGENCE_SAMPLE_SIZES = (100, 1_000, 10_000, 100_000)


def parse_params(text: str) -> dict[str, Any]:
    """Parse a JSON object of experiment parameters."""
    try:
        params = json.loads(text)
    except json.JSONDecodeError as e:
        raise InvalidArgument(f"parameters are not valid JSON: {e}") from e
    if not isinstance(params, dict):
        raise InvalidArgument("parameters must be a JSON object")
    return params


def load_params_from_json(path: str | Path) -> dict[str, Any]:
    """Load experiment parameters from a JSON file.

    Args:
        path: File holding a single JSON object

    Returns:
        Parameter dictionary, validated later by the experiment's config model
    """
    with open(path) as f:
        return parse_params(f.read())
