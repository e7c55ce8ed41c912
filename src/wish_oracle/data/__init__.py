"""Bundled data for the Wish Oracle package."""

from __future__ import annotations

import json
from importlib import resources
from typing import Any, Dict, List


def load_sample_readings() -> List[Dict[str, Any]]:
    with resources.files(__package__).joinpath("sample_readings.json").open("r", encoding="utf-8") as stream:
        return json.load(stream)


__all__ = ["load_sample_readings"]
