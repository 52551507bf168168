# -*- coding: utf-8 -*-
"""Run options shared by the attacks and the command line."""

from dataclasses import dataclass
from typing import Optional

# rough wall-clock guess per attack, drives the progress spinner
ESTIMATED_SECONDS = {
    "fermat": 2.0,
    "cycling": 5.0,
}


@dataclass
class AttackOptions:
    max_iterations: Optional[int] = None  # None = search until found
    stop_on_hit: bool = True

    @classmethod
    def from_args(cls, args) -> "AttackOptions":
        max_it = getattr(args, "max_iterations", None)
        if max_it is not None and max_it <= 0:
            raise ValueError("--max-iterations must be positive")
        return cls(max_iterations=max_it, stop_on_hit=not getattr(args, "no_stop", False))
