# board_intel/context.py
from __future__ import annotations
import itertools
from dataclasses import dataclass, field
from typing import Dict, Iterator


@dataclass
class RunContext:
    """Per-run id sequences.

    One context is created for each analyzed image and threaded through the
    stages that mint ids, so two runs never share a counter.
    """
    _counters: Dict[str, Iterator[int]] = field(default_factory=dict)

    def next_id(self, prefix: str, sep: str = "_") -> str:
        counter = self._counters.setdefault(prefix, itertools.count())
        return f"{prefix}{sep}{next(counter)}"
