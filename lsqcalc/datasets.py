"""Named groups of observations for the standard-error calculator.

Each dataset is an immutable record; editing the active dataset swaps in a new
record at its index and leaves every other dataset untouched.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import List, Optional, Tuple

from .parsing import parse_float
from .points import generate_id
from .stats.sample import SampleSummary, summarize

logger = logging.getLogger(__name__)

DATASET_NAME_TEMPLATE = "Values {index}"
SAMPLE_DISPLAY_DIGITS = 6


@dataclass(frozen=True)
class SampleValue:
    id: str
    v: float


@dataclass(frozen=True)
class SampleDataset:
    id: str
    name: str
    values: Tuple[SampleValue, ...] = ()

    @classmethod
    def create(cls, index: int) -> "SampleDataset":
        return cls(id=generate_id(), name=DATASET_NAME_TEMPLATE.format(index=index))

    def summary(self) -> SampleSummary:
        return summarize(item.v for item in self.values)


class SampleWorkbook:
    """An ordered, never-empty collection of datasets with one active tab."""

    def __init__(self):
        self._datasets: List[SampleDataset] = [SampleDataset.create(1)]
        self._active = 0

    def __len__(self) -> int:
        return len(self._datasets)

    @property
    def datasets(self) -> Tuple[SampleDataset, ...]:
        return tuple(self._datasets)

    @property
    def active_index(self) -> int:
        return self._active

    @property
    def active(self) -> SampleDataset:
        return self._datasets[self._active]

    def add_dataset(self) -> SampleDataset:
        """Append a new auto-numbered dataset and make it active."""
        dataset = SampleDataset.create(len(self._datasets) + 1)
        self._datasets.append(dataset)
        self._active = len(self._datasets) - 1
        return dataset

    def select(self, index: int) -> SampleDataset:
        if not 0 <= index < len(self._datasets):
            raise IndexError(f"dataset index {index} out of range")
        self._active = index
        return self.active

    def add_value(self, v: float) -> SampleValue:
        item = SampleValue(id=generate_id(), v=float(v))
        self._set_values(self.active.values + (item,))
        return item

    def update_value(self, value_id: str, v: float) -> Optional[SampleValue]:
        """Edit a value of the active dataset; an unknown id is a no-op."""
        for item in self.active.values:
            if item.id == value_id:
                updated = replace(item, v=float(v))
                self._set_values(
                    tuple(updated if x.id == value_id else x for x in self.active.values)
                )
                return updated
        return None

    def delete_value(self, value_id: str) -> bool:
        remaining = tuple(x for x in self.active.values if x.id != value_id)
        if len(remaining) == len(self.active.values):
            return False
        self._set_values(remaining)
        return True

    def submit_value(self, text, value_id: Optional[str] = None) -> Optional[SampleValue]:
        """Add (or edit ``value_id``) from form text; unparseable text is ignored."""
        v = parse_float(text)
        if v is None:
            return None
        if value_id is not None:
            return self.update_value(value_id, v)
        return self.add_value(v)

    def reset_active(self) -> None:
        """Empty the active dataset without removing it."""
        self._set_values(())

    def reset_all(self) -> None:
        """Drop every dataset and start again from one empty dataset."""
        self._datasets = [SampleDataset.create(1)]
        self._active = 0
        logger.debug("Sample workbook reset")

    def summary(self, index: Optional[int] = None) -> SampleSummary:
        if index is None:
            return self.active.summary()
        return self._datasets[index].summary()

    def summaries(self) -> List[SampleSummary]:
        return [d.summary() for d in self._datasets]

    def _set_values(self, values: Tuple[SampleValue, ...]) -> None:
        self._datasets[self._active] = replace(self.active, values=values)
