"""In-memory sample series for plotting."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Any, Deque, Dict, Iterable, Iterator, List, Mapping, Optional


class SampleOrderError(ValueError):
    """Raised when a sample would go back in time within one series."""


@dataclass(frozen=True)
class Sample:
    """Cumulative counter value observed at ``timestamp`` (milliseconds since epoch)."""

    timestamp: int
    sample: float

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Sample":
        timestamp = payload["timestamp"]
        if int(timestamp) != timestamp:
            raise ValueError(f"timestamp must be whole milliseconds, got {timestamp!r}")
        return cls(timestamp=int(timestamp), sample=payload["sample"])


@dataclass
class SeriesBuffer:
    """Samples collected for one named series since the last render.

    ``max_samples`` turns the buffer into a rolling window; ``None`` keeps
    everything until the buffer is drained.
    """

    rate: float = 0.0
    max_samples: Optional[int] = None
    _samples: Deque[Sample] = field(default_factory=deque)

    def append(self, sample: Sample) -> None:
        last = self.latest()
        if last is not None and sample.timestamp < last.timestamp:
            raise SampleOrderError(
                f"sample at {sample.timestamp} is older than last sample at {last.timestamp}"
            )
        self._samples.append(sample)
        if self.max_samples is not None:
            while len(self._samples) > self.max_samples:
                self._samples.popleft()

    def extend(self, samples: Iterable[Sample]) -> None:
        for sample in samples:
            self.append(sample)

    @property
    def samples(self) -> List[Sample]:
        return list(self._samples)

    def __iter__(self) -> Iterator[Sample]:
        return iter(self._samples)

    def __len__(self) -> int:
        return len(self._samples)

    def latest(self) -> Optional[Sample]:
        return self._samples[-1] if self._samples else None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "samples": [{"timestamp": s.timestamp, "sample": s.sample} for s in self._samples],
            "rate": self.rate,
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any], max_samples: Optional[int] = None) -> "SeriesBuffer":
        """Build a buffer from the ``{"samples": [...], "rate": r}`` payload shape."""
        buffer = cls(rate=payload.get("rate", 0.0), max_samples=max_samples)
        buffer.extend(Sample.from_dict(item) for item in payload.get("samples", []))
        return buffer
