"""Run many scalar conversions at once, collecting per-item errors."""

from __future__ import annotations

import asyncio
import logging
import time
import uuid
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple, Union

from measura.core.conversion import ConversionEngine, ConversionOptions, UnitConversionResult
from measura.core.errors import MeasuraError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class BatchItem:
    value: Union[float, str]
    category_id: str
    from_unit_id: str
    to_unit_id: str
    options: Optional[ConversionOptions] = None


@dataclass(frozen=True, slots=True)
class BatchItemResult:
    item: BatchItem
    result: Optional[UnitConversionResult] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True, slots=True)
class BatchConversionResponse:
    items: Tuple[BatchItemResult, ...]
    batch_id: str
    processing_time_ms: float

    @property
    def failed(self) -> Tuple[BatchItemResult, ...]:
        return tuple(r for r in self.items if not r.ok)


async def convert_many(
    engine: ConversionEngine,
    items: Iterable[BatchItem],
    batch_id: Optional[str] = None,
) -> BatchConversionResponse:
    """Convert every item concurrently; results keep the input order.

    Conversion errors (`MeasuraError`) are reported on their item. Any other
    exception propagates.
    """
    items = tuple(items)
    batch_id = batch_id or uuid.uuid4().hex
    started = time.perf_counter()

    outcomes = await asyncio.gather(
        *(
            engine.convert(i.value, i.category_id, i.from_unit_id, i.to_unit_id, i.options)
            for i in items
        ),
        return_exceptions=True,
    )

    results = []
    for item, outcome in zip(items, outcomes):
        if isinstance(outcome, MeasuraError):
            results.append(BatchItemResult(item, error=str(outcome)))
        elif isinstance(outcome, BaseException):
            raise outcome
        else:
            results.append(BatchItemResult(item, result=outcome))

    elapsed_ms = (time.perf_counter() - started) * 1000
    response = BatchConversionResponse(tuple(results), batch_id, elapsed_ms)
    logger.debug(
        "Batch %s: %d items, %d failed, %.2f ms",
        batch_id, len(results), len(response.failed), elapsed_ms,
    )
    return response


__all__ = ["BatchItem", "BatchItemResult", "BatchConversionResponse", "convert_many"]
