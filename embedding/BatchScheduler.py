# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-06
# Description: BatchScheduler
# -----------------------------------------------------------------------------
import logging
import math
from dataclasses import dataclass
from typing import Callable, Dict, Iterator, List, Optional, Sequence, Tuple

from document.NoteDocument import NoteDocument
from embedding.EmbeddingClient import EmbeddingClient
from embedding.EmbeddingRecord import EmbeddingRecord
from embedding.types import EmbeddingData
from utility.errors import EmbeddingCorrelationError, InvalidBatchCountError
from utility.logging_utils import get_class_logger

RecordSink = Callable[[List[EmbeddingRecord]], None]


def _check_batch_count(batch_count) -> int:
    if isinstance(batch_count, bool) or not isinstance(batch_count, int) or batch_count < 1:
        raise InvalidBatchCountError(f"batch count must be a positive integer, got {batch_count!r}")
    return batch_count


@dataclass(frozen=True)
class BatchPlan:
    """
    Split of ``total_records`` into at most ``batch_count`` contiguous batches.

    Every batch but the last takes ``batch_size = ceil(total / count)``
    records; batch number ``batch_count`` takes whatever is left. Because of
    the rounding up, the records can run out before the last batch number is
    reached (5 records / 4 batches -> 2, 2, 1).
    """
    total_records: int
    batch_count: int
    batch_size: int

    @classmethod
    def for_records(cls, total_records: int, batch_count: int) -> "BatchPlan":
        batch_count = _check_batch_count(batch_count)
        if total_records < 0:
            raise ValueError(f"total_records must be >= 0, got {total_records}")
        batch_size = math.ceil(total_records / batch_count)
        return cls(total_records=total_records, batch_count=batch_count, batch_size=batch_size)

    def ranges(self) -> Iterator[Tuple[int, int, int]]:
        """Yield (batch_number, start, stop) with batch numbers starting at 1."""
        processed = 0
        batch = 1
        while processed < self.total_records:
            remaining = self.total_records - processed
            if batch == self.batch_count:
                num_to_process = remaining
            else:
                num_to_process = min(self.batch_size, remaining)

            yield batch, processed, processed + num_to_process
            processed += num_to_process
            batch += 1

    def sizes(self) -> List[int]:
        return [stop - start for _, start, stop in self.ranges()]


def correlate_embeddings(
        documents: Sequence[NoteDocument],
        data: Sequence[EmbeddingData],
) -> List[EmbeddingRecord]:
    """
    Pair each document with the response vector at the same batch position.

    If the provider tagged every item with ``index``, that tag decides the
    position; otherwise array order does.
    """
    if data and all(item.index is not None for item in data):
        by_position: Dict[int, EmbeddingData] = {item.index: item for item in data}
    else:
        by_position = dict(enumerate(data))

    for position in by_position:
        if not 0 <= position < len(documents):
            raise EmbeddingCorrelationError(
                f"Cannot find matching name and header for embedding index {position}"
            )

    records: List[EmbeddingRecord] = []
    for i, doc in enumerate(documents):
        item = by_position.get(i)
        if item is None:
            raise EmbeddingCorrelationError(
                f"Cannot find matching embedding for name: {doc.name}, header: {doc.header}"
            )
        records.append(EmbeddingRecord(name=doc.name, header=doc.header, vector=item.embedding))
    return records


class BatchScheduler:
    """
    Drives one generation run: plan -> per batch request/submit/correlate ->
    hand the batch's records to the sink before starting the next batch.

    Strictly sequential. There is no retry: the first failing batch aborts
    the run, and whatever the sink already received stays where it put it.
    """

    def __init__(
            self,
            client: EmbeddingClient,
            *,
            num_batches: int,
            logger: Optional[logging.Logger] = None,
    ):
        self.client = client
        self.num_batches = _check_batch_count(num_batches)
        self.logger = logger or get_class_logger(self.__class__)

    def plan(self, total_records: int) -> BatchPlan:
        return BatchPlan.for_records(total_records, self.num_batches)

    def embed_batch(self, documents: Sequence[NoteDocument]) -> List[EmbeddingRecord]:
        request = self.client.create_request([d.body for d in documents])
        response = self.client.submit(request)
        self.logger.debug("Successfully obtained %d embeddings", len(response.data))
        return correlate_embeddings(documents, response.data)

    def run(self, documents: Sequence[NoteDocument], sink: RecordSink) -> int:
        plan = self.plan(len(documents))
        self.logger.info(
            "Embedding %d records in up to %d batches (batch_size=%d)",
            plan.total_records,
            plan.batch_count,
            plan.batch_size,
        )

        written = 0
        for batch, start, stop in plan.ranges():
            self.logger.debug("Processing batch %d: %d to %d", batch, start, stop)
            try:
                records = self.embed_batch(documents[start:stop])
            except Exception as e:
                self.logger.error(
                    "Batch %d (%d to %d) failed after %d records were saved: %s",
                    batch, start, stop, written, e,
                )
                raise

            sink(records)
            written += len(records)

        self.logger.info("Completed embeddings for %d records.", written)
        return written
