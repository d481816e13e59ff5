"""
Bulk loading boundary.

Splits generated documents into chunks, renders each chunk as a bulk
NDJSON body and hands it to a caller-supplied sender. The package itself
performs no network I/O: the sender owns the transport and returns the
parsed bulk response (or None when the response carries no item detail).

Item failures with a transient cause (429/503 or a rejected execution)
are retried with exponential backoff; other failures are counted.
"""

import json
import logging
import math
import time
from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import Any

from ..config.models import GeneratorConfig
from ..shared.exceptions import BulkRequestError
from ..shared.metrics import bulk_chunks_total
from ..shared.models import BulkProgress

logger = logging.getLogger(__name__)

MIN_CHUNK_SIZE = 1
MAX_CHUNK_SIZE = 10_000
DEFAULT_MAX_RETRIES = 5
DEFAULT_INITIAL_DELAY = 0.5
MAX_RETRY_DELAY = 8.0

SendChunk = Callable[[str, list[dict[str, Any]]], dict[str, Any] | None]
ProgressCallback = Callable[[BulkProgress], None]


def clamp_chunk_size(chunk_size: int) -> int:
    return min(max(MIN_CHUNK_SIZE, int(chunk_size)), MAX_CHUNK_SIZE)


def iter_chunks(
    documents: Sequence[dict[str, Any]], chunk_size: int
) -> Iterator[list[dict[str, Any]]]:
    """Consecutive slices of at most ``chunk_size`` documents (size is clamped)."""
    size = clamp_chunk_size(chunk_size)
    for offset in range(0, len(documents), size):
        yield list(documents[offset : offset + size])


def build_bulk_body(index: str, chunk: Iterable[dict[str, Any]]) -> str:
    """
    Render a chunk as a bulk request body.

    Each document becomes an ``{"index": {"_index": ...}}`` action line
    followed by its source line; the body ends with a newline.
    """
    action = json.dumps({"index": {"_index": index}}, ensure_ascii=False)
    lines: list[str] = []
    for document in chunk:
        lines.append(action)
        lines.append(json.dumps(document, ensure_ascii=False, default=str))
    return "\n".join(lines) + "\n"


def _is_transient_item(status: int, error: dict[str, Any] | None) -> bool:
    if status in (429, 503):
        return True
    if not error:
        return False
    caused_by = error.get("caused_by") or {}
    error_type = str(error.get("type") or caused_by.get("type") or "")
    reason = str(error.get("reason") or "")
    return "rejected" in error_type or "esrejectedexecutionexception" in reason.lower()


def summarize_bulk_response(
    response: dict[str, Any] | None, chunk: list[dict[str, Any]]
) -> tuple[int, int, list[dict[str, Any]]]:
    """
    Count the outcome of one bulk request.

    Returns:
        (succeeded, permanently failed, documents to retry)
    """
    items = response.get("items") if isinstance(response, dict) else None
    if not isinstance(items, list):
        return len(chunk), 0, []

    succeeded = 0
    failed = 0
    retry: list[dict[str, Any]] = []
    for position, item in enumerate(items):
        result = {}
        if isinstance(item, dict):
            result = next(
                (item[op] for op in ("index", "create", "update", "delete") if op in item),
                {},
            )
        status = result.get("status", 500)
        if 200 <= status < 300:
            succeeded += 1
        elif _is_transient_item(status, result.get("error")) and position < len(chunk):
            retry.append(chunk[position])
        else:
            failed += 1
    return succeeded, failed, retry


def run_bulk(
    index: str,
    documents: Sequence[dict[str, Any]],
    send_chunk: SendChunk,
    chunk_size: int | None = None,
    on_progress: ProgressCallback | None = None,
    should_cancel: Callable[[], bool] | None = None,
    max_retries: int = DEFAULT_MAX_RETRIES,
    initial_delay: float = DEFAULT_INITIAL_DELAY,
    sleep: Callable[[float], None] = time.sleep,
    config: GeneratorConfig | None = None,
) -> BulkProgress:
    """
    Load documents chunk by chunk through ``send_chunk``.

    Args:
        index: Target index name written into every action line
        documents: Documents to load
        send_chunk: Called with the rendered body and the chunk documents;
            returns the parsed bulk response, or raises BulkRequestError
        chunk_size: Documents per request (clamped to 1..10000); the
            configured ``chunk_size`` when omitted
        on_progress: Receives a BulkProgress after every chunk
        should_cancel: Checked before each chunk; True stops the run
        max_retries: Retry budget per chunk for transient failures
        initial_delay: First backoff delay in seconds (doubles, capped at 8s)
        sleep: Backoff sleeper
        config: Generator configuration supplying the default chunk size

    Returns:
        The final progress (``cancelled`` set when stopped early)

    Raises:
        BulkRequestError: When a chunk request fails permanently
    """
    total = len(documents)
    if chunk_size is None:
        chunk_size = (config or GeneratorConfig()).chunk_size
    size = clamp_chunk_size(chunk_size)
    chunk_count = math.ceil(total / size) if total else 0

    processed = 0
    succeeded = 0
    failed = 0
    progress = BulkProgress(
        processed=0, total=total, succeeded=0, failed=0, chunk_index=0, chunk_count=chunk_count
    )

    for chunk_index, chunk in enumerate(iter_chunks(documents, size)):
        if should_cancel is not None and should_cancel():
            logger.info(f"Bulk load cancelled after {processed}/{total} documents")
            bulk_chunks_total.labels(outcome="cancelled").inc()
            return BulkProgress(
                processed=processed,
                total=total,
                succeeded=succeeded,
                failed=failed,
                chunk_index=chunk_index,
                chunk_count=chunk_count,
                cancelled=True,
            )

        failed_before = failed
        pending = chunk
        attempt = 0
        delay = initial_delay
        while pending:
            try:
                response = send_chunk(build_bulk_body(index, pending), pending)
            except BulkRequestError as e:
                if not e.is_transient or attempt >= max_retries:
                    bulk_chunks_total.labels(outcome="error").inc()
                    raise
                logger.warning(f"Transient bulk failure on chunk {chunk_index}: {e}, retrying")
            else:
                ok, bad, retry = summarize_bulk_response(response, pending)
                succeeded += ok
                failed += bad
                if not retry:
                    break
                if attempt >= max_retries:
                    failed += len(retry)
                    break
                logger.debug(f"Retrying {len(retry)} rejected documents of chunk {chunk_index}")
                pending = retry

            attempt += 1
            sleep(delay)
            delay = min(delay * 2, MAX_RETRY_DELAY)

        processed += len(chunk)
        bulk_chunks_total.labels(outcome="failed" if failed > failed_before else "ok").inc()
        progress = BulkProgress(
            processed=processed,
            total=total,
            succeeded=succeeded,
            failed=failed,
            chunk_index=chunk_index,
            chunk_count=chunk_count,
        )
        if on_progress is not None:
            on_progress(progress)

    logger.info(f"Bulk load finished: {succeeded} succeeded, {failed} failed of {total}")
    return progress
