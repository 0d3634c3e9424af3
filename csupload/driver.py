"""Bulk upload driver - one authentication, many concurrent document creations."""
from __future__ import annotations

import asyncio
import logging
from typing import Callable, Iterable, Iterator, List, Optional, TYPE_CHECKING

import httpx

from .models import BatchSummary, UploadConfig, UploadResult, UploadTask
from .protocols import IDocumentClient
from .services.connection import ContentServerConnection

if TYPE_CHECKING:
    from .reporting import ConsoleReporter

logger = logging.getLogger(__name__)

ResultCallback = Callable[[UploadResult], None]


def document_name(prefix: str, index: int) -> str:
    """Name of the index-th document: prefix followed by the index padded to 5 digits."""
    return f"{prefix}{index:05d}"


def build_tasks(config: UploadConfig) -> Iterator[UploadTask]:
    for index in range(config.count):
        yield UploadTask(
            index=index,
            name=document_name(config.prefix, index),
            file_path=config.file,
            parent_id=config.parent_id,
        )


def _describe_exception(exc: BaseException) -> str:
    message = str(exc).strip()
    if message:
        return message
    return f"{type(exc).__name__}: {repr(exc)}"


class BulkUploadDriver:
    """
    Runs document creations with at most `concurrency` in flight.

    Tasks are launched in index order. A launch waits until a slot is free;
    the slot is held for the whole create_document call and released
    whatever its outcome. One failing task never stops the others.
    """

    def __init__(
        self,
        client: IDocumentClient,
        concurrency: int,
        on_result: Optional[ResultCallback] = None,
    ):
        if concurrency < 1:
            raise ValueError(f"concurrency must be at least 1, got {concurrency}")
        self._client = client
        self._concurrency = concurrency
        self._on_result = on_result

    async def run(self, tasks: Iterable[UploadTask]) -> List[UploadResult]:
        """Upload every task and return the results in completion order."""
        slots = asyncio.Semaphore(self._concurrency)
        results: List[UploadResult] = []
        running: List[asyncio.Task] = []

        for task in tasks:
            await slots.acquire()
            running.append(asyncio.create_task(self._upload_one(task, slots, results)))

        if running:
            await asyncio.gather(*running)

        uploaded = sum(1 for r in results if r.success)
        logger.info(f"Uploads complete: {uploaded} successful, {len(results) - uploaded} failed")
        return results

    async def _upload_one(
        self,
        task: UploadTask,
        slots: asyncio.Semaphore,
        results: List[UploadResult],
    ) -> None:
        try:
            try:
                node_id = await self._client.create_document(
                    task.name, task.file_path, task.parent_id
                )
                result = UploadResult.ok(task.name, node_id)
            except Exception as exc:
                logger.debug(f"Upload of {task.name} failed: {exc!r}")
                result = UploadResult.fail(task.name, _describe_exception(exc))

            results.append(result)
            if self._on_result:
                try:
                    self._on_result(result)
                except Exception as e:
                    logger.error(f"Error in result listener for {task.name}: {e}")
        finally:
            slots.release()


async def run_bulk_upload(
    config: UploadConfig,
    reporter: Optional["ConsoleReporter"] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> BatchSummary:
    """
    Authenticate once, then create config.count documents.

    An authentication failure is reported and, unless config.require_auth
    is set, the uploads are still attempted with the empty ticket.
    """
    async with ContentServerConnection(
        config.url,
        config.username,
        config.password,
        timeout=config.timeout,
        transport=transport,
        max_connections=config.concurrency,
    ) as conn:
        auth_error: Optional[str] = None
        try:
            await conn.authenticate()
        except Exception as exc:
            auth_error = _describe_exception(exc)
            logger.warning(f"Authentication failed: {auth_error}")

        if reporter:
            reporter.auth(auth_error, conn.ticket)

        summary = BatchSummary(authenticated=auth_error is None, auth_error=auth_error)
        if auth_error and config.require_auth:
            logger.info("Skipping uploads because authentication failed")
            return summary

        driver = BulkUploadDriver(
            conn,
            config.concurrency,
            on_result=reporter.result if reporter else None,
        )
        summary.results = await driver.run(build_tasks(config))

    if reporter:
        reporter.summary(summary)
    return summary
