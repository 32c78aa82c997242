"""Lookup orchestration utilities.

The CLI delegates the "check several numbers and collect what happened"
flow to these helpers, which keeps printing and exit codes out of the core
logic and lets tests drive the pipeline with a fake checker.

Numbers are checked one at a time, in input order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable

from iseven_api.core.domain.errors import IsEvenError, ServerError
from iseven_api.core.domain.models import IsEven, LookupEntry, LookupReport
from iseven_api.core.interfaces.checker import BlockingParityChecker, ParityChecker
from iseven_api.core.services.request_builder import Subject, render_subject

logger = logging.getLogger(__name__)


@dataclass
class PipelineHooks:
    """Optional callbacks for UI layers (one call per finished entry)."""

    entry_done: Callable[[LookupEntry], None] | None = None


def entry_from_result(subject: Subject, result: IsEven) -> LookupEntry:
    return LookupEntry(subject=render_subject(subject), result=result)


def entry_from_error(subject: Subject, error: IsEvenError) -> LookupEntry:
    """Flatten a classified error into a report entry."""

    status_code = error.status_code if isinstance(error, ServerError) else None
    return LookupEntry(
        subject=render_subject(subject),
        error_kind=type(error).__name__,
        error_message=str(error),
        status_code=status_code,
    )


def _notify(hooks: PipelineHooks, entry: LookupEntry) -> None:
    if not entry.ok:
        logger.info("Lookup failed for %s: %s", entry.subject, entry.error_message)
    if hooks.entry_done:
        hooks.entry_done(entry)


async def lookup(
    checker: ParityChecker,
    subjects: Iterable[Subject],
    *,
    hooks: PipelineHooks | None = None,
) -> LookupReport:
    hooks = hooks or PipelineHooks()
    report = LookupReport()
    for subject in subjects:
        try:
            entry = entry_from_result(subject, await checker.check(subject))
        except IsEvenError as exc:
            entry = entry_from_error(subject, exc)
        report.entries.append(entry)
        _notify(hooks, entry)
    return report


def lookup_blocking(
    checker: BlockingParityChecker,
    subjects: Iterable[Subject],
    *,
    hooks: PipelineHooks | None = None,
) -> LookupReport:
    """Same as `lookup`, using a blocking checker."""

    hooks = hooks or PipelineHooks()
    report = LookupReport()
    for subject in subjects:
        try:
            entry = entry_from_result(subject, checker.check(subject))
        except IsEvenError as exc:
            entry = entry_from_error(subject, exc)
        report.entries.append(entry)
        _notify(hooks, entry)
    return report
