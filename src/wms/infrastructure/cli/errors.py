"""Translate domain errors into click errors for the terminal."""

from __future__ import annotations

import logging

import click

from wms.domain.exceptions import DomainException, http_status_for

logger = logging.getLogger(__name__)


def to_click_exception(exc: DomainException) -> click.ClickException:
    # Server-side faults get logged, client mistakes are only echoed
    if http_status_for(exc) >= 500:
        logger.error("Capacity bookkeeping is inconsistent: %s", exc)
    return click.ClickException(str(exc))
