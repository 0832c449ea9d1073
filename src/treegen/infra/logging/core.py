from __future__ import annotations

"""
Logging Core Orchestrator.

Maintains the idempotent lifecycle of the logging subsystem. Records are
pushed through a QueueHandler and written by a QueueListener thread, so
console and file I/O stay off the main execution path.
"""

import atexit
import logging
import queue
from logging.handlers import QueueHandler, QueueListener
from typing import Optional

from treegen.infra.logging.sinks import LoggingConfig, build_sinks, console_sink, is_tagged, tag_handler

# Internal state flags for idempotency and lifecycle tracking
_CONFIGURED_FLAG_ATTR: str = "_treegen_configured"
_QUEUE_LISTENER_ATTR: str = "_treegen_queue_listener"


# ==============================================================================
# PUBLIC API
# ==============================================================================

def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Configure the root logger once, routing records through a queue.

    Repeated calls are no-ops unless force is set, so the CLI and tests can
    call this freely.

    Args:
        cfg: Startup logging choices.
        force: Tear down the current setup and build a new one.

    Returns:
        logging.Logger: The root logger.
    """
    root = logging.getLogger()

    if getattr(root, _CONFIGURED_FLAG_ATTR, False) and not force:
        return root

    try:
        root.setLevel(cfg.level_int)
        _detach(root)

        sinks = build_sinks(cfg)
        if not sinks:
            return root

        log_queue: queue.Queue = queue.Queue(-1)
        listener = QueueListener(log_queue, *sinks, respect_handler_level=True)
        listener.start()

        root.addHandler(tag_handler(QueueHandler(log_queue)))
        setattr(root, _QUEUE_LISTENER_ATTR, listener)
        setattr(root, _CONFIGURED_FLAG_ATTR, True)

        # Flush pending records on interpreter shutdown
        atexit.register(_safe_stop_listener, listener)
        return root

    # Fallback to emergency console logging if the infrastructure fails
    except Exception:
        _detach(root)
        root.setLevel(logging.INFO)
        root.addHandler(console_sink(logging.INFO, "CRITICAL FALLBACK | %(levelname)s | %(message)s"))
        root.warning("Logging infrastructure failed. Switched to emergency console.")
        return root


def get_logger(name: str) -> logging.Logger:
    """Named logger; records reach whatever configure_logging installed."""
    return logging.getLogger(name)


def shutdown_logging() -> None:
    """
    Flush and detach everything configure_logging installed.

    Leaves the root logger ready for a fresh configure_logging call.
    """
    root = logging.getLogger()
    _detach(root)
    if hasattr(root, _CONFIGURED_FLAG_ATTR):
        delattr(root, _CONFIGURED_FLAG_ATTR)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _detach(root: logging.Logger) -> None:
    """Stop the listener (flushing its queue) and remove our handlers."""
    listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
    if listener:
        _safe_stop_listener(listener)
        setattr(root, _QUEUE_LISTENER_ATTR, None)

    for h in list(root.handlers):
        if is_tagged(h):
            root.removeHandler(h)
            h.close()


def _safe_stop_listener(listener: Optional[QueueListener]) -> None:
    """
    Stop a QueueListener, tolerating listeners that were already stopped.

    The internal thread is None once stop() has joined it, which happens
    when both atexit and an explicit shutdown reach the same listener.
    """
    if not listener:
        return
    if getattr(listener, "_thread", None) is not None:
        listener.stop()
