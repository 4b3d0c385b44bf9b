"""Helpers for routing log messages and exceptions through the ViewModel.

Messages meant for the user are emitted on the ViewModel's ``log_message``
signal (shown in the log dock). They are also passed to the standard
``logging`` logger of this package so headless runs and tests keep a record.
Without a ViewModel the message is printed.
"""
from __future__ import annotations

import logging
import sys
import traceback
from typing import Optional

logger = logging.getLogger("viewmodel")


def log_message(message: str, vm: Optional[object] = None, level: int = logging.INFO) -> None:
    """Emit *message* through ``vm.log_message`` when possible, else print it."""
    text = str(message)
    logger.log(level, text)
    signal = getattr(vm, "log_message", None) if vm is not None else None
    if signal is not None:
        try:
            signal.emit(text)
            return
        except (RuntimeError, AttributeError, TypeError):
            # signal source already deleted or not a Qt signal
            pass
    print(text)


def log_exception(context: str, exc: Optional[BaseException] = None, vm: Optional[object] = None) -> None:
    """Format *exc* with its traceback and delegate to :func:`log_message`."""
    if exc is None:
        exc = sys.exc_info()[1]
    if exc is None:
        payload = f"{context}: (no exception details available)"
    else:
        tb = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
        payload = f"{context}: {exc}\n{tb}"
    log_message(payload, vm=vm, level=logging.ERROR)



def safe_call(vm: object, context: str, func, *args, default=None, **kwargs):
    """Run *func* on behalf of *vm*; a failure is logged and *default* returned.

    Used where a slot refresh (plot, ticks) must not abort a speaker switch.
    """
    try:
        return func(*args, **kwargs)
    except Exception as exc:
        log_exception(f"{type(vm).__name__}: {context} failed", exc, vm=vm)
        return default


def safe_emit(vm: object, signal_name: str, *args) -> bool:
    """Emit ``vm.<signal_name>`` with *args*. Returns False if a slot raised.

    Unknown signal names are reported instead of raised.
    """
    signal = getattr(vm, signal_name, None)
    if signal is None:
        log_message(f"{type(vm).__name__} has no signal '{signal_name}'", vm=vm, level=logging.WARNING)
        return False
    try:
        signal.emit(*args)
    except Exception as exc:
        log_exception(f"{type(vm).__name__}: slot for {signal_name} failed", exc, vm=vm)
        return False
    return True
