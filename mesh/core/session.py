# -*- coding: utf-8 -*-
# Foilmesh/mesh/core/session.py

"""
Project: Foilmesh
Date: 9/26/2026

Purpose
-------
Serialized access to the meshing kernel. The gmsh kernel is process-global state, so one
build at a time may hold it; a session initializes it, opens a model, runs named stages
under an optional deadline, and always finalizes it.

Main Tasks
----------
    1. Guard the kernel with a module-level lock; a second caller gets KernelBusyError
       (immediately, or after `acquire_timeout_s`).
    2. Check the deadline before each stage and raise KernelTimeoutError once it passes.
    3. Wrap foreign exceptions raised inside a stage into KernelError naming the stage.
    4. Finalize the kernel and release the lock on every exit path.

Notes
-----
- A stage that is already running is not interrupted; the deadline is checked between stages.
"""

import logging
import threading
import time
from contextlib import contextmanager
from typing import Any, Callable, Iterator, Optional

from .base import MeshKernel
from .errors import KernelBusyError, KernelError, KernelTimeoutError

logger = logging.getLogger(__name__)

__all__ = ["KernelSession", "kernel_session"]

_KERNEL_LOCK = threading.Lock()


class KernelSession:
    """One open kernel model with an optional wall-clock deadline."""

    def __init__(self, kernel: MeshKernel, model_name: str, deadline: Optional[float] = None):
        self.kernel = kernel
        self.model_name = model_name
        self.deadline = deadline
        self.completed = []

    def check_deadline(self, stage: str) -> None:
        if self.deadline is not None and time.monotonic() > self.deadline:
            raise KernelTimeoutError("Kernel deadline exceeded.",
                                     {"model": self.model_name, "stage": stage})

    def stage(self, name: str, fn: Callable[..., Any], *args, **kwargs) -> Any:
        """Run `fn(*args, **kwargs)` as stage `name`."""
        self.check_deadline(name)
        logger.debug("[KernelSession] %s: stage '%s'", self.model_name, name)
        try:
            result = fn(*args, **kwargs)
        except KernelError:
            raise
        except Exception as e:
            raise KernelError("Kernel stage failed: {}".format(e),
                              {"model": self.model_name, "stage": name}) from e
        self.completed.append(name)
        return result


@contextmanager
def kernel_session(kernel: MeshKernel,
                   model_name: str,
                   *,
                   timeout_s: Optional[float] = None,
                   acquire_timeout_s: Optional[float] = None) -> Iterator[KernelSession]:
    """
    Hold the kernel for the duration of the `with` block.

    Parameters
    ----------
    kernel : MeshKernel
    model_name : str
    timeout_s : float, optional
        Deadline for the whole session, measured from lock acquisition.
    acquire_timeout_s : float, optional
        How long to wait for another session to finish; None means do not wait.

    Raises
    ------
    KernelBusyError
        If another session holds the kernel.
    KernelTimeoutError
        If a stage starts after the deadline.
    """
    if acquire_timeout_s is None:
        acquired = _KERNEL_LOCK.acquire(blocking=False)
    else:
        acquired = _KERNEL_LOCK.acquire(timeout=acquire_timeout_s)
    if not acquired:
        raise KernelBusyError("Mesh kernel is in use by another build.", {"model": model_name})

    try:
        deadline = None if timeout_s is None else time.monotonic() + float(timeout_s)
        session = KernelSession(kernel, model_name, deadline)
        initialized = False
        try:
            session.stage("initialize", kernel.initialize)
            initialized = True
            session.stage("add_model", kernel.add_model, model_name)
            yield session
        finally:
            if initialized:
                try:
                    kernel.finalize()
                except Exception as e:
                    logger.warning("[KernelSession] %s: finalize failed: %s", model_name, e)
    finally:
        _KERNEL_LOCK.release()
