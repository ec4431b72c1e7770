# -*- coding: utf-8 -*-
# Foilmesh/tests/test_session.py

import threading

import pytest

from mesh.core.errors import KernelBusyError, KernelError, KernelTimeoutError
from mesh.core.kernels import RecordingKernel
from mesh.core.session import kernel_session


def test_session_brackets_initialize_and_finalize():
    kernel = RecordingKernel()
    with kernel_session(kernel, "demo") as session:
        assert kernel.model == "demo"
        session.stage("synchronize", kernel.synchronize)
    names = [c.name for c in kernel.commands]
    assert names == ["initialize", "add_model", "synchronize", "finalize"]
    assert session.completed == ["initialize", "add_model", "synchronize"]


def test_finalize_runs_on_error():
    kernel = RecordingKernel()
    with pytest.raises(RuntimeError):
        with kernel_session(kernel, "demo"):
            raise RuntimeError("boom")
    assert kernel.commands[-1].name == "finalize"


def test_foreign_errors_are_wrapped_with_stage():
    def explode():
        raise ValueError("kernel said no")

    kernel = RecordingKernel()
    with pytest.raises(KernelError) as info:
        with kernel_session(kernel, "demo") as session:
            session.stage("generate", explode)
    assert info.value.context["stage"] == "generate"
    assert isinstance(info.value.__cause__, ValueError)


def test_second_session_is_busy():
    entered, release = threading.Event(), threading.Event()

    def hold():
        with kernel_session(RecordingKernel(), "first"):
            entered.set()
            release.wait(5)

    worker = threading.Thread(target=hold)
    worker.start()
    try:
        assert entered.wait(5)
        with pytest.raises(KernelBusyError):
            with kernel_session(RecordingKernel(), "second"):
                pass
    finally:
        release.set()
        worker.join(5)

    # Lock released afterwards.
    with kernel_session(RecordingKernel(), "third"):
        pass


def test_deadline_between_stages(monkeypatch):
    class FakeClock:
        ticks = [100.0, 100.0, 100.0, 200.0]

        @classmethod
        def monotonic(cls):
            return cls.ticks.pop(0) if len(cls.ticks) > 1 else cls.ticks[0]

    monkeypatch.setattr("mesh.core.session.time", FakeClock)
    kernel = RecordingKernel()
    with pytest.raises(KernelTimeoutError) as info:
        with kernel_session(kernel, "slow", timeout_s=10.0) as session:
            session.stage("synchronize", kernel.synchronize)
    assert info.value.context["stage"] == "synchronize"
    assert kernel.commands[-1].name == "finalize"
