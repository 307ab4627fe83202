from __future__ import annotations

from typing import Callable, Dict, Optional

from PySide6 import QtCore
from PySide6.QtCore import QThreadPool, Slot

from app.thread_worker import GenericWorker


class TaskRunnerController(QtCore.QObject):
    """Runs blocking calls on a thread pool, one in-flight job per tag.

    Worker signals are connected to slots of this object, so callbacks always
    run on the thread that owns the runner (the GUI thread).
    """

    def __init__(self, threadpool: Optional[QThreadPool] = None, parent=None):
        super().__init__(parent)
        self.threadpool = threadpool if threadpool is not None else QThreadPool.globalInstance()
        self._workers: Dict[str, GenericWorker] = {}
        self._callbacks: Dict[str, dict] = {}

    def is_running(self, tag: str) -> bool:
        return tag in self._workers

    def run_threaded(
        self,
        tag: str,
        callback: Callable,
        result_callback: Callable = None,
        error_callback: Callable = None,
        finished_callback: Callable = None,
        *args,
        **kwargs,
    ) -> bool:
        if self.is_running(tag):
            return False

        worker = GenericWorker(callback, *args, tag=tag, **kwargs)
        worker.signals.result.connect(self._on_result)
        worker.signals.error.connect(self._on_error)
        worker.signals.finished.connect(self._on_finished)

        self._workers[tag] = worker
        self._callbacks[tag] = {
            "result": result_callback,
            "error": error_callback,
            "finished": finished_callback,
        }
        self.threadpool.start(worker)
        return True

    def wait_for_done(self, msecs: int = -1) -> bool:
        return self.threadpool.waitForDone(msecs)

    @Slot(str, object)
    def _on_result(self, tag: str, result):
        callback = self._callbacks.get(tag, {}).get("result")
        if callback:
            callback(result)

    @Slot(str, tuple)
    def _on_error(self, tag: str, error_tuple: tuple):
        callback = self._callbacks.get(tag, {}).get("error")
        if callback:
            callback(error_tuple)

    @Slot(str)
    def _on_finished(self, tag: str):
        self._workers.pop(tag, None)
        callbacks = self._callbacks.pop(tag, {})
        if callbacks.get("finished"):
            callbacks["finished"]()
