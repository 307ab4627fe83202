from PySide6.QtCore import QRunnable, Signal, QObject
import traceback, sys

class WorkerSignals(QObject):
    # Every signal carries the worker's tag so one receiver can track several jobs
    finished = Signal(str)
    error = Signal(str, tuple)
    result = Signal(str, object)

class GenericWorker(QRunnable):
    def __init__(self, fn, *args, tag: str = "", **kwargs):
        super(GenericWorker, self).__init__()
        self.fn = fn
        self.args = args
        self.kwargs = kwargs
        self.tag = tag
        self.signals = WorkerSignals()

    def run(self):
        try:
            result = self.fn(*self.args, **self.kwargs)
            self.signals.result.emit(self.tag, result)
        except Exception:
            exctype, value = sys.exc_info()[:2]
            self.signals.error.emit(self.tag, (exctype, value, traceback.format_exc()))
        finally:
            self.signals.finished.emit(self.tag)
