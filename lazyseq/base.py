import importlib
import threading


class LazyLib(object):
    """
    Handle to a library which is imported on the first call, so that importing lazyseq never pulls
    in optional dependencies.

    >>> json = LazyLib("json")
    >>> json.loaded
    False
    >>> json().loads("[1]")
    [1]
    """

    def __init__(self, name):
        self.name = name
        self._lib = None
        self._lock = threading.Lock()

    @property
    def loaded(self):
        return self._lib is not None

    def __call__(self):
        if self._lib is None:
            with self._lock:
                if self._lib is None:
                    self._lib = importlib.import_module(self.name)
        return self._lib
