import threading


class Singleton(type):
    _instances = {}
    _lock = threading.Lock()  # guards both creation and removal

    def __call__(cls, *args, **kwargs):
        with cls._lock:
            if cls not in cls._instances:
                cls._instances[cls] = super().__call__(*args, **kwargs)
        return cls._instances[cls]

    @classmethod
    def forget(mcs, cls: type) -> None:
        with mcs._lock:
            mcs._instances.pop(cls, None)
