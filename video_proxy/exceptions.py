# video_proxy/exceptions.py


class VideoError(Exception):
    """Базовая ошибка загрузки/воспроизведения видео."""

    def __init__(self, name: str, message: str):
        super().__init__(message)
        self.name = name


class VideoNotFoundError(VideoError):
    def __init__(self, name: str):
        super().__init__(name, f"Video '{name}' not found on server")


class LoadTimeoutError(VideoError):
    def __init__(self, name: str, timeout: float):
        super().__init__(name, f"Loading video '{name}' timed out after {timeout:.2f}s")
        self.timeout = timeout
