# video_proxy/video/real.py

from typing import Optional

from video_proxy.logger import get_logger
from video_proxy.server import VideoServer
from video_proxy.video.base import Video

logger = get_logger(__name__)


class RealVideo(Video):
    """
    «Тяжёлое» видео: скачивается с сервера прямо в конструкторе.
    """

    __slots__ = ("size_mb", "_server")

    def __init__(self, name: str, server: Optional[VideoServer] = None):
        super().__init__(name)
        self._server = server or VideoServer()
        self.size_mb = self._server.size_of(name)
        self._load_from_server()

    def _load_from_server(self) -> None:
        logger.info(f"Downloading video '{self.name}' from server...")
        logger.info(f"Size: {self.size_mb:g}MB")
        self._server.download(self.name)
        logger.info(f"Video '{self.name}' loaded into memory!")

    def play(self) -> None:
        logger.info(f"Playing video: {self.name}")
        self._server.record_playback(self.name)

    def describe(self) -> str:
        return f"{self.name} ({self.size_mb:g}MB)"
