# video_proxy/video/proxy.py

from typing import Optional

from video_proxy.logger import get_logger
from video_proxy.server import VideoServer
from video_proxy.video.base import Video
from video_proxy.video.real import RealVideo

logger = get_logger(__name__)


class VideoProxy(Video):
    """
    Лёгкий заместитель RealVideo.

    Создаётся мгновенно и отвечает на describe() без загрузки. Реальное видео
    создаётся при первом play() и дальше переиспользуется; если загрузка
    упала, заместитель остаётся незагруженным и следующий play() попробует снова.
    """

    __slots__ = ("size_mb", "_server", "_real")

    def __init__(self, name: str, server: Optional[VideoServer] = None):
        super().__init__(name)
        self._server = server or VideoServer()
        self.size_mb = self._server.size_of(name)
        self._real: Optional[RealVideo] = None

    @property
    def loaded(self) -> bool:
        return self._real is not None

    def play(self) -> None:
        if self._real is None:
            logger.info("Proxy: starting on-demand loading...")
            self._real = RealVideo(self.name, self._server)
        self._real.play()

    def describe(self) -> str:
        if self._real is None:
            return f"{self.name} ({self.size_mb:g}MB) [not loaded]"
        return self._real.describe()
