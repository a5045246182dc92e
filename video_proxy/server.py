# video_proxy/server.py

from typing import Dict, Optional

import simpy

from video_proxy.config import ServerConfig
from video_proxy.exceptions import LoadTimeoutError, VideoNotFoundError
from video_proxy.logger import get_logger
from video_proxy.metrics import MetricsCollector

logger = get_logger(__name__)


class VideoServer:
    """
    Симулируемый сервер, с которого «скачиваются» видео.

    Время загрузки моделируется таймаутом SimPy: в обычном окружении
    симуляционные часы просто сдвигаются на load_delay, в realtime-окружении
    вызов действительно блокирует процесс на это время.
    """

    def __init__(
            self,
            env: Optional[simpy.Environment] = None,
            *,
            default_size_mb: float = 500.0,
            load_delay: float = 3.0,
            load_timeout: Optional[float] = None,
            catalog: Optional[Dict[str, float]] = None,
            metrics: Optional[MetricsCollector] = None,
    ):
        if default_size_mb < 0:
            raise ValueError("default_size_mb must be non-negative")
        if load_delay < 0:
            raise ValueError("load_delay must be non-negative")
        if load_timeout is not None and load_timeout <= 0:
            raise ValueError("load_timeout must be positive")

        self.env = env or simpy.Environment()
        self.default_size_mb = default_size_mb
        self.load_delay = load_delay
        self.load_timeout = load_timeout
        self.catalog = dict(catalog) if catalog is not None else None
        self.metrics = metrics if metrics is not None else MetricsCollector()

    @classmethod
    def from_settings(cls, cfg: ServerConfig, metrics: Optional[MetricsCollector] = None) -> "VideoServer":
        if cfg.realtime:
            env = simpy.RealtimeEnvironment(factor=1.0, strict=False)
        else:
            env = simpy.Environment()
        return cls(
            env=env,
            default_size_mb=cfg.default_size_mb,
            load_delay=cfg.load_delay,
            load_timeout=cfg.load_timeout,
            catalog=cfg.catalog,
            metrics=metrics,
        )

    @property
    def now(self) -> float:
        return self.env.now

    def size_of(self, name: str) -> float:
        """
        Размер файла в MB. Известен без скачивания.
        """
        if self.catalog is not None and name in self.catalog:
            return self.catalog[name]
        return self.default_size_mb

    def download(self, name: str) -> dict:
        """
        Синхронно «скачивает» видео: крутит окружение, пока процесс загрузки
        не завершится. Возвращает запись о загрузке.

        Загрузка, которая длится дольше load_timeout, обрывается по истечении
        таймаута; равная таймауту успевает.
        """
        if self.catalog is not None and name not in self.catalog:
            logger.warning(f"t={self.now:.2f}: {name} is not in the server catalog")
            raise VideoNotFoundError(name)

        if self.load_timeout is not None and self.load_delay > self.load_timeout:
            self.env.run(until=self.env.timeout(self.load_timeout))
            logger.warning(f"t={self.now:.2f}: download of {name} timed out")
            raise LoadTimeoutError(name, self.load_timeout)

        proc = self.env.process(self._download_proc(name))
        self.env.run(until=proc)
        return proc.value

    def _download_proc(self, name: str):
        start = self.env.now
        yield self.env.timeout(self.load_delay)

        finish = self.env.now
        size = self.size_of(name)
        logger.debug(f"t={finish:.2f}: Served {name}, size={size}MB, wait={finish - start:.2f}")
        self.metrics.record_load(name, size, start, finish)
        return {"video": name, "size_mb": size, "start": start, "finish": finish}

    def record_playback(self, name: str) -> None:
        self.metrics.record_playback(name, self.now)
