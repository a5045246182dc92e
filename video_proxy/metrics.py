from typing import Any, Dict, List

from video_proxy.logger import get_logger

logger = get_logger(__name__)


class MetricsCollector:
    """
    Сбор метрик демо: какие видео реально скачивались и сколько это стоило.
    """

    def __init__(self):
        # ---- «сырые» данные ----
        self.loads: List[Dict[str, Any]] = []
        self.playbacks: List[Dict[str, Any]] = []

    # ------------------------------------------------------------------ #
    #   Методы‑регистраторы                                              #
    # ------------------------------------------------------------------ #
    def record_load(self, name: str, size_mb: float, start: float, finish: float):
        logger.debug(f"t={finish:.2f}: load recorded for {name} ({size_mb}MB, {finish - start:.2f}s)")
        self.loads.append(
            {
                "video": name,
                "size_mb": size_mb,
                "start": start,
                "finish": finish,
                "latency": finish - start,
            }
        )

    def record_playback(self, name: str, time: float):
        self.playbacks.append({"video": name, "time": time})

    def loads_for(self, name: str) -> int:
        return sum(1 for rec in self.loads if rec["video"] == name)

    # ------------------------------------------------------------------ #
    #   Сводка результатов                                               #
    # ------------------------------------------------------------------ #
    def summary(self) -> dict:
        # каждое скачанное видео одновременно и трафик, и занятая память
        bandwidth = sum(rec["size_mb"] for rec in self.loads)
        finishes = [rec["finish"] for rec in self.loads] + [p["time"] for p in self.playbacks]

        return {
            "loads": len(self.loads),
            "playbacks": len(self.playbacks),
            "loaded_videos": [rec["video"] for rec in self.loads],
            "bandwidth_mb": bandwidth,
            "memory_mb": bandwidth,
            "elapsed": max(finishes) if finishes else 0.0,
            # подробные логи
            "loads_detail": list(self.loads),
            "playbacks_detail": list(self.playbacks),
        }
