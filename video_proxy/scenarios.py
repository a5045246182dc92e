# video_proxy/scenarios.py

"""
Два демо-сценария: без заместителя (всё грузится сразу) и с заместителем
(грузится только то, что реально воспроизводят).
"""

import sys
from typing import List, Optional, TextIO

from video_proxy.config import Settings
from video_proxy.logger import get_logger
from video_proxy.metrics import MetricsCollector
from video_proxy.server import VideoServer
from video_proxy.video.base import Video
from video_proxy.video.proxy import VideoProxy
from video_proxy.video.real import RealVideo

logger = get_logger(__name__)


def build_server(settings: Settings) -> VideoServer:
    return VideoServer.from_settings(settings.server, metrics=MetricsCollector())


def _report_usage(server: VideoServer, out: TextIO, label: str) -> None:
    summary = server.metrics.summary()
    print(f"{label}: {server.now:g} seconds", file=out)
    print(f"Memory consumed: ~{summary['memory_mb']:g}MB", file=out)
    print(f"Bandwidth consumed: {summary['bandwidth_mb']:g}MB", file=out)


def _play_first(videos: List[Video], out: TextIO) -> Video:
    first = videos[0]
    print(f"\n--- User plays only {first.name} ---", file=out)
    first.play()
    return first


def run_without_proxy(settings: Settings, out: Optional[TextIO] = None) -> dict:
    """
    Каждое RealVideo скачивается в момент создания, даже если его никто не смотрит.
    """
    out = out or sys.stdout
    server = build_server(settings)
    logger.debug(f"Eager scenario for {len(settings.demo.videos)} videos")

    print("=== SYSTEM WITHOUT PROXY ===\n", file=out)

    videos: List[Video] = []
    for i, name in enumerate(settings.demo.videos):
        if i:
            print(file=out)
        videos.append(RealVideo(name, server))

    print(file=out)
    _report_usage(server, out, "Total initialization time")

    first = _play_first(videos, out)

    unused = [v for v in videos if v is not first]
    wasted = sum(server.size_of(v.name) for v in unused)
    if unused:
        names = ", ".join(v.name for v in unused)
        print(f"\nProblem: {names} were downloaded for nothing!", file=out)
    print(f"Wasted: {wasted:g}MB of bandwidth + {wasted:g}MB of memory", file=out)

    return server.metrics.summary()


def run_with_proxy(settings: Settings, out: Optional[TextIO] = None) -> dict:
    """
    VideoProxy создаётся мгновенно; скачивается только воспроизведённое видео.
    """
    out = out or sys.stdout
    server = build_server(settings)
    logger.debug(f"Lazy scenario for {len(settings.demo.videos)} videos")

    print("=== SYSTEM WITH PROXY ===\n", file=out)

    videos: List[Video] = [VideoProxy(name, server) for name in settings.demo.videos]

    _report_usage(server, out, "Initialization time")

    # метаданные доступны без загрузки
    print("\n--- Listing available videos ---", file=out)
    for video in videos:
        print(video.describe(), file=out)

    first = _play_first(videos, out)

    unused = [v for v in videos if v is not first]
    saved = sum(server.size_of(v.name) for v in unused)
    if unused:
        names = ", ".join(v.name for v in unused)
        print(f"\nAdvantage: {names} were NOT downloaded!", file=out)
    print(f"Saved: {saved:g}MB of bandwidth + {saved:g}MB of memory", file=out)
    print("Experience: the system started instantly", file=out)

    return server.metrics.summary()
