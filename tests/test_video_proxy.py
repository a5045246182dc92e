import logging

import pytest

from video_proxy.video.base import Video
from video_proxy.video.proxy import VideoProxy
from video_proxy.video.real import RealVideo


def _download_lines(caplog):
    return [r.getMessage() for r in caplog.records if r.getMessage().startswith("Downloading video")]


def test_both_variants_share_capability_set(server):
    assert issubclass(VideoProxy, Video)
    assert issubclass(RealVideo, Video)
    assert isinstance(VideoProxy("a.mp4", server), Video)


def test_creating_proxies_loads_nothing(server, lessons, caplog):
    caplog.set_level(logging.INFO)

    proxies = [VideoProxy(name, server) for name in lessons]

    assert all(not p.loaded for p in proxies)
    assert server.metrics.loads == []
    assert server.now == 0
    assert _download_lines(caplog) == []


def test_describe_never_forces_loading(server, caplog):
    caplog.set_level(logging.INFO)
    proxy = VideoProxy("aula01_introducao.mp4", server)

    for _ in range(5):
        assert proxy.describe() == "aula01_introducao.mp4 (500MB) [not loaded]"

    assert not proxy.loaded
    assert server.metrics.loads == []
    assert _download_lines(caplog) == []


def test_first_play_loads_exactly_once(server, caplog):
    caplog.set_level(logging.INFO)
    proxy = VideoProxy("aula01_introducao.mp4", server)

    proxy.play()
    proxy.play()
    proxy.play()

    assert proxy.loaded
    assert server.metrics.loads_for("aula01_introducao.mp4") == 1
    assert len(server.metrics.playbacks) == 3
    assert server.now == 3.0

    messages = [r.getMessage() for r in caplog.records]
    assert messages.count("Proxy: starting on-demand loading...") == 1
    assert messages.count("Playing video: aula01_introducao.mp4") == 3


def test_load_logs_in_order(server, caplog):
    caplog.set_level(logging.INFO)

    VideoProxy("aula01_introducao.mp4", server).play()

    assert [r.getMessage() for r in caplog.records] == [
        "Proxy: starting on-demand loading...",
        "Downloading video 'aula01_introducao.mp4' from server...",
        "Size: 500MB",
        "Video 'aula01_introducao.mp4' loaded into memory!",
        "Playing video: aula01_introducao.mp4",
    ]


def test_describe_after_load_delegates_to_real_video(server):
    proxy = VideoProxy("aula02_fundamentos.mp4", server)
    proxy.play()

    assert proxy.describe() == "aula02_fundamentos.mp4 (500MB)"


def test_loaded_reference_is_never_replaced(server):
    proxy = VideoProxy("aula01_introducao.mp4", server)
    proxy.play()
    real = proxy._real

    proxy.play()
    proxy.describe()

    assert proxy._real is real


def test_handles_with_same_name_are_independent(server):
    a = VideoProxy("aula01_introducao.mp4", server)
    b = VideoProxy("aula01_introducao.mp4", server)

    a.play()

    assert a.loaded
    assert not b.loaded
    assert b.describe().endswith("[not loaded]")
    assert server.metrics.loads_for("aula01_introducao.mp4") == 1


def test_lessons_only_played_video_is_downloaded(server, lessons, caplog):
    caplog.set_level(logging.INFO)
    proxies = [VideoProxy(name, server) for name in lessons]

    descriptions = [p.describe() for p in proxies]
    assert all(d.endswith("[not loaded]") for d in descriptions)
    assert server.metrics.loads == []

    proxies[0].play()

    assert _download_lines(caplog) == ["Downloading video 'aula01_introducao.mp4' from server..."]
    playing = [r for r in caplog.records if r.getMessage().startswith("Playing video")]
    assert len(playing) == 1
    text = caplog.text
    assert "aula02_fundamentos.mp4" not in text
    assert "aula03_avancado.mp4" not in text
    assert server.metrics.summary()["loaded_videos"] == ["aula01_introducao.mp4"]


def test_real_videos_load_on_construction(server, lessons, caplog):
    caplog.set_level(logging.INFO)

    videos = [RealVideo(name, server) for name in lessons]

    assert len(_download_lines(caplog)) == 3
    assert server.metrics.playbacks == []
    assert [rec["video"] for rec in server.metrics.loads] == lessons
    assert server.now == 9.0
    assert videos[2].describe() == "aula03_avancado.mp4 (500MB)"


def test_real_video_without_explicit_server():
    video = RealVideo("solo.mp4")

    assert video.describe() == "solo.mp4 (500MB)"
    video.play()
    assert repr(video) == "RealVideo(solo.mp4)"
    assert str(video) == "solo.mp4"


def test_name_is_read_only(server):
    proxy = VideoProxy("aula01_introducao.mp4", server)
    proxy.play()

    with pytest.raises(AttributeError):
        proxy.name = "aula02_fundamentos.mp4"

    assert proxy.name == "aula01_introducao.mp4"
    assert proxy.describe() == "aula01_introducao.mp4 (500MB)"
    with pytest.raises(AttributeError):
        RealVideo("x.mp4", server).name = "y.mp4"
