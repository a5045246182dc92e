import io

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt

from video_proxy.config import Settings
from video_proxy.scenarios import run_with_proxy, run_without_proxy
from video_proxy.visualizer import LoadTimelineVisualizer


def test_timeline_lists_every_video_lane(lessons):
    summary = run_with_proxy(Settings(), out=io.StringIO())
    vis = LoadTimelineVisualizer(summary, videos=lessons)

    ax = vis.plot_timeline()

    labels = [t.get_text() for t in ax.get_yticklabels()]
    assert sorted(labels) == sorted(lessons)
    assert "1 из 3" in ax.get_title()
    plt.close("all")


def test_lanes_default_to_logged_videos(lessons):
    summary = run_without_proxy(Settings(), out=io.StringIO())
    vis = LoadTimelineVisualizer(summary)

    assert vis.videos == lessons
    assert vis.t_end == 9.0


def test_save_writes_png(tmp_path, lessons):
    summary = run_with_proxy(Settings(), out=io.StringIO())
    path = tmp_path / "timeline.png"

    LoadTimelineVisualizer(summary, videos=lessons).save(str(path))

    assert path.exists()
    assert path.stat().st_size > 0
