import matplotlib.patches as mpatches
import matplotlib.pyplot as plt


class LoadTimelineVisualizer:
    """
    Визуализатор демо: для каждого видео — полоса загрузки с сервера
    и отметка момента воспроизведения.
    """

    def __init__(self, summary: dict, videos: list | None = None):
        self.summary = summary
        self.loads = summary.get("loads_detail", [])
        self.playbacks = summary.get("playbacks_detail", [])

        # порядок дорожек: явно заданный или по первому появлению в логах
        if videos is None:
            videos = []
            for rec in self.loads + self.playbacks:
                if rec["video"] not in videos:
                    videos.append(rec["video"])
        self.videos = list(videos)

        all_times = [rec["finish"] for rec in self.loads] + [p["time"] for p in self.playbacks]
        self.t_end = max(all_times) if all_times else 0.0

        self.colors = {
            "load": "#f44336",
            "play": "#4caf50",
        }
        self.labels = {
            "load": "Загрузка с сервера",
            "play": "Воспроизведение",
        }

    def plot_timeline(self, ax=None):
        """
        Рисует диаграмму Ганта загрузок: одна дорожка на видео.
        """
        if ax is None:
            fig, ax = plt.subplots(figsize=(12, 1 + len(self.videos)))

        height = 0.4
        lane_y = {name: i for i, name in enumerate(reversed(self.videos))}

        for rec in self.loads:
            y = lane_y.get(rec["video"])
            if y is None:
                continue
            ax.broken_barh(
                [(rec["start"], rec["finish"] - rec["start"])],
                (y - height / 2, height),
                facecolors=self.colors["load"], edgecolors="black"
            )

        for rec in self.playbacks:
            y = lane_y.get(rec["video"])
            if y is None:
                continue
            ax.plot([rec["time"]], [y], marker="v", markersize=10, color=self.colors["play"])

        ax.set_ylim(-0.5, max(len(self.videos), 1) - 0.5)
        ax.set_xlim(0, max(self.t_end, 1.0))
        ax.margins(x=0)
        ax.set_yticks(list(lane_y.values()))
        ax.set_yticklabels(list(lane_y.keys()))
        ax.set_xlabel("Время (с)")
        ax.set_title(
            f"Загружено {len(self.loads)} из {len(self.videos)} видео, "
            f"{self.summary.get('bandwidth_mb', 0):g}MB"
        )

        patches = [
            mpatches.Patch(color=self.colors[k], label=self.labels[k])
            for k in self.colors
        ]
        ax.legend(handles=patches, bbox_to_anchor=(1.02, 1), loc="upper left")

        return ax

    def save(self, path: str) -> None:
        fig, ax = plt.subplots(figsize=(12, 1 + len(self.videos)))
        self.plot_timeline(ax)
        fig.tight_layout()
        fig.savefig(path)
        plt.close(fig)
