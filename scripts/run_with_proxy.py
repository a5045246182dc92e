# scripts/run_with_proxy.py

import argparse
import sys

from video_proxy.config import Settings
from video_proxy.logger import setup_logging, get_logger
from video_proxy.scenarios import run_with_proxy

logger = get_logger(__name__)


def parse_args():
    parser = argparse.ArgumentParser(
        description="Демо: ленивая загрузка видео через заместитель (VideoProxy)"
    )
    parser.add_argument(
        "-c", "--config",
        metavar="PATH",
        type=str,
        default=None,
        help="Путь до YAML-конфига (по умолчанию: CONFIG_PATH или config/default.yaml)"
    )
    parser.add_argument(
        "--realtime",
        action="store_true",
        help="Реально ждать время загрузки вместо симуляционных часов"
    )
    parser.add_argument(
        "--plot",
        metavar="PATH",
        type=str,
        default=None,
        help="Сохранить диаграмму загрузок в файл"
    )
    return parser.parse_args()


def main():
    args = parse_args()

    settings = Settings.load(path=args.config)
    if args.realtime:
        settings.server.realtime = True

    setup_logging(settings)
    logger.debug("Loaded settings and configured logging")

    summary = run_with_proxy(settings)

    if args.plot:
        from video_proxy.visualizer import LoadTimelineVisualizer

        LoadTimelineVisualizer(summary, videos=settings.demo.videos).save(args.plot)
        logger.info(f"Load timeline saved to {args.plot}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
