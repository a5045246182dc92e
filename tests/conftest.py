import logging

import pytest

from video_proxy.logger import _HANDLER_MARK
from video_proxy.server import VideoServer

LESSONS = [
    "aula01_introducao.mp4",
    "aula02_fundamentos.mp4",
    "aula03_avancado.mp4",
]


@pytest.fixture
def server():
    return VideoServer()


@pytest.fixture
def lessons():
    return list(LESSONS)


@pytest.fixture
def restore_logging():
    """Снимает обработчики, которые повесил setup_logging."""
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, _HANDLER_MARK, False):
            root.removeHandler(handler)
            handler.close()
