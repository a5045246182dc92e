import logging
import sys
from logging.handlers import RotatingFileHandler

from video_proxy.config import Settings

_HANDLER_MARK = "_video_proxy_handler"


def setup_logging(settings: Settings | None = None):
    """
    Настройка логгера на основе pydantic-модели Settings.logging.
    Повторный вызов заменяет ранее установленные обработчики.
    """
    log_cfg = (settings or Settings()).logging

    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, _HANDLER_MARK, False):
            root.removeHandler(handler)
            handler.close()

    # консоль: статусные строки демо идут в stdout
    console_level = logging.getLevelName(log_cfg.console.level.upper())
    ch = logging.StreamHandler(sys.stdout)
    ch.setLevel(console_level)
    ch.setFormatter(logging.Formatter(log_cfg.console.fmt, datefmt=log_cfg.date_format))
    setattr(ch, _HANDLER_MARK, True)
    root.addHandler(ch)
    levels = [console_level]

    # файл с ротацией (опционально)
    if log_cfg.file is not None:
        file_level = logging.getLevelName(log_cfg.file.level.upper())
        fh = RotatingFileHandler(
            filename=log_cfg.file.path,
            maxBytes=log_cfg.file.max_bytes,
            backupCount=log_cfg.file.backup_count,
            encoding="utf-8"
        )
        fh.setLevel(file_level)
        fh.setFormatter(logging.Formatter(log_cfg.file.fmt, datefmt=log_cfg.date_format))
        setattr(fh, _HANDLER_MARK, True)
        root.addHandler(fh)
        levels.append(file_level)

    root.setLevel(min(levels))


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
