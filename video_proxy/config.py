"""
Pydantic-конфиг проекта: логирование, симулируемый сервер видео и демо-сценарии.
"""

import os
from typing import Dict, List, Optional

import yaml
from pydantic import BaseModel, Field


# ---------- логирование ----------
class FileLogConfig(BaseModel):
    path: str
    max_bytes: int
    backup_count: int
    level: str
    fmt: str = Field(..., alias="format")


class ConsoleLogConfig(BaseModel):
    level: str = "INFO"
    fmt: str = Field("%(message)s", alias="format")


class LoggingConfig(BaseModel):
    console: ConsoleLogConfig = Field(default_factory=ConsoleLogConfig)
    file: Optional[FileLogConfig] = None
    date_format: str = "%H:%M:%S"


# ---------- сервер ----------
class ServerConfig(BaseModel):
    default_size_mb: float = Field(500.0, ge=0)
    load_delay: float = Field(3.0, ge=0)  # секунды на «скачивание»
    load_timeout: Optional[float] = Field(None, gt=0)
    realtime: bool = False
    # если задан — только эти файлы «есть на сервере», значение = размер в MB
    catalog: Optional[Dict[str, float]] = None


# ---------- демо ----------
class DemoConfig(BaseModel):
    videos: List[str] = Field(
        default_factory=lambda: [
            "aula01_introducao.mp4",
            "aula02_fundamentos.mp4",
            "aula03_avancado.mp4",
        ],
        min_length=1,
    )


class Settings(BaseModel):
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    demo: DemoConfig = Field(default_factory=DemoConfig)

    # загрузка из YAML
    @classmethod
    def load(cls, path: str | None = None) -> "Settings":
        yaml_path = path or os.getenv("CONFIG_PATH", "config/default.yaml")
        with open(yaml_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        return cls.model_validate(data)
