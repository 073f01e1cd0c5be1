# === FILE: robots_policy/config.py ===
"""
Модуль для загрузки и валидации конфигурации robots_policy.
Используется Pydantic для описания схемы и проверки данных.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Callable, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_USER_AGENT = "RobotsPolicyBot/1.0"
DEFAULT_TIMEOUT = 10.0


class RetrieverConfig(BaseModel):
    """Настройки загрузки robots.txt и проверки доступа."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    user_agent: str = Field(DEFAULT_USER_AGENT, min_length=1, description="Заголовок User-Agent.")
    timeout: float = Field(DEFAULT_TIMEOUT, gt=0, description="Таймаут на загрузку robots.txt (секунд).")
    max_age: float = Field(
        3600.0, ge=0, description="Через сколько секунд загруженный robots.txt считается устаревшим."
    )

    @field_validator("user_agent", mode="before")
    def _strip_user_agent(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip()
        return v


_DEFAULT_CFG = Path("configs/default.yaml")


_LOADERS: dict[str, tuple[str, Callable[[str], Any], type[Exception]]] = {
    ".yaml": ("YAML", yaml.safe_load, yaml.YAMLError),
    ".yml": ("YAML", yaml.safe_load, yaml.YAMLError),
    ".json": ("JSON", json.loads, json.JSONDecodeError),
}


def _read_settings(path: Path) -> dict[str, Any]:
    """Читает секцию настроек retriever'а из YAML/JSON-файла."""
    suffix = path.suffix.lower()
    if suffix not in _LOADERS:
        raise ValueError(f"Неподдерживаемый формат конфига robots_policy: {suffix}")
    kind, loads, error = _LOADERS[suffix]
    try:
        data = loads(path.read_text(encoding="utf-8")) or {}
    except error as exc:
        raise ValueError(f"Конфиг robots_policy {path}: неправильный {kind}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(
            f"Конфиг robots_policy {path}: ожидался mapping настроек "
            f"({', '.join(RetrieverConfig.model_fields)}), получено {type(data).__name__}"
        )
    return data


def load_config(path: Union[str, Path, None]) -> RetrieverConfig:
    """
    Читает YAML или JSON и возвращает проверенный объект RetrieverConfig.
    Без явного пути берёт configs/default.yaml, а если его нет - значения по умолчанию.
    Явно указанный, но отсутствующий файл -> FileNotFoundError.
    """
    if path is None:
        if not _DEFAULT_CFG.exists():
            return RetrieverConfig()
        path_obj = _DEFAULT_CFG
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    return RetrieverConfig(**_read_settings(path_obj))


__all__ = ["RetrieverConfig", "load_config", "DEFAULT_USER_AGENT", "DEFAULT_TIMEOUT"]
