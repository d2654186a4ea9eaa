from __future__ import annotations

import os
import tempfile
import tomllib
from pathlib import Path

from funniversaries.models import DEFAULT_COUNTS, AppConfig


def _validate_counts(counts: list[int]) -> list[int]:
    if not counts:
        raise ValueError("counts must not be empty")
    if any((isinstance(count, bool) or not isinstance(count, int) or count < 0) for count in counts):
        raise ValueError("counts values must be non-negative integers")

    # Order and duplicates are significant.
    return list(counts)


def validate_config(config: AppConfig) -> AppConfig:
    return AppConfig(counts=_validate_counts(list(config.counts)))


def load_config(path: Path) -> AppConfig:
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with path.open("rb") as file_obj:
        data = tomllib.load(file_obj)

    counts = data.get("counts", [])
    if not isinstance(counts, list):
        raise ValueError("counts must be a list of integers")

    return validate_config(AppConfig(counts=counts))


def render_config(config: AppConfig) -> str:
    validated = validate_config(config)

    lines: list[str] = [
        "# Magnitudes applied to seconds, days and weeks, in this order.",
        "counts = [",
    ]
    for count in validated.counts:
        lines.append(f"    {count},")
    lines.append("]")

    return "\n".join(lines) + "\n"


def save_config_atomic(path: Path, config: AppConfig) -> None:
    rendered = render_config(config)
    path.parent.mkdir(parents=True, exist_ok=True)

    with tempfile.NamedTemporaryFile(
        mode="w",
        encoding="utf-8",
        dir=path.parent,
        prefix=f".{path.name}.",
        delete=False,
    ) as temp_file:
        temp_file.write(rendered)
        temp_name = temp_file.name

    os.replace(temp_name, path)


def ensure_default_config(path: Path) -> None:
    if path.exists():
        return

    save_config_atomic(path, AppConfig(counts=list(DEFAULT_COUNTS)))
