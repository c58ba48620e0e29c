"""File system and serialisation helpers shared across the package."""

from __future__ import annotations

import json
import os
from dataclasses import asdict, is_dataclass
from datetime import date
from enum import Enum
from pathlib import Path
from typing import Any


def ensure_dir(path: str | Path) -> Path:
    """Create the directory if it does not exist."""
    directory = Path(path)
    directory.mkdir(parents=True, exist_ok=True)
    return directory


def write_text(path: str | Path, content: str) -> Path:
    """Write UTF-8 text to disk atomically."""
    target = Path(path)
    ensure_dir(target.parent)
    temp_path = target.with_suffix(target.suffix + ".tmp")
    temp_path.write_text(content, encoding="utf-8")
    os.replace(temp_path, target)
    return target


def json_default(obj: Any) -> Any:
    """Fallback serializer for dataclasses, enums and dates."""
    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, date):
        return obj.isoformat()
    if isinstance(obj, (set, tuple)):
        return list(obj)
    return str(obj)


def dumps(data: Any) -> str:
    """Render ``data`` as indented JSON."""
    return json.dumps(data, indent=2, ensure_ascii=False, default=json_default)


def write_json(path: str | Path, data: Any) -> Path:
    """Serialize a Python object as JSON to disk."""
    return write_text(path, dumps(data))


def media_src(base: str, index: int, ext: str) -> str:
    """Return the URL path of a media file named by its integer index."""
    return f"{base.rstrip('/')}/{index}.{ext.lstrip('.')}"

