"""
Flat JSON file helpers.

Every store in this package reads and writes whole documents. Writes go to a
temp file in the target directory and are moved into place with os.replace,
so readers see either the old document or the new one.
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Any


class StoreError(Exception):
    """A stored document is missing or cannot be parsed."""


def read_json(path: Path) -> Any:
    """Read and parse a JSON document, raising StoreError on failure."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except FileNotFoundError as e:
        raise StoreError(f"{path.name} not found") from e
    except (OSError, json.JSONDecodeError) as e:
        raise StoreError(f"Could not read {path.name}: {e}") from e


def write_json_atomic(path: Path, payload: Any) -> None:
    """Replace the document at path with payload in a single rename."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f'.{path.name}.', suffix='.tmp')
    try:
        with os.fdopen(fd, 'w', encoding='utf-8') as f:
            json.dump(payload, f, indent=2)
        os.replace(tmp_name, path)
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise
