"""Visitor estimate submissions, kept as a capped JSON list."""

import logging
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List

from .files import StoreError, read_json, write_json_atomic


logger = logging.getLogger(__name__)


class EstimatesStore:

    def __init__(self, path: Path, max_entries: int = 100):
        self.path = Path(path)
        self.max_entries = max_entries

    def list(self) -> List[Dict[str, Any]]:
        """All stored estimates, oldest first. Missing file means none yet."""
        try:
            entries = read_json(self.path)
        except StoreError:
            return []
        return entries if isinstance(entries, list) else []

    def submit(self, name: str, estimates: Any) -> Dict[str, Any]:
        entries = self.list()
        entry = {
            'id': int(time.time() * 1000),
            'name': name,
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'estimates': estimates,
        }
        # Millisecond ids can collide on fast successive submissions
        existing_ids = {e.get('id') for e in entries}
        while entry['id'] in existing_ids:
            entry['id'] += 1

        entries.append(entry)
        entries = entries[-self.max_entries:]
        write_json_atomic(self.path, entries)
        logger.info("New estimate submitted by %s", name)
        return entry

    def delete(self, estimate_id: int) -> bool:
        """Remove an estimate by id. Returns False when nothing matched."""
        entries = self.list()
        remaining = [e for e in entries if e.get('id') != estimate_id]
        if len(remaining) == len(entries):
            return False
        write_json_atomic(self.path, remaining)
        logger.info("Estimate %s deleted", estimate_id)
        return True
