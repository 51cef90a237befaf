"""Clip storage probing.

Clip-ids are absolute-looking paths inside the device filesystem
(``/mp3/0100.mp3``). On a host the clip tree is mounted under some
directory; :class:`ClipStore` maps clip-ids below that root and reports
which ones are missing. Missing clips are reported, never dropped: the
playlist always carries the full nominal sequence.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

logger = logging.getLogger(__name__)


class ClipStore:
    """A directory holding the per-language clip folders."""

    def __init__(self, root: Path) -> None:
        self.root = root

    def path_for(self, clip_id: str) -> Path:
        return self.root / clip_id.lstrip("/")

    def exists(self, clip_id: str) -> bool:
        return self.path_for(clip_id).is_file()

    def missing(self, clip_ids: Iterable[str]) -> list[str]:
        """Clip-ids with no file under the root, in playlist order."""
        absent = [clip_id for clip_id in clip_ids if not self.exists(clip_id)]
        for clip_id in absent:
            logger.warning("Missing clip: %s", clip_id)
        return absent
