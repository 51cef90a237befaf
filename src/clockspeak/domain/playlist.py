"""Playlist — the ordered clip-id sequence handed to playback.

Compilers fill a :class:`PlaylistBuilder` with bare clip names. The
builder turns each name into a clip-id via the :class:`ClipLayout` and
stops accepting clips once its capacity is reached: a grammar that ever
produced more clips than its capacity yields a truncated playlist, never
an error.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field

from clockspeak.domain.types import DEFAULT_LAYOUT, ClipLayout, SpeechLanguage

logger = logging.getLogger(__name__)


class Playlist(BaseModel):
    """Ordered clip-ids for one time or date announcement.

    Attributes:
        language: Grammar and clip set the clips belong to.
        clips: Clip-ids in playback order.
        pause_after: Index of the clip after which the caller inserts a
            short pause before playing the rest, or None for no pause.
    """

    model_config = {"frozen": True}

    language: SpeechLanguage
    clips: tuple[str, ...] = Field(default_factory=tuple)
    pause_after: int | None = None

    def __len__(self) -> int:
        return len(self.clips)

    def segments(self) -> list[tuple[str, ...]]:
        """Clips split at the pause point; each segment plays contiguously."""
        if self.pause_after is None or self.pause_after >= len(self.clips) - 1:
            return [self.clips] if self.clips else []
        cut = self.pause_after + 1
        return [self.clips[:cut], self.clips[cut:]]


class PlaylistBuilder:
    """Bounded accumulator of clip names for one language."""

    def __init__(
        self,
        language: SpeechLanguage,
        capacity: int,
        layout: ClipLayout = DEFAULT_LAYOUT,
    ) -> None:
        self.language = language
        self.capacity = capacity
        self.layout = layout
        self._clips: list[str] = []

    def push(self, name: str) -> None:
        if len(self._clips) >= self.capacity:
            logger.debug("Playlist full (%d), dropping clip %s", self.capacity, name)
            return
        self._clips.append(self.layout.clip_id(self.language, name))

    def extend(self, names: list[str]) -> None:
        for name in names:
            self.push(name)

    def build(self, *, pause_after: int | None = None) -> Playlist:
        return Playlist(language=self.language, clips=tuple(self._clips), pause_after=pause_after)
