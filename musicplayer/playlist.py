"""Named, ordered collections of songs."""

from __future__ import annotations

import sys
from typing import TextIO

from musicplayer.music import Music


class PlayList:
    """An ordered list of songs under a name."""

    def __init__(self, name: str = "") -> None:
        self.name = name
        self._songs: list[Music] = []

    @property
    def songs(self) -> tuple[Music, ...]:
        """The songs in play order."""
        return tuple(self._songs)

    def add_music(self, music: Music) -> None:
        """Append a song to the end of the list."""
        self._songs.append(music)

    def remove_music(self, index: int) -> Music:
        """Remove and return the song at a zero-based position."""
        if not 0 <= index < len(self._songs):
            raise IndexError(f"no song at position {index}")
        return self._songs.pop(index)

    def __len__(self) -> int:
        return len(self._songs)

    def __iter__(self):
        return iter(self._songs)

    def show_songs(self, out: TextIO | None = None) -> None:
        """Write every song's details, one field per line."""
        out = out or sys.stdout
        for song in self._songs:
            out.write(f"{song}\n")

    def show_info(self, out: TextIO | None = None) -> None:
        """Write the list's name and its number of songs."""
        out = out or sys.stdout
        out.write(f"play list name: {self.name}\n")
        out.write(f"number of songs: {len(self)}\n")