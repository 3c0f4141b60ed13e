"""A single song in the library."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Music:
    """A song with its artist, release year and genre."""

    name: str = ""
    artist_name: str = ""
    release_year: int = 0
    genre: str = ""

    def __str__(self) -> str:
        return "\n".join(
            (self.name, self.artist_name, self.genre, str(self.release_year))
        )