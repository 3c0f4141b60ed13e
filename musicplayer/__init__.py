"""In-memory music library of songs, playlists and artists, with console workflows."""

__version__ = "0.1.0"
__all__ = ["admin", "artist", "database", "music", "playlist", "prompt", "users"]