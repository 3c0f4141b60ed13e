# musicplayer

An in-memory music library. It keeps songs, playlists and artists. It
also provides the console workflows that an administrator or a listener
uses to manage them. Every listing is written to a text stream that you
choose, and standard output is the default.

## Installation

```
pip install .
```

## Modules

- `musicplayer.music.Music` is a dataclass for one song. Its fields are `name`,
  `artist_name`, `release_year` and `genre`. `str(song)` gives the name, the
  artist, the genre and the year, one per line.
- `musicplayer.playlist.PlayList` is a named, ordered list of songs.
  - `add_music(song)` appends a song.
  - `remove_music(index)` removes the song at a zero-based position and returns it.
    It raises `IndexError` when the position is out of range.
  - `len(play_list)` gives the number of songs, and iterating yields the songs.
    `songs` gives them as a tuple.
  - `show_songs(out)` writes the details of each song.
  - `show_info(out)` writes the name and the number of songs.
- `musicplayer.artist.Artist` is an artist page. It holds `name`,
  `number_of_albums` and `number_of_released_songs`, together with the
  artist's `songs` and `play_lists`.
  - `add_song` and `remove_song(index)` add and remove songs.
  - `add_play_list` and `remove_play_list(index)` add and remove playlists.
  - `show_info(out)` writes the name and the two counts.
- `musicplayer.database.MusicDatabase` is the shared catalogue.
  - `add_music`, `add_play_list` and `add_artist` store an item.
  - `remove_music` removes the first song that matches both name and artist.
    `remove_play_list` and `remove_artist` remove the first item that matches by
    name. These methods do nothing when no item matches.
  - `find_music`, `find_play_list` and `find_artist` return the first item with
    the given name, or `None`.
  - `show_all_musics`, `show_all_play_lists` and `show_all_artists` write every
    item. When there are no items, they write `database is empty`.
- `musicplayer.prompt.Console` reads answers from one stream and writes prompts to
  another. The defaults are standard input and standard output.
  - `read_line` returns the next line. It raises `EOFError` when the input ends.
  - `read_int` keeps asking until it gets a whole number.
  - `choose_index(prompt, count)` keeps asking until it gets a number from 1 to
    `count`, and returns that number as a zero-based index. It raises `ValueError`
    when `count` is not positive.
- `musicplayer.users.BaseUser` holds a `user_name` and a `password`.
- `musicplayer.users.User` is a listener.
  - Favourite songs: `add_favourite_song` and `remove_favourite_song(index)`.
  - Saved songs: `save_song` and `remove_saved_song(index)`.
  - Own playlists: `make_play_list(console)` asks for a name.
    `remove_play_list(index)` removes one.
  - Favourite playlists: `add_favourite_play_list` and
    `remove_favourite_play_list(index)`.
- `musicplayer.admin.Admin` is an administrator. It works through a `Console`.
  - `add_song`, `remove_song`, `add_play_list` and `remove_play_list` manage songs
    and playlists.
  - `add_song_to_play_list` and `remove_song_from_play_list` change the contents of
    a playlist.
  - `add_artist_page` and `remove_artist_page` manage artist pages.
  - `show_play_lists(out)` and `show_added_artists(out)` write listings.
  - `added_songs`, `added_play_lists` and `added_artists` hold what the
    administrator has added.

## Example

```python
import sys

from musicplayer.database import MusicDatabase
from musicplayer.music import Music
from musicplayer.playlist import PlayList

db = MusicDatabase()
song = Music("Blue Train", "John Coltrane", 1957, "jazz")
db.add_music(song)

mix = PlayList("Evening")
mix.add_music(song)
db.add_play_list(mix)

assert db.find_music("Blue Train") is song
mix.show_info(sys.stdout)
```

A `Console` drives an administrator session. You can connect it to the
terminal, or to in-memory streams for scripting:

```python
import io

from musicplayer.admin import Admin
from musicplayer.prompt import Console

password = "password"
admin = Admin("admin", password)
console = Console(io.StringIO("Evening\n"), io.StringIO())
evening = admin.add_play_list(console)
assert admin.added_play_lists == (evening,)
```

## What it does not do

- It plays no audio.
- It has no command-line program. You use it as a library.
- Everything lives in memory. Nothing is saved between runs.
- The songs, playlists and artists that an administrator adds are kept only on
  that `Admin`. They are not placed in a `MusicDatabase`.
- `add_artist_page` asks whether to add a song or a playlist for the new artist.
  It checks that the answer is 0, 1 or 2, but it adds neither.

## Running the tests

```
pip install .[test]
pytest
```