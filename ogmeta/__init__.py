# -*- coding: utf-8 -*-
from .errors import BadUrlError, FetchError, MalformedUrlError, OgmetaError  # noqa: F401
from .generator import generate, generate_tags  # noqa: F401
from .models import (  # noqa: F401
    Article, Audio, Book, Gender, Image, MusicAlbum, MusicPlaylist, MusicRadioStation, MusicSong,
    ObjectType, OpenGraph, Profile, Tag, Video, VideoEpisode, VideoMovie, parse_datetime,
)
from .parser import extract_tags, parse, parse_file, parse_tags  # noqa: F401

__version__ = '0.1'
