# -*- coding: utf-8 -*-
"""Open Graphのメタデータを表す値オブジェクト

すべてfrozenなdataclassで、繰り返し項目はtupleで持つ。
"""
import datetime
import enum
import re
from dataclasses import asdict, dataclass, field
from typing import Optional, Tuple
from urllib.parse import urlsplit

from .errors import MalformedUrlError

DATE_ONLY_REX = re.compile(r'^\d{4}-\d{2}-\d{2}$')


class ObjectType(enum.Enum):
    ARTICLE = 'article'
    PROFILE = 'profile'
    BOOK = 'book'
    MUSIC_SONG = 'music.song'
    MUSIC_ALBUM = 'music.album'
    MUSIC_PLAYLIST = 'music.playlist'
    MUSIC_RADIO_STATION = 'music.radio_station'
    VIDEO_MOVIE = 'video.movie'
    VIDEO_TV_SHOW = 'video.tv_show'
    VIDEO_OTHER = 'video.other'
    VIDEO_EPISODE = 'video.episode'
    WEBSITE = 'website'
    UNKNOWN = 'unknown'

    @classmethod
    def from_string(cls, value):
        """og:typeの値をObjectTypeにする

        og:typeが無いときはwebsite扱い、知らない値はUNKNOWN。
        """
        if value is None:
            return cls.WEBSITE
        for member in cls:
            if member.value == value:
                return member
        return cls.UNKNOWN


class Gender(enum.Enum):
    MALE = 'male'
    FEMALE = 'female'

    @classmethod
    def from_string(cls, value):
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise ValueError('unknown gender: {!r}'.format(value)) from None

    def __str__(self):
        return self.value


@dataclass(frozen=True)
class Tag:
    property: str  # og: prefixは取り除いたもの
    content: str


@dataclass(frozen=True)
class Image:
    url: str
    secure_url: Optional[str] = None
    type: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    alt: Optional[str] = None


@dataclass(frozen=True)
class Video:
    url: str
    secure_url: Optional[str] = None
    type: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    duration: Optional[int] = None


@dataclass(frozen=True)
class Audio:
    url: str
    secure_url: Optional[str] = None
    type: Optional[str] = None


@dataclass(frozen=True)
class Article:
    published_time: Optional[str] = None
    modified_time: Optional[str] = None
    expiration_time: Optional[str] = None
    section: Optional[str] = None
    authors: Tuple[str, ...] = ()
    tags: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Profile:
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    username: Optional[str] = None
    gender: Optional[Gender] = None


@dataclass(frozen=True)
class Book:
    authors: Tuple[str, ...] = ()
    isbn: Optional[str] = None
    release_date: Optional[str] = None
    tags: Tuple[str, ...] = ()


@dataclass(frozen=True)
class MusicSong:
    duration: Optional[int] = None
    album: Optional[str] = None
    album_disc: Optional[int] = None
    album_track: Optional[int] = None
    musicians: Tuple[str, ...] = ()


@dataclass(frozen=True)
class MusicAlbum:
    songs: Tuple[str, ...] = ()
    song_disc: Optional[int] = None
    song_track: Optional[int] = None
    musicians: Tuple[str, ...] = ()
    release_date: Optional[str] = None


@dataclass(frozen=True)
class MusicPlaylist:
    songs: Tuple[str, ...] = ()
    song_disc: Optional[int] = None
    song_track: Optional[int] = None
    creator: Optional[str] = None


@dataclass(frozen=True)
class MusicRadioStation:
    creator: Optional[str] = None


@dataclass(frozen=True)
class VideoMovie:
    actors: Tuple[str, ...] = ()
    directors: Tuple[str, ...] = ()
    writers: Tuple[str, ...] = ()
    duration: Optional[int] = None
    release_date: Optional[str] = None
    tags: Tuple[str, ...] = ()


@dataclass(frozen=True)
class VideoEpisode:
    actors: Tuple[str, ...] = ()
    directors: Tuple[str, ...] = ()
    writers: Tuple[str, ...] = ()
    duration: Optional[int] = None
    release_date: Optional[str] = None
    tags: Tuple[str, ...] = ()
    series: Optional[str] = None


# og:type -> そのtypeで使うレコードのクラス
OBJECT_CLASSES = {
    ObjectType.ARTICLE: Article,
    ObjectType.PROFILE: Profile,
    ObjectType.BOOK: Book,
    ObjectType.MUSIC_SONG: MusicSong,
    ObjectType.MUSIC_ALBUM: MusicAlbum,
    ObjectType.MUSIC_PLAYLIST: MusicPlaylist,
    ObjectType.MUSIC_RADIO_STATION: MusicRadioStation,
    ObjectType.VIDEO_MOVIE: VideoMovie,
    ObjectType.VIDEO_TV_SHOW: VideoMovie,
    ObjectType.VIDEO_OTHER: VideoMovie,
    ObjectType.VIDEO_EPISODE: VideoEpisode,
}


def _object_property(cls):
    def getter(self):
        if isinstance(self.object, cls):
            return self.object
        return None
    return property(getter)


@dataclass(frozen=True)
class OpenGraph:
    """1ドキュメント分のOpen Graphメタデータ

    type固有のレコードは ``object`` 1つにだけ入る。``article`` などの
    プロパティは ``object`` がその型のときだけ値を返すので、同時に2つ以上が
    埋まることはない。
    """
    tags: Tuple[Tag, ...] = ()
    title: Optional[str] = None
    type: Optional[str] = None
    url: Optional[str] = None
    description: Optional[str] = None
    site_name: Optional[str] = None
    determiner: Optional[str] = None
    locale: Optional[str] = None
    locale_alternate: Tuple[str, ...] = ()
    images: Tuple[Image, ...] = ()
    videos: Tuple[Video, ...] = ()
    audios: Tuple[Audio, ...] = ()
    object: object = field(default=None)

    def __post_init__(self):
        if self.object is not None:
            expected = OBJECT_CLASSES.get(self.object_type)
            if not isinstance(self.object, expected or ()):
                raise TypeError('{} does not match og:type {!r}'.format(
                    type(self.object).__name__, self.type))

    article = _object_property(Article)
    profile = _object_property(Profile)
    book = _object_property(Book)
    music_song = _object_property(MusicSong)
    music_album = _object_property(MusicAlbum)
    music_playlist = _object_property(MusicPlaylist)
    music_radio_station = _object_property(MusicRadioStation)
    video_movie = _object_property(VideoMovie)
    video_episode = _object_property(VideoEpisode)

    @property
    def object_type(self):
        return ObjectType.from_string(self.type)

    def is_valid(self):
        """OGPの必須プロパティ(title, type, url, image)が揃っているか"""
        return (
            self.title is not None and
            self.type is not None and
            self.url is not None and
            len(self.images) > 0
        )

    @property
    def parsed_url(self):
        """og:urlをurlsplitしたもの。URLとして読めなければNone"""
        try:
            return self.strict_url()
        except MalformedUrlError:
            return None

    def strict_url(self):
        """og:urlをurlsplitして返す

        og:urlが無いときはNone。

        :rtype: urllib.parse.SplitResult
        :raises MalformedUrlError: scheme/netlocが無い
        """
        if self.url is None:
            return None
        try:
            parsed = urlsplit(self.url.strip())
        except ValueError:
            raise MalformedUrlError(self.url) from None
        if not parsed.scheme or not parsed.netloc:
            raise MalformedUrlError(self.url)
        return parsed

    def to_dict(self):
        rv = asdict(self)
        rv['object_type'] = self.object_type.value
        profile = self.profile
        if profile is not None and profile.gender is not None:
            rv['object']['gender'] = profile.gender.value
        return rv


def parse_datetime(value):
    """日付文字列(ISO 8601)をaware datetimeにする

    日付だけのものはUTCの0時とみなす。読めないものはNone。

    :param str value: 例 ``2023-01-15`` や ``2023-01-15T12:30:00Z``
    :rtype: datetime.datetime
    """
    if not value:
        return None
    value = value.strip()
    if DATE_ONLY_REX.match(value):
        try:
            date = datetime.date.fromisoformat(value)
        except ValueError:
            return None
        return datetime.datetime(date.year, date.month, date.day, tzinfo=datetime.timezone.utc)

    if value.endswith(('Z', 'z')):
        value = value[:-1] + '+00:00'
    try:
        rv = datetime.datetime.fromisoformat(value)
    except ValueError:
        return None
    if rv.tzinfo is None:
        rv = rv.replace(tzinfo=datetime.timezone.utc)
    return rv
