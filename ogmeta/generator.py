# -*- coding: utf-8 -*-
"""OpenGraphから ``<meta property="og:...">`` を作る

出力順は固定:
基本プロパティ -> image -> video -> audio -> og:typeごとのプロパティ
"""
from .models import ObjectType

META_TAG_FORMAT = '<meta property="og:{}" content="{}" />'


def generate(data):
    """OpenGraphをmetaタグの文字列にする。1行1タグ

    :param ogmeta.models.OpenGraph data:
    :rtype: str
    """
    return '\n'.join(
        META_TAG_FORMAT.format(prop, escape(content))
        for prop, content in generate_tags(data)
    )


def generate_tags(data):
    """出力する (property, content) の組をlistで返す。propertyにog:は付かない"""
    rv = []
    _add(rv, 'title', data.title)
    _add(rv, 'type', data.type)
    _add(rv, 'url', data.url)
    _add(rv, 'description', data.description)
    _add(rv, 'site_name', data.site_name)
    _add(rv, 'determiner', data.determiner)
    _add(rv, 'locale', data.locale)
    _add_all(rv, 'locale:alternate', data.locale_alternate)

    for image in data.images:
        _add(rv, 'image', image.url)
        _add(rv, 'image:secure_url', image.secure_url)
        _add(rv, 'image:type', image.type)
        _add(rv, 'image:width', image.width)
        _add(rv, 'image:height', image.height)
        _add(rv, 'image:alt', image.alt)

    for video in data.videos:
        _add(rv, 'video', video.url)
        _add(rv, 'video:secure_url', video.secure_url)
        _add(rv, 'video:type', video.type)
        _add(rv, 'video:width', video.width)
        _add(rv, 'video:height', video.height)
        _add(rv, 'video:duration', video.duration)

    for audio in data.audios:
        _add(rv, 'audio', audio.url)
        _add(rv, 'audio:secure_url', audio.secure_url)
        _add(rv, 'audio:type', audio.type)

    generator = OBJECT_GENERATORS.get(data.object_type)
    if generator and data.object is not None:
        generator(rv, data.object)

    return rv


def escape(content):
    return content.replace('"', '&quot;')


def _add(rv, prop, value):
    if value is None or value == '':
        return
    rv.append((prop, str(value)))


def _add_all(rv, prop, values):
    for value in values:
        _add(rv, prop, value)


def _article(rv, article):
    _add(rv, 'article:published_time', article.published_time)
    _add(rv, 'article:modified_time', article.modified_time)
    _add(rv, 'article:expiration_time', article.expiration_time)
    _add(rv, 'article:section', article.section)
    _add_all(rv, 'article:author', article.authors)
    _add_all(rv, 'article:tag', article.tags)


def _profile(rv, profile):
    _add(rv, 'profile:first_name', profile.first_name)
    _add(rv, 'profile:last_name', profile.last_name)
    _add(rv, 'profile:username', profile.username)
    _add(rv, 'profile:gender', profile.gender)


def _book(rv, book):
    _add_all(rv, 'book:author', book.authors)
    _add(rv, 'book:isbn', book.isbn)
    _add(rv, 'book:release_date', book.release_date)
    _add_all(rv, 'book:tag', book.tags)


def _music_song(rv, song):
    _add(rv, 'music:duration', song.duration)
    _add(rv, 'music:album', song.album)
    _add(rv, 'music:album:disc', song.album_disc)
    _add(rv, 'music:album:track', song.album_track)
    _add_all(rv, 'music:musician', song.musicians)


def _music_album(rv, album):
    _add_all(rv, 'music:song', album.songs)
    _add(rv, 'music:song:disc', album.song_disc)
    _add(rv, 'music:song:track', album.song_track)
    _add_all(rv, 'music:musician', album.musicians)
    _add(rv, 'music:release_date', album.release_date)


def _music_playlist(rv, playlist):
    _add_all(rv, 'music:song', playlist.songs)
    _add(rv, 'music:song:disc', playlist.song_disc)
    _add(rv, 'music:song:track', playlist.song_track)
    _add(rv, 'music:creator', playlist.creator)


def _music_radio_station(rv, station):
    _add(rv, 'music:creator', station.creator)


def _video_movie(rv, movie):
    _add_all(rv, 'video:actor', movie.actors)
    _add_all(rv, 'video:director', movie.directors)
    _add_all(rv, 'video:writer', movie.writers)
    _add(rv, 'video:duration', movie.duration)
    _add(rv, 'video:release_date', movie.release_date)
    _add_all(rv, 'video:tag', movie.tags)


def _video_episode(rv, episode):
    _video_movie(rv, episode)
    _add(rv, 'video:series', episode.series)


OBJECT_GENERATORS = {
    ObjectType.ARTICLE: _article,
    ObjectType.PROFILE: _profile,
    ObjectType.BOOK: _book,
    ObjectType.MUSIC_SONG: _music_song,
    ObjectType.MUSIC_ALBUM: _music_album,
    ObjectType.MUSIC_PLAYLIST: _music_playlist,
    ObjectType.MUSIC_RADIO_STATION: _music_radio_station,
    ObjectType.VIDEO_MOVIE: _video_movie,
    ObjectType.VIDEO_TV_SHOW: _video_movie,
    ObjectType.VIDEO_OTHER: _video_movie,
    ObjectType.VIDEO_EPISODE: _video_episode,
}
