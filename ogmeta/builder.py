# -*- coding: utf-8 -*-
"""og:タグの並びからOpenGraphを組み立てる

image/video/audioは繰り返し可能で、og:image:width などの属性タグが
どのog:imageに属するかはドキュメント上の順番でしか分からない。
そのため、あるbaseタグ(``image`` か ``image:url``)から次のbaseタグの手前までを
そのbaseタグの属性とみなす。ページによっては人が読んだ印象と違う対応付けに
なるが、プロトコル自体の曖昧さなのでそのままにしている。
"""
import logging
import re
from collections import OrderedDict

from .models import (
    Article, Audio, Book, Gender, Image, MusicAlbum, MusicPlaylist, MusicRadioStation, MusicSong,
    ObjectType, OpenGraph, Profile, Video, VideoEpisode, VideoMovie,
)

logger = logging.getLogger(__name__)

INT_REX = re.compile(r'[+-]?[0-9]+')
INT_MIN = -2 ** 31
INT_MAX = 2 ** 31 - 1

BASIC_PROPERTIES = ('title', 'type', 'url', 'description', 'site_name', 'determiner', 'locale')

IMAGE_ATTRIBUTES = {
    'secure_url': str,
    'type': str,
    'width': int,
    'height': int,
    'alt': str,
}
VIDEO_ATTRIBUTES = {
    'secure_url': str,
    'type': str,
    'width': int,
    'height': int,
    'duration': int,
}
AUDIO_ATTRIBUTES = {
    'secure_url': str,
    'type': str,
}


def build(tags):
    """タグの並びをOpenGraphにする

    壊れた値があっても例外にはせず、そのフィールドが無いものとして扱う。

    :param tags: og: prefixを取り除いた :class:`~ogmeta.models.Tag` の並び
    :rtype: ogmeta.models.OpenGraph
    """
    tags = tuple(tags)
    groups = group_by_namespace(tags)

    basic = {name: first_content(tags, name) for name in BASIC_PROPERTIES}
    images = build_records(groups.get('image', []), 'image', IMAGE_ATTRIBUTES, Image)
    videos = build_records(groups.get('video', []), 'video', VIDEO_ATTRIBUTES, Video)
    audios = build_records(groups.get('audio', []), 'audio', AUDIO_ATTRIBUTES, Audio)

    object_type = ObjectType.from_string(basic['type'])
    obj = build_object(object_type, groups)
    logger.debug(
        'build: %d tags, type=%s, images=%d videos=%d audios=%d',
        len(tags), object_type.value, len(images), len(videos), len(audios))

    return OpenGraph(
        tags=tags,
        locale_alternate=all_contents(tags, 'locale:alternate'),
        images=images,
        videos=videos,
        audios=audios,
        object=obj,
        **basic
    )


def namespace_of(prop):
    return prop.split(':', 1)[0]


def group_by_namespace(tags):
    """最初の ``:`` より前でタグをまとめる。各グループ内の順番は元のまま"""
    groups = OrderedDict()
    for tag in tags:
        groups.setdefault(namespace_of(tag.property), []).append(tag)
    return groups


def first_content(tags, prop):
    for tag in tags:
        if tag.property == prop:
            return tag.content
    return None


def all_contents(tags, prop):
    return tuple(tag.content for tag in tags if tag.property == prop)


def parse_int(value):
    """32bitの整数にできなければNone

    符号と数字だけを受け付ける。空白や ``1_000`` のような表記もNone。
    """
    if value is None or not INT_REX.fullmatch(value):
        return None
    rv = int(value)
    if not INT_MIN <= rv <= INT_MAX:
        return None
    return rv


def first_int(tags, prop):
    return parse_int(first_content(tags, prop))


def build_records(group, namespace, attributes, record_class):
    """image/video/audioのグループからレコードのtupleを作る

    :param list group: 同じnamespaceのタグ(元の順番)
    :param str namespace: ``image`` など
    :param dict attributes: 属性名 -> 型(``str`` か ``int``)
    """
    base_properties = (namespace, namespace + ':url')
    base_positions = [i for i, tag in enumerate(group) if tag.property in base_properties]
    if not base_positions:
        return ()

    prefix = namespace + ':'
    records = []
    for index, start in enumerate(base_positions):
        end = base_positions[index + 1] if index + 1 < len(base_positions) else len(group)
        window = [tag for tag in group[start + 1:end] if tag.property.startswith(prefix)]

        values = {}
        for name, kind in attributes.items():
            content = first_content(window, prefix + name)
            values[name] = parse_int(content) if kind is int else content
        records.append(record_class(url=group[start].content, **values))

    return tuple(records)


def build_article(tags):
    return Article(
        published_time=first_content(tags, 'article:published_time'),
        modified_time=first_content(tags, 'article:modified_time'),
        expiration_time=first_content(tags, 'article:expiration_time'),
        section=first_content(tags, 'article:section'),
        authors=all_contents(tags, 'article:author'),
        tags=all_contents(tags, 'article:tag'),
    )


def build_profile(tags):
    gender = first_content(tags, 'profile:gender')
    if gender is not None:
        try:
            gender = Gender.from_string(gender)
        except ValueError:
            logger.debug('ignore profile:gender %r', gender)
            gender = None

    return Profile(
        first_name=first_content(tags, 'profile:first_name'),
        last_name=first_content(tags, 'profile:last_name'),
        username=first_content(tags, 'profile:username'),
        gender=gender,
    )


def build_book(tags):
    return Book(
        authors=all_contents(tags, 'book:author'),
        isbn=first_content(tags, 'book:isbn'),
        release_date=first_content(tags, 'book:release_date'),
        tags=all_contents(tags, 'book:tag'),
    )


def build_music_song(tags):
    return MusicSong(
        duration=first_int(tags, 'music:duration'),
        album=first_content(tags, 'music:album'),
        album_disc=first_int(tags, 'music:album:disc'),
        album_track=first_int(tags, 'music:album:track'),
        musicians=all_contents(tags, 'music:musician'),
    )


def build_music_album(tags):
    return MusicAlbum(
        songs=all_contents(tags, 'music:song'),
        song_disc=first_int(tags, 'music:song:disc'),
        song_track=first_int(tags, 'music:song:track'),
        musicians=all_contents(tags, 'music:musician'),
        release_date=first_content(tags, 'music:release_date'),
    )


def build_music_playlist(tags):
    return MusicPlaylist(
        songs=all_contents(tags, 'music:song'),
        song_disc=first_int(tags, 'music:song:disc'),
        song_track=first_int(tags, 'music:song:track'),
        creator=first_content(tags, 'music:creator'),
    )


def build_music_radio_station(tags):
    return MusicRadioStation(creator=first_content(tags, 'music:creator'))


def build_video_movie(tags):
    return VideoMovie(
        actors=all_contents(tags, 'video:actor'),
        directors=all_contents(tags, 'video:director'),
        writers=all_contents(tags, 'video:writer'),
        duration=first_int(tags, 'video:duration'),
        release_date=first_content(tags, 'video:release_date'),
        tags=all_contents(tags, 'video:tag'),
    )


def build_video_episode(tags):
    return VideoEpisode(
        actors=all_contents(tags, 'video:actor'),
        directors=all_contents(tags, 'video:director'),
        writers=all_contents(tags, 'video:writer'),
        duration=first_int(tags, 'video:duration'),
        release_date=first_content(tags, 'video:release_date'),
        tags=all_contents(tags, 'video:tag'),
        series=first_content(tags, 'video:series'),
    )


# og:type -> (使うnamespace, builder)
OBJECT_BUILDERS = {
    ObjectType.ARTICLE: ('article', build_article),
    ObjectType.PROFILE: ('profile', build_profile),
    ObjectType.BOOK: ('book', build_book),
    ObjectType.MUSIC_SONG: ('music', build_music_song),
    ObjectType.MUSIC_ALBUM: ('music', build_music_album),
    ObjectType.MUSIC_PLAYLIST: ('music', build_music_playlist),
    ObjectType.MUSIC_RADIO_STATION: ('music', build_music_radio_station),
    ObjectType.VIDEO_MOVIE: ('video', build_video_movie),
    ObjectType.VIDEO_TV_SHOW: ('video', build_video_movie),
    ObjectType.VIDEO_OTHER: ('video', build_video_movie),
    ObjectType.VIDEO_EPISODE: ('video', build_video_episode),
}


def build_object(object_type, groups):
    """og:typeに対応するレコードを1つだけ作る。website/unknownならNone"""
    if object_type not in OBJECT_BUILDERS:
        return None
    namespace, builder = OBJECT_BUILDERS[object_type]
    return builder(groups.get(namespace, []))

