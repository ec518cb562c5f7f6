# -*- coding: utf-8 -*-
"""HTMLからog:タグを取り出してOpenGraphにする

1. ``<meta property="og:...">`` をドキュメント順にすべて拾う
2. ``og:`` を取り除いて :class:`~ogmeta.models.Tag` にする
3. :func:`ogmeta.builder.build` で組み立てる
"""
import logging
import re

from bs4 import BeautifulSoup

from .builder import build
from .config import DEFAULT_CHARSET, DEFAULT_FEATURES
from .models import Tag

logger = logging.getLogger(__name__)

OG_PREFIX = 'og:'
OG_NODES_REX = re.compile(r'^og:')


def parse(html, charset=DEFAULT_CHARSET, features=DEFAULT_FEATURES):
    """htmlを与えられたら、ParseしてOpenGraphを返す

    :param html: HTML文字列かbytes、またはParse済みのBeautifulSoup
    :param str charset: ``html`` がbytesのときのエンコーディング
    :param str features: BeautifulSoupに渡すパーサ名
    :rtype: ogmeta.models.OpenGraph
    """
    if isinstance(html, BeautifulSoup):
        doc = html
    elif isinstance(html, bytes):
        doc = BeautifulSoup(html, features, from_encoding=charset)
    else:
        doc = BeautifulSoup(html, features)
    return build(extract_tags(select_og_elements(doc)))


def parse_file(path, charset=DEFAULT_CHARSET, features=DEFAULT_FEATURES):
    """ファイルを ``charset`` で読んでparseする"""
    with open(path, encoding=charset) as fp:
        html = fp.read()
    logger.debug('parse_file %s (%s)', path, charset)
    return parse(html, features=features)


def parse_tags(pairs):
    """(property, content)の組からOpenGraphを作る

    自前でHTMLを読む呼び出し側向け。``og:`` で始まらないものは無視する。

    :param pairs: ``('og:title', 'The Rock')`` のような組の並び
    """
    elements = [
        {'property': prop, 'content': content}
        for prop, content in pairs
        if prop.startswith(OG_PREFIX)
    ]
    return build(extract_tags(elements))


def select_og_elements(doc):
    """ドキュメント中の ``meta[property^="og:"]`` をドキュメント順に返す"""
    return doc.find_all('meta', property=OG_NODES_REX)


def extract_tags(elements):
    """og:で始まるmeta要素の並びをTagのlistにする

    ``elements`` は呼び出し側で ``og:`` のものだけに絞ってあること。
    contentが無い要素は空文字として扱う。

    :param elements: ``get('property')`` / ``get('content')`` ができるもの
    :rtype: list
    """
    return [
        Tag(element.get('property')[len(OG_PREFIX):], element.get('content', ''))
        for element in elements
    ]
