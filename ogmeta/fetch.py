# -*- coding: utf-8 -*-
"""URLをクロールして、そのページのOpenGraphを返す"""
import logging
from urllib.parse import urljoin

from tornado import httpclient, ioloop

from .config import FetchConfig
from .errors import BadUrlError, FetchError
from .parser import parse

logger = logging.getLogger(__name__)


async def fetch_ogp(url, config=None, client=None):
    """urlをクロールして、OpenGraphを返す

    リダイレクトは ``config.max_redirects`` 回まで自分で辿る。

    :param str url: クロール対象のurl
    :param ogmeta.config.FetchConfig config:
    :param tornado.httpclient.AsyncHTTPClient client: 省略時は共有のclient
    :rtype: ogmeta.models.OpenGraph
    :raises BadUrlError: http/https以外のurl
    :raises FetchError: 接続できない、または200のtext/html以外のレスポンス
    """
    config = config or FetchConfig()
    client = client or httpclient.AsyncHTTPClient()

    for redirect in range(config.max_redirects + 1):
        logger.debug('fetch_ogp %r', url)
        if not (url.startswith('http://') or url.startswith('https://')):
            logger.debug('bad url : %s', url)
            raise BadUrlError(url)

        try:
            response = await client.fetch(
                url,
                follow_redirects=False,
                raise_error=False,
                connect_timeout=config.connect_timeout,
                request_timeout=config.request_timeout,
                user_agent=config.user_agent,
            )
        except (OSError, httpclient.HTTPClientError) as e:
            # 接続失敗やタイムアウト(599)はraise_error=Falseでも飛んでくる
            raise FetchError(url, status_code=getattr(e, 'code', None), message=str(e)) from e
        if 300 <= response.code < 400 and 'Location' in response.headers:
            before = url
            url = urljoin(url, response.headers['Location'])
            logger.info(' redirect %s -> %s', before, url)
            continue
        break
    else:
        raise FetchError(url, status_code=response.code, message='too many redirects: {}'.format(url))

    content_type, charset = _get_content_type(response)
    if response.code != 200 or content_type != 'text/html':
        # 200 & htmlじゃないとメタ情報は探らない
        raise FetchError(url, status_code=response.code, content_type=content_type)

    return parse(response.body, charset=charset or config.charset, features=config.features)


def parse_url(url, config=None):
    """:func:`fetch_ogp` の同期版。IOLoopが動いていないところから呼ぶ"""
    async def run():
        client = httpclient.AsyncHTTPClient(force_instance=True)
        try:
            return await fetch_ogp(url, config, client=client)
        finally:
            client.close()

    return ioloop.IOLoop.current().run_sync(run)


def _get_content_type(response):
    """Content-Typeヘッダを (mime type, charset) にする"""
    content_type = response.headers.get('Content-Type')
    if not content_type:
        return None, None
    charset = None
    if ';' in content_type:
        content_type, params = content_type.split(';', 1)
        for param in params.split(';'):
            key, _, value = param.strip().partition('=')
            if key.lower() == 'charset' and value:
                charset = value.strip('"\'')
    return content_type.strip().lower(), charset
