"""Tests for fetching pages over HTTP with tornado."""

from unittest.mock import patch

import pytest
from tornado import httpclient, web
from tornado.testing import AsyncHTTPTestCase, bind_unused_port, gen_test

from ogmeta.config import FetchConfig
from ogmeta.errors import BadUrlError, FetchError
from ogmeta.fetch import _get_content_type, fetch_ogp, parse_url
from ogmeta.models import OpenGraph

PAGE = '''<html><head>
<meta property="og:title" content="{title}">
<meta property="og:type" content="article">
<meta property="og:url" content="https://example.com/article">
<meta property="og:image" content="https://example.com/a.jpg">
<meta property="og:article:author" content="Jane">
</head><body></body></html>'''


class PageHandler(web.RequestHandler):
    def get(self):
        self.set_header('Content-Type', 'text/html; charset=UTF-8')
        self.write(PAGE.format(title='Fetched page'))


class LatinPageHandler(web.RequestHandler):
    def get(self):
        self.set_header('Content-Type', 'text/html; charset=iso-8859-1')
        self.write(PAGE.format(title='Café').encode('iso-8859-1'))


class RedirectHandler(web.RequestHandler):
    def get(self):
        self.redirect('/page')


class LoopHandler(web.RequestHandler):
    def get(self):
        self.redirect('/loop')


class JsonHandler(web.RequestHandler):
    def get(self):
        self.write({'title': 'not html'})


class UserAgentHandler(web.RequestHandler):
    def get(self):
        self.set_header('Content-Type', 'text/html')
        self.write(PAGE.format(title=self.request.headers.get('User-Agent')))


class FetchOgpTest(AsyncHTTPTestCase):
    def get_app(self):
        return web.Application([
            (r'/page', PageHandler),
            (r'/latin', LatinPageHandler),
            (r'/redirect', RedirectHandler),
            (r'/loop', LoopHandler),
            (r'/json', JsonHandler),
            (r'/ua', UserAgentHandler),
        ])

    @gen_test
    async def test_fetches_and_parses(self):
        data = await fetch_ogp(self.get_url('/page'), client=self.http_client)
        assert data.title == 'Fetched page'
        assert data.article.authors == ('Jane',)
        assert data.is_valid()

    @gen_test
    async def test_uses_charset_from_header(self):
        data = await fetch_ogp(self.get_url('/latin'), client=self.http_client)
        assert data.title == 'Café'

    @gen_test
    async def test_follows_redirect(self):
        data = await fetch_ogp(self.get_url('/redirect'), client=self.http_client)
        assert data.title == 'Fetched page'

    @gen_test
    async def test_too_many_redirects(self):
        with pytest.raises(FetchError) as excinfo:
            await fetch_ogp(self.get_url('/loop'), FetchConfig(max_redirects=2), client=self.http_client)
        assert excinfo.value.status_code == 302

    @gen_test
    async def test_not_html(self):
        with pytest.raises(FetchError) as excinfo:
            await fetch_ogp(self.get_url('/json'), client=self.http_client)
        assert excinfo.value.status_code == 200
        assert excinfo.value.content_type == 'application/json'

    @gen_test
    async def test_not_found(self):
        with pytest.raises(FetchError) as excinfo:
            await fetch_ogp(self.get_url('/missing'), client=self.http_client)
        assert excinfo.value.status_code == 404

    @gen_test
    async def test_sends_user_agent(self):
        data = await fetch_ogp(self.get_url('/ua'), FetchConfig(user_agent='ogmeta-test'), client=self.http_client)
        assert data.title == 'ogmeta-test'

    @gen_test
    async def test_rejects_non_http_url(self):
        with pytest.raises(BadUrlError):
            await fetch_ogp('ftp://example.com/file', client=self.http_client)


def test_parse_url_runs_fetch_synchronously():
    async def fake_fetch(url, config=None, client=None):
        return OpenGraph(title=url)

    with patch('ogmeta.fetch.fetch_ogp', fake_fetch):
        assert parse_url('https://example.com/').title == 'https://example.com/'


class FakeResponse:
    def __init__(self, headers):
        self.headers = headers


@pytest.mark.parametrize('header, expected', [
    ('text/html', ('text/html', None)),
    ('text/html; charset=Shift_JIS', ('text/html', 'Shift_JIS')),
    ('Text/HTML; foo=bar; charset="utf-8"', ('text/html', 'utf-8')),
    (None, (None, None)),
])
def test_get_content_type(header, expected):
    headers = {'Content-Type': header} if header else {}
    assert _get_content_type(FakeResponse(headers)) == expected


def closed_port_url():
    sock, port = bind_unused_port()
    sock.close()
    return 'http://127.0.0.1:{}/'.format(port)


class ConnectionFailureTest(AsyncHTTPTestCase):
    def get_app(self):
        return web.Application([])

    @gen_test
    async def test_connection_refused(self):
        url = closed_port_url()
        with pytest.raises(FetchError) as excinfo:
            await fetch_ogp(url, client=self.http_client)
        assert excinfo.value.url == url
        assert isinstance(excinfo.value.__cause__, OSError)

    @gen_test
    async def test_timeout(self):
        class TimeoutClient:
            async def fetch(self, url, **kwargs):
                raise httpclient.HTTPClientError(599, 'Timeout while connecting')

        with pytest.raises(FetchError) as excinfo:
            await fetch_ogp('https://example.com/', client=TimeoutClient())
        assert excinfo.value.status_code == 599


def test_parse_url_connection_refused():
    with pytest.raises(FetchError):
        parse_url(closed_port_url())


def test_parse_url_closes_its_client():
    closed = []

    class FakeClient:
        def close(self):
            closed.append(True)

    async def fake_fetch(url, config=None, client=None):
        return OpenGraph(title=url)

    with patch('ogmeta.fetch.httpclient.AsyncHTTPClient', return_value=FakeClient()), \
            patch('ogmeta.fetch.fetch_ogp', fake_fetch):
        parse_url('https://example.com/')
    assert closed == [True]
