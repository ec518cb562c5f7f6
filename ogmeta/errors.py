# -*- coding: utf-8 -*-


class OgmetaError(Exception):
    pass


class MalformedUrlError(OgmetaError, ValueError):
    """og:url の内容がURLとして解釈できない"""

    def __init__(self, url):
        super().__init__('malformed url: {!r}'.format(url))
        self.url = url


class FetchError(OgmetaError):
    def __init__(self, url, status_code=None, content_type=None, message=None):
        if message is None:
            message = 'cannot fetch {} (status={}, content_type={})'.format(url, status_code, content_type)
        super().__init__(message)
        self.url = url
        self.status_code = status_code
        self.content_type = content_type


class BadUrlError(FetchError):
    def __init__(self, url):
        super().__init__(url, message='bad url: {!r}'.format(url))
