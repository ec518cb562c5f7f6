# -*- coding: utf-8 -*-
"""Defaults for reading and fetching documents."""
from dataclasses import dataclass

DEFAULT_CHARSET = 'utf-8'
DEFAULT_FEATURES = 'html.parser'
DEFAULT_USER_AGENT = 'ogmeta (+https://ogp.me/)'


@dataclass(frozen=True)
class FetchConfig:
    charset: str = DEFAULT_CHARSET
    features: str = DEFAULT_FEATURES
    max_redirects: int = 3
    connect_timeout: float = 10.0
    request_timeout: float = 30.0
    user_agent: str = DEFAULT_USER_AGENT
