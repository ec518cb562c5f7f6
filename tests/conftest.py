import pytest

from ogmeta.models import Tag

MOVIE_HTML = '''<!DOCTYPE html>
<html prefix="og: https://ogp.me/ns#">
<head>
  <title>The Rock (1996)</title>
  <meta property="og:title" content="The Rock" />
  <meta property="og:type" content="video.movie" />
  <meta property="og:url" content="https://www.imdb.com/title/tt0117500/" />
  <meta property="og:image" content="https://ia.media-imdb.com/images/rock.jpg" />
  <meta property="og:image:width" content="300" />
  <meta property="og:image:height" content="200" />
  <meta property="og:description" content="An action movie about a rock" />
  <meta property="og:locale" content="en_US" />
  <meta property="og:locale:alternate" content="fr_FR" />
  <meta property="og:locale:alternate" content="es_ES" />
  <meta name="description" content="not an og tag" />
  <meta property="twitter:card" content="summary" />
</head>
<body>
  <meta property="og:video:actor" content="Sean Connery" />
</body>
</html>
'''


def make_tags(*pairs):
    return [Tag(prop, content) for prop, content in pairs]


@pytest.fixture
def movie_html():
    return MOVIE_HTML


@pytest.fixture
def sample_tags():
    return make_tags(
        ('title', 'The Rock'),
        ('type', 'video.movie'),
        ('url', 'https://example.com/the-rock'),
        ('image', 'https://example.com/rock.jpg'),
        ('image:width', '300'),
        ('image:height', '200'),
        ('description', 'An action movie about a rock'),
    )
