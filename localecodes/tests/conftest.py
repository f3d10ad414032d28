import pytest

from localecodes.registry import LanguageEntry, Registry


LANGUAGES = [
    LanguageEntry('German', iso6393='deu', iso6392b='ger', iso6392t='deu', iso6391='de'),
    LanguageEntry('English', iso6393='eng', iso6392b='eng', iso6392t='eng', iso6391='en'),
    LanguageEntry('Chinese', iso6393='zho', iso6392b='chi', iso6392t='zho', iso6391='zh'),
    LanguageEntry('Arabic', iso6393='ara', iso6392b='ara', iso6392t='ara', iso6391='ar'),
    LanguageEntry('Yue Chinese', iso6393='yue', iso6392b=None, iso6392t=None, iso6391=None),
    # Only a bibliographic code, so there's nothing to normalize it to
    LanguageEntry('Broken', iso6393=None, iso6392b='xxb', iso6392t=None, iso6391=None),
]

REGIONS = {'DE': 'Germany', 'GB': 'United Kingdom', 'HK': 'Hong Kong'}
SCRIPTS = {'Latn': 'Latin', 'Hant': 'Han (Traditional variant)'}
DIRECTIONS = {'de': 'ltr', 'en': 'ltr', 'zh': 'ltr', 'ar': 'rtl'}


def make_registry(**overrides):
    return Registry(LANGUAGES, REGIONS, SCRIPTS, DIRECTIONS, **overrides)


@pytest.fixture
def registry():
    return make_registry()
