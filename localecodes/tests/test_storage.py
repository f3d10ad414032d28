import pytest

from localecodes import LanguageTagError, Locale, parse
from localecodes.storage import cast, dump, dump_map, load


STORED_TAGS = [
    'en', 'de-CH', 'zh-yue-Hant-HK', 'sl-nedis', 'de-DE-1901', 'es-419',
    'en-x-custom', 'en-a-value-more',
]


def test_cast_parses_strings():
    assert cast('eng-GB') == Locale.make(primary='en', region='GB')


def test_cast_passes_locales_through():
    locale = Locale(primary='qqq')
    assert cast(locale) is locale


def test_cast_rejects_invalid_tags():
    with pytest.raises(LanguageTagError):
        cast('en-ZZ')


@pytest.mark.parametrize('value', [42, None, ['en'], {'primary': 'en'}])
def test_cast_rejects_other_types(value):
    with pytest.raises(TypeError):
        cast(value)


def test_load_trusts_strings():
    assert load('deu').primary == 'deu'
    assert load('en-ZZ') == Locale.make(primary='en', region='ZZ')


def test_load_dict():
    assert load({'primary': 'en', 'extension': {'singleton': 'x', 'rest': ['a']}}) == parse('en-x-a')


def test_load_none():
    assert load(None) is None


def test_load_rejects_other_types():
    with pytest.raises(TypeError):
        load(42)


def test_dump():
    assert dump(parse('ger-CH')) == 'de-CH'
    assert dump_map(parse('ger-CH')) == {'primary': 'de', 'region': 'CH'}


@pytest.mark.parametrize('value', ['en', None])
def test_dump_needs_a_locale(value):
    with pytest.raises(TypeError):
        dump(value)
    with pytest.raises(TypeError):
        dump_map(value)


@pytest.mark.parametrize('tag', STORED_TAGS)
def test_stored_round_trip(tag):
    locale = parse(tag)
    assert load(dump(locale)) == locale
    assert load(dump_map(locale)) == locale
