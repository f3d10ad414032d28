import pytest

from localecodes import Locale, alignment, label, parse, to_iso6393
from localecodes.names import LTR, RTL


def test_label_with_script_and_region(registry):
    locale = parse('zh-Hant-HK', registry)
    assert label(locale, registry) == 'Chinese (Han (Traditional variant) - Hong Kong)'


def test_label_with_region(registry):
    assert label(parse('deu-DE', registry), registry) == 'German (Germany)'


def test_bare_label(registry):
    assert label(parse('en', registry), registry) == 'English'


def test_unnamed_region_is_left_out(registry):
    assert label(parse('en-419', registry), registry) == 'English'


def test_label_with_default_registry():
    assert parse('zh-Hans').label() == 'Chinese (Han (Simplified variant))'
    assert parse('en').label() == 'English'
    assert parse('es-419').label() == 'Spanish (Latin America and the Caribbean)'
    assert parse('yue-Hant-HK').label() == 'Yue Chinese (Han (Traditional variant) - Hong Kong)'


def test_label_ignores_variant_and_extension():
    assert parse('de-CH-1901-x-private').label() == 'German (Switzerland)'


def test_label_needs_a_registered_language(registry):
    with pytest.raises(KeyError):
        label(Locale(primary='qqq'), registry)


def test_alignment(registry):
    assert alignment(parse('ar', registry), registry) == RTL
    assert alignment(parse('ara-GB', registry), registry) == RTL
    assert alignment(parse('eng', registry), registry) == LTR


def test_unknown_alignment_is_none(registry):
    assert alignment(parse('yue', registry), registry) is None
    assert alignment(Locale(primary='qqq'), registry) is None


def test_alignment_with_default_registry():
    assert parse('he-IL').alignment() == 'rtl'
    assert parse('fas').alignment() == 'rtl'
    assert parse('ja-JP').alignment() == 'ltr'


def test_to_iso6393(registry):
    assert to_iso6393(parse('de', registry), registry) == 'deu'
    assert to_iso6393(parse('chi', registry), registry) == 'zho'
    assert parse('en-GB').to_iso6393() == 'eng'
