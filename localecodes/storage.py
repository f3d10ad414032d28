"""
Convert Locale objects to and from the forms they're stored in: either the
canonical tag string, or a dictionary of their attributes.

Values coming from a user are checked with the parser. Values coming back
out of storage were valid when they were stored, so they're rebuilt without
checking them again.

>>> cast('en-GB')
Locale.make(primary='en', region='GB')
>>> dump(cast('eng-GB'))
'en-GB'
>>> load('yue-Hant-HK')
Locale.make(primary='yue', script='Hant', region='HK')
>>> load({'primary': 'sr', 'script': 'Cyrl'})
Locale.make(primary='sr', script='Cyrl')
"""
from localecodes import Locale, parse
from localecodes.tag_parser import parse_trusted


def cast(value, registry=None):
    """
    Turn user input into a Locale. Strings are parsed (and may raise
    LanguageTagError); Locales are passed through.
    """
    if isinstance(value, Locale):
        return value
    if isinstance(value, str):
        return parse(value, registry)
    raise TypeError("Can't make a Locale from %r" % (value,))


def load(value):
    """
    Turn a stored tag string or dictionary back into a Locale, trusting
    that it was valid when it was stored.
    """
    if value is None:
        return None
    if isinstance(value, str):
        return Locale.make(**parse_trusted(value))
    if isinstance(value, dict):
        return Locale.from_dict(value)
    raise TypeError("Can't load a Locale from %r" % (value,))


def dump(locale):
    """
    Get the string form of a Locale for storage.
    """
    if not isinstance(locale, Locale):
        raise TypeError("Expected a Locale, got %r" % (locale,))
    return locale.to_tag()


def dump_map(locale):
    """
    Get the dictionary form of a Locale for storage.
    """
    if not isinstance(locale, Locale):
        raise TypeError("Expected a Locale, got %r" % (locale,))
    return locale.to_dict()
