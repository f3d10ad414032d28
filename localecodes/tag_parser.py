"""
This module implements a parser for language tags, according to the RFC 5646
(BCP 47) standard, checking each subtag against the code registries as it
goes.

A tag is split on hyphens and the subtags are handed through a fixed
pipeline of stages: language, extlang, script, region, variant, extension.
Each stage looks at the first remaining subtag and decides from its shape
alone whether it belongs there. If it does, the stage checks it against the
registry and consumes it; if it doesn't, the stage passes the subtags along
untouched so that a later stage can have a go. Whatever is left over at the
end is an error.

The result is a dictionary of the parts that were found, in the order they
appear in the tag. The `Locale` class in `localecodes` turns that into a
value.

>>> parse('en')
{'primary': 'en'}

>>> parse('en-GB')
{'primary': 'en', 'region': 'GB'}

>>> parse('deu-CH')
{'primary': 'de', 'region': 'CH'}

>>> parse('yue-Hant-HK')
{'primary': 'yue', 'script': 'Hant', 'region': 'HK'}

>>> parse('zh-cmn-Hans-CN')
{'primary': 'zh', 'extended': 'cmn', 'script': 'Hans', 'region': 'CN'}

>>> parse('es-419')
{'primary': 'es', 'region': '419'}

>>> parse('sl-nedis')
{'primary': 'sl', 'variant': 'nedis'}

>>> parse('de-DE-1901')
{'primary': 'de', 'region': 'DE', 'variant': '1901'}

>>> parse('en-x-custom')
{'primary': 'en', 'extension': Extension(singleton='x', rest=('custom',))}

>>> parse('en-ZZ')
Traceback (most recent call last):
    ...
localecodes.tag_parser.LanguageTagError: Invalid language tag 'en-ZZ': region 'ZZ' not found

>>> parse('sr-cyrl')
Traceback (most recent call last):
    ...
localecodes.tag_parser.LanguageTagError: Invalid language tag 'sr-cyrl': unrecognized sub-tag 'cyrl'
"""
import logging
from collections import namedtuple

from localecodes.registry import ISO6393, get_registry

logger = logging.getLogger(__name__)

# The kinds of subtags, in the order they have to appear, named so we can
# describe them in error messages
LANGUAGE, EXTLANG, SCRIPT, REGION, VARIANT, EXTENSION, END = range(7)
SUBTAG_TYPES = ['language', 'extlang', 'script', 'region', 'variant',
                'extension', 'end of string']


class Extension(namedtuple('Extension', ['singleton', 'rest'])):
    """
    An extension or private-use section of a tag: a one-character
    'singleton' followed by whatever subtags came after it. The trailing
    subtags are kept exactly as they were written.
    """
    __slots__ = ()

    def __str__(self):
        return '-'.join((self.singleton,) + tuple(self.rest))


class LanguageTagError(ValueError):
    """
    Raised when a tag can't be parsed. Besides the message, it keeps the
    original `tag`, a `reason`, the `stage` that rejected it (one of
    SUBTAG_TYPES) and the offending `subtags`.
    """
    def __init__(self, tag, reason, stage, subtags=()):
        self.tag = tag
        self.reason = reason
        self.stage = stage
        self.subtags = list(subtags)
        super().__init__("Invalid language tag %r: %s" % (tag, reason))


def tag_error(tag, reason, tagtype, subtags):
    logger.debug("Rejecting %r at the %s stage: %s",
                 tag, SUBTAG_TYPES[tagtype], reason)
    raise LanguageTagError(tag, reason, SUBTAG_TYPES[tagtype], subtags)


# Shapes of subtags
# =================

def is_script_shape(subtag):
    """
    Scripts are four letters in title case, such as 'Latn'. A script subtag
    written in any other case is not treated as a script at all.

    >>> is_script_shape('Cyrl')
    True
    >>> is_script_shape('cyrl')
    False
    >>> is_script_shape('1901')
    False
    """
    return (len(subtag) == 4 and subtag.isascii() and subtag.isalpha()
            and subtag == subtag.capitalize())


def is_numeric_region(subtag):
    return len(subtag) == 3 and subtag.isascii() and subtag.isdigit()


def is_variant_shape(subtag):
    """
    Variants are at least four characters starting with a digit, such as
    '1901', or more than four letters, such as 'nedis'.
    """
    if not subtag.isascii():
        return False
    return ((len(subtag) >= 4 and subtag[0].isdigit())
            or (len(subtag) > 4 and subtag.isalpha()))


def is_singleton(subtag):
    return len(subtag) == 1


# The stages
# ==========
#
# Every stage takes the registry, the original tag, the data parsed so far
# and the remaining subtags, and returns the updated data and the subtags
# it didn't consume. A stage that doesn't recognize the next subtag must
# return the subtags unchanged.

def parse_language(registry, tag, data, subtags):
    """
    The first subtag is always the language. It's replaced by the preferred
    code for that language: ISO 639-1 if there is one, otherwise ISO 639-2/T,
    otherwise ISO 639-3.
    """
    code = subtags[0]
    entry = registry.lookup_language(code)
    if entry is None:
        tag_error(tag, "language code %r not found" % code, LANGUAGE, [code])
    preferred = entry.preferred()
    if preferred is None:
        tag_error(tag, "language code %r has no usable alternate" % code,
                  LANGUAGE, [code])
    return dict(data, primary=preferred), subtags[1:]


def parse_extlang(registry, tag, data, subtags):
    """
    An extended language subtag names a specific language within the
    primary one, as in 'zh-yue'. Anything that isn't a known language code
    is left for later stages. It's kept as written.
    """
    subtag = subtags[0]
    if registry.lookup_language(subtag) is None:
        return data, subtags
    if registry.lookup_code_type(subtag) != ISO6393:
        tag_error(tag, "%r is not a valid ISO6393 code" % subtag,
                  EXTLANG, [subtag])
    return dict(data, extended=subtag), subtags[1:]


def parse_script(registry, tag, data, subtags):
    subtag = subtags[0]
    if not is_script_shape(subtag):
        return data, subtags
    if registry.lookup_script(subtag) is None:
        tag_error(tag, "script %r not found" % subtag, SCRIPT, [subtag])
    return dict(data, script=subtag), subtags[1:]


def parse_region(registry, tag, data, subtags):
    """
    Two-character regions must be in the region registry. Three-digit UN
    M.49 area codes are accepted without looking them up.
    """
    subtag = subtags[0]
    if len(subtag) == 2:
        if registry.lookup_region(subtag) is None:
            tag_error(tag, "region %r not found" % subtag, REGION, [subtag])
    elif not is_numeric_region(subtag):
        return data, subtags
    return dict(data, region=subtag), subtags[1:]


def parse_variant(registry, tag, data, subtags):
    subtag = subtags[0]
    if not is_variant_shape(subtag):
        return data, subtags
    return dict(data, variant=subtag), subtags[1:]


def parse_extension(registry, tag, data, subtags):
    """
    A singleton starts an extension, which takes the rest of the tag with
    it. Nothing after it is interpreted.
    """
    subtag = subtags[0]
    if not is_singleton(subtag):
        return data, subtags
    extension = Extension(subtag, tuple(subtags[1:]))
    return dict(data, extension=extension), []


STAGES = [parse_language, parse_extlang, parse_script, parse_region,
          parse_variant, parse_extension]


def parse(tag, registry=None):
    """
    Parse a language tag, checking it against the registry, and return a
    dictionary of its parts. Raises LanguageTagError if any subtag is
    invalid or out of place.

    If no registry is given, the default one that ships with localecodes is
    used.
    """
    if registry is None:
        registry = get_registry()
    data = {}
    subtags = tag.split('-')
    for stage in STAGES:
        if not subtags:
            break
        data, subtags = stage(registry, tag, data, subtags)
    if subtags:
        tag_error(tag, "unrecognized sub-tag %r" % '-'.join(subtags),
                  END, subtags)
    return data


def parse_trusted(tag):
    """
    Split a tag that is already known to be valid, such as one that was
    rendered from a Locale and stored, without consulting any registry.
    Subtags are assigned by shape alone and the language code is kept as it
    is.

    >>> parse_trusted('zh-yue-Hant-HK')
    {'primary': 'zh', 'extended': 'yue', 'script': 'Hant', 'region': 'HK'}

    >>> parse_trusted('en-a-value')
    {'primary': 'en', 'extension': Extension(singleton='a', rest=('value',))}
    """
    subtags = tag.split('-')
    data = {'primary': subtags[0]}
    subtags = subtags[1:]
    for field, matches in TRUSTED_SHAPES:
        if subtags and matches(subtags[0]):
            data[field] = subtags[0]
            subtags = subtags[1:]
    if subtags and is_singleton(subtags[0]):
        data['extension'] = Extension(subtags[0], tuple(subtags[1:]))
        subtags = []
    if subtags:
        tag_error(tag, "unrecognized sub-tag %r" % '-'.join(subtags),
                  END, subtags)
    return data


def _is_extlang_shape(subtag):
    return (len(subtag) == 3 and subtag.isascii() and subtag.isalpha()
            and subtag.islower())


def _is_region_shape(subtag):
    return (len(subtag) == 2 and subtag.isalpha()) or is_numeric_region(subtag)


TRUSTED_SHAPES = [
    ('extended', _is_extlang_shape),
    ('script', is_script_shape),
    ('region', _is_region_shape),
    ('variant', is_variant_shape),
]
