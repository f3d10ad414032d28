"""
localecodes parses BCP 47 language tags, such as `en-GB`, `yue-Hant-HK` or
`sl-nedis`, into Locale objects, checking each part against the standard
code lists: ISO 639 for languages, ISO 15924 for scripts, and ISO 3166-1 or
UN M.49 for regions. It can also turn a Locale back into a tag, describe it
in English, and tell you which direction its language is written in.

>>> locale = parse('ger-CH')
>>> locale
Locale.make(primary='de', region='CH')
>>> str(locale)
'de-CH'
>>> locale.label()
'German (Switzerland)'
>>> locale.alignment()
'ltr'
"""
from localecodes.tag_parser import (
    Extension, LanguageTagError, parse as parse_tag
)
from localecodes.registry import Registry, configure, get_registry
from localecodes import names


class Locale:
    """
    The Locale class holds the results of parsing a language tag. It has
    these attributes, all but the first of which may be None:

    - *primary*: the code for the language. After parsing, this is always
      the preferred code for the language, which is its ISO 639-1 code if it
      has one. It's 'und' (undetermined) if nothing else is given.
    - *extended*: an ISO 639-3 code for a more specific language within the
      primary one, as in 'zh-yue'.
    - *script*: the 4-letter code for the writing system, such as 'Latn'.
    - *region*: the 2-letter or 3-digit code for the country or area whose
      usage of the language this is.
    - *variant*: a code for a dialect or orthography, such as 'nedis' or
      '1901'.
    - *extension*: an Extension, holding a one-letter singleton and the
      subtags that followed it, which aren't interpreted.

    Locale objects are immutable. Use `Locale.get` (also available as
    `localecodes.parse`) to get one from a string.
    """

    ATTRIBUTES = ['primary', 'extended', 'script', 'region', 'variant',
                  'extension']

    # Values cached at the class level
    _INSTANCES = {}
    _PARSE_CACHE = {}

    def __init__(self, primary='und', extended=None, script=None,
                 region=None, variant=None, extension=None):
        """
        The constructor for Locale objects. This doesn't check anything
        against the registry; if you have a tag, use Locale.get instead.
        """
        if extension is not None and not isinstance(extension, Extension):
            singleton, rest = extension
            extension = Extension(singleton, tuple(rest))
        values = {
            'primary': primary or 'und',
            'extended': extended,
            'script': script,
            'region': region,
            'variant': variant,
            'extension': extension,
        }
        for key, value in values.items():
            object.__setattr__(self, key, value)
        object.__setattr__(self, '_str_tag', None)
        object.__setattr__(self, '_str_tag', self.to_tag())

    def __setattr__(self, name, value):
        raise AttributeError("Locale objects can't be modified")

    def __delattr__(self, name):
        raise AttributeError("Locale objects can't be modified")

    @classmethod
    def make(cls, primary='und', extended=None, script=None, region=None,
             variant=None, extension=None):
        """
        Create a Locale object by giving any subset of its attributes.

        If this value has been created before, return the existing value.
        Values with an extension are always new objects.
        """
        instance = cls(primary=primary, extended=extended, script=script,
                       region=region, variant=variant, extension=extension)
        if instance.extension is not None:
            return instance
        key = instance._key()
        if key in cls._INSTANCES:
            return cls._INSTANCES[key]
        cls._INSTANCES[key] = instance
        return instance

    @staticmethod
    def get(tag: str, registry=None) -> 'Locale':
        """
        Create a Locale object from a language tag string, checking each
        subtag against the registry. Raises a LanguageTagError (a subclass of
        ValueError) if the tag isn't valid.

        >>> Locale.get('en-GB')
        Locale.make(primary='en', region='GB')

        Languages can be given by any of their ISO 639 codes, and they come
        out as the shortest one:

        >>> Locale.get('deu')
        Locale.make(primary='de')
        >>> Locale.get('ger')
        Locale.make(primary='de')

        >>> Locale.get('zh-yue-Hant')
        Locale.make(primary='zh', extended='yue', script='Hant')

        >>> Locale.get('ja-Latn-hepburn')
        Locale.make(primary='ja', script='Latn', variant='hepburn')

        Everything after a singleton is an extension, which we don't look
        inside:

        >>> Locale.get('en-a-value')
        Locale.make(primary='en', extension=Extension(singleton='a', rest=('value',)))

        >>> Locale.get('en-Zzzz')
        Traceback (most recent call last):
            ...
        localecodes.tag_parser.LanguageTagError: Invalid language tag 'en-Zzzz': script 'Zzzz' not found

        >>> Locale.get('en-ger')
        Traceback (most recent call last):
            ...
        localecodes.tag_parser.LanguageTagError: Invalid language tag 'en-ger': 'ger' is not a valid ISO6393 code
        """
        if registry is not None:
            return Locale.make(**parse_tag(tag, registry))

        if tag in Locale._PARSE_CACHE:
            return Locale._PARSE_CACHE[tag]
        result = Locale.make(**parse_tag(tag))
        if result.extension is None:
            Locale._PARSE_CACHE[tag] = result
        return result

    def to_tag(self) -> str:
        """
        Convert a Locale back to a standard language tag, as a string.
        This is also the str() representation of a Locale object.

        >>> Locale.make(primary='en', region='GB').to_tag()
        'en-GB'

        >>> Locale.make(primary='yue', script='Hant', region='HK').to_tag()
        'yue-Hant-HK'

        >>> str(Locale.make(primary='en', extension=('x', ['custom'])))
        'en-x-custom'

        >>> str(Locale.make())
        'und'
        """
        if self._str_tag is not None:
            return self._str_tag
        subtags = [self.primary]
        for attr in ('extended', 'script', 'region', 'variant'):
            value = getattr(self, attr)
            if value:
                subtags.append(value)
        if self.extension is not None:
            subtags.append(str(self.extension))
        return '-'.join(subtags)

    def label(self, registry=None) -> str:
        """
        Describe this Locale in English.

        >>> Locale.get('zh-Hans').label()
        'Chinese (Han (Simplified variant))'
        """
        return names.label(self, registry)

    def alignment(self, registry=None):
        """
        The direction this Locale's language is written in: 'ltr', 'rtl',
        or None when it isn't known.
        """
        return names.alignment(self, registry)

    def to_iso6393(self, registry=None) -> str:
        return names.to_iso6393(self, registry)

    def to_dict(self) -> dict:
        """
        Get a dictionary of the attributes of this Locale that are set. The
        extension, if any, becomes a dictionary too, so the result can be
        stored as JSON.

        >>> from pprint import pprint
        >>> pprint(Locale.get('sl-IT-nedis-x-dialect').to_dict())
        {'extension': {'rest': ['dialect'], 'singleton': 'x'},
         'primary': 'sl',
         'region': 'IT',
         'variant': 'nedis'}
        """
        result = {}
        for key in self.ATTRIBUTES:
            value = getattr(self, key)
            if key == 'extension' and value is not None:
                value = {'singleton': value.singleton, 'rest': list(value.rest)}
            if value:
                result[key] = value
        return result

    @classmethod
    def from_dict(cls, data: dict) -> 'Locale':
        """
        Make a Locale from a dictionary like the ones `to_dict` returns,
        without checking it against the registry.
        """
        unknown = set(data) - set(cls.ATTRIBUTES)
        if unknown:
            raise KeyError("Unknown Locale attributes: %s"
                           % ', '.join(sorted(unknown)))
        values = dict(data)
        extension = values.get('extension')
        if isinstance(extension, dict):
            values['extension'] = (extension['singleton'],
                                   extension.get('rest', ()))
        return cls.make(**values)

    def _key(self):
        return tuple(getattr(self, attr) for attr in self.ATTRIBUTES)

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, Locale):
            return False
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __getitem__(self, key):
        if key in self.ATTRIBUTES:
            return getattr(self, key)
        else:
            raise KeyError(key)

    def __repr__(self):
        items = []
        for attr in self.ATTRIBUTES:
            if getattr(self, attr):
                items.append('{0}={1!r}'.format(attr, getattr(self, attr)))
        return "Locale.make({})".format(', '.join(items))

    def __str__(self):
        return self.to_tag()


# Make the main operations available at the top level
get = Locale.get


def parse(tag: str, registry=None) -> Locale:
    """
    Parse a language tag into a Locale. This is the same as `Locale.get`.

    >>> parse('sl-nedis')
    Locale.make(primary='sl', variant='nedis')
    """
    return Locale.get(tag, registry)


def render(locale: Locale) -> str:
    """
    Turn a Locale back into its canonical tag.

    >>> render(parse('eng-GB'))
    'en-GB'
    """
    return locale.to_tag()


label = names.label
alignment = names.alignment
to_iso6393 = names.to_iso6393

__all__ = [
    'Locale', 'Extension', 'LanguageTagError', 'Registry', 'configure',
    'get_registry', 'get', 'parse', 'render', 'label', 'alignment',
    'to_iso6393',
]
