"""
The registry holds the tables of codes that language tags are checked
against: languages, regions, scripts, and the writing direction of
languages.

The language table is indexed by every code a language has: its ISO 639-3
code, its bibliographic and terminological ISO 639-2 codes, and its ISO
639-1 code. All of those keys point to the same entry.

>>> registry = get_registry()
>>> registry.lookup_language('ger') is registry.lookup_language('de')
True
>>> registry.lookup_language('deu').preferred()
'de'
>>> registry.lookup_code_type('ger')
'iso6392b'
>>> registry.lookup_region('GB')
'United Kingdom'
>>> registry.lookup_script('Cyrl')
'Cyrillic'
>>> registry.lookup_direction('he')
'rtl'

Tables are built once and never modified afterward, so a Registry can be
read from any number of threads at once.
"""
import logging
import threading
from collections import namedtuple
from types import MappingProxyType

from localecodes.load_data import (
    read_directions, read_languages, read_regions, read_scripts
)

logger = logging.getLogger(__name__)

ISO6393 = 'iso6393'
ISO6392B = 'iso6392b'
ISO6392T = 'iso6392t'
ISO6391 = 'iso6391'

# When one string is the code for a language in more than one encoding, such
# as 'deu', which is both ISO 639-2/T and ISO 639-3, the encoding that comes
# later in this list is the one it's recorded under.
CODE_TYPES = [ISO6391, ISO6392B, ISO6392T, ISO6393]

# The order of preference for the code that represents a language
PREFERRED_CODE_TYPES = [ISO6391, ISO6392T, ISO6393]

# The names of the code fields in iso639.json
JSON_CODE_FIELDS = {
    ISO6393: 'iso6393',
    ISO6392B: 'iso6392B',
    ISO6392T: 'iso6392T',
    ISO6391: 'iso6391',
}


class LanguageEntry(namedtuple('LanguageEntry', ['label'] + CODE_TYPES)):
    """
    A language, with its English name and each of the codes it has. Any of
    the codes may be None.
    """
    __slots__ = ()

    @classmethod
    def from_json(cls, data):
        codes = {
            code_type: data.get(field)
            for code_type, field in JSON_CODE_FIELDS.items()
        }
        return cls(label=data['name'], **codes)

    def codes(self):
        """
        Iterate over (code type, code) pairs for the codes this language
        actually has.
        """
        for code_type in CODE_TYPES:
            code = getattr(self, code_type)
            if code is not None:
                yield code_type, code

    def preferred(self):
        """
        Get the code that should represent this language: the shortest
        available one, falling back toward ISO 639-3. Returns None if the
        entry has none of the codes we'd accept.

        >>> LanguageEntry('German', iso6393='deu', iso6392b='ger',
        ...               iso6392t='deu', iso6391='de').preferred()
        'de'
        >>> LanguageEntry('Cantonese', iso6393='yue', iso6392b=None,
        ...               iso6392t=None, iso6391=None).preferred()
        'yue'
        """
        for code_type in PREFERRED_CODE_TYPES:
            code = getattr(self, code_type)
            if code:
                return code
        return None


def _merge(base, overrides):
    merged = dict(base)
    if overrides:
        merged.update(overrides)
    return MappingProxyType(merged)


class Registry:
    """
    Read-only lookup tables for language, region and script codes.

    `languages` is an iterable of LanguageEntry objects. `regions` and
    `scripts` map codes to names, and `directions` maps ISO 639-1 codes to
    'ltr' or 'rtl'. Entries in `region_overrides` and `script_overrides` are
    merged on top of the regions and scripts, replacing any entries with the
    same code, which is how private-use codes can be made valid.
    """
    def __init__(self, languages, regions, scripts, directions,
                 region_overrides=None, script_overrides=None):
        language_table = {}
        code_types = {}
        entries = []
        for entry in languages:
            entries.append(entry)
            for code_type, code in entry.codes():
                previous = language_table.get(code)
                if previous is not None and previous is not entry:
                    logger.debug("Code %r moves from %r to %r",
                                 code, previous.label, entry.label)
                language_table[code] = entry
                code_types[code] = code_type

        self.entries = tuple(entries)
        self.languages = MappingProxyType(language_table)
        self.code_types = MappingProxyType(code_types)
        self.regions = _merge(regions, region_overrides)
        self.scripts = _merge(scripts, script_overrides)
        self.directions = MappingProxyType(dict(directions))
        logger.debug(
            "Built %s (%d region overrides, %d script overrides)",
            self, len(region_overrides or ()), len(script_overrides or ())
        )

    @classmethod
    def from_data_files(cls, region_overrides=None, script_overrides=None):
        """
        Build a Registry from the data that ships with localecodes.
        """
        languages = [LanguageEntry.from_json(item) for item in read_languages()]
        return cls(
            languages, read_regions(), read_scripts(), read_directions(),
            region_overrides=region_overrides,
            script_overrides=script_overrides
        )

    def __str__(self):
        return "Registry(%d languages, %d regions, %d scripts)" % (
            len(self.entries), len(self.regions), len(self.scripts)
        )

    __repr__ = __str__

    # Lookups
    # =======
    #
    # Each of these returns None when the code isn't known. Codes are
    # matched exactly, including their case.

    def lookup_language(self, code):
        return self.languages.get(code)

    def lookup_code_type(self, code):
        """
        Which kind of code `code` is: one of ISO6393, ISO6392B, ISO6392T or
        ISO6391.
        """
        return self.code_types.get(code)

    def lookup_region(self, code):
        return self.regions.get(code)

    def lookup_script(self, code):
        return self.scripts.get(code)

    def lookup_direction(self, code):
        return self.directions.get(code)


# The default registry
# ====================
#
# Most code uses a single registry built from the shipped data. It's built
# the first time something asks for it. Overrides for it have to be supplied
# with `configure` before that happens.

_DEFAULT_REGISTRY = None
_OVERRIDES = {'regions': {}, 'scripts': {}}
_LOCK = threading.Lock()


def configure(regions=None, scripts=None):
    """
    Add entries to the region and script tables of the default registry,
    such as private-use codes your organization needs. Entries given here
    replace built-in entries with the same code.

    This has to be called before the default registry is first used;
    afterward it raises a RuntimeError.
    """
    with _LOCK:
        if _DEFAULT_REGISTRY is not None:
            raise RuntimeError(
                "The default registry has already been built, so it can't "
                "be configured anymore. Call configure() before parsing "
                "any tags."
            )
        if regions:
            _OVERRIDES['regions'].update(regions)
        if scripts:
            _OVERRIDES['scripts'].update(scripts)


def get_registry():
    """
    Get the process-wide default Registry, building it if necessary.
    """
    global _DEFAULT_REGISTRY
    if _DEFAULT_REGISTRY is None:
        with _LOCK:
            if _DEFAULT_REGISTRY is None:
                _DEFAULT_REGISTRY = Registry.from_data_files(
                    region_overrides=_OVERRIDES['regions'],
                    script_overrides=_OVERRIDES['scripts']
                )
    return _DEFAULT_REGISTRY
