"""
Turn a parsed Locale into things people can read: an English label, and
the direction its language is written in.

These all assume the Locale came from the parser, so its primary language
code is in the registry. If it isn't, you get a KeyError.
"""
from localecodes.registry import get_registry

LTR = 'ltr'
RTL = 'rtl'


def _language_entry(locale, registry):
    entry = registry.lookup_language(locale.primary)
    if entry is None:
        raise KeyError(
            "Language code %r isn't in the registry. Locales should be made "
            "by parsing a tag." % locale.primary
        )
    return entry


def label(locale, registry=None):
    """
    Describe a Locale in English. The script and region, if there are any,
    are put in parentheses after the language.

    >>> from localecodes import parse
    >>> label(parse('de-DE'))
    'German (Germany)'
    >>> label(parse('sr-Cyrl-RS'))
    'Serbian (Cyrillic - Serbia)'
    >>> label(parse('en'))
    'English'
    >>> label(parse('und'))
    'Undetermined'
    """
    if registry is None:
        registry = get_registry()
    language_name = _language_entry(locale, registry).label

    details = []
    if locale.script:
        script_name = registry.lookup_script(locale.script)
        if script_name is not None:
            details.append(script_name)
    if locale.region:
        region_name = registry.lookup_region(locale.region)
        if region_name is not None:
            details.append(region_name)

    if details:
        return '%s (%s)' % (language_name, ' - '.join(details))
    return language_name


def alignment(locale, registry=None):
    """
    Which way the Locale's language is written: LTR ('ltr'), RTL ('rtl'), or
    None if we don't know. Only languages with an ISO 639-1 code have a
    known direction.

    >>> from localecodes import parse
    >>> alignment(parse('ar-EG'))
    'rtl'
    >>> alignment(parse('eng'))
    'ltr'
    >>> alignment(parse('yue')) is None
    True
    """
    if registry is None:
        registry = get_registry()
    return registry.lookup_direction(locale.primary)


def to_iso6393(locale, registry=None):
    """
    Get the ISO 639-3 code for the Locale's language, whichever code it was
    written with.

    >>> from localecodes import parse
    >>> to_iso6393(parse('de-DE'))
    'deu'
    >>> to_iso6393(parse('ger'))
    'deu'
    """
    if registry is None:
        registry = get_registry()
    return _language_entry(locale, registry).iso6393
