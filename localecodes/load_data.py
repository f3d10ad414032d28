"""
Read the reference data that ships with localecodes.

The data files are plain JSON:

- `iso639.json` is the full list of ISO 639-3 languages, in the format of
  https://github.com/wooorm/iso-639-3, where each entry has a `name` and up
  to four codes: `iso6393`, `iso6392B`, `iso6392T` and `iso6391`.
- `regions.json` maps ISO 3166-1 alpha-2 codes and UN M.49 area codes to
  English names.
- `scripts.json` maps ISO 15924 codes to English names.
- `directions.json` maps ISO 639-1 codes to 'ltr' or 'rtl'.

Nothing here knows about tags; it only turns files into dictionaries.
"""
import json
import logging

from localecodes.util import data_filename

logger = logging.getLogger(__name__)

_DATA_CACHE = {}


def read_json(name):
    """
    Read one of the data files, caching the decoded result.
    """
    if name in _DATA_CACHE:
        return _DATA_CACHE[name]

    filename = data_filename('{}.json'.format(name))
    with open(filename, encoding='utf-8') as infile:
        data = json.load(infile)
    logger.debug("Loaded %d records from %s", len(data), filename)
    _DATA_CACHE[name] = data
    return data


def read_languages():
    return read_json('iso639')


def read_regions():
    return read_json('regions')


def read_scripts():
    return read_json('scripts')


def read_directions():
    return read_json('directions')
