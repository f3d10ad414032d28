import string
import localecodes
from localecodes import LanguageTagError

# Iterate through all 2- and 3-letter language codes, and for all the ones
# that are in the registry, show:
#
# - The original code
# - The code after normalization
# - The language's name in English
# - The direction it's written in, if we know it

for let1 in string.ascii_lowercase:
    for let2 in string.ascii_lowercase:
        for let3 in [''] + list(string.ascii_lowercase):
            code = let1 + let2 + let3
            try:
                locale = localecodes.parse(code)
            except LanguageTagError:
                continue
            direction = locale.alignment() or '?'
            print('%-3s %-3s %-3s %s' % (code, locale.primary, direction, locale.label()))
