"""Regex patterns and constants shared by the string and encoding helpers.
"""

__docformat__ = 'google'

import re

## Encoding
TEXT_ENCODING: str = 'utf-8'
"""Encoding applied to text before it is base64 encoded, and after it is decoded."""

DEFAULT_MIME_TYPE: str = 'application/octet-stream'
"""Mimetype used in data URIs when none is given and none can be guessed."""

DATA_URI_TEMPLATE: str = 'data:{mime_type};base64,{payload}'
"""Layout of a base64 data URI.

Used in `webstrings.encoding.file_to_base64`."""

## Case transforms
# Building blocks
SEPARATOR: str = '[-_\\s]'
ALNUM: str = 'a-zA-Z0-9'

# Patterns
SEPARATOR_RUN_PATTERN: re.Pattern = re.compile(f'{SEPARATOR}+(.)?')
"""Compiled regex matching a run of separators and the character after it, if any.

Used in `webstrings.case.to_camel_case`."""

ALNUM_RUN_PATTERN: re.Pattern = re.compile(f'[{ALNUM}]+')
"""Compiled regex matching a maximal run of ASCII letters and digits.

Used in `webstrings.case.to_pascal_case`."""

WORD_START_PATTERN: re.Pattern = re.compile('^(.)|\\s+(.)')
"""Compiled regex matching the first character of the string and of every word.

Used in `webstrings.case.uppercase_words`."""

HYPHEN_PAIR_PATTERN: re.Pattern = re.compile('-.')
"""Used in `webstrings.case.kebab_to_camel`."""

CAMEL_BOUNDARY_PATTERN: re.Pattern = re.compile('([a-z0-9])([A-Z])')
"""Compiled regex matching a lowercase letter or digit followed by an uppercase letter.

Used in `webstrings.case.camel_to_kebab`."""

## Paths
EXTENSION_PATTERN: re.Pattern = re.compile(f'[{ALNUM}]+')
"""Valid file extensions. Must match the whole final dot-separated segment.

Used in `webstrings.paths.path_to_file_type`."""

PATH_SEGMENT: str = '[^/]+'
"""Uncompiled regex building block representing one path segment."""

## Text
WHITESPACE_PATTERN: re.Pattern = re.compile('\\s')

PLACEHOLDER_PATTERN: re.Pattern = re.compile('\\$\\{.+\\}')
"""Compiled regex matching a `${...}` placeholder.

The match is greedy, so `'${a} and ${b}'` is a single match. Placeholders on
separate lines are matched separately.

Used in `webstrings.text.replace_keys`."""

I18N_CALL_PREFIX_PATTERN: re.Pattern = re.compile('^(\\$t\\(|t\\()')
"""Compiled regex matching the `t(` or `$t(` call that opens an i18n expression."""

I18N_CALL_SUFFIX_PATTERN: re.Pattern = re.compile('\\)\\Z')

I18N_QUOTES_PATTERN: re.Pattern = re.compile('^\'|^"|\'\\Z|"\\Z')
"""Compiled regex matching one leading and one trailing quote character.

Used in `webstrings.text.get_i18n_key`."""
