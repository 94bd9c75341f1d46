"""Whitespace removal, `${key}` placeholder substitution and i18n key extraction."""

__docformat__ = 'google'

__all__ = [
    'remove_spaces',
    'replace_keys',
    'get_i18n_key'
]

from typing import Any, Mapping, Optional
from webstrings.patterns import (
    WHITESPACE_PATTERN,
    PLACEHOLDER_PATTERN,
    I18N_CALL_PREFIX_PATTERN,
    I18N_CALL_SUFFIX_PATTERN,
    I18N_QUOTES_PATTERN
)

def remove_spaces(string: str) -> str:
    """
    Remove every whitespace character, including tabs and newlines.

    Example:
        >>> remove_spaces('hel lo wor ld')
        'helloworld'
    """
    return WHITESPACE_PATTERN.sub('', string)

def replace_keys(string: str, values: Mapping[str, Any]) -> str:
    """
    Replace `${key}` placeholders with the matching entry of `values`.

    Placeholders are matched greedily within a line: two placeholders on the
    same line form one match, whose key is everything between the first '${'
    and the last '}'. Each match replaces its first remaining occurrence.
    Keys missing from `values` are rendered as 'None'.

    Args:
        string: Template text
        values: Replacement values, converted with `str`

    Returns:
        Text with placeholders replaced
        
    Example:
        >>> replace_keys('Hello ${name}', {'name': 'World'})
        'Hello World'
        >>> replace_keys('${count} items', {'count': 3})
        '3 items'
    """
    for placeholder in PLACEHOLDER_PATTERN.findall(string):
        key = placeholder[2:-1]
        string = string.replace(placeholder, str(values.get(key)), 1)
    return string

def get_i18n_key(string: Optional[str] = '') -> Optional[str]:
    """
    Get the key from a `t('key')` or `$t('key')` expression.

    Either quote style is accepted, as is an unquoted key.

    Args:
        string: Translation call expression. None is treated as an empty string.

    Returns:
        The key, or None if the input is not a translation call
        
    Example:
        >>> get_i18n_key("t('test')")
        'test'
        >>> get_i18n_key('$t("test")')
        'test'
        >>> get_i18n_key('not_a_call') is None
        True
    """
    string = string or ''
    if not (I18N_CALL_PREFIX_PATTERN.search(string) and I18N_CALL_SUFFIX_PATTERN.search(string)):
        return None

    key = I18N_CALL_PREFIX_PATTERN.sub('', string)
    key = I18N_CALL_SUFFIX_PATTERN.sub('', key)
    return I18N_QUOTES_PATTERN.sub('', key)
