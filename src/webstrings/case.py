"""Case and word transforms.

All functions in this module take a single string and return a new string.
None of them raise on unusual input; characters outside the patterns they
look for are passed through unchanged.
"""

__docformat__ = 'google'

__all__ = [
    # Functions
    'to_camel_case',
    'to_pascal_case',
    'first_uppercase',
    'uppercase_words',
    'kebab_to_camel',
    'camel_to_kebab'
]

from webstrings.patterns import (
    SEPARATOR_RUN_PATTERN,
    ALNUM_RUN_PATTERN,
    WORD_START_PATTERN,
    HYPHEN_PAIR_PATTERN,
    CAMEL_BOUNDARY_PATTERN
)

def _upper_following(match) -> str:
    following = match.group(1)
    return following.upper() if following else ''

def to_camel_case(string: str) -> str:
    """
    Join words separated by hyphens, underscores or whitespace.

    The character after each separator run is uppercased. The case of the
    first character is left alone, so a leading separator produces
    PascalCase.

    Args:
        string: Text to convert
        
    Returns:
        Input with separators removed and word starts uppercased
        
    Example:
        >>> to_camel_case('background-color')
        'backgroundColor'
        >>> to_camel_case('-webkit-scrollbar-thumb')
        'WebkitScrollbarThumb'
        >>> to_camel_case('_hello_world')
        'HelloWorld'
        >>> to_camel_case('hello_world')
        'helloWorld'
    """
    return SEPARATOR_RUN_PATTERN.sub(_upper_following, string.strip())

def to_pascal_case(string: str) -> str:
    """
    Capitalize every run of letters and digits and join them.

    Args:
        string: Text to convert
        
    Returns:
        PascalCase string, or an empty string if input has no letters or digits
        
    Example:
        >>> to_pascal_case('hello world')
        'HelloWorld'
        >>> to_pascal_case('hello.world')
        'HelloWorld'
        >>> to_pascal_case('foo_bar-baz')
        'FooBarBaz'
    """
    words = ALNUM_RUN_PATTERN.findall(string)
    return ''.join(word[0].upper() + word[1:] for word in words)

def first_uppercase(string: str) -> str:
    """
    Uppercase the first character only.

    Example:
        >>> first_uppercase('hello world')
        'Hello world'
        >>> first_uppercase('')
        ''
    """
    return string[:1].upper() + string[1:]

def uppercase_words(string: str) -> str:
    """
    Uppercase the first character of every whitespace-separated word.

    Example:
        >>> uppercase_words('hello world')
        'Hello World'
    """
    return WORD_START_PATTERN.sub(lambda match: match.group(0).upper(), string)

def kebab_to_camel(string: str) -> str:
    """
    Convert kebab-case to camelCase.

    Example:
        >>> kebab_to_camel('background-color')
        'backgroundColor'
    """
    # uppercasing may expand the character ('ß' -> 'SS'), keep one
    return HYPHEN_PAIR_PATTERN.sub(lambda match: match.group(0).upper()[1], string)

def camel_to_kebab(string: str) -> str:
    """
    Convert camelCase or PascalCase to kebab-case.

    Example:
        >>> camel_to_kebab('backgroundColor')
        'background-color'
        >>> camel_to_kebab('HTMLElement2Node')
        'htmlelement2-node'
    """
    return CAMEL_BOUNDARY_PATTERN.sub('\\1-\\2', string).lower()
