"""A YAML-backed catalog of localized messages.

Messages are looked up with the same `t('key')` expressions recognized by
`webstrings.text.get_i18n_key`, and may contain `${name}` placeholders
filled by `webstrings.text.replace_keys`.

A catalog file looks like::

    locale: en
    messages:
      greeting: Hello ${name}
      errors:
        not_found: ${path} does not exist
"""

__docformat__ = 'google'

__all__ = [
    'MessageCatalog'
]

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union
import yaml
from webstrings.text import get_i18n_key, replace_keys

logger = logging.getLogger(__name__)

KEY_SEPARATOR = '.'

@dataclass
class MessageCatalog:
    """
    Messages for one locale, keyed by dotted paths into nested mappings.

    Args:
        locale: Locale identifier, e.g. 'en' or 'zh-CN'
        messages: Nested mapping of message keys to message text
    """
    locale: str
    messages: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def load_from_yaml(cls, file_path: Union[str, Path]):
        with open(file_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
        
        if not isinstance(data, dict) or not isinstance(data.get('messages') or {}, dict):
            raise ValueError(f'messages in {file_path} must be a mapping')

        catalog = cls(
            locale = data.get('locale', ''),
            messages = data.get('messages') or {}
        )
        logger.debug(f'Loaded {len(catalog.keys())} messages for locale {catalog.locale!r} from {file_path}')
        return catalog

    def save_to_yaml(self, file_path: Union[str, Path]):
        serializable_data = {
            'locale': self.locale,
            'messages': self.messages
        }
        
        with open(file_path, 'w', encoding='utf-8') as f:
            yaml.dump(serializable_data, f, sort_keys=False, allow_unicode=True)

    def lookup(self, key: str) -> Optional[str]:
        """
        Get the message stored under a dotted key.

        Returns:
            Message text, or None if the key is missing or names a group of messages
        """
        node = self.messages
        for part in key.split(KEY_SEPARATOR):
            if not isinstance(node, Mapping) or part not in node:
                return None
            node = node[part]
        
        if isinstance(node, Mapping) or node is None:
            return None
        return str(node)

    def translate(self, expression: str, values: Optional[Mapping[str, Any]] = None) -> str:
        """
        Resolve a translation call and fill its placeholders.

        Args:
            expression: A `t('key')` style call, or plain text
            values: Placeholder values. Placeholders are left alone when omitted.

        Returns:
            The message for the key, the key itself when the catalog has no
            such message, or the plain text unchanged
        
        Example:
            >>> catalog = MessageCatalog('en', {'greeting': 'Hello ${name}'})
            >>> catalog.translate("t('greeting')", {'name': 'World'})
            'Hello World'
            >>> catalog.translate("$t('farewell')")
            'farewell'
        """
        key = get_i18n_key(expression)
        if key is None:
            message = expression
        else:
            message = self.lookup(key)
            if message is None:
                logger.debug(f'No {self.locale!r} message for {key!r}')
                message = key

        if values is not None:
            message = replace_keys(message, values)
        return message

    def keys(self) -> List[str]:
        """All message keys in dotted form, sorted."""
        def walk(node: Mapping, prefix: str):
            for name, value in node.items():
                key = f'{prefix}{name}'
                if isinstance(value, Mapping):
                    yield from walk(value, key + KEY_SEPARATOR)
                else:
                    yield key

        return sorted(walk(self.messages, ''))
