"""Convert event identifiers to Go/TypeScript member names and wire values.

Identifiers are split into words on any non-alphanumeric separator, on
lower-to-upper case transitions, at the end of an acronym and at
letter/digit boundaries, then rejoined. Accented letters are folded to
ASCII first:

  - to_pascal_case: first letter of every word uppercased (type member names)
  - to_camel_case:  first word lowercased, the rest as above (wire values)

Letters after the first keep their case, so acronyms survive and converting
an already converted name is a no-op.

Examples:
  message_start    -> MessageStart / messageStart
  content-block.v2 -> ContentBlockV2 / contentBlockV2
  HTTPServerError  -> HTTPServerError / httpServerError
  MessageStart     -> MessageStart / messageStart
  café_start       -> CafeStart / cafeStart
"""

from __future__ import annotations

import re
import unicodedata

# Acronym followed by a capitalized word, capitalized or lowercase word,
# bare acronym, digit run. Anything else is a separator.
_WORD_RE = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z]+|[A-Z]+|[0-9]+")


def fold_ascii(text: str) -> str:
    """Strip accents so that e.g. 'café' becomes 'cafe'."""
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def unmappable_characters(text: str) -> list[str]:
    """Letters and digits in text that have no ASCII spelling after folding."""
    return [ch for ch in fold_ascii(text) if ch.isalnum() and not ch.isascii()]


def split_words(text: str) -> list[str]:
    """Split an identifier into its word fragments."""
    return _WORD_RE.findall(fold_ascii(text))


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:]


def to_pascal_case(text: str) -> str:
    """Convert an identifier to PascalCase, e.g. 'message_start' -> 'MessageStart'."""
    return "".join(_capitalize(w) for w in split_words(text))


def to_camel_case(text: str) -> str:
    """Convert an identifier to camelCase, e.g. 'message_start' -> 'messageStart'."""
    words = split_words(text)
    if not words:
        return ""
    return words[0].lower() + "".join(_capitalize(w) for w in words[1:])
