# language_filter/engine/compiler.py

"""Pattern compilation: creative-letter expansion and fenced regex building."""

import logging
import re
from functools import lru_cache
from typing import Dict, Pattern

from language_filter.core.definitions import LEFT_FENCE, RIGHT_FENCE
from language_filter.core.exceptions import PatternError

logger = logging.getLogger(__name__)

_CK = r"(?:(?:c|©|¢|\(|\[|cee+|see+|k|x|[\|\[\]\)\(li1\!¡][\<\{\(]|[ck]ay)+)"
_IL = r"(?:(?:i|l|1|\!|¡|\||\]|\[|\\|/|eye|£|[\|li1\!¡\[\]\(\)\{\}]_|¬|el+)+)"
_SZ = r"(?:(?:s|\$|5|§|es+|z|2|7_|\~/_|\>_|\%|zee+)+)"
_UV = r"(?:(?:u|v|µ|[\|\(\)\[\]]_[\|\(\)\[\]]|L\||\/|you|yoo+|vee+)+)"

# Each group matches one or more repetitions of the letter or a look-alike.
CREATIVE_LETTERS: Dict[str, str] = {
    "a": r"(?:(?:a|@|4|\^|/\\|/\-\\|aye?)+)",
    "b": r"(?:(?:b|i3|l3|13|\|3|/3|\\3|3|8|6|ß|p\>|\|\:|bee+)+)",
    "c": _CK,
    "d": r"(?:(?:d|\)|\|\)|\[\)|\?|\|\>|\|o|dee+)+)",
    "e": r"(?:(?:e|3|\&|€|ë|\[\-)+)",
    "f": r"(?:(?:f|ph|ƒ|[\|/\\][\=\#]|ef+)+)",
    "g": r"(?:(?:g|6|9|\&|c\-|\(_\+|gee+)+)",
    "h": r"(?:(?:h|\#|[\|\}\{\\/\(\)\[\]]\-?[\|\}\{\\/\(\)\[\]])+)",
    "i": _IL,
    "j": r"(?:(?:j|\]|¿|_\||_/|\</|\(/|jay+)+)",
    "k": _CK,
    "l": _IL,
    "m": r"(?:(?:m|[\|\(\)/](?:\\/|v|\|)[\|\(\)\\]|\^\^|em+)+)",
    "n": r"(?:(?:n|[\|/\[\]\<\>]\\[\|/\[\]\<\>]|/v|\^/|en+)+)",
    "o": r"(?:(?:o|0|\(\)|\[\]|°|oh+)+)",
    "p": r"(?:(?:p|¶|[\|li1\[\]\!¡/\\][\*o°\"\>7\^]|pee+)+)",
    "q": r"(?:(?:q|9|(?:0|\(\)|\[\])_|\(_\,\)|\<\||[ck]ue*|qu?eue*)+)",
    "r": r"(?:(?:r|[/1\|li]?[2\^\?z]|®|ar+)+)",
    "s": _SZ,
    "t": r"(?:(?:t|7|\+|†|\-\|\-|\'\]\[\')+)",
    "u": _UV,
    "v": _UV,
    "w": r"(?:(?:w|vv|\\/\\/|\\\|/|\\\\\'|\'//|\\\^/|\(n\)|double ?(?:u+|you|yoo+))+)",
    "x": r"(?:(?:x|\>\<|\%|\*|\}\{|\)\(|e[ck]+s+|ex+)+)",
    "y": r"(?:(?:y|¥|j|\'/|wh?(?:y+|ie+))+)",
    "z": _SZ,
}


def compile_creative(pattern: str) -> str:
    """Expands every letter of a fragment into its look-alike group.

    A character directly after a backslash is kept as written, so escapes
    such as ``\\w*`` survive. Characters without a group (digits,
    punctuation, whitespace) pass through unchanged.

    Args:
        pattern: Pattern fragment to expand

    Returns:
        Obfuscation-tolerant pattern fragment
    """
    parts = []
    last_char = ""
    for char in pattern:
        if last_char == "\\":
            parts.append(char)
        else:
            parts.append(CREATIVE_LETTERS.get(char.lower(), char))
        last_char = char
    return "".join(parts)


def fence(pattern: str) -> str:
    """Wraps a fragment in the zero-width left and right fences."""
    return f"{LEFT_FENCE}(?:{pattern}){RIGHT_FENCE}"


@lru_cache(maxsize=4096)
def compile_fenced(pattern: str) -> Pattern:
    """Returns the case-insensitive fenced regex for a fragment.

    Raises:
        PatternError: If the fragment is not a valid regular expression.
    """
    try:
        return re.compile(fence(pattern), re.IGNORECASE)
    except re.error as e:
        logger.error(f"Failed to compile pattern fragment {pattern!r}: {e}")
        raise PatternError(f"Invalid pattern fragment {pattern!r}: {e}") from e
