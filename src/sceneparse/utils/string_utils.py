"""
String utility functions for text sanitizing and regex building.
"""

import re
from typing import Optional

# Words which should end with a point
SPECIAL_WORDS_AFTER = ("feat", "ft", "incl", "(incl", "inkl", "nr", "st", "pt", "vol")
# Top level domains glued to the previous word (XXX sites)
SPECIAL_WORDS_BEFORE_XXX = ("com", "net", "pl")


def ucwords(text: str) -> str:
    """
    Lowercase a string, then uppercase the first letter of every
    whitespace separated word.
    """
    return " ".join(word[:1].upper() + word[1:] for word in text.lower().split(" "))


def is_all_uppercase(text: str) -> bool:
    """Check that a text only contains uppercase letters (ignoring spaces and dashes)."""
    letters = text.replace("-", "").replace(" ", "")
    return bool(letters) and letters.isalpha() and letters.isupper()


def sanitize_text(text: Optional[str], release_type: Optional[str] = None) -> str:
    """
    Turn a raw name segment into readable text.
    
    Separators become spaces, all uppercase multi word text is title cased
    and a few abbreviations get their point back. Running it twice gives
    the same result.
    
    Args:
        text: Raw text cut from a release name
        release_type: Type of the release (App and XXX have special rules)
        
    Returns:
        Sanitized text
    """
    if not text:
        return ""
    
    text = text.replace("_", " ").replace(".", " ")
    # Dashes only count as edges once the separators are gone
    text = " ".join(text.split()).strip(" -")
    
    # Keep single worded titles uppercase
    if len(text.split(" ")) > 1 and is_all_uppercase(text):
        text = ucwords(text)
    
    release_type = (release_type or "").lower()
    
    words_after = SPECIAL_WORDS_AFTER
    if release_type != "app":
        words_after = words_after + ("vs",)
    words_before = SPECIAL_WORDS_BEFORE_XXX if release_type == "xxx" else ()
    
    result = []
    for word in text.split(" "):
        lowered = word.lower()
        if lowered in words_after:
            result.append(word + ".")
        elif lowered in words_before and result:
            result[-1] = result[-1] + "." + word
        else:
            result.append(word)
    
    return " ".join(result)


def non_capturing(pattern: str) -> str:
    """Turn every capturing group of a regex into a non-capturing one."""
    return re.sub(r"(?<!\\)\((?!\?)", "(?:", pattern)
