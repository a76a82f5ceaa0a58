"""
Structural grammar used by the parsing passes.

Placeholders written as ``%name%`` are filled in by the pattern compiler with
the patterns of attributes that were already parsed. Placeholders whose
attribute is still unset stay in the pattern as literal text and simply never
match.
"""

# Release group: last dash separated token
REGEX_GROUP = r"-(\w+)$"

# Dates: 21.09.16 / 16.09.2021 / 2021.09.16 / 09.16.2021
REGEX_DATE = r"(\d{2}|\d{4})[._-](\d{2})[._-](\d{2}|\d{4})"

# Date inside brackets with a description, used by old music video releases
REGEX_DATE_MUSIC = r"\([a-z._]+[._-]" + REGEX_DATE + r"\)"

# Groups: day, month name, day, year, day
REGEX_DATE_MONTHNAME = (
    r"(\d{1,2})?(?:th|rd|nd|st)?[._-]?(%monthname%)[._-]?"
    r"(\d{1,2})?(?:th|rd|nd|st)?[._-]?(\d{4})[._-]?(\d{1,2})?(?:th|rd|nd|st)?"
)

REGEX_YEAR_SIMPLE = r"(19\d[\dx]|20\d[\dx])"
# Lookahead keeps back to back years (2019.2020) both visible
REGEX_YEAR = r"(?=[(._-]" + REGEX_YEAR_SIMPLE + r"[)._-])"

# Groups: S01, season 1, 1x02
REGEX_SEASON = (
    r"[._-](?:S(\d{1,3})(?=[._-]?(?:E|D|DIS[CK])?\d|[._-])"
    r"|(?:season|saison|staffel|series)[._-]?(\d{1,3})(?=[._-])"
    r"|(\d{1,2})x\d{1,3}(?=[._-]))"
)

# Groups: episode (maybe ranged like 03E04 or 1-2), episode of 1x02
REGEX_EPISODE = (
    r"(?:(?:S\d+[._-]?)?(?:E|EP|Episode[._-]?|Pt[._-]?)(\d+(?:(?:-E?|E)\d+)*)"
    r"|\d+x(\d+))"
)

# Episode grammar of ebooks, audiobooks and music (issues and numbers)
REGEX_EPISODE_OTHER = (
    r"(?:(?:S\d+[._-]?)?(?:E|EP|Episode[._-]?|Pt[._-]?|Part[._-]?|No[._-]?|Nr[._-]?|Issue[._-]?|#)"
    r"(\d+(?:(?:-E?|E)\d+)*)|\d+x(\d+))"
)

REGEX_DISC = r"(?:S\d+[._-]?)?(?:D|DIS[CK]|CD)[._-]?(\d{1,2})"

REGEX_VERSION = (
    r"((?:v|ver|version)[._-]?\d+(?:[._-]\d+)*[a-z]?(?:[._-]?build[._-]?\d+)?"
    r"|build[._-]?\d+)"
)
REGEX_VERSION_BOOKWARE = r"((?:v|ver|version)[._-]?\d+(?:[._-]\d+)*[a-z]?)"

# Language must be followed by another known tag (or be the last one)
REGEX_LANGUAGE = (
    r"(?<!grand)[._(-]%language_pattern%[._)-]"
    r"(?:(?:%audio%|%device%|%flags%|%format%|%os%|%resolution%|%source%|%year%|%language%)"
    r"(?:[._)-]|$)|%group%$)"
)

# Dash-bounded shapes used to pre-classify releases
REGEX_SHAPE_MUSIC = r"^[\w()]+-+[\w().]+-+[\w()-]+$"
REGEX_SHAPE_VA = r"^VA-"
REGEX_SHAPE_EBOOK = r"[._-](?:ebook(?:[._-]\d+)?|comics?)-\w+$"
REGEX_SHAPE_ABOOK = r"[._(-]A(?:UDIO?)?BOOKS?\d*[._)-]"
REGEX_SHAPE_BOOKWARE = r"[._(-]bookware[._)-]"

# Nokia models that look like seasons or episodes (S40, S60, N7650)
REGEX_NOKIA = r"[._-]N(?:7650|66\d0|36\d0)[._-]"

# Episode ranges are taken whole (S01E01-E02)
_EPISODE_TOKEN = r"(?:S\d+[._-]?(?:E\d+(?:-?E\d+)*(?!-?E\d))?|E\d+|EP\d+|\d+x\d+|(?:season|saison|staffel|series)[._-]?\d+)"

REGEX_TITLE_TV = r"^(.+?)[._-]+" + _EPISODE_TOKEN + r"[._-]"
REGEX_TITLE_TV_EPISODE = (
    r"[._-]" + _EPISODE_TOKEN + r"[._-]+(?!\.)(\w.*?)[._-]*(?:\.\.|-\w+$)"
)
# Groups: event (league), specific event
REGEX_TITLE_TV_DATE = (
    r"^(.+?)[._-]+(?:%dateformat%|%date%|%year%)[._-]*(.*?)"
    r"(?:(?:[._-]+|(?<=[._-]))(?:%flags%|%format%|%language%|%resolution%|%source%)[._)-]|-\w+$)"
)
# Three numeric date blocks, used by the dated fallback for every type
REGEX_TITLE_DATEFORMAT = r"(?:\d+[._-]){3}"

REGEX_TITLE_MOVIE = (
    r"^(.+?)[._(-]+"
    r"(?:%year%|%language%|%flags%|%format%|%resolution%|%source%|%audio%|%disc%)[._)-]"
)

_MUSIC_TAGS = r"%audio%|%flags%|%format%|%language%|%source%|%year%|%date%|%date_monthname%"

# A separator run between two tags always belongs to the next tag. Only a
# closing bracket, or the run in front of the group, ends the previous one.
_MUSIC_TAG_END = r"(?:\)|[._)]+(?=-%group%$))?"

REGEX_TITLE_MUSIC = r"^(.+?)(?:[._(-]+(?:" + _MUSIC_TAGS + r")" + _MUSIC_TAG_END + r")*-%group%$"
REGEX_TITLE_MVID = (
    r"^(.+?)(?:[._(-]+(?:" + _MUSIC_TAGS + r"|%resolution%)" + _MUSIC_TAG_END + r")*-%group%$"
)
REGEX_TITLE_ABOOK = (
    r"^(.+?)(?:[._(-]+(?:" + _MUSIC_TAGS + r"|A(?:UDIO)?BOOKS?\d*)" + _MUSIC_TAG_END + r")*-%group%$"
)
REGEX_TITLE_EBOOK = (
    r"^(.+?)(?:[._-]+(?:%flags%|%format%|%language%|%year%|%date%|%date_monthname%"
    r"|e?book(?:[._-]\d+)?|comics?))*-\w+$"
)

REGEX_TITLE_APP = (
    r"^(.+?)(?:[._-]+(?:%version%|%device%|%os%|%resolution%|%disc%|%language%|%source%|x64|x86)"
    r"(?=[._)-])|-\w+$)"
)
REGEX_TITLE_FONT = r"^(.+?)(?:\.\.|[._-]+(?:FONTS?|FONT[._-]?SETS?|TTF|OTF)[._-]|-\w+$)"
REGEX_TITLE_BOOKWARE = r"^(?:(?:%bookware%)[._-]+)?(.+?)(?:\.\.|[._(-]+BOOKWARE[._)-]|-\w+$)"

# Groups: publisher, release name
REGEX_TITLE_XXX = (
    r"^(.+?)[._-]+(?:%year%[._-]+)?(.+?)"
    r"(?:[._-]+(?:%flags%|%language%|%source%|XXX)[._-]|-\w+$)"
)
REGEX_TITLE_XXX_DATE = (
    r"^(.+?)[._-]+(?:%year%[._-]?)?(?:%date%|%date_monthname%)[._-]+(.+?)"
    r"(?:[._-]+(?:%flags%|%language%|%source%|XXX)[._-]|-\w+$)"
)

REGEX_TITLE_MINIMAL = r"^([\w.()\s-]+)-"
REGEX_TITLE_LAST_RESORT = r"^([\w.()\s]+)"

# Trailing country tokens stripped from TV titles
COUNTRIES = r"^(?:US|UK|NZ|AU|CA|BE)$"
COUNTRY_STOP_WORDS = r"^(?:the|of|with|and|between|to)$"
