"""
Attribute recognition tables.

Every table maps a display key to one pattern or a list of patterns. Patterns
are regex fragments matched case-insensitively between separators. Order
matters: single-valued categories keep the first (or last) key that matches
in table order.

A trailing ``$`` restricts a pattern to the last token before the group.
Flag patterns may reference other categories through placeholders
(``%format%`` and friends); those flags only match once the referenced
categories are known.
"""

# Placeholder context for flags that only count when followed by known tags
_FOLLOWED_BY_TAG = "[._-](?:%flags%|%format%|%language%|%resolution%|%source%)"


SOURCE = {
    # Bluray family, specific before generic
    "UHD Bluray": ["UHD[._-]?Blu[._-]?Ray", "UHD[._-]?BD(?:R|Rip)?"],
    "BDRip": ["BD[._-]?Rip", "BR[._-]?Rip"],
    "BDScr": "BD[._-]?SCR",
    "Bluray": ["Blu[._-]?Ray", "BD", "BDR", "BD[._-]?(?:25|50|66|100)"],
    "HD-DVD": "HD[._-]?DVD(?:R|Rip)?",
    # DVD family
    "DVDRip": "DVD[._-]?Rip",
    "DVDScr": ["DVD[._-]?SCR", "SCREENER", "SCR"],
    "DVD": ["DVD", "PAL[._-]DVD", "NTSC[._-]DVD"],
    # Cinema
    "CAM": ["CAM(?:[._-]?Rip)?", "HD[._-]?CAM"],
    "Telesync": ["TS", "TELESYNC", "HD[._-]?TS", "PDVD"],
    "Telecine": ["TC", "TELECINE", "HD[._-]?TC"],
    "Workprint": ["WORKPRINT", "WP"],
    "R5": ["R5", "R5[._-]LINE"],
    # Web, specific before generic
    "WEB-DL": ["WEB[._-]?DL", "WEB[._-]?HD"],
    "WEBRip": "WEB[._-]?Rip",
    "WEB": ["WEB", "WEB[._-]?Single"],
    "Amazon": ["AMZN", "AMAZON"],
    "Netflix": ["NF", "NETFLIX"],
    "Disney+": ["DSNP", "DSNY", "DISNEY"],
    "Apple TV+": ["ATVP", "ATV"],
    "HBO Max": ["HMAX", "HBO"],
    "Hulu": "HULU",
    "Paramount+": ["PMTP", "PARAMOUNT"],
    "Peacock": ["PCOK", "PEACOCK"],
    "iTunes": ["iT", "ITUNES"],
    "YouTube": ["YT", "YOUTUBE"],
    # Television
    "HDTV": ["HDTV", "HD[._-]TV", "HDTV[._-]?Rip"],
    "PDTV": "PDTV",
    "SDTV": "SDTV",
    "DSR": ["DSR(?:ip)?", "DTH(?:Rip)?", "SAT[._-]?Rip"],
    "TVRip": "TV[._-]?Rip",
    "DVB": ["DVB(?:[._-]?[ST]2?)?(?:Rip)?", "DVBC"],
    "PPV": ["PPV(?:[._-]?Rip)?"],
    "VODRip": "VOD(?:[._-]?Rip)?",
    "HDRip": "HD[._-]?Rip",
    "VHS": "VHS(?:[._-]?Rip)?",
    "Laserdisc": ["LD[._-]?Rip", "LASERDISC"],
    # Music
    "CD Album": ["CDA", "CD[._-]?ALBUM"],
    "CD Single": ["CDS", "CDM", "CD[._-]?SINGLE", "CD[._-]?MAXI"],
    "CD EP": ["CDEP", "CD[._-]EP"],
    "CD": ["CD$", "CDR$"],
    "Promo CD": ["PROMO[._-]?CDS?", "PROMO[._-]?CDR"],
    "Vinyl": ["VINYL", "VINYLRIP"],
    "LP": "LP$",
    "VLS": "VLS",
    "EP": "EP$",
    "Web Single": "WEB[._-]?SINGLE$",
    "Tape": ["TAPE", "CASSETTE"],
    "DAB": "DAB",
    "FM": "FM",
    "SAT": "SAT",
    "Cable": "CABLE",
    "Line": "LINE$",
    "Mixtape": "MIXTAPE",
    "Bootleg": "BOOTLEG",
    # Games
    "Steam": ["STEAM(?:[._-]?Rip)?"],
    "GOG": "GOG",
    # Anime
    "RAWRip": ["RAW(?:[._-]?Rip)?"],
}


FORMAT = {
    # Video codecs and containers
    "x264": "x264",
    "x265": "x265",
    "H264": ["H[._-]?264", "AVC"],
    "H265": ["H[._-]?265", "HEVC"],
    "XViD": "XViD",
    "DiVX": "DiVX",
    "VC-1": "VC[._-]?1",
    "MPEG2": ["MPEG[._-]?2", "M2TS"],
    "AV1": "AV1",
    "VP9": "VP9",
    "WMV": "WMV",
    "SVCD": "SVCD",
    "VCD": "VCD",
    "MKV": "MKV",
    "AVI": "AVI",
    "MP4": "MP4",
    "DVDR": ["DVDR", "DVD[._-]?[59]", "DVD[._-]?R(?:[._-]?DL)?"],
    "Bluray": ["COMPLETE[._-](?:UHD[._-])?BLU[._-]?RAY", "BD(?:25|50|66|100)"],
    "MDVDR": "MDVDR",
    "MBluray": "MBLU[._-]?RAY",
    # Audio formats
    "MP3": "MP3",
    "FLAC": "FLAC",
    "OGG": "OGG",
    "WAV": "WAV",
    "APE": "APE",
    "ALAC": "ALAC",
    "M4A": "M4A",
    "M4B": "M4B",
    "WMA": "WMA",
    "AAC": "AAC$",
    # Documents
    "PDF": "PDF",
    "EPUB": "EPUB",
    "MOBI": "MOBI",
    "AZW3": "AZW3?",
    "CBR": "CBR",
    "CBZ": "CBZ",
    "DJVU": "DJVU",
    "Hybrid": "HYBRID",
    # Software
    "ISO": "ISO",
    "NSP": "NSP",
    "XCI": "XCI",
    "APK": "APK",
    "DMG": "DMG",
    "TTF": "TTF",
    "OTF": "OTF",
}


RESOLUTION = {
    "SD": ["SD", "480[pi]", "576[pi]", "PAL", "NTSC"],
    "720p": ["720[pi]?"],
    "1080i": "1080i",
    "1080p": ["1080p?", "FHD"],
    "1440p": "1440p?",
    "2160p": ["2160p?", "4K", "UHD"],
    "4320p": ["4320p?", "8K"],
}


AUDIO = {
    "AAC": ["AAC(?:[._-]?[257][._-]?[01])?", "AAC[._-]?LC", "HE[._-]?AAC"],
    "AC3": ["AC3", "AC[._-]3"],
    "Dolby Digital": ["DD", "DD[._-]?[1257][._-]?[01]", "DOLBY(?:[._-]?DIGITAL)?"],
    "Dolby Digital Plus": ["DDP", "DD[P+][._-]?[1257][._-]?[01]", "E[._-]?AC[._-]?3", "DD\\+"],
    "Dolby Atmos": "ATMOS",
    "Dolby TrueHD": ["TRUE[._-]?HD(?:[._-]?[57][._-]?1)?"],
    "DTS-HD": ["DTS[._-]?HD(?:[._-]?(?:MA|HRA))?(?:[._-]?[57][._-]?1)?"],
    "DTS-X": "DTS[._-]?X",
    "DTS": ["DTS(?:[._-]?[57][._-]?1)?", "DTS[._-]?ES"],
    "FLAC": ["FLAC(?:[._-]?[257][._-]?[01])?"],
    "LPCM": ["L?PCM(?:[._-]?[257][._-]?[01])?"],
    "MP3": "MP3",
    "Opus": "OPUS",
    "Dual Audio": ["DUAL[._-]?AUDIO", "DUAL"],
    "Multi Audio": "MULTI[._-]?AUDIO",
    "Line Dubbed": ["LD", "LINE[._-]?DUBBED"],
    "Mic Dubbed": ["MD", "MIC[._-]?DUBBED"],
}


DEVICE = {
    "Playstation": ["PS1", "PSX", "PSONE"],
    "Playstation 2": "PS2",
    "Playstation 3": "PS3",
    "Playstation 4": "PS4",
    "Playstation 5": "PS5",
    "Playstation Portable": "PSP",
    "Playstation Vita": ["PSV", "PSVITA"],
    "Xbox": "XBOX",
    "Xbox 360": ["XBOX360", "X360"],
    "Xbox One": ["XBOXONE", "XBONE"],
    "Xbox Series": ["XBSX", "XBOX[._-]?SERIES(?:[._-]?X)?"],
    "Nintendo Switch": ["NSW", "SWITCH"],
    "Nintendo Wii U": ["WIIU", "WII[._-]U"],
    "Nintendo Wii": "WII",
    "Nintendo 3DS": "3DS",
    "Nintendo DS": "NDS",
    "Nintendo 64": "N64",
    "Nintendo GameCube": ["NGC", "GAMECUBE"],
    "Game Boy Advance": "GBA",
    "Game Boy Color": "GBC",
    "Game Boy": "GB",
    "Super Nintendo": "SNES",
    "Sega Dreamcast": ["DC", "DREAMCAST"],
    "Sega Saturn": "SATURN",
    "Sega Genesis": ["GENESIS", "MEGADRIVE"],
    "Nokia N-Gage": "NGAGE",
    "GP32": "GP32",
    "GP2X": "GP2X",
    "Palm": "PALM",
    "Pocket PC": ["PPC", "POCKETPC"],
    "iPhone": "IPHONE",
    "iPad": "IPAD",
}


OS = {
    "Windows Mobile": ["WM[56]", "WIN(?:DOWS)?[._-]?MOBILE", "WINCE"],
    "Windows": ["WIN(?:DOWS)?(?:[._-]?(?:XP|VISTA|7|8|10|11|98|95|2000|2K|NT|ME))?", "WIN(?:32|64|ALL)", "WINNT"],
    "macOS": ["MAC(?:OS)?(?:X)?", "OSX"],
    "Linux": "LINUX",
    "Unix": "UNIX",
    "BSD": "(?:FREE|OPEN|NET)?BSD",
    "Solaris": "SOLARIS",
    "Android": "ANDROID",
    "iOS": "IOS",
    "Symbian": ["SYMBIAN(?:OS)?", "UIQ"],
    "Palm OS": "PALMOS",
    "Blackberry": "BLACKBERRY",
    "Java": ["J2ME", "JAVA"],
}


# Language code -> [display name, more patterns...]
LANGUAGES = {
    "en": ["English", "ENG"],
    "de": ["German", "GER", "DEUTSCH"],
    "fr": ["French", "FRE", "FRA", "TRUEFRENCH", "VFF", "VFQ"],
    "es": ["Spanish", "SPA", "ESP", "CASTELLANO", "ESPANOL"],
    "it": ["Italian", "ITA"],
    "nl": ["Dutch", "NL", "FLEMISH"],
    "pl": ["Polish", "POL", "PL"],
    "ru": ["Russian", "RUS"],
    "uk": ["Ukrainian", "UKR"],
    "pt": ["Portuguese", "POR", "PT[._-]?BR", "BRAZILIAN"],
    "sv": ["Swedish", "SWE", "SWEDISH"],
    "da": ["Danish", "DAN", "DK"],
    "no": ["Norwegian", "NOR"],
    "fi": ["Finnish", "FIN"],
    "is": ["Icelandic", "ICE"],
    "hu": ["Hungarian", "HUN"],
    "cs": ["Czech", "CZ", "CZE"],
    "sk": ["Slovak", "SLO", "SVK"],
    "ro": ["Romanian", "ROM", "RUM"],
    "bg": ["Bulgarian", "BUL"],
    "hr": ["Croatian", "CRO"],
    "sr": ["Serbian", "SRB"],
    "el": ["Greek", "GRE"],
    "tr": ["Turkish", "TUR"],
    "ar": ["Arabic", "ARA"],
    "he": ["Hebrew", "HEB"],
    "hi": ["Hindi", "HIN"],
    "ja": ["Japanese", "JAP", "JPN"],
    "ko": ["Korean", "KOR"],
    "zh": ["Chinese", "CHI", "CHS", "CHT", "MANDARIN", "CANTONESE"],
    "th": ["Thai", "THA"],
    "vi": ["Vietnamese", "VIE"],
    "id": ["Indonesian", "IND"],
    "fa": ["Persian", "FARSI", "PER"],
    "nordic": ["Nordic", "NORDIC"],
    "multi": ["Multi", "MULTI\\d*", "MULTI[._-]?LANG(?:UAGE)?S?", "MULTI[._-]?SUBS?"],
}


FLAGS = {
    "3D": "3D",
    "Abridged": ["ABRIDGED", "ABR"],
    "Unabridged": ["UNABRIDGED", "UNABR"],
    "Anime": "ANIME",
    "Beta": "BETA",
    "Audiobook": "A(?:UDIO)?BOOKS?",
    "Bootleg": "BOOTLEG",
    "Colorized": "COLORI[SZ]ED",
    "Comic": "COMICS?",
    "Complete": "COMPLETE",
    "Cover": "COVERS?" + _FOLLOWED_BY_TAG,
    "Converted": "CONVERT(?:ED)?",
    "Cracked": ["CRACK(?:ED)?", "INCL[._-]?CRACK"],
    "Criterion": "CRITERION",
    "Deluxe": "DELUXE(?:[._-]EDITION)?",
    "Digipak": "DIGIPAK",
    "Directors Cut": ["DC", "DIRECTORS?[._-]?CUT", "DIR[._-]?CUT"],
    "Dirfix": "DIR[._-]?FIX",
    "DLC": "DLC",
    "Docu": "DOCU" + _FOLLOWED_BY_TAG,
    "Dolby Vision": ["DV", "DOVI", "DOLBY[._-]?VISION"],
    "Dual Language": ["(?<!WEB[._-])DL", "DUAL[._-]?LANG(?:UAGE)?"],
    "Dubbed": ["DUBBED", "DUB"],
    "eBook": "E[._-]?BOOK",
    "Extended": "EXTENDED(?:[._-](?:CUT|EDITION))?",
    "Final": "FINAL" + _FOLLOWED_BY_TAG,
    "FONT": "FONTS?",
    "FONTSET": "FONT[._-]?SETS?",
    "Fullscreen": ["FS", "FULLSCREEN"],
    "HDR": ["HDR", "HDR10"],
    "HDR10+": ["HDR10(?:\\+|PLUS)"],
    "Hentai": "HENTAI",
    "HR": "HR" + _FOLLOWED_BY_TAG,
    "Hybrid": "HYBRID",
    "IMAX": "IMAX",
    "Imageset": ["IMAGESETS?", "IMGSETS?"],
    "Incl. Keygen": "INCL[._-]?KEY(?:GEN|MAKER)",
    "Incl. Patch": "INCL[._-]?PATCH",
    "Internal": ["INTERNAL", "iNT"],
    "Keygen": ["KEYGEN", "KEYMAKER"],
    "Limited": "LIMITED",
    "Magazine": ["MAGAZINE", "MAG"],
    "MP3CD": "MP3[._-]?CD",
    "New": "NEW" + _FOLLOWED_BY_TAG,
    "NFOFix": "NFO[._-]?FIX",
    "OAR": "OAR",
    "Patch": ["PATCH(?:ED)?"],
    "Paysite": "PAYSITE",
    "Portable": "PORTABLE",
    "Promo": "PROMO",
    "Proof": "PROOF(?:[._-]?FIX)?",
    "Proper": "PROPER",
    "Read NFO": "READ[._-]?NFO",
    "Real": "REAL" + _FOLLOWED_BY_TAG,
    "Regged": "REGGED",
    "Reissue": "REISSUE",
    "Remastered": "REMASTERED",
    "Remux": "REMUX",
    "Repack": "REPACK",
    "Rerip": "RERIP",
    "Restored": "RESTORED",
    "Retail": "RETAIL",
    "Samplefix": "SAMPLE[._-]?FIX",
    "Special Edition": ["SE", "SPECIAL[._-]?EDITION"],
    "Subbed": ["SUBBED", "HARDSUB(?:BED)?", "HC"],
    "Subpack": "SUBPACK",
    "Syncfix": "SYNC[._-]?FIX",
    "Theatrical": "THEATRICAL(?:[._-]CUT)?",
    "Trainer": ["TRAINER", "PLUS[._-]?\\d+[._-]?TRAINER"],
    "Tutorial": "TUTORIALS?",
    "Uncensored": "UNCENSORED",
    "Uncut": "UNCUT",
    "Unrated": "UNRATED",
    "Update": ["UPDATE", "UPDATED"],
    "V2": "V2" + _FOLLOWED_BY_TAG,
    "V3": "V3" + _FOLLOWED_BY_TAG,
    "Vertical": "VERTICAL" + _FOLLOWED_BY_TAG,
    "VST": ["VSTI?", "VST3"],
    "Widescreen": ["WS", "WIDESCREEN"],
    "x64": ["X64", "AMD64"],
    "x86": "X86",
    "XXX": "XXX",
}

# Flags whose patterns reference other categories
CONTEXT_FLAGS = ("Cover", "Docu", "Final", "HR", "New", "Real", "V2", "V3", "Vertical")


# Month number -> pattern; longer spellings first so alternation picks them
MONTHS = {
    1: "January|Januar|Jan",
    2: "February|Februar|Feb",
    3: "March|Maerz|März|Mar",
    4: "April|Apr",
    5: "May|Mai",
    6: "June|Juni|Jun",
    7: "July|Juli|Jul",
    8: "August|Aug",
    9: "September|Sept|Sep",
    10: "October|Oktober|Oct|Okt",
    11: "November|Nov",
    12: "December|Dezember|Dec|Dez",
}
