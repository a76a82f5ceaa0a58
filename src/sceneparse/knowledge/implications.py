"""
Type implication sets.

Each set lists attribute keys (or group names) that point to one content
type when classifying a release.
"""

FLAGS_GAMES = ["DLC", "Trainer"]
FLAGS_APPS = ["Cracked", "Incl. Keygen", "Incl. Patch", "Keygen", "Patch", "Portable", "Regged", "VST", "x64", "x86"]
FLAGS_MUSIC = ["Bootleg", "Digipak", "MP3CD", "Promo", "Reissue"]
FLAGS_MOVIE = [
    "Colorized", "Criterion", "Directors Cut", "Extended", "Fullscreen", "IMAX",
    "OAR", "Remastered", "Restored", "Special Edition", "Theatrical", "Uncut",
    "Unrated", "Widescreen",
]
FLAGS_EBOOK = ["eBook", "Comic", "Magazine"]
FLAGS_ANIME = ["Anime"]
FLAGS_XXX = ["XXX", "Imageset", "Hentai", "Paysite"]

SOURCES_GAMES = ["Steam", "GOG"]
SOURCES_MUSIC = [
    "Bootleg", "Cable", "CD", "CD Album", "CD EP", "CD Single", "DAB", "EP", "FM",
    "Line", "LP", "Mixtape", "Promo CD", "SAT", "Tape", "Vinyl", "VLS", "Web Single",
]
SOURCES_MVID = ["DVB"]
SOURCES_TV = ["HDTV", "PDTV", "SDTV", "DSR", "TVRip", "DVB", "PPV"]
SOURCES_MOVIES = [
    "Bluray", "UHD Bluray", "BDRip", "BDScr", "HD-DVD", "DVDRip", "DVDScr",
    "CAM", "Telesync", "Telecine", "Workprint", "R5", "HDRip", "VHS", "Laserdisc",
]

FORMATS_MUSIC = ["MP3", "FLAC", "OGG", "WAV", "APE", "ALAC", "M4A", "WMA", "AAC"]
FORMATS_VIDEO = ["x264", "x265", "H264", "H265", "XViD", "DiVX", "VC-1", "MPEG2", "AV1", "VP9", "WMV", "MKV", "AVI", "MP4"]
FORMATS_MVID = ["SVCD", "VCD", "MDVDR", "MBluray"]

GROUPS_GAMES = [
    "ALI213", "ANOMALY", "BAT", "BigBlueBox", "CODEX", "CPY", "DARKSiDERS",
    "DARKZER0", "DEViANCE", "DINOByTES", "DOGE", "DUPLEX", "ElAmigos", "EMPRESS",
    "FLT", "GOLDBERG", "HI2U", "HOODLUM", "iMARS", "KaOs", "LiGHTFORCE", "MOONSHiNE",
    "OUTLAWS", "PLAZA", "POSTMORTEM", "PROPHET", "PROMiNENT", "PUSSYCAT", "RAZOR1911",
    "RELOADED", "RUNE", "SiMPLEX", "SKIDROW", "STEAMPUNKS", "SUXXORS", "TENOKE",
    "TiNYiSO", "Unleashed", "VENOM",
]
GROUPS_APPS = [
    "AMPED", "ArCADE", "BLiZZARD", "BTCR", "CORE", "DIGERATI", "DVT", "EMBRACE",
    "HAD", "iOTA", "LAXiTY", "MESMERiZE", "ORiON", "RLTS", "SHooTERS", "TBE", "TNT",
    "TSZ", "XFORCE",
]
