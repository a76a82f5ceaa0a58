"""
Structural hints: sports leagues, bookware vendors and section names.
"""

# League/event prefixes, matched at the start of the release name
SPORTS = [
    "AEW", "AFL", "ATP", "Boxing", "Bundesliga", "Cricket", "Darts", "EPL",
    "F1", "Formula[._-]?1", "Formula[._-]?E", "IPL", "KHL", "La[._-]?Liga",
    "Ligue[._-]?1", "MLB", "MLS", "MotoGP", "NASCAR", "NBA", "NCAA[A-Z]*", "NFL",
    "NHL", "NRL", "Olympics", "PDC", "PGA", "Premier[._-]?League", "Ring[._-]?of[._-]?Honor",
    "Rugby", "Serie[._-]?A", "Snooker", "Super[._-]?Bowl", "TNA", "Tour[._-]?de[._-]?France",
    "UEFA", "UFC", "Wimbledon", "WTA", "WWE", "WWF",
]

# Tutorial vendors, matched at the start of the release name
BOOKWARE = [
    "A[._-]?Cloud[._-]?Guru", "Apress", "Ask[._-]?Video", "CBT[._-]?Nuggets",
    "CG[._-]?Cookie", "Coursera", "CreativeLive", "Digital[._-]?Tutors", "Domestika",
    "Egghead", "Frontend[._-]?Masters", "FXPHD", "Gnomon", "Groove3",
    "Infinite[._-]?Skills", "ITPro[._-]?TV", "Kelby[._-]?Training",
    "LinkedIn[._-]?Learning", "Linux[._-]?Academy", "Lynda(?:[._-]?com)?",
    "MacProVideo", "Manning", "MasterClass", "O[._-]?Reilly", "Packt(?:pub)?",
    "Pluralsight", "SitePoint", "Skillshare", "Sybex", "The[._-]?Great[._-]?Courses",
    "Total[._-]?Training", "Train[._-]?Simple", "Tuts[._-]?Plus", "Udemy",
    "Video2Brain", "Wiley",
]

# Section hint patterns per type, first matching type wins
TYPE = {
    "ABook": ["a[._-]?book", "audio[._-]?books?"],
    "Bookware": ["bookware", "tutorials?", "training"],
    "eBook": ["e[._-]?book", "books?", "comics?", "magazines?", "mags?"],
    "Font": ["fonts?"],
    "Sports": ["sports?"],
    "XXX": ["xxx", "porn", "adult", "imgset", "imageset"],
    "Anime": ["anime"],
    "MusicVideo": ["mvid", "music[._-]?vid", "mdvdr", "mbluray"],
    "Music": ["mp3", "flac", "music", "audio"],
    "Game": ["games?", "ps[1-5p]", "psv", "xbox", "x360", "nsw", "switch", "wii", "nds", "3ds", "gba", "console"],
    "App": ["apps?", "0day", "pda", "software", "iso"],
    "TV": ["tv", "episodes?", "series", "shows?"],
    "Docu": ["docu", "documentar(?:y|ies)"],
    "Movie": ["movies?", "films?", "x264", "x265", "xvid", "divx", "bluray", "dvdr?", "uhd"],
}
