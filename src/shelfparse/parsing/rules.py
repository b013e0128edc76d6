# ABOUTME: Ordered, library-type-scoped regex tables for series/volume/chapter extraction.
# ABOUTME: Tables are immutable; evaluation order is table order and the first match wins.

import re
from dataclasses import dataclass

from shelfparse.parsing.types import LibraryType

ALL_TYPES: frozenset[LibraryType] = frozenset(LibraryType)
COMIC_TYPES: frozenset[LibraryType] = frozenset(
    {LibraryType.COMIC, LibraryType.COMIC_LEGACY}
)
MANGA_TYPES: frozenset[LibraryType] = ALL_TYPES - COMIC_TYPES
# Bare "v01" tokens are too easy to trip over in prose titles, so Book is left out.
LOOSE_VOLUME_TYPES: frozenset[LibraryType] = MANGA_TYPES - {LibraryType.BOOK}
# Bare numbers ("Series 018") only read as chapters where titles rarely end in numbers.
BARE_NUMBER_TYPES: frozenset[LibraryType] = frozenset({LibraryType.MANGA, LibraryType.IMAGE})

NUMBER_RANGE = r"\d+(?:\.\d+)?(?:-\d+(?:\.\d+)?)?"
# A "v02", "Vol. 3" or "Volume 3" token anywhere in the text.
NO_VOLUME_TOKEN = r"(?!.*(?:\b|_)v(?:ol(?:ume)?)?\.?\s?\d)"
# Series text must not end on a season/volume token such as "S01" or "v01".
NOT_AFTER_VOLUME_TOKEN = r"(?<!\bs\d)(?<!\bs\d\d)(?<!\bv\d)(?<!\bv\d\d)"


@dataclass(frozen=True)
class TokenRule:
    """A single extraction pattern and the library types it is valid for."""

    pattern: re.Pattern[str]
    library_types: frozenset[LibraryType]

    def applies_to(self, library_type: LibraryType) -> bool:
        return library_type in self.library_types


def _rule(pattern: str, library_types: frozenset[LibraryType] = ALL_TYPES) -> TokenRule:
    return TokenRule(re.compile(pattern, re.IGNORECASE), library_types)


VOLUME_RULES: tuple[TokenRule, ...] = (
    # Dance in the Vampire Bund v16-17 (Digital)
    _rule(r"(?P<Series>.*)(?:\b|_)v(?P<Volume>\d+-?\d+)(?: |_)", LOOSE_VOLUME_TYPES),
    # Nagasarete Airantou - Vol.30 Ch. 187.5, Mujaki no Rakuen Vol12 ch76
    _rule(
        r"^(?P<Series>.+?)(?:\s*Chapter\s*\d+)?(?:\s|_|-)+(?:Vol\.?)(?P<Volume>\d+(?:-\d+)?)",
        MANGA_TYPES,
    ),
    # Historys Strongest Disciple Kenichi_v11_c90-98, Naruto v01
    _rule(
        r"(?P<Series>.*)(?:\b|_)(?!\[)v(?P<Volume>" + NUMBER_RANGE + r")(?!\])",
        LOOSE_VOLUME_TYPES,
    ),
    # Kodomo no Jikan vol. 10, One Piece - Digital Colored Comics Vol. 20.5-21.5 Ch. 177
    _rule(
        r"(?P<Series>.*)(?:\b|_)(?:vol\.? ?)(?P<Volume>\d+(?:\.\d)?(?:-\d+)?(?:\.\d)?)",
        MANGA_TYPES,
    ),
    # Tonikaku Cawaii [Volume 11], Accel World - Volume 1
    _rule(r"(?:volume )(?P<Volume>\d+(?:\.\d)?)", MANGA_TYPES),
    # Tower Of God S01 014 (CBT) (digital)
    _rule(
        r"(?P<Series>.*)(?:\b|_)S(?P<Volume>\d+)(?:\b|_)",
        frozenset({LibraryType.MANGA, LibraryType.IMAGE}),
    ),
    # vol_001-1 (MangaPy default naming)
    _rule(r"(?:vol_)(?P<Volume>\d+(?:\.\d)?)", MANGA_TYPES),
    # Teen Titans v1 001 (1966-02) (digital), Aldebaran-Antares-t6
    _rule(r"^(?P<Series>.+?)(?: |_|-)(?:t|v)(?P<Volume>" + NUMBER_RANGE + r")", COMIC_TYPES),
    # Batgirl Vol.2000 #57 (December, 2004)
    _rule(r"^(?P<Series>.+?)(?:\s|_)vol\.?\s?(?P<Volume>\d+)", COMIC_TYPES),
    # Asterix Tome 22, Invincible Volume 3
    _rule(r"^(?P<Series>.+?)(?:\s|_)(?:tome|volume)\s?(?P<Volume>\d+)", COMIC_TYPES),
    # Chinese: 幽游白书完全版 第03卷, 阿衰online 第1册
    _rule(r"第(?P<Volume>\d+)(?:卷|册)"),
    # Chinese: 卷3, 册3
    _rule(r"(?:卷|册)(?P<Volume>\d+)"),
    # Korean: 영혼 화장사 제1권
    _rule(r"제?(?P<Volume>\d+(?:\.\d)?)권"),
    # Japanese: 鬼滅の刃 3巻
    _rule(r"(?P<Volume>\d+(?:-\d+)?)巻"),
    # Russian: Том 1, Тома 1-4
    _rule(r"Тома?\.?(?:\s|_)?(?P<Volume>\d+(?:-\d+)?)"),
    # Russian: 1 Том
    _rule(r"(?:\s|_)?(?P<Volume>\d+(?:-\d+)?)(?:\s|_)Тома?"),
)


CHAPTER_RULES: tuple[TokenRule, ...] = (
    # Historys Strongest Disciple Kenichi_v11_c90-98, One Piece c0982, Vol12 ch76
    _rule(
        r"(?:\b|_)(?:c|ch)(?:\.?\s?)(?P<Chapter>\d+(?:\.\d+)?(?:-c?\d+(?:\.\d+)?)?)",
        MANGA_TYPES,
    ),
    # Umineko no Naku Koro ni - Episode 3 - Banquet of the Golden Witch #02
    _rule(r"^(?P<Series>.*)(?: |_)#(?P<Chapter>\d+)", MANGA_TYPES),
    # Green Worldz - Chapter 027, Accel World - Volume 1 Chapter 2
    _rule(
        r"^(?!Vol)(?P<Series>.*)\s?(?<!vol\. )\sChapter\s(?P<Chapter>\d+(?:\.?[\d-]+)?)",
        MANGA_TYPES,
    ),
    # Noblesse - Episode 429 (74 Pages)
    _rule(r"(?:\s|_)(?:Episode|Ep\.?)(?:\s|_)(?P<Chapter>\d+(?:\.\d+|-\d+)?)", MANGA_TYPES),
    # Beelzebub_01_[Noodles], Beelzebub_153b_RHS
    _rule(
        "^" + NO_VOLUME_TOKEN + r"(?:(?!v|vo|vol|volume).)*(?:\s|_)(?P<Chapter>\.?\d+(?:\.\d+|-\d+)?)(?P<Part>b)?(?:\s|_|\[|\()",
        BARE_NUMBER_TYPES,
    ),
    # Hinowa ga CRUSH! 018 (2019) (Digital) (LuCaZ), Hinowa ga CRUSH! 018.5
    _rule(
        "^" + NO_VOLUME_TOKEN + r"(?!Vol)(?P<Series>.+?)(?<!Vol)(?<!Vol\.)\s(?:\d\s)?(?P<Chapter>\d+(?:\.?\d+)?)(?:\s\(\d{4}\))?(?:\b|_|-)",
        BARE_NUMBER_TYPES,
    ),
    # Batman & Wildcat (1 of 3)
    _rule(r"(?P<Series>.*(?:\d{4})?)(?: |_)(?:\((?P<Chapter>\d+) of \d+)", COMIC_TYPES),
    # Batman Beyond 04 (of 6) (1999)
    _rule(r"(?P<Series>.+?)(?P<Chapter>\d+)(?:\s|_)\(of\s\d+\)", COMIC_TYPES),
    # Teen Titans v1 038 (1972) (c2c)
    _rule(
        r"^(?P<Series>.+?)(?: |_)v(?P<Volume>\d+)(?: |_)(?:c? ?)(?P<Chapter>\d+(?:\.\d)?(?:-\d+(?:\.\d)?)?)",
        COMIC_TYPES,
    ),
    # Batgirl Vol.2000 #57 (December, 2004)
    _rule(r"^(?P<Series>.+?)(?:vol\.?\d+)\s#(?P<Chapter>\d+)", COMIC_TYPES),
    # Batman & Robin the Teen Wonder #0, Batman #1
    _rule(r"^(?P<Series>.+?)(?:\s|_)#(?P<Chapter>\d+)", COMIC_TYPES),
    # Amazing Man Comics chapter 25
    _rule(r"^(?!Vol)(?P<Series>.+?)(?: |_)chapter(?: |_)(?P<Chapter>\d+)", COMIC_TYPES),
    # Amazing Man Comics issue #25
    _rule(r"^(?!Vol)(?P<Series>.+?)(?: |_)issue(?: |_)#(?P<Chapter>\d+)", COMIC_TYPES),
    # Batman Wayne Family Adventures - Ep. 001 - Moving In
    _rule(r"^(?P<Series>.+?)(?:\s|_|-)?(?:Ep\.?)(?:\s|_|-)+(?P<Chapter>\d+)", COMIC_TYPES),
    # Invincible 070.5 - Invincible Returns 1 (2010) (digital) (Minutemen-InnerDemons)
    _rule(r"^(?P<Series>.+?)(?: |_)(?P<Chapter>\d+(?:\.\d)?)(?: |_)-", COMIC_TYPES),
    # Saga 001 (2012) (Digital) (Empire-Zone)
    _rule(r"(?P<Series>.+?)(?: |_)(?P<Chapter>\d+(?:\.\d)?(?:-\d+(?:\.\d)?)?)\s\(\d{4}", COMIC_TYPES),
    # spawn-123, spawn-chapter-123
    _rule(r"^(?P<Series>.+?)-(?:chapter-)?(?P<Chapter>\d+)", COMIC_TYPES),
    # Chinese: 【TFO汉化&Petit汉化】迷你偶像漫画第25话
    _rule(r"第(?P<Chapter>\d+)(?:话|話)"),
    # Korean: 가디언즈 오브 갤럭시 죽음의 보석 7화
    _rule(r"제?(?P<Chapter>\d+(?:\.\d+)?)(?:회|화|장)"),
    # Russian: Глава 5, Главы 5-6
    _rule(r"Глав[аы]\.?(?:\s|_)?(?P<Chapter>\d+(?:\.\d+|-\d+)?)"),
)


SERIES_RULES: tuple[TokenRule, ...] = (
    # Grand Blue Dreaming - SP02
    _rule(r"(?P<Series>.*)(?:\b|_|-|\s)(?:sp)\d", MANGA_TYPES),
    # Mad Chimera World - Volume 005 - Chapter 026, Accel World - Volume 1 Chapter 2
    _rule(
        r"(?P<Series>.+?)(?:\s|_|-)+(?:Vol(?:ume|\.)?(?:\s|_|-)+\d+)(?:\s|_|-)+(?:(?:Ch|Chapter)\.?)(?:\s|_|-)+(?P<Chapter>\d+)",
        MANGA_TYPES,
    ),
    # Ichiban_Ushiro_no_Daimaou_v04_ch34_[VISCANS], VanDread-v01-c01
    _rule(r"(?P<Series>.*)(?:\b|_)v(?P<Volume>\d+-?\d*)(?:\s|_|-)", LOOSE_VOLUME_TYPES),
    # Gokukoku no Brynhildr - c001-008 (v01) [TrinityBAKumA], Black Bullet - v4 c17
    _rule(r"(?P<Series>.*)(?: - )(?:v|vo|c|chapters)\d", MANGA_TYPES),
    # Kedouin Makoto - Corpse Party Musume, Chapter 19 [Dametrans]
    _rule(r"(?P<Series>.*)(?:, Chapter )(?P<Chapter>\d+)", MANGA_TYPES),
    # Please Go Home, Akutsu-San! - Chapter 038.5 [Volume 3], Accel World - Chapter 3
    _rule(
        r"(?P<Series>.*)(?:\s|_|-)(?!Vol)(?:\s|_|-)(?:Chapter|Ch\.)(?:\s|_|-)(?P<Chapter>\d+)",
        MANGA_TYPES,
    ),
    # [dmntsf.net] One Piece - Digital Colored Comics Vol. 20 Ch. 177, Harry Potter - Vol 1
    _rule(r"(?P<Series>.*) (?:\b|_|-)(?:vol)\.?(?:\s|-|_)?\d+", MANGA_TYPES),
    # [xPearse] Kyochuu Rettou Volume 1 [English] [Manga] [Volume Scans]
    _rule(r"(?P<Series>.+?)(?:\s|_|-)+(?:vol(?:ume)?\.?)(?:\s|_|-)*\d+", MANGA_TYPES),
    # Tonikaku Kawaii (Ch 59-67) (Ongoing)
    _rule(r"(?P<Series>.*)(?:\s|_)\((?:c\s|ch\s|chapter\s)", MANGA_TYPES),
    # Fullmetal Alchemist chapters 101-108
    _rule(r"(?P<Series>.+?)(?:\s|_|-)+?chapters(?:\s|_|-)+?\d+", MANGA_TYPES),
    # It's Witching Time! 001 (Digital) (Anonymous1234)
    _rule(
        r"(?P<Series>.+?)" + NOT_AFTER_VOLUME_TOKEN + r"(?:\s|_|-)+?\d+(?:\s|_|-)\(",
        MANGA_TYPES,
    ),
    # Ichinensei_ni_Nacchattara_v01_ch01_[Taruby]_v1.1
    _rule(r"(?P<Series>.*)(?:v|s)\d+(?:-\d+)?(?:_|\s)", LOOSE_VOLUME_TYPES),
    # [Suihei Kiki]_Kasumi_Otoko_no_Ko_[Taruby]_v1.1, Naruto v01
    _rule(r"(?P<Series>.*)(?:v|s)\d+(?:-\d+)?", LOOSE_VOLUME_TYPES),
    # Goblin Slayer - Brand New Day 006.5 (2019) (Digital) (danke-Empire)
    _rule(r"(?P<Series>.*) (?P<Chapter>\d+(?:\.\d+|-\d+)?) \(\d{4}\)", MANGA_TYPES),
    # Noblesse - Episode 429 (74 Pages)
    _rule(
        r"(?P<Series>.*)(?:\s|_)(?:Episode|Ep\.?)(?:\s|_)(?P<Chapter>\d+(?:\.\d+|-\d+)?)",
        MANGA_TYPES,
    ),
    # Akame ga KILL! ZERO (2016-2019) (Digital) (LuCaZ)
    _rule(r"(?P<Series>.*)\(\d", MANGA_TYPES),
    # Umineko no Naku Koro ni - Episode 1 - Legend of the Golden Witch #1
    _rule(
        r"^(?!Vol\.?)(?P<Series>.*)(?: |_|-)(?<!-)(?:episode|chapter|(?:ch\.?) ?)\d+-?\d*",
        MANGA_TYPES,
    ),
    # Baketeriya ch01-05
    _rule(r"^(?!Vol)(?P<Series>.*)ch\d+-?\d?", MANGA_TYPES),
    # Magi - Ch.252-005
    _rule(r"(?P<Series>.*)(?: ?- ?)Ch\.\d+-?\d*", MANGA_TYPES),
    # [BAA]_Darker_than_Black_Omake-1
    _rule(r"^(?!Vol)(?P<Series>.*)(?:-)\d+-?\d*", MANGA_TYPES),
    # Kodoja #001 (March 2016)
    _rule(r"(?P<Series>.*)(?:\s|_|-)#", MANGA_TYPES),
    # Beelzebub_01_[Noodles], Cynthia the Mission 29, Akiiro Bousou Biyori - 01
    _rule(
        r"^(?!Vol\.?)(?!Chapter)(?P<Series>.+?)(?:\s|_|-)(?<!-)(?:ch|chapter)?\.?\d+-?\d*",
        MANGA_TYPES,
    ),
    # [BAA]_Darker_than_Black_c1, One Piece c0982
    _rule(r"^(?!Vol)(?P<Series>.*)(?: |_|-)(?:ch?)\d+", MANGA_TYPES),
    # Japanese: 鬼滅の刃 第3巻
    _rule(r"(?P<Series>.+?)第(?P<Volume>\d+(?:-\d+)?)巻", MANGA_TYPES),
    # Russian: Kebab Том 1
    _rule(r"(?P<Series>.+?)\s?Тома?\.?(?:\s|_)?\d+", MANGA_TYPES),
    # Tintin - T22 Vol 714 pour Sydney
    _rule(
        r"(?P<Series>.+?)\s?(?:\b|_|-)\s?(?:(?:vol|tome|t)\.?)(?P<Volume>\d+(?:-\d+)?)",
        COMIC_TYPES,
    ),
    # Batman & Wildcat (1 of 3)
    _rule(r"(?P<Series>.*(?:\d{4})?)(?: |_)(?:\((?P<Volume>\d+) of \d+)", COMIC_TYPES),
    # Amazing Man Comics chapter 25
    _rule(r"^(?P<Series>.+?)(?: |_)chapter \d+", COMIC_TYPES),
    # Amazing Man Comics issue #25
    _rule(r"^(?P<Series>.+?)(?: |_)issue #\d+", COMIC_TYPES),
    # Batman Wayne Family Adventures - Ep. 001 - Moving In
    _rule(r"^(?P<Series>.+?)(?:\s|_|-)(?:Ep\.?)(?:\s|_|-)+\d+", COMIC_TYPES),
    # Batman & Robin the Teen Wonder #0
    _rule(r"^(?P<Series>.*)(?: |_)#\d+", COMIC_TYPES),
    # Scott Pilgrim 02 - Scott Pilgrim vs. The World (2005)
    _rule(r"^(?P<Series>.+?)(?: |_)(?P<Chapter>\d+)", COMIC_TYPES),
    # spawn-123, spawn-chapter-123
    _rule(r"^(?P<Series>.+?)-(?:chapter-)?(?P<Chapter>\d+)", COMIC_TYPES),
    # The First Asterix Frieze (WebP by Doc MaKS)
    _rule(r"^(?P<Series>.*)(?: |_)(?!\(\d{4}|\d{4}-\d{2}\))\(", COMIC_TYPES),
    # Batman & Daredevil - King of New York
    _rule(r"^(?P<Series>.*)", COMIC_TYPES),
)


EDITION_RULES: tuple[TokenRule, ...] = (
    # Tenjo Tenge {Full Contact Edition} v01 (2011) (Digital-HD) (ASTC)
    _rule(r"(?P<Edition>[{(\[][^{}()\[\]]* Edition[})\]])", MANGA_TYPES),
    # To Love Ru v01 Uncensored (Ch.001-007)
    _rule(r"\b(?P<Edition>Uncensored)\b", MANGA_TYPES),
    # AKIRA - c003 (v01) [Full Color] [Darkhorse]
    _rule(r"(?:\b|_)(?P<Edition>Full(?: |_)Colou?r)(?:\b|_)", MANGA_TYPES),
    # Air Gear Omnibus v01 (2016) (Digital) (Shadowcat-Empire)
    _rule(r"(?:\b|_)(?P<Edition>Omnibus(?:(?: |_)?Edition)?)(?:\b|_)", MANGA_TYPES),
)


SPECIAL_KEYWORD_RULES: tuple[TokenRule, ...] = (
    _rule(
        r"(?:\b|_)(?:Omake|Extras?|Specials?|One[- ]?Shot|Oneshot|Bonus|Art[- ]?book|"
        r"Illustrations?|Gaiden|Side Stor(?:y|ies)|Doujin(?:shi)?|Anthology|Preview)(?:\b|_)",
        MANGA_TYPES,
    ),
    # Localized: 番外 (zh), 特別編 (ja), 특별편 (ko), Спешл (ru)
    _rule(r"番外|特別編|특별편|Спешл", MANGA_TYPES),
    _rule(
        r"(?:\b|_)(?:Specials?|One[- ]?Shot|Annual|Compendium|Omnibus|FCBD \d+|Absolute|"
        r"Preview|TPB|Hors[ -]S[ée]rie)(?:\b|_)",
        COMIC_TYPES,
    ),
)


# "SP01", "Series_SP12": an explicit, numbered special marker.
SPECIAL_MARKER_RE = re.compile(r"(?:^|(?<=[\s_\-\[(]))SP(?P<Index>\d+)", re.IGNORECASE)

# Folder names that conventionally hold extras rather than a series.
SPECIAL_FOLDER_RE = re.compile(r"^(?:specials?|extras?|omake|sp)$", re.IGNORECASE)
