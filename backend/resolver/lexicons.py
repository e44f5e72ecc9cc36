"""
Keyword and known-site tables used by the signal classifier.

The tables are plain tuples wrapped in a read-only mapping so the classifier
stays a pure function of its inputs.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .models import Lexicon, MediaCategory

ANIME_KEYWORDS = (
    # core
    "anime", "episode", "episodes", "streaming", "subbed", "dubbed",
    "sub", "dub", "ova", "ona", "simulcast", "season", "seasons",
    # streaming
    "watch online", "stream", "video player", "autoplay next",
    "opening", "ending", "op", "ed", "filler", "filler list", "canon",
    "voice actor", "seiyuu", "studio", "animation studio",
    # japanese
    "アニメ", "エピソード", "話", "期", "シーズン",
    # release formats
    "1080p", "720p", "480p", "bluray", "bd", "dvd", "raw",
    "crunchyroll", "funimation", "hidive", "netflix anime", "animelab",
)

MANGA_KEYWORDS = (
    "manga", "mangaka", "read manga", "manga reader", "manga scan",
    # demographics
    "shonen", "shounen", "shojo", "shoujo", "seinen", "josei", "kodomo",
    "oneshot", "one-shot", "tankoubon", "tankobon", "volume",
    # publishers and magazines
    "jump", "shonen jump", "weekly shonen", "magazine", "viz",
    "kodansha", "shueisha", "shogakukan", "square enix",
    "japanese", "japan", "jp",
    "マンガ", "漫画", "少年", "少女", "青年", "女性",
    # scanlation
    "raw", "scanlation", "scanslation", "fan translation",
    "right to left", "rtl",
)

WEBCOMIC_KEYWORDS = (
    "manhwa", "manhua", "webtoon", "webcomic", "web comic", "webcomics",
    "webtoons", "toon", "comic", "comics",
    "korean", "chinese", "korea", "china", "kr", "cn",
    # platforms
    "tapas", "tappytoon", "lezhin", "toomics", "manta", "pocket comics",
    "line webtoon", "naver", "kakao", "daum", "kuaikan", "bilibili comics",
    # vertical strip formats
    "vertical scroll", "long strip", "full color", "full colour", "colored",
    "scroll down", "infinite scroll",
    "웹툰", "만화", "네이버", "카카오",
    "漫画网", "动漫", "国漫", "漫画屋",
    # genres common in manhwa/manhua
    "cultivation", "regression", "reincarnation", "system", "hunter",
    "tower", "dungeon", "awakening", "martial arts", "murim",
)

NOVEL_KEYWORDS = (
    "novel", "light novel", "lightnovel", "web novel", "webnovel",
    "ln", "wn", "fiction", "story", "stories", "chapter", "chapters",
    "fanfiction", "fanfic", "fan fiction", "fan fic", "fic",
    # genres
    "wuxia", "xianxia", "xuanhuan", "cultivation", "isekai", "litrpg",
    "lit rpg", "progression", "progression fantasy", "gamelit",
    "harem", "romance", "fantasy", "sci-fi", "slice of life",
    # platforms
    "royalroad", "scribblehub", "wattpad", "ao3", "archiveofourown",
    "webnovel", "qidian", "起点",
    "word count", "pages", "reading time", "author note",
    "ライトノベル", "小説", "なろう", "syosetu",
    "小说", "轻小说", "网文",
    # book structure
    "volume", "vol", "book", "arc", "part", "prologue", "epilogue",
    "original", "original fiction", "oc", "original character",
)

ANIME_SITES = (
    # legal streaming
    "crunchyroll.com", "funimation.com", "hidive.com", "vrv.co",
    "wakanim.tv", "animelab.com", "animax.com",
    "netflix.com/browse/genre/7424", "amazon.com/anime",
    # trackers and databases
    "myanimelist.net", "anilist.co", "kitsu.io", "anime-planet.com",
    "anidb.net", "annict.com", "annict.jp", "livechart.me",
    # unofficial streaming
    "9anime", "gogoanime", "animixplay", "zoro.to", "aniwatch",
    "animesuge", "animepahe", "twist.moe", "animekisa", "animedao",
    "animefrenzy", "animeowl", "animesaturn", "animeflv",
    "jkanime", "monoschinos", "tioanime", "animeyt",
    "kayoanime", "animension", "animebee", "gogoanimes",
    "animeonsen", "4anime", "animekayo", "animeheaven",
    "aniwatcher", "animevibe", "ryuanime", "dubbedanime",
    "watchcartoononline", "kimcartoon",
)

MANGA_SITES = (
    # official
    "mangadex.org", "mangaplus.shueisha.co.jp", "viz.com",
    "kodansha.us", "manga.club", "comikey.com", "azuki.co",
    "inkr.com", "coolmic.me", "mangamo.com", "shonenjump.com",
    # aggregators
    "mangasee123.com", "manga4life.com", "mangareader.to", "mangakakalot.com",
    "mangakatana.com", "mangapill.com", "mangahub.io", "mangapark.to",
    "mangafox.me", "mangahere.cc", "mangaeden.com", "mangafreak.me",
    "mangaowl.net", "mangairo.com", "mangabat.com", "manganelo.com",
    "mangaclash.com", "mangajar.com", "readmng.com", "mangadoom.co",
    "mangahasu.se", "rawdevart.com", "mangaraw.org", "mangarawjp.com",
    # raws
    "rawkuma.com", "klmanga.com", "manga1000.com", "manga1001.com",
)

WEBCOMIC_SITES = (
    # korean platforms
    "webtoons.com", "webtoon.xyz", "tapas.io", "tappytoon.com",
    "lezhin.com", "lezhincomics.com", "toomics.com", "manta.net",
    "netcomics.com", "pocketcomics.com", "lehzin.com", "bomtoon.com",
    "mrblue.com", "kakaopage.com", "naver.com/webtoon",
    # chinese platforms
    "kuaikanmanhua.com", "bilibili.com/manga", "dmzj.com", "manhuagui.com",
    "ac.qq.com", "u17.com", "dongmanmanhua.cn", "webcomicsapp.com",
    # scanlation groups
    "asurascans.com", "asuracomic.net", "asuratoon.com",
    "reaperscans.com", "reapersans.com",
    "flamecomics.com", "flamescans.org",
    "luminousscans.com", "luminousscans.net",
    "manhuascan.io", "manhuaus.com", "manhuaplus.com",
    "manhwatop.com", "manhwa18.com", "manhwaclan.com",
    "zinmanga.com", "mangatx.com", "manhwabuddy.com",
    "resetscans.com", "hivetoon.com", "infernalvoidscans.com",
    "nitroscans.com", "nightscans.net", "harmonyscan.com",
    "immortalupdates.com", "cosmic-scans.com", "astrascans.com",
    "rizzfables.com", "arvenscans.com", "skscans.com",
    # aggregators
    "bato.to", "batotoo.com", "comick.io", "comick.fun",
    "mangagg.com", "toonily.com", "manhwax.com", "manhuafast.com",
    "1stkissmanga.io", "1stkissmanga.me", "manhwa-freak.com",
)

NOVEL_SITES = (
    # original fiction
    "royalroad.com", "scribblehub.com", "wattpad.com",
    "fictionpress.com", "penana.com", "inkitt.com", "tapas.io/novels",
    "honeyfeed.fm", "webnovel.com", "neovel.io", "moonquill.com",
    # fan fiction
    "archiveofourown.org", "fanfiction.net", "quotev.com",
    "asianfanfics.com", "spiritfanfiction.com",
    # translated chinese
    "wuxiaworld.com", "novelfull.com", "lightnovelpub.com",
    "novelupdates.com", "novelbin.com", "novelhall.com",
    "readlightnovel.org", "boxnovel.com", "noveltop.com",
    "wnmtl.org", "wuxiaworld.site", "novelsemperor.com",
    "wuxiap.com", "ranobes.net", "freewebnovel.com",
    "lightnovelreader.org", "lightnovelsonl.com", "pandanovel.com",
    "69shu.com", "shu69.com", "qidian.com", "jjwxc.net",
    # japanese
    "syosetu.com", "kakuyomu.jp", "j-novel.club", "yenpress.com",
    "lndb.info",
)

LEXICONS: Mapping[MediaCategory, Lexicon] = MappingProxyType(
    {
        MediaCategory.ANIME: Lexicon(keywords=ANIME_KEYWORDS, sites=ANIME_SITES),
        MediaCategory.MANGA: Lexicon(keywords=MANGA_KEYWORDS, sites=MANGA_SITES),
        MediaCategory.WEBCOMIC: Lexicon(keywords=WEBCOMIC_KEYWORDS, sites=WEBCOMIC_SITES),
        MediaCategory.NOVEL: Lexicon(keywords=NOVEL_KEYWORDS, sites=NOVEL_SITES),
    }
)

# Lower index wins when two categories tie on score.
CATEGORY_PRIORITY = (
    MediaCategory.ANIME,
    MediaCategory.MANGA,
    MediaCategory.WEBCOMIC,
    MediaCategory.NOVEL,
)

DEFAULT_CATEGORY = MediaCategory.MANGA
