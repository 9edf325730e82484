"""Extended codepage support for legacy workbooks.

BIFF (.xls) workbooks declare their text codepage as a Windows codepage
number, which the reader turns into a ``cpNNNNN`` codec name. Python ships
most of these under ISO/IANA names only, so this module registers a codec
search function that resolves the Windows names to the codecs Python has.
"""
import codecs
from typing import Dict, Optional

import structlog

logger = structlog.get_logger(__name__)


CODEPAGE_ALIASES: Dict[str, str] = {
    'cp20127': 'ascii',
    'cp20866': 'koi8_r',
    'cp21866': 'koi8_u',
    'cp20932': 'euc_jp',
    'cp51932': 'euc_jp',
    'cp50220': 'iso2022_jp',
    'cp50221': 'iso2022_jp_ext',
    'cp50222': 'iso2022_jp',
    'cp51949': 'euc_kr',
    'cp52936': 'hz',
    'cp54936': 'gb18030',
    'cp28591': 'latin_1',
    'cp28592': 'iso8859_2',
    'cp28593': 'iso8859_3',
    'cp28594': 'iso8859_4',
    'cp28595': 'iso8859_5',
    'cp28596': 'iso8859_6',
    'cp28597': 'iso8859_7',
    'cp28598': 'iso8859_8',
    'cp28599': 'iso8859_9',
    'cp28603': 'iso8859_13',
    'cp28605': 'iso8859_15',
    'cp10004': 'mac_arabic',
    'cp10006': 'mac_greek',
    'cp10007': 'mac_cyrillic',
    'cp10029': 'mac_latin2',
    'cp10079': 'mac_iceland',
    'cp10081': 'mac_turkish',
}


def _search_codepage(name: str) -> Optional[codecs.CodecInfo]:
    """Codec search function resolving Windows codepage names."""
    target = CODEPAGE_ALIASES.get(name.replace('-', '_').lower())
    if target is None:
        return None
    return codecs.lookup(target)


def register_codepage_aliases() -> None:
    """Register the codepage search function with the codec registry.

    Not idempotent on its own; call it through ``runtime.initialize()``.
    """
    codecs.register(_search_codepage)
    logger.debug("codepage_aliases_registered", alias_count=len(CODEPAGE_ALIASES))
