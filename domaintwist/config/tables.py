"""
Static lookup tables consumed by the fuzzer.

Everything here is plain data: keyboard adjacency, confusable characters,
candidate TLDs and combosquatting keywords. Callers can pass their own
replacements to ``Fuzzer``; an empty table simply disables the strategies
that depend on it.
"""
from typing import Dict, List, Tuple

# Adjacent keys per layout, used by the Replacement strategy
KEYBOARD_QWERTY: Dict[str, str] = {
    '1': '2q', '2': '3wq1', '3': '4ew2', '4': '5re3', '5': '6tr4', '6': '7yt5', '7': '8uy6',
    '8': '9iu7', '9': '0oi8', '0': 'po9',
    'q': '12wa', 'w': '3esaq2', 'e': '4rdsw3', 'r': '5tfde4', 't': '6ygfr5', 'y': '7uhgt6',
    'u': '8ijhy7', 'i': '9okju8', 'o': '0plki9', 'p': 'lo0',
    'a': 'qwsz', 's': 'edxzaw', 'd': 'rfcxse', 'f': 'tgvcdr', 'g': 'yhbvft', 'h': 'ujnbgy',
    'j': 'ikmnhu', 'k': 'olmji', 'l': 'kop',
    'z': 'asx', 'x': 'zsdc', 'c': 'xdfv', 'v': 'cfgb', 'b': 'vghn', 'n': 'bhjm', 'm': 'njk',
}
KEYBOARD_QWERTZ: Dict[str, str] = {
    '1': '2q', '2': '3wq1', '3': '4ew2', '4': '5re3', '5': '6tr4', '6': '7zt5', '7': '8uz6',
    '8': '9iu7', '9': '0oi8', '0': 'po9',
    'q': '12wa', 'w': '3esaq2', 'e': '4rdsw3', 'r': '5tfde4', 't': '6zgfr5', 'z': '7uhgt6',
    'u': '8ijhz7', 'i': '9okju8', 'o': '0plki9', 'p': 'lo0',
    'a': 'qwsy', 's': 'edxyaw', 'd': 'rfcxse', 'f': 'tgvcdr', 'g': 'zhbvft', 'h': 'ujnbgz',
    'j': 'ikmnhu', 'k': 'olmji', 'l': 'kop',
    'y': 'asx', 'x': 'ysdc', 'c': 'xdfv', 'v': 'cfgb', 'b': 'vghn', 'n': 'bhjm', 'm': 'njk',
}
KEYBOARD_AZERTY: Dict[str, str] = {
    '1': '2a', '2': '3za1', '3': '4ez2', '4': '5re3', '5': '6tr4', '6': '7yt5', '7': '8uy6',
    '8': '9iu7', '9': '0oi8', '0': 'po9',
    'a': '2zq1', 'z': '3esqa2', 'e': '4rdsz3', 'r': '5tfde4', 't': '6ygfr5', 'y': '7uhgt6',
    'u': '8ijhy7', 'i': '9okju8', 'o': '0plki9', 'p': 'lo0m',
    'q': 'zswa', 's': 'edxwqz', 'd': 'rfcxse', 'f': 'tgvcdr', 'g': 'yhbvft', 'h': 'ujnbgy',
    'j': 'iknhu', 'k': 'olji', 'l': 'kopm', 'm': 'lp',
    'w': 'sxq', 'x': 'wsdc', 'c': 'xdfv', 'v': 'cfgb', 'b': 'vghn', 'n': 'bhj',
}
KEYBOARDS: List[Dict[str, str]] = [KEYBOARD_QWERTY, KEYBOARD_QWERTZ, KEYBOARD_AZERTY]

# Single-character look-alikes that stay inside ASCII
GLYPHS_ASCII: Dict[str, str] = {
    '0': 'o', '1': 'li', '3': '8', '6': '9', '8': '3', '9': '6',
    'b': 'd', 'c': 'e', 'd': 'b', 'e': 'c', 'g': 'q', 'i': '1l', 'l': '1i',
    'm': 'n', 'n': 'mr', 'o': '0', 'q': 'g', 'u': 'v', 'v': 'u',
}

# Accented and small-capital look-alikes valid under IDNA
GLYPHS_UNICODE: Dict[str, str] = {
    '2': 'ƻ', '3': 'ʒ', '5': 'ƽ',
    'a': 'ạăȧɑåąâǎáəäãāà', 'b': 'ḃḅƅʙḇɓ', 'c': 'čᴄċçćĉƈ', 'd': 'ďḍḋɖḏɗḓḑđ',
    'e': 'êẹęèḛěɇėĕéëēȩ', 'f': 'ḟƒ', 'g': 'ǧġǵğɡǥĝģɢ', 'h': 'ȟḫḩḣɦḥḧħẖⱨĥ',
    'i': 'ɩǐíɪỉȋɨïīĩịîıĭįì', 'j': 'ǰĵʝɉ', 'k': 'ĸǩⱪḵķᴋḳ', 'l': 'ĺłɫļľ',
    'm': 'ᴍṁḿṃɱ', 'n': 'ņǹńňṅṉṇꞑñŋ', 'o': 'öóȯỏôᴏōòŏơőõọø', 'p': 'ṗƿƥṕ',
    'q': 'ʠ', 'r': 'ʀȓɍɾřṛɽȑṙŗŕɼṟ', 's': 'ṡșŝꜱʂšśṣş', 't': 'ťƫţṭṫțŧ',
    'u': 'ᴜųŭūűǔȕưùůʉúȗüûũụ', 'v': 'ᶌṿᴠⱴⱱṽ', 'w': 'ᴡẇẅẃẘẉⱳŵẁ', 'x': 'ẋẍ',
    'y': 'ŷÿʏẏɏƴȳýỿỵ', 'z': 'žƶẓẕⱬᴢżźʐ',
}

# Registries that only accept a restricted IDN repertoire
_IDN_EU: Dict[str, str] = {
    'a': 'áàăâåäãąā', 'c': 'ćĉčċç', 'd': 'ďđ', 'e': 'éèĕêěëėęē', 'g': 'ğĝġģ', 'h': 'ĥħ',
    'i': 'íìĭîïĩįī', 'j': 'ĵ', 'k': 'ķĸ', 'l': 'ĺľļł', 'n': 'ńňñņ', 'o': 'óòŏôöőõøō',
    'r': 'ŕřŗ', 's': 'śŝšş', 't': 'ťţŧ', 'u': 'úùŭûůüűũųū', 'w': 'ŵ', 'y': 'ýŷÿ', 'z': 'źžż',
}
_IDN_BE: Dict[str, str] = {
    'a': 'àáâãäå', 'c': 'ç', 'e': 'èéêë', 'i': 'ìíîï', 'n': 'ñ', 'o': 'òóôõö', 'u': 'ùúûü', 'y': 'ýÿ',
}
_IDN_BR: Dict[str, str] = {
    'a': 'àáâã', 'c': 'ç', 'e': 'éê', 'i': 'í', 'o': 'óôõ', 'u': 'úü', 'y': 'ýÿ',
}
GLYPHS_IDN_BY_TLD: Dict[str, Dict[str, str]] = {
    'info': {'a': 'áäåą', 'c': 'ćč', 'e': 'éėę', 'i': 'íį', 'l': 'ł', 'n': 'ñń', 'o': 'óöøő',
             's': 'śš', 'u': 'úüūűų', 'z': 'źżž'},
    'dk': {'a': 'äå', 'e': 'é', 'o': 'öø', 'u': 'ü'},
    'fi': {'3': 'ʒ', 'a': 'áäåâ', 'c': 'č', 'd': 'đ', 'g': 'ǧǥ', 'k': 'ǩ', 'n': 'ŋ', 'o': 'õö',
           's': 'š', 't': 'ŧ', 'z': 'ž'},
    'no': {'a': 'áàäå', 'c': 'čç', 'e': 'éèê', 'i': 'ï', 'n': 'ŋńñ', 'o': 'óòôöø', 's': 'š',
           't': 'ŧ', 'u': 'ü', 'z': 'ž'},
    'ca': {'a': 'àâ', 'c': 'ç', 'e': 'èéêë', 'i': 'îï', 'o': 'ô', 'u': 'ùûü', 'y': 'ÿ'},
    'eu': _IDN_EU, 'de': _IDN_EU, 'pl': _IDN_EU,
    'br': _IDN_BR, 'com.br': _IDN_BR,
    **dict.fromkeys(['be', 'fr', 're', 'yt', 'pm', 'wf', 'tf', 'ch', 'li'], _IDN_BE),
}

# Multi-character visual mappings, applied in both directions by the Mapped strategy
MAPPED_SEQUENCES: Dict[str, Tuple[str, ...]] = {
    'm': ('rn', 'nn'), 'rn': ('m',), 'nn': ('m',),
    'd': ('cl',), 'cl': ('d',),
    'w': ('vv',), 'vv': ('w',),
    'b': ('lb',), 'h': ('lh',), 'k': ('lc',),
    'ae': ('æ',), 'oe': ('œ',),
}

LATIN_TO_CYRILLIC: Dict[str, str] = {
    'a': 'а', 'b': 'ь', 'c': 'с', 'd': 'ԁ', 'e': 'е', 'g': 'ԍ', 'h': 'һ', 'i': 'і', 'j': 'ј',
    'k': 'к', 'l': 'ӏ', 'm': 'м', 'o': 'о', 'p': 'р', 'q': 'ԛ', 's': 'ѕ', 't': 'т', 'v': 'ѵ',
    'w': 'ԝ', 'x': 'х', 'y': 'у',
}

# Suffixes tried by TldVariation
CANDIDATE_TLDS: List[str] = [
    'com', 'org', 'net', 'edu', 'gov', 'mil', 'int', 'co', 'io', 'biz', 'info', 'me', 'tv', 'name',
    'co.uk', 'us', 'ca', 'de', 'fr', 'au', 'it', 'jp', 'in', 'br', 'ru', 'cn', 'es', 'mx', 'se',
    'pl', 'ch', 'nl', 'be', 'at', 'kr', 'fi', 'dk', 'cz', 'hu', 'ro', 'gr', 'bg', 'ua', 'tw', 'hk',
    'sa', 'ae', 'za', 'ke', 'ng', 'eg', 'pk', 'vn', 'th', 'id', 'ph', 'lk', 'my', 'np', 'lt', 'lv',
    'ee', 'pt', 'il', 'kz', 'iq', 'qa', 'sy', 'om', 'ly', 'ye', 'bh', 'sd', 'jo', 'tn', 'dz', 'ma',
    'gh', 'bd', 'ga', 'gq', 'tk', 'cf', 'ooo', 'xyz', 'online', 'site', 'wang', 'work', 'rest',
    'buzz', 'fit', 'news', 'to', 'no', 'al', 'ir', 'cl', 'cc', 'sg', 'pe', 'rs', 'club', 'si',
    'mobi', 'by', 'cat', 'wiki', 'la', 'xxx', 'hr', 'jobs', 'ug', 'is', 'pro', 'fm', 'tips', 'ms',
    'app',
]

# Brand-abuse keywords joined to the root by Combosquatting
COMBO_KEYWORDS: List[str] = [
    'auth', 'access', 'account', 'admin', 'agree', 'blue', 'business', 'cdn', 'choose', 'claim',
    'click', 'confirm', 'confirmation', 'connect', 'download', 'enroll', 'find', 'group', 'http',
    'https', 'https-www', 'install', 'login', 'mobile', 'mail', 'my', 'online', 'pay', 'payment',
    'payments', 'portal', 'recovery', 'register', 'ssl', 'safe', 'secure', 'security', 'service',
    'services', 'signin', 'signup', 'support', 'summary', 'update', 'user', 'verify',
    'verification', 'view', 'ww', 'www', 'web',
    # fr / pl
    'actif', 'active', 'activite', 'agent', 'bleu', 'carte', 'compte', 'enligne', 'forum',
    'gerer', 'gouv', 'groupe', 'index', 'menu', 'mon', 'moncompte', 'portail', 'site',
    'solutions', 'autoryzacja', 'konto', 'logowanie',
]

VOWELS = 'aeiou'
ALPHANUMERIC = 'abcdefghijklmnopqrstuvwxyz0123456789'
HOSTNAME_CHARS = frozenset(ALPHANUMERIC + '-')
