"""
JMA epicenter name codes (震央地名コード)

3-digit codes carried at bytes 86-88 of an EEW fastcast telegram.

Only the Hokkaido, Tohoku and Kanto entries are bundled. A complete table
can be supplied as a JSON file (see src.eew.config).
"""

from typing import Optional

EPICENTER_CODES = {
    # Hokkaido
    100: '石狩地方北部',
    101: '石狩地方中部',
    102: '石狩地方南部',
    105: '渡島地方北部',
    106: '渡島地方東部',
    107: '渡島地方西部',
    110: '檜山地方',
    189: '根室半島南東沖',

    # Tohoku
    200: '青森県津軽北部',
    201: '青森県津軽南部',
    202: '青森県三八上北地方',
    203: '青森県下北地方',
    210: '岩手県沿岸北部',
    211: '岩手県沿岸南部',
    212: '岩手県内陸北部',
    213: '岩手県内陸南部',
    220: '宮城県北部',
    221: '宮城県南部',
    222: '宮城県中部',
    230: '秋田県沿岸北部',
    231: '秋田県沿岸南部',
    232: '秋田県内陸北部',
    233: '秋田県内陸南部',
    240: '山形県庄内地方',
    241: '山形県最上地方',
    242: '山形県村山地方',
    243: '山形県置賜地方',
    250: '福島県中通り',
    251: '福島県浜通り',
    252: '福島県会津',

    # Kanto
    300: '茨城県北部',
    301: '茨城県南部',
    309: '千葉県南東沖',
    310: '栃木県北部',
    311: '栃木県南部',
    320: '群馬県北部',
    321: '群馬県南部',
    330: '埼玉県北部',
    331: '埼玉県南部',
    332: '埼玉県秩父地方',
    340: '千葉県北東部',
    341: '千葉県北西部',
    342: '千葉県南部',
    350: '東京都２３区',
    351: '東京都多摩東部',
    352: '東京都多摩西部',
    360: '神奈川県東部',
    361: '神奈川県西部',
}


def get_epicenter_name(code: int) -> Optional[str]:
    """Get epicenter name for a 3-digit code, or None if unknown."""
    return EPICENTER_CODES.get(code)
