"""
Code partitions and label text for EEW telegram fields.

Which characters a field accepts is fixed by the telegram format and lives
in PARTITIONS. The text shown for each code is presentation and lives in a
LabelSet, so callers can swap in their own wording. JMA_LABELS carries the
agency's original Japanese text.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import FrozenSet, Mapping


def _chars(codes: str) -> FrozenSet[str]:
    return frozenset(codes)


@dataclass(frozen=True)
class CodePartition:
    """
    Split of the single-character codes of one field.

    valid codes have their own label, reserved codes render with the
    generic "undefined" label and unset codes decode to UNSPECIFIED.
    Any other character is a format error.
    """
    valid: FrozenSet[str]
    reserved: FrozenSet[str] = frozenset()
    unset: FrozenSet[str] = frozenset('/')


# single-character categorical fields, keyed by accessor name
PARTITIONS = {
    'probability_of_position': CodePartition(valid=_chars('123456789')),
    'probability_of_depth': CodePartition(valid=_chars('123456789')),
    'probability_of_magnitude': CodePartition(
        valid=_chars('2345689'), reserved=_chars('17'), unset=_chars('/0')
    ),
    'observation_points_of_magnitude': CodePartition(
        valid=_chars('12345'), reserved=_chars('67890')
    ),
    'probability_of_depth_jma': CodePartition(
        valid=_chars('12349'), reserved=_chars('56780')
    ),
    'land_or_sea': CodePartition(valid=_chars('01'), reserved=_chars('23456789')),
    'prediction_method': CodePartition(valid=_chars('9'), reserved=_chars('012345678')),
    'change': CodePartition(valid=_chars('012'), reserved=_chars('3456789')),
    'reason_of_change': CodePartition(valid=_chars('012349'), reserved=_chars('5678')),
}

# drill type codes that mark a drill or test
DRILL_CODES = frozenset({'01', '11', '30'})
NON_DRILL_CODES = frozenset({'00', '10', '20'})

# status codes that are not the final report
NON_FINAL_STATUS = frozenset({'0', '6', '7', '8', '/'})


@dataclass(frozen=True)
class LabelSet:
    """
    Human-readable text for every categorical code and for the text report.
    """
    type: Mapping[str, str]
    office: Mapping[str, str]
    drill_type: Mapping[str, str]
    status: Mapping[str, str]
    intensity: Mapping[str, str]
    probability_of_position: Mapping[str, str]
    probability_of_magnitude: Mapping[str, str]
    observation_points_of_magnitude: Mapping[str, str]
    probability_of_depth_jma: Mapping[str, str]
    land_or_sea: Mapping[str, str]
    prediction_method: Mapping[str, str]
    change: Mapping[str, str]
    reason_of_change: Mapping[str, str]
    undefined: str
    unspecified: str
    intensity_or_above: str
    intensity_range: str
    already_arrived: str
    report_title: str
    ebi_title: str
    ebi_line: str
    captions: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        # keep read-only copies of the tables
        for name, value in list(vars(self).items()):
            if isinstance(value, dict):
                object.__setattr__(self, name, MappingProxyType(dict(value)))


JMA_LABELS = LabelSet(
    type={
        '35': '最大予測震度のみの高度利用者向け緊急地震速報',
        '36': 'マグニチュード、最大予測震度及び主要動到達予測時刻の高度利用者向け緊急地震速報(B-Δ法、テリトリ法)',
        '37': 'マグニチュード、最大予測震度及び主要動到達予測時刻の高度利用者向け緊急地震速報(グリッドサーチ法、EPOS自動処理手法)',
        '39': 'キャンセル報',
    },
    office={
        '01': '札幌',
        '02': '仙台',
        '03': '東京',
        '04': '大阪',
        '05': '福岡',
        '06': '沖縄',
    },
    drill_type={
        '00': '通常',
        '01': '訓練',
        '10': '取り消し',
        '11': '訓練取り消し',
        '20': '参考情報またはテキスト',
        '30': 'コード部のみの配信試験',
    },
    status={
        '0': '通常発表',
        '6': '情報内容の訂正',
        '7': 'キャンセルを誤って発表した場合の訂正',
        '8': '訂正事項を盛り込んだ最終の高度利用者向け緊急地震速報',
        '9': '最終の高度利用者向け緊急地震速報',
    },
    intensity={
        '01': '1',
        '02': '2',
        '03': '3',
        '04': '4',
        '5-': '5弱',
        '5+': '5強',
        '6-': '6弱',
        '6+': '6強',
        '07': '7',
    },
    probability_of_position={
        '1': 'P波/S波レベル越え、またはIPF法(1点) または仮定震源要素の場合',
        '2': 'IPF法(2点)',
        '3': 'IPF法(3点/4点)',
        '4': 'IPF法(5点)',
        '5': '防災科研システム(4点以下、または精度情報なし)[防災科研Hi-netデータ]',
        '6': '防災科研システム(5点以上)[防災科研Hi-netデータ]',
        '7': 'EPOS(海域[観測網外])',
        '8': 'EPOS(内陸[観測網内])',
        '9': '予備',
    },
    probability_of_magnitude={
        '2': '防災科研システム[防災科研Hi-netデータ]',
        '3': '全点P相',
        '4': 'P相/全相混在',
        '5': '全点全相',
        '6': 'EPOS',
        '8': 'P波/S波レベル越え または仮定震源要素の場合',
        '9': '予備',
    },
    observation_points_of_magnitude={
        '1': '1点、P波/S波レベル超え、または仮定震源要素',
        '2': '2点',
        '3': '3点',
        '4': '4点',
        '5': '5点以上',
    },
    probability_of_depth_jma={
        '1': 'P波/S波レベル越え、IPF法(1点)、または仮定震源要素',
        '2': 'IPF法(2点)',
        '3': 'IPF法(3点/4点)',
        '4': 'IPF法(5点以上)',
        '9': '震源とマグニチュードに基づく震度予測手法の精度が最終報相当',
    },
    land_or_sea={
        '0': '陸域',
        '1': '海域',
    },
    prediction_method={
        '9': '震源とマグニチュードによる震度推定手法において震源要素が推定できず、PLUM 法による震度予測のみが有効である場合',
    },
    change={
        '0': 'ほとんど変化無し',
        '1': '最大予測震度が1.0以上大きくなった',
        '2': '最大予測震度が1.0以上小さくなった',
    },
    reason_of_change={
        '0': '変化無し',
        '1': '主としてMが変化したため(1.0以上)',
        '2': '主として震源位置が変化したため(10.0km以上)',
        '3': 'M及び震源位置が変化したため',
        '4': '震源の深さが変化したため',
        '9': 'PLUM 法による予測により変化したため',
    },
    undefined='未定義',
    unspecified='不明又は未設定',
    intensity_or_above='{intensity}以上',
    intensity_range='{lower}から{upper}',
    already_arrived='すでに到達',
    report_title='緊急地震速報 (第{number}報)',
    ebi_title='地域毎の警報の判別、最大予測震度及び主要動到達予測時刻(EBI):',
    ebi_line='{area_name:<10} 最大予測震度: {intensity:<2} 予想到達時刻: {arrival_time} 警報: {warning}',
    captions={
        'type': '電文種別',
        'from_office': '発信官署',
        'drill_type': '訓練等の識別符',
        'report_time': '電文の発表時刻',
        'number_of_telegram': '電文がこの電文を含め何通あるか',
        'is_continued': 'コードが続くかどうか',
        'earthquake_time': '地震発生時刻もしくは地震検知時刻',
        'id': '地震識別番号',
        'status': '発表状況(訂正等)の指示',
        'is_final': '最終報かどうか',
        'number': '発表する高度利用者向け緊急地震速報の番号(地震単位での通番)',
        'epicenter': '震央地名',
        'position': '震央の位置',
        'depth': '震源の深さ(単位 km)(不明・未設定時,キャンセル時:///)',
        'magnitude': 'マグニチュード(不明・未設定時、キャンセル時:///)',
        'seismic_intensity': '最大予測震度(不明・未設定時、キャンセル時://)',
        'observation_points_of_magnitude': 'マグニチュード使用観測点(気象庁の部内システムでの利用)',
        'probability_of_depth': '震源の深さの確からしさ',
        'probability_of_magnitude': 'マグニチュードの確からしさ',
        'probability_of_position': '震央の確からしさ',
        'probability_of_depth_jma': '震源の深さの確からしさ(気象庁の部内システムでの利用)',
        'land_or_sea': '震央位置の海陸判定',
        'is_warning': '警報を含む内容かどうか',
        'prediction_method': '予測手法',
        'change': '最大予測震度の変化',
        'reason_of_change': '最大予測震度の変化の理由',
    }
)
