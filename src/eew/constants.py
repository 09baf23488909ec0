"""
EEW fastcast telegram layout constants

Offsets are 0-based byte positions into the raw telegram text, line breaks
included. Each field is given as (offset, length).
Reference: http://eew.mizar.jp/excodeformat
"""

from datetime import timedelta, timezone

# telegram size
MIN_SIZE = 135

# header
TYPE = (0, 2)
OFFICE = (3, 2)
DRILL_TYPE = (6, 2)
REPORT_TIME = (9, 12)
NUMBER_OF_TELEGRAM = (23, 1)
CONTINUE = (24, 1)
EARTHQUAKE_TIME = (26, 12)

# ND / NCN line
EARTHQUAKE_ID = (41, 14)
STATUS = (59, 1)
NUMBER = (60, 2)

# hypocenter line
EPICENTER = (86, 3)
POSITION = (90, 10)
DEPTH = (101, 3)
MAGNITUDE = (105, 2)
SEISMIC_INTENSITY = (108, 2)

# RK: probabilities
PROBABILITY_OF_POSITION = 113
PROBABILITY_OF_DEPTH = 114
PROBABILITY_OF_MAGNITUDE = 115
OBSERVATION_POINTS_OF_MAGNITUDE = 116
PROBABILITY_OF_DEPTH_JMA = 117

# RT: land/sea, warning, prediction method
LAND_OR_SEA = 121
WARNING = 122
PREDICTION_METHOD = 123

# RC: change of peak intensity
CHANGE = 129
REASON_OF_CHANGE = 130

# regional block (EBI)
EBI_MARKER = 'EBI'
EBI_MARKER_OFFSET = 135
EBI_START = 139
EBI_STRIDE = 20

# offsets inside one 20-byte EBI record
EBI_AREA_CODE = (0, 3)
EBI_INTENSITY_MAX = (5, 2)
EBI_INTENSITY_MIN = (7, 2)
EBI_ARRIVAL_TIME = (10, 6)
EBI_WARNING = 17
EBI_ARRIVAL = 18

# "not set" placeholders
UNSET = '/'
UNSET_EPICENTER = '///'
UNSET_POSITION = '//// /////'
UNSET_DEPTH = '///'
UNSET_MAGNITUDE = '//'
UNSET_INTENSITY = '//'
UNSET_ARRIVAL_TIME = '//////'

# codes
CANCEL_TYPE = '39'
FINAL_STATUS = '9'
NORMAL_DRILL_TYPE = '00'

# all telegram times are JST
JST = timezone(timedelta(hours=9), 'JST')
