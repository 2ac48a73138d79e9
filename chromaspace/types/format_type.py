# No dependencies
from enum import Enum


class FormatType(str, Enum):
    INT = "int"
    FLOAT = "float"


RGB_MAX = 255
APPLE_MAX = 65535
PERCENT_MAX = 100
HUE_360 = 360
