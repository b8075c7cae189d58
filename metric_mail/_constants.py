"""Common literal values used across metric_mail.

These constants keep the dialect tokens, fallback strings, and brand colours
centralized so the parser, templates, and tests can import the same values
without drifting. Intended for internal use within the metric_mail package.

Examples
--------
>>> from metric_mail import _constants
>>> _constants.METRIC_CARD_TOKEN
'[METRIC_ATTACH_CARD]'
>>> _constants.LIST_DELIMITER in "A | B"
True
"""

METRIC_CARD_TOKEN = "[METRIC_ATTACH_CARD]"
SEPARATOR_TOKEN = "---"
CODE_START_TOKEN = "[CODE]"
CODE_END_TOKEN = "[/CODE]"
LIST_DELIMITER = "|"

DEFAULT_METRIC_TITLE = "Metric Update"
DEFAULT_METRIC_DESCRIPTION = "Description not set."
DEFAULT_SOC_TITLE = "List includes:"

BRAND_MAGENTA = "#e20074"
BRAND_DARK_MAGENTA = "#A3005A"
BRAND_LIGHT_PINK = "#fcf4f9"
BRAND_CODE_PINK = "#FADDE7"
