"""
bdfont.constants - package constants

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

VERSION = '0.3.0'

# BDF format version written for fonts that don't specify one
DEFAULT_FORMAT = '2.2'
