"""
Tags shared by several resources.
"""

from enum import Enum


class Language(str, Enum):
    ENGLISH = "en"
    SPANISH = "es"
    GERMAN = "de"
    PORTUGUESE = "pt"
    FRENCH = "fr"
    HINDI = "hi"
    DUTCH = "nl"
    ITALIAN = "it"
    JAPANESE = "jp"
    KOREAN = "ko"


class TelephonyProvider(str, Enum):
    VONAGE = "vonage"
    TWILIO = "twilio"
