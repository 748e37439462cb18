"""Shared constants across the application"""


class WordFileConstants:
    """Constants for the word list file format"""

    LINE_SEPARATOR = "\n"
    FIELD_SEPARATOR = ","

    # Extensions tried, in order, when a word file is looked up by stem
    TEXT_ASSET_EXTENSIONS = (".txt", ".csv", ".text", ".tsv")

    ENCODING = "utf-8"


class AnimationConstants:
    """Constants for display and button animations"""

    VISIBLE_ALPHA = 1.0
    HIDDEN_ALPHA = 0.0
    REST_SCALE = 1.0

    # One fade effect per displayed field (term, meaning)
    FADE_EFFECTS_PER_PHASE = 2
