"""namecraft: build structured names from an interactive questionnaire."""

__version__ = "0.1.0"
