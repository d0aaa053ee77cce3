"""HanyuLearn - HSK Chinese vocabulary and example-sentence review."""

__version__ = "0.1.0"
