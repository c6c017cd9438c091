"""
Kana SRS - spaced repetition engine for learning hiragana and katakana.

Subpackages:
- sm2: scheduler, item state and persistence
- session_builders: daily study queue
- analytics: progress counts and stats dashboards
"""

__version__ = "0.1.0"
