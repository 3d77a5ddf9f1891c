"""
moedeck: review scheduling and answer grading for bopomofo flashcards.

Subpackages:
- core: familiarity tiers, learning records, collaborator interfaces
- questions: question models and answer handlers
- study: scheduling algorithms, due queue, review application, progress
- phonetics: bopomofo normalization and dictionary-backed validation
"""

__version__ = "1.0.0"
