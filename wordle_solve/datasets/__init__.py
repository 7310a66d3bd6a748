from pathlib import Path

from .dictionary import Dictionary
from .io import DatasetError, load_answers, load_dictionary, read_lines
from .validator import validate_wordlists, pretty_summary

# Small sample resources shipped with the package
DATA_DIR = Path(__file__).parent / "data"
SAMPLE_DICTIONARY = DATA_DIR / "dictionary.txt"
SAMPLE_ANSWERS = DATA_DIR / "answers.txt"

__all__ = [
    "Dictionary", "DatasetError", "load_answers", "load_dictionary", "read_lines",
    "validate_wordlists", "pretty_summary",
    "DATA_DIR", "SAMPLE_DICTIONARY", "SAMPLE_ANSWERS",
]
