from .words import WORD_LENGTH, InvalidWordError, Word, as_word
from .scoring import ALL_CORRECT, Correctness, Mask, check, format_mask, parse_mask, permutations
from .constraints import Guess, filter_candidates
from .pool import SIGMOID_K, CandidatePool, Weighting, sigmoid_weight
from .validation import validate_guess

__all__ = [
    "WORD_LENGTH", "InvalidWordError", "Word", "as_word",
    "ALL_CORRECT", "Correctness", "Mask", "check", "format_mask", "parse_mask", "permutations",
    "Guess", "filter_candidates",
    "SIGMOID_K", "CandidatePool", "Weighting", "sigmoid_weight",
    "validate_guess",
]
