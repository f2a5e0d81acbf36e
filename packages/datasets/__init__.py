from .validator import Corpus, load_corpus, validate_wordlists, pretty_summary
from .io import read_lines, read_words

__all__ = ["Corpus", "load_corpus", "validate_wordlists", "pretty_summary",
           "read_lines", "read_words"]
