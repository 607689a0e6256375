"""
Number Words — spoken-word numbers for Persian, English and Arabic.

Architecture: Lexicon tables → Chunk renderer → Encoder;  Lexicon tables → Decoder
Philosophy:  Strict when writing numbers out, lenient when reading them back.
"""

from .decoder import words_to_number
from .encoder import number_to_words

__version__ = "1.0.0"

__all__ = ["number_to_words", "words_to_number", "__version__"]
