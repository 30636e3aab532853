# soundex.py
# Soundex encoder: word -> 4-char code (head letter + 3 digits)
#  - consonant groups share a digit
#  - adjacent duplicate digits collapse
#  - a vowel-like letter between duplicates keeps both

from types import MappingProxyType

# ----- parameters -----
MAX_CODE_LENGTH = 4
PAD_CHARACTER = "0"
NOT_A_DIGIT = "*"

VOWEL_LIKE = frozenset("aeiouyh")

_GROUPS = {
    "bfpv": "1", "cgjkqsxz": "2",
    "dt": "3", "l": "4",
    "mn": "5", "r": "6",
}
DIGIT_TABLE = MappingProxyType({c: d for letters, d in _GROUPS.items() for c in letters})


class EmptyWordError(ValueError):
    """raised when encode() is given an empty word"""


class Soundex:
    """
    stateless soundex encoder. one instance can be shared freely.

        >>> Soundex().encode("Jbob")
        'J110'
    """

    def encode(self, word: str) -> str:
        if not isinstance(word, str):
            raise TypeError(f"word must be str, not {type(word).__name__}")
        if not word:
            raise EmptyWordError("cannot encode an empty word")
        code = self._upper_front(word) + self._encode_digits(word)[1:]
        return self._zero_pad(code)

    def encode_digit(self, letter: str) -> str:
        """digit for a single character, or NOT_A_DIGIT"""
        return DIGIT_TABLE.get(letter.lower(), NOT_A_DIGIT)

    # ----------------- helpers -----------------

    def _upper_front(self, word: str) -> str:
        # keep the head a single character ("ß".upper() == "SS")
        upper = word[0].upper()
        return upper if len(upper) == 1 else word[0]

    def _zero_pad(self, code: str) -> str:
        return code[:MAX_CODE_LENGTH].ljust(MAX_CODE_LENGTH, PAD_CHARACTER)

    def _encode_digits(self, word: str) -> str:
        # encoding[0] is the head's digit (or NOT_A_DIGIT); it only seeds
        # the duplicate check for the second letter and is dropped by encode()
        encoding = [self.encode_digit(word[0])]
        for i in range(1, len(word)):
            if self._is_complete(encoding):
                break
            self._encode_letter(encoding, word[i], word[i - 1])
        return "".join(encoding)

    def _encode_letter(self, encoding: list, letter: str, last_letter: str):
        digit = self.encode_digit(letter)
        if digit == NOT_A_DIGIT:
            return
        if digit != encoding[-1] or self._is_vowel(last_letter):
            encoding.append(digit)

    def _is_vowel(self, letter: str) -> bool:
        return letter.lower() in VOWEL_LIKE

    def _is_complete(self, encoding: list) -> bool:
        return len(encoding) >= MAX_CODE_LENGTH


_default = Soundex()


def soundex(word: str) -> str:
    """
    classic soundex implementation -> 4-char code
    raises EmptyWordError on ""
    """
    return _default.encode(word)


if __name__ == "__main__":
    print(soundex("robert"))   # expectation: R163
    print(soundex("rupert"))   # R163
    print(soundex("Jbob"))     # J110
