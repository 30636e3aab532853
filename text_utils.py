# text_utils.py
import re

# ----- parameters -----
STOPWORDS_LANGUAGE = "english"

_token_re = re.compile(r"\b[a-zA-Z]+\b")


def tokenize(text):
    """lowercase alphabetic tokenizer"""
    return [t.lower() for t in _token_re.findall(text)]


def load_stopwords(language: str = STOPWORDS_LANGUAGE) -> set:
    """
    nltk stopword list for `language`.
    downloads the stopwords corpus on first use if it isn't installed.
    """
    from nltk.corpus import stopwords
    try:
        return set(stopwords.words(language))
    except LookupError:
        import nltk
        print("nltk stopwords not found, downloading...")
        nltk.download("stopwords", quiet=True)
        return set(stopwords.words(language))
