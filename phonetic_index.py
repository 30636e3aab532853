# phonetic_index.py
# Sound-alike lookup over a vocabulary:
#  - terms bucketed by soundex code
#  - each bucket has a representative (highest-frequency term)
#  - unknown words resolve to the representative of their code

from collections import Counter, defaultdict
from typing import Dict, Iterable, List, Optional

from soundex import soundex
from text_utils import load_stopwords, tokenize


def build_phonetic_index(terms: Iterable[str], doc_freqs: Optional[Dict[str, int]] = None):
    """
    Build {code: {'rep': canonical_term, 'bucket': [terms...]}}
    bucket is ordered by frequency (desc) then alphabetically; rep is the first entry.
    """
    doc_freqs = doc_freqs or {}
    bucket = defaultdict(set)
    for term in terms:
        if not term:
            continue
        tl = term.lower()
        bucket[soundex(tl)].add(tl)

    sidx = {}
    for code, found in bucket.items():
        ordered = sorted(found, key=lambda t: (-doc_freqs.get(t, 0), t))
        sidx[code] = {"rep": ordered[0], "bucket": ordered}
    return sidx


def index_text(text: str, stopwords=None):
    """tokenize raw text, drop stopwords and build a phonetic index weighted by term counts"""
    if stopwords is None:
        stopwords = load_stopwords()
    counts = Counter(t for t in tokenize(text) if t not in stopwords)
    return build_phonetic_index(counts.keys(), counts)


def lookup(word: str, index: dict) -> Optional[str]:
    """representative term sharing `word`'s code, or None"""
    if not word:
        return None
    entry = index.get(soundex(word))
    if entry and entry.get("rep"):
        return entry["rep"]
    return None


def sound_alike(word: str, index: dict) -> List[str]:
    if not word:
        return []
    entry = index.get(soundex(word))
    return list(entry["bucket"]) if entry else []


def sounds_alike(a: str, b: str) -> bool:
    """True when both words share a soundex code; empty words never match"""
    if not a or not b:
        return False
    return soundex(a) == soundex(b)
