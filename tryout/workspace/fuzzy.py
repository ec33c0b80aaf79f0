"""
Fuzzy filtering of the catalog.

Subsequence matching in the style of editor "go to file" pickers: every
query character must appear in the name, in order, case-insensitively.
Matches are scored so that hits at the start of the name, after a
separator, on camelCase humps and in runs rank higher.
"""

from dataclasses import dataclass, field

from .catalog import DirectoryEntry

FIRST_CHAR_MATCH_BONUS = 10
MATCH_FOLLOWING_SEPARATOR_BONUS = 20
CAMEL_CASE_MATCH_BONUS = 20
ADJACENT_MATCH_BONUS = 5
UNMATCHED_LEADING_CHAR_PENALTY = -5
MAX_UNMATCHED_LEADING_CHAR_PENALTY = -15
UNMATCHED_CHAR_PENALTY = -1

SEPARATORS = "-_ ./\\"


@dataclass
class FuzzyMatch:
    """Score and matched character positions for one candidate."""
    text: str
    score: int
    indexes: list[int] = field(default_factory=list)


def _same_char(a: str, b: str) -> bool:
    return a == b or a.lower() == b.lower()


def _position_score(text: str, idx: int, previous: int | None, first: bool) -> int:
    """Bonus/penalty for matching the current query character at text[idx]."""
    score = 0
    if idx == 0:
        score += FIRST_CHAR_MATCH_BONUS
    else:
        before = text[idx - 1]
        if before in SEPARATORS:
            score += MATCH_FOLLOWING_SEPARATOR_BONUS
        elif before.islower() and text[idx].isupper():
            score += CAMEL_CASE_MATCH_BONUS
    if previous is not None and idx == previous + 1:
        score += ADJACENT_MATCH_BONUS
    if first:
        score += max(MAX_UNMATCHED_LEADING_CHAR_PENALTY, idx * UNMATCHED_LEADING_CHAR_PENALTY)
    return score


def fuzzy_match(query: str, text: str) -> FuzzyMatch | None:
    """
    Match query against text. Returns None if query isn't a subsequence.

    A query character isn't bound to its first occurrence. Candidates are
    collected until the next text character matches the next query
    character (or the text ends), and the best scoring one wins, so "tk"
    against "The Black Knight" takes the K of "Knight".
    """
    if not query:
        return FuzzyMatch(text=text, score=0)

    indexes = []
    score = 0
    q = 0
    best_idx = None
    best_score = 0
    for j, ch in enumerate(text):
        if _same_char(ch, query[q]):
            previous = indexes[-1] if indexes else None
            candidate = _position_score(text, j, previous, first=(q == 0))
            if best_idx is None or candidate > best_score:
                best_idx, best_score = j, candidate

        next_q = query[q + 1] if q + 1 < len(query) else None
        next_ch = text[j + 1] if j + 1 < len(text) else None
        if best_idx is not None and (
            next_ch is None or (next_q is not None and _same_char(next_ch, next_q))
        ):
            indexes.append(best_idx)
            score += best_score
            best_idx = None
            q += 1
            if q == len(query):
                break

    if q < len(query):
        return None

    score += (len(text) - len(indexes)) * UNMATCHED_CHAR_PENALTY
    return FuzzyMatch(text=text, score=score, indexes=indexes)


def filter_entries(query: str, entries: list[DirectoryEntry]) -> list[DirectoryEntry]:
    """
    Filter and rank entries by query against the full folder name.

    An empty query keeps catalog (recency) order. Otherwise non-matches are
    dropped and the rest are ordered by score, best first; ties keep the
    catalog order.
    """
    if not query:
        return list(entries)

    scored = []
    for entry in entries:
        match = fuzzy_match(query, entry.name)
        if match is not None:
            scored.append((match.score, entry))

    scored.sort(key=lambda pair: pair[0], reverse=True)
    return [entry for _, entry in scored]
