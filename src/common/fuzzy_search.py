"""Fuzzy search utilities for matching recipe queries against titles and tags."""

import re
from typing import Sequence

_SEPARATOR_RE = re.compile(r"[^a-z0-9]+")


def tokenize(value: str) -> list[str]:
    """Split a string into lowercase alphanumeric tokens, dropping empty segments."""
    return [token for token in _SEPARATOR_RE.split(value.lower().strip()) if token]


def max_distance_for_length(length: int) -> int:
    """
    Get the maximum edit distance tolerated for a token of the given length.

    Short tokens only allow a single slip; longer ones allow proportionally
    more, capped at 3.

    Args:
        length: Token length (>= 0)

    Returns:
        Maximum tolerated edit distance
    """
    if length <= 4:
        return 1
    if length <= 7:
        return 2
    return min(3, max(2, int(length * 0.34)))


def bounded_levenshtein(a: str, b: str, max_distance: int) -> int:
    """
    Compute the Levenshtein distance between two strings, giving up early.

    The exact distance is only returned when it is within max_distance.
    Anything further away comes back as max_distance + 1, whose exact value
    carries no meaning beyond "too far".

    Args:
        a: First string
        b: Second string
        max_distance: Largest distance worth computing exactly

    Returns:
        The edit distance, or max_distance + 1 if it exceeds max_distance
    """
    max_distance = max(max_distance, 0)
    too_far = max_distance + 1

    if a == b:
        return 0
    if abs(len(a) - len(b)) > max_distance:
        return too_far

    # Keep the rolling rows as short as possible
    if len(b) > len(a):
        a, b = b, a

    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i] + [0] * len(b)
        for j, char_b in enumerate(b, start=1):
            cost = 0 if char_a == char_b else 1
            current[j] = min(
                previous[j] + 1,  # deletion
                current[j - 1] + 1,  # insertion
                previous[j - 1] + cost,  # substitution
            )
        # Every later row is at least this row's minimum
        if min(current) > max_distance:
            return too_far
        previous = current

    distance = previous[-1]
    return distance if distance <= max_distance else too_far


def token_matches(query_token: str, candidate_tokens: Sequence[str]) -> bool:
    """
    Check if a query token matches any candidate token.

    A candidate token matches when it contains the query token (partial word
    search, e.g. "choc" in "chocolate") or is within the adaptive edit
    distance of it.

    Args:
        query_token: A single token from the query
        candidate_tokens: Tokens of the title or tag being searched

    Returns:
        True if any candidate token matches
    """
    if not query_token:
        return False

    threshold = max_distance_for_length(len(query_token))
    for candidate_token in candidate_tokens:
        if query_token in candidate_token:
            return True
        if bounded_levenshtein(query_token, candidate_token, threshold) <= threshold:
            return True
    return False


def fuzzy_match(query: str, candidate: str) -> bool:
    """
    Check if a search query matches a candidate string (a title or one tag).

    Multi-word queries are a conjunction: every query token must match some
    candidate token, in any order. Single-word queries are more permissive and
    may also match the whole candidate string as one unit, which catches short
    tags that are a near miss of the query. That whole-string check is never
    applied to multi-word queries.

    The query is lowercased and trimmed here as well, so direct callers may
    pass raw input. The caller is expected to have filtered out empty queries.

    Args:
        query: The search query
        candidate: The text to match against

    Returns:
        True if the candidate matches the query
    """
    if not candidate:
        return False

    query = query.lower().strip()
    candidate = candidate.lower()
    if query in candidate:
        return True

    query_tokens = tokenize(query)
    candidate_tokens = tokenize(candidate)
    if not candidate_tokens:
        return False

    if len(query_tokens) > 1:
        return all(token_matches(token, candidate_tokens) for token in query_tokens)

    single_token = query_tokens[0] if query_tokens else query
    threshold = max_distance_for_length(len(single_token))

    if token_matches(single_token, candidate_tokens):
        return True

    # Whole-string comparison, only for candidates short enough to be close
    if len(candidate) <= len(single_token) + threshold:
        return bounded_levenshtein(single_token, candidate, threshold) <= threshold
    return False
