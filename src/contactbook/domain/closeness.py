"""Closeness scoring between a free-text query and a field value.

Lower is more relevant and 0 is the best possible match. Word containment
ignores case ("hello" is found in "Hello World"); edit distances are
case-sensitive, so "Jon" is one edit away from "jon".
"""


def _build_edit_distance_table(a: str, b: str) -> list[list[int]]:
    """Bottom-up Levenshtein table of size (len(a) + 1) x (len(b) + 1)."""
    dp = [[0] * (len(b) + 1) for _ in range(len(a) + 1)]

    # An empty prefix is as far from the other prefix as that prefix is long.
    for i in range(len(a) + 1):
        dp[i][0] = i
    for j in range(len(b) + 1):
        dp[0][j] = j

    for i in range(1, len(a) + 1):
        for j in range(1, len(b) + 1):
            if a[i - 1] == b[j - 1]:
                dp[i][j] = dp[i - 1][j - 1]
            else:
                dp[i][j] = 1 + min(
                    dp[i - 1][j],  # delete
                    dp[i][j - 1],  # insert
                    dp[i - 1][j - 1],  # replace
                )
    return dp


def edit_distance(a: str, b: str) -> int:
    """Minimum number of single-character inserts, deletes and replaces turning a into b."""
    return _build_edit_distance_table(a, b)[len(a)][len(b)]


def compute_closeness(text: str, query: str) -> int:
    """Score how close text is to a (possibly multi-word) query.

    For each query word, take 0 if it appears (ignoring case) inside some word of text,
    otherwise the smallest edit distance to any word of text; sum those.
    Not symmetric: only query-in-text containment short-circuits.
    """
    text_words = (text or "").split()
    folded_words = [candidate.casefold() for candidate in text_words]
    total = 0
    for word in (query or "").split():
        if any(word.casefold() in candidate for candidate in folded_words):
            continue
        if not text_words:
            total += len(word)
            continue
        total += min(edit_distance(candidate, word) for candidate in text_words)
    return total
