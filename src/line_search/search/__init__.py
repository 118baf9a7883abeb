"""
Line search indexing and query package.

This package provides a pure-Python TF-IDF line search stack:
- analyzers: Line splitting and alphabetic tokenization
- vocabulary: Case-insensitive ordered term set
- stats: Term frequency and inverse document frequency helpers
- relevance_index: Per-line TF-IDF table builder
- ranker: Query scoring, tie-break ordering and truncation
- engine: SearchEngine facade
"""
