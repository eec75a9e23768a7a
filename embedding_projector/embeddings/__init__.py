"""
Embedding-query engine.

Responsibilities:
- Hold an externally supplied embedding matrix and its vocabulary.
- Resolve words to vectors, raising on unknown words.
- Compute unit directions between pairs of words.
- Rank the vocabulary by similarity to a query word (exact top-k).
"""
