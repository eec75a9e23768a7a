"""
Axis projections.

Responsibilities:
- Cache unit directions per ordered (left, right) axis.
- Describe axes and per-word projection results.
- Project the whole vocabulary onto a stack of axes in one matrix product.
- Derive the per-axis bias-correction baseline (mean projection).
"""
