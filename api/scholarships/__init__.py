"""
Scholarship catalogue joined with per-scholarship application steps.
"""
