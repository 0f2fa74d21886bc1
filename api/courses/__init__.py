"""
Study programme catalogue (per-country course listings).
"""
