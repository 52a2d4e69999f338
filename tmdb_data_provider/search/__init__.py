"""
Search pipeline: `/search/multi` orchestration and result normalization.
"""
