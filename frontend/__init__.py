"""
LUMA Client
Gallery, profile and artist studio on top of the LUMA Server API
"""
