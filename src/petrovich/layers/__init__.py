"""
Processing layers for petrovich
"""
