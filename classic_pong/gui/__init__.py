"""
PyGame presentation layer for Classic Pong
"""
