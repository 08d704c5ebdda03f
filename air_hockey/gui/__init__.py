"""
PyGame front end for Air Hockey
"""
