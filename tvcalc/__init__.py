"""
tvcalc - build tooling for the YouTube TV Calculator site.
"""
