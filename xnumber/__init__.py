"""
xnumber — configurable numeric fields (integer, decimal, float).

Step validation, canonical number strings, storage ranges, field and
display-mode settings, and value validation for number inputs.
"""
