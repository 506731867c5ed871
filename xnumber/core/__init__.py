"""
Core numeric primitives, storage ranges, settings models and contracts.

Independent of any host form or storage system.
"""
