"""
Review Registry Module.

Stores each review in the Reviews, Spirits and Users containers.
"""
