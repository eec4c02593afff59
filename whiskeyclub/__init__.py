"""
WhiskeyClub review documents.

Review aggregate, its document mapping, and partition-routed storage.
"""
