"""
Utility modules for WhiskeyClub.

- Storage: file-backed, partitioned document containers
- Export: CSV export of reviews
"""
