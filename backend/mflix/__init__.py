"""
mflix user/session data-access layer backed by MongoDB.
"""
