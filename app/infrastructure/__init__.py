"""
Infrastructure layer: MongoDB connection, repositories and document serialization.
"""
