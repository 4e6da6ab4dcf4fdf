"""
YouTube media type for generic media items.
"""
