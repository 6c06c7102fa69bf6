"""Image uploads"""
