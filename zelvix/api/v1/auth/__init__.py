"""Authentication package"""
