"""Users API package"""
