"""Public product pages and the checkout entry point"""
