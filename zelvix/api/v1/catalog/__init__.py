"""Categories, products, inventory, product details, reviews and FAQs"""
