"""Payment gateways, coupons and saved addresses"""
