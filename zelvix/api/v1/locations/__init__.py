"""Countries, states, cities, pincodes and shipping rates"""
