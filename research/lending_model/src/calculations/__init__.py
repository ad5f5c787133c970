"""Formula groups of the lending model, leaves first"""
