"""Interest, share, risk, liquidation and reward math for a collateralized lending protocol"""
