# simulations/__init__.py
"""
Monte Carlo simulations for the volatility-drag repo.

Run the fixed scenario via:
    python -m simulations.report
"""
