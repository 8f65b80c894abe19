"""
Concrete chart implementations.

Resolved dynamically by ChartEngine (class name → snake_case module).
"""
