"""
Kiosk Management System - customers, products and employees
"""
__version__ = "1.0.0"
