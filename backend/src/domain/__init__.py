"""Domain modules for LicenseFlow"""
