"""License validation API"""
