"""HTTP API packages"""
