"""Section schema table"""
