"""Console reporting"""
