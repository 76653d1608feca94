"""
剣・盾・兵 HTTP API
"""
