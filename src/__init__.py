"""
剣・盾・兵
"""
