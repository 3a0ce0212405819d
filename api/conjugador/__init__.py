"""
Spanish verb conjugation catalog with regional tú/vos resolution.
"""
