"""
Domain layer: token type grammar, color spaces, reference syntax and the
document tree walk.
"""
