"""
Runtime services wrapping the game engine: session ownership and the tick timer.
"""
