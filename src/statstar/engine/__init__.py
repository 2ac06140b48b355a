"""
The ENGINE layer turns stat totals into drawable star geometry.
Every function here is pure: same stats in, same geometry out.
"""
