"""
The MODEL layer contains pure data structures.
It has NO knowledge of the renderers (SVG, Qt).
It deals with the stat record and 2-D geometry primitives.
"""
